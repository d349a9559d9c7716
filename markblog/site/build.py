"""Static site generator for the blog."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from pydantic import BaseModel

from ..config import PATH_PREFIX, SITE_CONFIG
from ..content.metadata import SiteMetadata, load_site_metadata
from ..content.posts import ContentError, PostRecord, load_posts
from ..query.requests import INDEX_PAGE_QUERY, NOT_FOUND_PAGE_QUERY, post_page_query
from ..query.resolver import ContentResolver
from .context import RenderContext, make_context
from .routes import NOT_FOUND_FILE, NOT_FOUND_PATH, Route, page_path
from .templates import index_page, not_found_page, post_page
from .tokens import DEFAULT_TOKENS, StyleTokens

logger = logging.getLogger(__name__)

ASSETS_DIR = "assets"


class BuildReport(BaseModel):
    """Result of building the site."""

    out_dir: Path
    pages: int
    posts: int
    total_bytes: int
    warnings: list[str]
    routes: dict[str, Route]


class RenderedPage(BaseModel):
    route: Route
    html: str


def build_site(
    content_dir: Path,
    out_dir: Path,
    site_config: Path | None = None,
    path_prefix: str = PATH_PREFIX,
    tokens: StyleTokens = DEFAULT_TOKENS,
) -> BuildReport:
    """Build the static site from Markdown posts and a site config.

    Every page is rendered before anything is written, so a content or query
    error leaves ``out_dir`` untouched.

    Args:
        content_dir: Directory of Markdown posts
        out_dir: Output directory
        site_config: Site YAML file; relative avatar paths resolve against its directory
        path_prefix: Prefix for every generated link
        tokens: Design tokens for the stylesheets

    Raises:
        SiteConfigError, ContentError, QueryError
    """
    content_dir = content_dir.resolve()
    out_dir = out_dir.resolve()
    site_config = (site_config or SITE_CONFIG).resolve()

    site = load_site_metadata(site_config)
    posts = load_posts(content_dir)
    warnings = _content_warnings(posts)

    avatar_src, avatar_file = _locate_avatar(site, site_config.parent, warnings)
    avatar_href = None
    if avatar_file is not None:
        avatar_href = f"{path_prefix.rstrip('/')}/{avatar_file}"
    ctx = make_context(site, tokens=tokens, path_prefix=path_prefix, avatar_href=avatar_href)

    pages = render_pages(ctx, site, posts)

    out_dir.mkdir(parents=True, exist_ok=True)
    for page in pages:
        target = out_dir / page.route.file
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(page.html, encoding="utf-8")
        logger.debug("wrote %s", target)

    if avatar_src is not None and avatar_file is not None:
        target = out_dir / avatar_file
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(avatar_src, target)

    return BuildReport(
        out_dir=out_dir,
        pages=len(pages),
        posts=len(posts),
        total_bytes=_dir_size_bytes(out_dir),
        warnings=warnings,
        routes={p.route.path: p.route for p in pages},
    )


def render_pages(
    ctx: RenderContext, site: SiteMetadata, posts: list[PostRecord]
) -> list[RenderedPage]:
    """Resolve each page's query and render it, in memory."""
    resolver = ContentResolver(site, posts)
    pages: list[RenderedPage] = []

    index = Route(path="/", file=page_path("/"), kind="index")
    data = resolver.resolve(INDEX_PAGE_QUERY)
    pages.append(RenderedPage(route=index, html=index_page(ctx, data, ctx.href(index.path))))

    for post in resolver.posts:
        if post.slug in ("/", NOT_FOUND_PATH):
            raise ContentError(f"{post.source or post.slug}: slug {post.slug} is reserved")
        route = Route(path=post.slug, file=page_path(post.slug), kind="post")
        data = resolver.resolve(post_page_query(post.slug))
        pages.append(RenderedPage(route=route, html=post_page(ctx, data, ctx.href(route.path))))

    not_found = Route(path=NOT_FOUND_PATH, file=NOT_FOUND_FILE, kind="not_found")
    data = resolver.resolve(NOT_FOUND_PAGE_QUERY)
    html = not_found_page(ctx, data, ctx.href(not_found.path))
    pages.append(RenderedPage(route=not_found, html=html))
    return pages


def _content_warnings(posts: list[PostRecord]) -> list[str]:
    warnings = []
    for p in posts:
        if not p.title:
            warnings.append(f"{p.source or p.slug}: no title, using slug {p.slug}")
        if p.date is None:
            warnings.append(f"{p.source or p.slug}: no date, listed last")
    return warnings


def _locate_avatar(
    site: SiteMetadata, base_dir: Path, warnings: list[str]
) -> tuple[Path | None, str | None]:
    if not site.avatar:
        return None, None
    src = (base_dir / site.avatar).resolve()
    if not src.is_file():
        warnings.append(f"avatar not found: {src}")
        return None, None
    return src, f"{ASSETS_DIR}/{src.name}"


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total
