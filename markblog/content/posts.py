"""Post records: loading Markdown sources, slugs, ordering, and neighbors."""

from __future__ import annotations

import datetime as dt
import logging
import re
from pathlib import Path
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict

from .frontmatter import FrontmatterError, parse_frontmatter
from .markup import Markup, plain_text, render_markdown

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")

_SLUG_RE = re.compile(r"[^a-z0-9-]+")


class ContentError(ValueError):
    """Raised when a content source cannot be turned into a post record."""


class PostRecord(BaseModel):
    """One post, created from a Markdown source and immutable afterwards."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    slug: str
    title: str | None = None
    date: dt.date | None = None
    description: Markup | None = None
    html: Markup
    text: str = ""
    source: Path | None = None

    @property
    def display_title(self) -> str:
        return self.title or self.slug


class Neighbors(NamedTuple):
    """Adjacent posts in date-descending order."""

    previous: PostRecord | None  # older
    next: PostRecord | None  # newer


def slugify(segment: str) -> str:
    return re.sub(r"-{2,}", "-", _SLUG_RE.sub("-", segment.lower())).strip("-")


def slug_for_path(path: Path, content_dir: Path) -> str:
    """Derive the routing slug for a content file.

    ``hello.md`` and ``hello/index.md`` both map to ``/hello/``; nested
    directories are kept (``notes/first.md`` -> ``/notes/first/``).
    """
    rel = path.relative_to(content_dir)
    parts = list(rel.parent.parts)
    if rel.stem.lower() != "index":
        parts.append(rel.stem)
    segments = [s for s in (slugify(p) for p in parts) if s]
    if not segments:
        return "/"
    return "/" + "/".join(segments) + "/"


def coerce_date(value: Any) -> dt.date | None:
    """Accept YAML dates, datetimes, and ISO 8601 strings."""
    if value is None or value == "":
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        s = value.strip().strip('"').strip("'")
        try:
            return dt.date.fromisoformat(s)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(s.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    raise ValueError(f"unrecognized date: {value!r}")


def post_from_source(text: str, slug: str, source: Path | None = None) -> PostRecord:
    """Build a post record from Markdown source text.

    Raises:
        ContentError: If the frontmatter is invalid or its date is unparseable
    """
    where = source or slug
    try:
        fm, body = parse_frontmatter(text)
    except FrontmatterError as e:
        raise ContentError(f"{where}: {e}") from e

    try:
        post_date = coerce_date(fm.get("date"))
    except ValueError as e:
        raise ContentError(f"{where}: {e}") from e

    title = fm.get("title")
    description = fm.get("description")
    html = render_markdown(body)

    return PostRecord(
        slug=slug,
        title=str(title).strip() if title else None,
        date=post_date,
        # Frontmatter descriptions may contain inline HTML and are trusted.
        description=Markup(str(description)) if description else None,
        html=html,
        text=plain_text(html.html),
        source=source,
    )


def load_post(path: Path, content_dir: Path) -> PostRecord:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(f"{path}: cannot read: {e}") from e
    return post_from_source(text, slug_for_path(path, content_dir), source=path)


def load_posts(content_dir: Path) -> list[PostRecord]:
    """Load every Markdown file under ``content_dir``.

    Returns:
        Posts in date-descending order

    Raises:
        ContentError: On unreadable sources or duplicate slugs
    """
    if not content_dir.exists():
        raise ContentError(f"content directory not found: {content_dir}")

    posts: list[PostRecord] = []
    seen: dict[str, Path] = {}
    for path in sorted(content_dir.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in MARKDOWN_SUFFIXES:
            continue
        if any(part.startswith((".", "_")) for part in path.relative_to(content_dir).parts):
            continue

        post = load_post(path, content_dir)
        if post.slug in seen:
            raise ContentError(
                f"duplicate slug {post.slug}: {seen[post.slug]} and {path}"
            )
        seen[post.slug] = path
        logger.debug("loaded %s as %s", path, post.slug)
        posts.append(post)

    return sort_posts(posts)


def sort_posts(posts: list[PostRecord]) -> list[PostRecord]:
    """Order posts by date, newest first; ties and undated posts by slug.

    Undated posts go last.
    """
    dated = [p for p in posts if p.date is not None]
    undated = [p for p in posts if p.date is None]
    dated.sort(key=lambda p: p.slug)
    dated.sort(key=lambda p: p.date, reverse=True)
    undated.sort(key=lambda p: p.slug)
    return dated + undated


def neighbors(posts: list[PostRecord], slug: str) -> Neighbors:
    """Return the older and newer posts around ``slug``.

    ``posts`` must already be in date-descending order.

    Raises:
        KeyError: If no post has this slug
    """
    for i, post in enumerate(posts):
        if post.slug == slug:
            previous = posts[i + 1] if i + 1 < len(posts) else None
            newer = posts[i - 1] if i > 0 else None
            return Neighbors(previous=previous, next=newer)
    raise KeyError(slug)
