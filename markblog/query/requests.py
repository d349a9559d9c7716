"""Typed content requests, one per page.

A request names the fields a page needs; it does not know how they are looked
up. ``ContentResolver`` is one way to satisfy them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ..config import DATE_FORMAT, INDEX_EXCERPT_LENGTH, POST_EXCERPT_LENGTH

SITE_FIELDS = frozenset(
    {"title", "description", "author", "location", "site_url", "avatar", "social"}
)
POST_FIELDS = frozenset({"slug", "title", "date", "description", "excerpt", "html"})


class SiteQuery(BaseModel):
    """Fields of the site metadata."""

    model_config = ConfigDict(frozen=True)

    fields: tuple[str, ...] = ("title",)


class PostListQuery(BaseModel):
    """Every post, newest first."""

    model_config = ConfigDict(frozen=True)

    fields: tuple[str, ...] = ("excerpt", "slug", "date", "title", "description")
    excerpt_length: int = INDEX_EXCERPT_LENGTH
    date_format: str = DATE_FORMAT


class PostBySlugQuery(BaseModel):
    """A single post selected by slug, optionally with its neighbors."""

    model_config = ConfigDict(frozen=True)

    slug: str
    fields: tuple[str, ...] = ("slug", "title", "date", "description", "excerpt", "html")
    excerpt_length: int = POST_EXCERPT_LENGTH
    date_format: str = DATE_FORMAT
    with_neighbors: bool = True


class PageQuery(BaseModel):
    """Everything one page needs."""

    model_config = ConfigDict(frozen=True)

    site: SiteQuery = SiteQuery()
    posts: PostListQuery | None = None
    post: PostBySlugQuery | None = None


INDEX_PAGE_QUERY = PageQuery(site=SiteQuery(fields=("title",)), posts=PostListQuery())

NOT_FOUND_PAGE_QUERY = PageQuery(site=SiteQuery(fields=("title",)))


def post_page_query(slug: str) -> PageQuery:
    return PageQuery(
        site=SiteQuery(fields=("title", "author")),
        post=PostBySlugQuery(slug=slug),
    )
