"""Resolve page requests against loaded content."""

from __future__ import annotations

from typing import Any

from ..content.markup import excerpt_markup
from ..content.metadata import SiteMetadata
from ..content.posts import PostRecord, neighbors, sort_posts
from .requests import POST_FIELDS, SITE_FIELDS, PageQuery, PostBySlugQuery, PostListQuery, SiteQuery

# Fields a record must carry when selected; an undated post resolves to a None date.
_REQUIRED_POST_FIELDS = frozenset({"slug", "html"})


class QueryError(ValueError):
    """Raised when a request cannot be satisfied by the content set."""


class ContentResolver:
    """Answers page requests from site metadata and a set of posts.

    Results are plain dicts shaped like the request: ``{"site": {...}}`` plus
    ``"posts"`` for a list request, or ``"post"``, ``"previous"`` and ``"next"``
    for a single-post request.
    """

    def __init__(self, site: SiteMetadata, posts: list[PostRecord]):
        self.site = site
        self.posts = sort_posts(list(posts))
        self._by_slug = {p.slug: p for p in self.posts}

    def resolve(self, query: PageQuery) -> dict[str, Any]:
        result: dict[str, Any] = {"site": self.resolve_site(query.site)}
        if query.posts is not None:
            result["posts"] = self.resolve_posts(query.posts)
        if query.post is not None:
            result.update(self.resolve_post(query.post))
        return result

    def resolve_site(self, query: SiteQuery) -> dict[str, Any]:
        _check_fields(query.fields, SITE_FIELDS, "site")
        out: dict[str, Any] = {}
        for field in query.fields:
            value = getattr(self.site, field)
            out[field] = value.model_dump() if field == "social" else value
        return out

    def resolve_posts(self, query: PostListQuery) -> list[dict[str, Any]]:
        _check_fields(query.fields, POST_FIELDS, "post")
        return [
            _select(p, query.fields, query.excerpt_length, query.date_format)
            for p in self.posts
        ]

    def resolve_post(self, query: PostBySlugQuery) -> dict[str, Any]:
        _check_fields(query.fields, POST_FIELDS, "post")
        post = self._by_slug.get(query.slug)
        if post is None:
            raise QueryError(f"no post with slug {query.slug}")

        out: dict[str, Any] = {
            "post": _select(post, query.fields, query.excerpt_length, query.date_format),
            "previous": None,
            "next": None,
        }
        if query.with_neighbors:
            around = neighbors(self.posts, post.slug)
            out["previous"] = _neighbor(around.previous)
            out["next"] = _neighbor(around.next)
        return out


def _check_fields(fields: tuple[str, ...], known: frozenset[str], kind: str) -> None:
    unknown = [f for f in fields if f not in known]
    if unknown:
        raise QueryError(f"unknown {kind} field(s): {', '.join(sorted(unknown))}")


def _select(
    post: PostRecord,
    fields: tuple[str, ...],
    excerpt_length: int,
    date_format: str,
) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for field in fields:
        if field == "excerpt":
            out["excerpt"] = excerpt_markup(post.text, excerpt_length)
            continue

        value = getattr(post, field)
        if value is None and field in _REQUIRED_POST_FIELDS:
            where = post.source or post.slug
            raise QueryError(f"{where}: required field '{field}' is missing")

        if field == "date" and value is not None:
            value = value.strftime(date_format)
        out[field] = value
    return out


def _neighbor(post: PostRecord | None) -> dict[str, Any] | None:
    if post is None:
        return None
    return {"slug": post.slug, "title": post.display_title}
