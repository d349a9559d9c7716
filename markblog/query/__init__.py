"""Content query layer: per-page requests and their resolver."""

from .requests import (
    INDEX_PAGE_QUERY,
    NOT_FOUND_PAGE_QUERY,
    PageQuery,
    PostBySlugQuery,
    PostListQuery,
    SiteQuery,
    post_page_query,
)
from .resolver import ContentResolver, QueryError

__all__ = [
    "INDEX_PAGE_QUERY",
    "NOT_FOUND_PAGE_QUERY",
    "PageQuery",
    "PostBySlugQuery",
    "PostListQuery",
    "SiteQuery",
    "post_page_query",
    "ContentResolver",
    "QueryError",
]
