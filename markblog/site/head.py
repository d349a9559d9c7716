"""Document ``<head>``: title, description, and social card tags."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from html import escape

from ..content.markup import Markup, plain_text
from .context import RenderContext


@dataclass(frozen=True)
class Head:
    title: str
    description: str | Markup | None = None
    site_title: str | None = None
    meta: tuple[tuple[str, str, str], ...] = field(default_factory=tuple)  # (attr, key, content)


def meta_description(ctx: RenderContext, description: str | Markup | None) -> str:
    """Per-page description, or the site description when the page has none."""
    if isinstance(description, Markup):
        description = plain_text(description.html)
    return description or ctx.site.description


def document_title(ctx: RenderContext, head: Head) -> str:
    site_title = head.site_title or ctx.site.title
    if not head.title:
        return site_title
    return f"{head.title} | {site_title}"


def meta_tags(ctx: RenderContext, head: Head) -> list[tuple[str, str, str]]:
    description = meta_description(ctx, head.description)
    tags = [
        ("name", "description", description),
        ("property", "og:title", head.title),
        ("property", "og:description", description),
        ("property", "og:type", "website"),
        ("name", "twitter:card", "summary"),
        ("name", "twitter:creator", ctx.site.author),
        ("name", "twitter:title", head.title),
        ("name", "twitter:description", description),
    ]
    tags.extend(head.meta)
    return tags


def render_head(ctx: RenderContext, head: Head, styles: Iterable[str] = ()) -> str:
    lines = [
        '<meta charset="utf-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1">',
        f"<title>{escape(document_title(ctx, head))}</title>",
    ]
    for attr, key, content in meta_tags(ctx, head):
        lines.append(
            f'<meta {attr}="{escape(key, quote=True)}" content="{escape(content, quote=True)}">'
        )
    lines.extend(styles)
    return "\n".join(lines)
