"""Page templates for the blog."""

from __future__ import annotations

from html import escape
from typing import Any

from ..content.markup import Markup, has_code
from .components import bio, heading, link, pagination, post_summary, text_or_markup
from .context import RenderContext
from .head import Head, render_head
from .styles import style_tag

NOT_FOUND_TITLE = "404: Not Found"
NOT_FOUND_HEADING = "404: Words Not Found"
NOT_FOUND_MESSAGE = (
    "Not entirely sure how you ended up here, but you're either lost or the "
    "content you're after is gone."
)


def html_doc(ctx: RenderContext, head: Head, body: str, with_code_styles: bool = False) -> str:
    sheets = [ctx.stylesheet]
    if with_code_styles:
        sheets.append(ctx.code_stylesheet)
    return (
        "<!doctype html>\n"
        f'<html lang="{escape(ctx.lang, quote=True)}">\n'
        "<head>\n"
        f"{render_head(ctx, head, styles=[style_tag(sheets)])}\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def layout(ctx: RenderContext, location: str, children: str, flat: bool = False) -> str:
    """Bio column plus main content; non-root pages get a link home."""
    side = [bio(ctx)]
    if location != ctx.root_path:
        side.append(link(ctx.root_path, "← Home", cls="home-link"))
    inner = f"<div>{''.join(side)}</div>\n<main>\n{children}\n</main>"
    return heading(inner, flat=flat)


def index_page(ctx: RenderContext, data: dict[str, Any], location: str) -> str:
    """List every post, newest first.

    Each entry shows its title (the slug when untitled), date, and the
    description, or the excerpt when there is no description.
    """
    entries = []
    for node in data.get("posts") or []:
        slug = node["slug"]
        entries.append(
            post_summary(
                href=ctx.href(slug),
                title=node.get("title") or slug,
                date=node.get("date") or "",
                summary=node.get("description") or node.get("excerpt"),
            )
        )
    body = layout(ctx, location, "\n".join(entries))
    return html_doc(ctx, Head(title="All posts", site_title=_site_title(data)), body)


def post_page(ctx: RenderContext, data: dict[str, Any], location: str) -> str:
    post = data["post"]
    title = post.get("title") or post.get("slug") or ""
    html: Markup = post.get("html") or Markup("")

    prev_node = data.get("previous")
    next_node = data.get("next")
    nav = pagination(
        (ctx.href(prev_node["slug"]), prev_node["title"]) if prev_node else None,
        (ctx.href(next_node["slug"]), next_node["title"]) if next_node else None,
    )

    lines = [
        f'<h1 class="post-title">{escape(title)}</h1>',
        f'<small class="post-date">{escape(post.get("date") or "")}</small>',
        f'<div class="post-content">{text_or_markup(html)}</div>',
        nav,
    ]
    head = Head(
        title=title,
        description=post.get("description") or post.get("excerpt"),
        site_title=_site_title(data),
    )
    return html_doc(
        ctx,
        head,
        layout(ctx, location, "\n".join(lines)),
        with_code_styles=has_code(html),
    )


def not_found_page(ctx: RenderContext, data: dict[str, Any], location: str) -> str:
    lines = [
        f"<h1>{escape(NOT_FOUND_HEADING)}</h1>",
        f"<p>{escape(NOT_FOUND_MESSAGE)}</p>",
    ]
    head = Head(title=NOT_FOUND_TITLE, site_title=_site_title(data))
    return html_doc(ctx, head, layout(ctx, location, "\n".join(lines)))


def _site_title(data: dict[str, Any]) -> str | None:
    return (data.get("site") or {}).get("title")
