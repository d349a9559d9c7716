"""Presentational primitives.

Every function returns an HTML fragment. Plain ``str`` arguments are escaped;
``Markup`` arguments are inserted as-is.
"""

from __future__ import annotations

from html import escape

from ..config import AVATAR_SIZE
from ..content.markup import Markup
from .context import RenderContext


def text_or_markup(value: str | Markup | None) -> str:
    if value is None:
        return ""
    if isinstance(value, Markup):
        return value.html
    return escape(value)


def link(href: str, text: str | Markup, rel: str | None = None, cls: str | None = None) -> str:
    attrs = f' href="{escape(href, quote=True)}"'
    if rel:
        attrs += f' rel="{escape(rel, quote=True)}"'
    if cls:
        attrs += f' class="{escape(cls, quote=True)}"'
    return f"<a{attrs}>{text_or_markup(text)}</a>"


def avatar(src: str | None, alt: str, size: int = AVATAR_SIZE) -> str:
    """Circular avatar image; nothing when there is no image."""
    if not src:
        return ""
    return (
        f'<img class="avatar" src="{escape(src, quote=True)}" alt="{escape(alt, quote=True)}"'
        f' width="{size}" height="{size}">'
    )


def name_text(name: str) -> str:
    if not name:
        return ""
    return f'<strong class="bio-name">{escape(name)}</strong>'


def about_text(text: str | Markup | None) -> str:
    if not text:
        return ""
    return f'<p class="bio-about">{text_or_markup(text)}</p>'


def center_horizontally(*children: str) -> str:
    inner = "".join(c for c in children if c)
    return f'<div class="center-h">{inner}</div>'


def heading(children: str, flat: bool = False) -> str:
    """Wrapper that lays its children side by side on wide screens.

    With ``flat`` the children stay stacked at every width.
    """
    cls = "heading flat" if flat else "heading"
    return f'<div class="{cls}">\n{children}\n</div>'


def bio(ctx: RenderContext) -> str:
    """Author card: avatar, a "Written by" sentence, and a Twitter link."""
    site = ctx.site
    about_parts = []
    if site.author:
        sentence = f"Written by {name_text(site.author)}"
        if site.location:
            sentence += f" who lives and works in {escape(site.location)} building useful things."
        else:
            sentence += "."
        about_parts.append(sentence)
    elif site.location:
        about_parts.append(f"Lives and works in {escape(site.location)} building useful things.")
    if site.social.twitter:
        handle = site.social.twitter.lstrip("@")
        about_parts.append(
            link(f"https://twitter.com/{handle}", "You should follow them on Twitter")
        )
    about = Markup(" ".join(about_parts)) if about_parts else None

    card = center_horizontally(
        avatar(ctx.avatar_href, site.author),
        f"<div>{about_text(about)}</div>",
    )
    return f'<div class="bio">{card}</div>'


def post_summary(href: str, title: str, date: str, summary: Markup | None) -> str:
    """One entry of the post index."""
    return (
        '<article class="excerpt">'
        f'<h3 class="excerpt-title">{link(href, title)}</h3>'
        f"<small>{escape(date)}</small>"
        f"<p>{text_or_markup(summary)}</p>"
        "</article>"
    )


def pagination(previous: tuple[str, str] | None, next_: tuple[str, str] | None) -> str:
    """Previous/next links; an absent neighbor leaves its slot empty.

    Each neighbor is ``(href, title)``.
    """
    prev_html = link(previous[0], f"← {previous[1]}", rel="prev") if previous else ""
    next_html = link(next_[0], f"{next_[1]} →", rel="next") if next_ else ""
    return (
        '<ul class="pagination">'
        f"<li>{prev_html}</li>"
        f"<li>{next_html}</li>"
        "</ul>"
    )
