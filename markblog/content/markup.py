"""Markdown rendering and the pre-sanitized markup type."""

from __future__ import annotations

import re
from dataclasses import dataclass
from html import escape, unescape

import markdown

from ..config import CODE_CSS_CLASS, MARKDOWN_EXTENSION_CONFIGS, MARKDOWN_EXTENSIONS

ELLIPSIS = "…"


@dataclass(frozen=True)
class Markup:
    """HTML that is trusted as already sanitized.

    Templates insert a Markup value verbatim; every plain ``str`` is escaped.
    Only the Markdown renderer, frontmatter descriptions, and ``Markup.escape``
    produce instances.
    """

    html: str

    @classmethod
    def escape(cls, text: str) -> Markup:
        return cls(escape(text))

    def __str__(self) -> str:
        return self.html

    def __bool__(self) -> bool:
        return bool(self.html.strip())


def render_markdown(text: str) -> Markup:
    """Render a Markdown body to HTML.

    Fenced code blocks are highlighted with Pygments (``codehilite``); a fence
    may carry ``hl_lines="2 3"`` to mark highlighted lines.
    """
    html = markdown.markdown(
        text,
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
        output_format="html",
    )
    return Markup(html)


_BLOCK_TAG_RE = re.compile(
    r"</?(?:p|h[1-6]|li|ul|ol|pre|br|hr|blockquote|div|table|tr|td|th)\b[^>]*>",
    re.IGNORECASE,
)


def plain_text(html: str) -> str:
    """Strip tags and collapse whitespace, keeping visible text.

    Block-level tags separate words; inline tags vanish so ``<em>b</em>ly``
    stays one word.
    """
    text = _BLOCK_TAG_RE.sub(" ", html)
    text = re.sub(r"<[^>]+>", "", text)
    text = unescape(text)
    return re.sub(r"\s+", " ", text).strip()


def make_excerpt(text: str, prune_length: int) -> str:
    """Truncate text to at most ``prune_length`` characters at a word boundary.

    An ellipsis is appended whenever text was cut. A first word longer than the
    limit is cut mid-word.
    """
    if prune_length <= 0:
        return ""
    text = re.sub(r"\s+", " ", text).strip()
    if len(text) <= prune_length:
        return text

    cut = text[: prune_length + 1]
    space = cut.rfind(" ")
    if space > 0:
        cut = cut[:space]
    else:
        cut = cut[:prune_length]
    return cut.rstrip(" ,.;:") + ELLIPSIS


def excerpt_markup(text: str, prune_length: int) -> Markup:
    return Markup.escape(make_excerpt(text, prune_length))


def has_code_block(html: Markup | str) -> bool:
    """True when the rendered body contains a highlighted code block."""
    return f'class="{CODE_CSS_CLASS}"' in str(html)


def has_code(html: Markup | str) -> bool:
    """True when the body holds a code block or inline ``<code>``."""
    return has_code_block(html) or "<code" in str(html)
