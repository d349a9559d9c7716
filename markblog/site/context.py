"""Render context built once per build and passed to every page."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..content.metadata import SiteMetadata
from .styles import StyleSheet, base_stylesheet, code_styles
from .tokens import DEFAULT_TOKENS, StyleTokens


@dataclass(frozen=True)
class RenderContext:
    site: SiteMetadata
    tokens: StyleTokens = DEFAULT_TOKENS
    stylesheet: StyleSheet = field(default_factory=lambda: base_stylesheet(DEFAULT_TOKENS))
    code_stylesheet: StyleSheet = field(default_factory=lambda: code_styles(DEFAULT_TOKENS))
    path_prefix: str = ""
    avatar_href: str | None = None
    lang: str = "en"

    @property
    def root_path(self) -> str:
        return f"{self.path_prefix}/"

    def href(self, slug: str) -> str:
        """Absolute link for a slug, honoring the path prefix."""
        if not slug.startswith("/"):
            slug = "/" + slug
        return f"{self.path_prefix}{slug}"


def make_context(
    site: SiteMetadata,
    tokens: StyleTokens = DEFAULT_TOKENS,
    path_prefix: str = "",
    avatar_href: str | None = None,
) -> RenderContext:
    return RenderContext(
        site=site,
        tokens=tokens,
        stylesheet=base_stylesheet(tokens),
        code_stylesheet=code_styles(tokens),
        path_prefix=path_prefix.rstrip("/"),
        avatar_href=avatar_href,
    )
