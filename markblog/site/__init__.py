"""Static site rendering: tokens, styles, components, templates, and the build."""

from .build import BuildReport, build_site, render_pages
from .context import RenderContext, make_context
from .routes import Route, page_path, resolve_route
from .styles import StyleSheet, base_stylesheet, code_styles, component_styles, global_styles
from .tokens import BREAKPOINTS, COLORS, DEFAULT_TOKENS, SCREEN_QUERIES, StyleTokens

__all__ = [
    "BuildReport",
    "build_site",
    "render_pages",
    "RenderContext",
    "make_context",
    "Route",
    "page_path",
    "resolve_route",
    "StyleSheet",
    "base_stylesheet",
    "code_styles",
    "component_styles",
    "global_styles",
    "BREAKPOINTS",
    "COLORS",
    "DEFAULT_TOKENS",
    "SCREEN_QUERIES",
    "StyleTokens",
]
