"""Design tokens shared by every visual component."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

COLORS: Mapping[str, str] = MappingProxyType(
    {
        "primary": "#005eb8",
        "secondary": "#3A4851",
        "text.primary": "#3A4851",
        "text.secondary": "#717171",
        "text.link": "#0b5d9e",
        "text.body": "#383838",
        "background": "#fbfbfb",
        "border": "rgba(187, 187, 187, 0.58)",
        "state.success": "#2FA72F",
        "state.warning": "#EA7600",
        "state.danger": "#D02828",
        "code.inline.color": "#254ebf",
        "code.inline.background": "rgba(127, 144, 191, 0.1)",
        "code.block.background": "#282a36",
        "code.token.function": "#ffc9a0",
        "code.highlight.border": "#ffc9a0",
    }
)

# Upper bounds in pixels.
BREAKPOINTS: Mapping[str, int] = MappingProxyType({"small": 767, "medium": 1024})

SCREEN_QUERIES: Mapping[str, str] = MappingProxyType(
    {
        "small": f"screen and (max-width: {BREAKPOINTS['small']}px)",
        "medium": f"screen and (min-width: {BREAKPOINTS['medium'] + 1}px)",
        "large": f"screen and (min-width: {BREAKPOINTS['medium'] + 1}px)",
    }
)

FONT_FAMILY = (
    '"Source Sans Pro", -apple-system, Helvetica, "Avenir Next", sans-serif'
)
BASE_FONT_SIZE = "16px"
BASE_LINE_HEIGHT = "1.45"


@dataclass(frozen=True)
class StyleTokens:
    colors: Mapping[str, str] = field(default_factory=lambda: COLORS)
    breakpoints: Mapping[str, int] = field(default_factory=lambda: BREAKPOINTS)
    screen_queries: Mapping[str, str] = field(default_factory=lambda: SCREEN_QUERIES)
    font_family: str = FONT_FAMILY
    font_size: str = BASE_FONT_SIZE
    line_height: str = BASE_LINE_HEIGHT

    def color(self, name: str) -> str:
        """Look up a color by semantic name, e.g. ``"text.secondary"``."""
        return self.colors[name]

    def media(self, name: str) -> str:
        return self.screen_queries[name]


DEFAULT_TOKENS = StyleTokens()
