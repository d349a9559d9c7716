"""Stylesheets for the generated site.

Style rules are immutable values built once from the design tokens and handed
to the renderer through ``RenderContext``; nothing here is global state.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pygments.formatters import HtmlFormatter

from ..config import CODE_CSS_CLASS, PYGMENTS_STYLE
from .tokens import StyleTokens


@dataclass(frozen=True)
class StyleRule:
    selector: str
    declarations: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class MediaRule:
    query: str
    rules: tuple[StyleRule, ...]


@dataclass(frozen=True)
class StyleSheet:
    name: str
    rules: tuple[StyleRule | MediaRule, ...]
    prelude: str = ""

    def css(self) -> str:
        return render_css(self)

    def __add__(self, other: StyleSheet) -> StyleSheet:
        extra = "\n".join(s for s in (self.prelude, other.prelude) if s)
        return StyleSheet(
            name=f"{self.name}+{other.name}",
            rules=self.rules + other.rules,
            prelude=extra,
        )


def rule(selector: str, **declarations: str) -> StyleRule:
    """Build a rule from keyword declarations (``font_size`` -> ``font-size``).

    A leading ``webkit_``/``moz_`` becomes a vendor prefix.
    """
    decls = []
    for prop, value in declarations.items():
        name = prop.replace("_", "-")
        if name.startswith(("webkit-", "moz-")):
            name = "-" + name
        decls.append((name, value))
    return StyleRule(selector=selector, declarations=tuple(decls))


def media(query: str, *rules: StyleRule) -> MediaRule:
    return MediaRule(query=query, rules=tuple(rules))


def render_css(sheet: StyleSheet) -> str:
    lines = [f"/* {sheet.name} */"]
    if sheet.prelude:
        lines.append(sheet.prelude.strip())
    for r in sheet.rules:
        if isinstance(r, MediaRule):
            lines.append(f"@media {r.query} {{")
            lines.extend(_render_rule(inner, indent="  ") for inner in r.rules)
            lines.append("}")
        else:
            lines.append(_render_rule(r))
    return "\n".join(lines) + "\n"


def _render_rule(r: StyleRule, indent: str = "") -> str:
    body = " ".join(f"{name}: {value};" for name, value in r.declarations)
    return f"{indent}{r.selector} {{ {body} }}"


def global_styles(tokens: StyleTokens) -> StyleSheet:
    """Base rules applied to every page."""
    return StyleSheet(
        name="global",
        rules=(
            rule("*", box_sizing="border-box"),
            rule("body, html", height="100%"),
            rule(
                "body",
                webkit_font_smoothing="antialiased",
                padding="25px",
                padding_top="30px",
                font_family=tokens.font_family,
                font_size=tokens.font_size,
                line_height=tokens.line_height,
                color=tokens.color("text.body"),
                background_color=tokens.color("background"),
                max_width="44rem",
                margin="0 auto",
            ),
            rule("h1, h2, h3, h4", font_family=tokens.font_family, line_height="1.1"),
            rule("main", padding_bottom="80px", min_width="355px"),
            media("(min-width: 768px)", rule("body", padding_top="105px")),
            rule("p", color=tokens.color("text.secondary")),
            rule("a", color=tokens.color("text.link"), text_decoration="none"),
            rule("a:hover", text_decoration="underline"),
            rule("ul", padding_left="0"),
            rule("ul li", margin_bottom="10px"),
        ),
    )


def component_styles(tokens: StyleTokens) -> StyleSheet:
    """Rules for the presentational primitives and page templates."""
    return StyleSheet(
        name="components",
        rules=(
            rule(".center-h", display="flex", align_items="center"),
            rule(".bio", margin_bottom="50px"),
            rule(".avatar", border_radius="50%", margin_right="0.875rem", flex_shrink="0"),
            rule(".bio-name", color=tokens.color("text.primary"), margin="0"),
            rule(".bio-about", color=tokens.color("text.secondary"), margin="0.25rem 0 0"),
            rule(".home-link", display="inline-block", margin_bottom="30px"),
            media(
                tokens.media("medium"),
                rule(".heading:not(.flat)", display="flex"),
                rule(".heading:not(.flat) > div:first-child", flex="0 0 14rem", margin_right="2rem"),
                rule(".heading:not(.flat) > main", flex="1 1 auto"),
            ),
            rule(".excerpt", margin_bottom="40px"),
            rule(".excerpt-title", margin_bottom="5px", font_weight="normal"),
            rule(".post-title", font_weight="normal", margin_bottom="10px"),
            rule(".post-date", margin_bottom="15px", display="block"),
            rule(
                ".post-content",
                margin="15px 0px",
                padding="15px 0px",
                border_top=f"1px solid {tokens.color('border')}",
                border_bottom=f"1px solid {tokens.color('border')}",
            ),
            rule(
                ".pagination",
                display="flex",
                flex_wrap="wrap",
                justify_content="space-between",
                list_style="none",
                padding="0",
                margin="0",
            ),
        ),
    )


def code_styles(tokens: StyleTokens, pygments_style: str = PYGMENTS_STYLE) -> StyleSheet:
    """Rules for syntax-highlighted code, emitted only on pages with code."""
    block = f".{CODE_CSS_CLASS}"
    return StyleSheet(
        name="code",
        rules=(
            rule(
                ":not(pre) > code",
                border_radius="0.3em",
                color=tokens.color("code.inline.color"),
                background=tokens.color("code.inline.background"),
                padding="0.15em 0.2em 0.05em",
                white_space="normal",
            ),
            rule(
                block,
                background_color=tokens.color("code.block.background"),
                margin_bottom="1.85rem",
                border_radius="10px",
                overflow="auto",
            ),
            media(
                tokens.media("small"),
                rule(block, border_radius="0px", margin="1.85rem -25px"),
            ),
            rule(f"{block} pre", padding="20px", margin="0"),
            rule(f"{block} pre code", font_size="14px"),
            rule(f"{block} .nf, {block} .fm", color=tokens.color("code.token.function")),
            rule(
                f"{block} .hll",
                display="block",
                border_left=f"5px solid {tokens.color('code.highlight.border')}",
                margin="0 -20px",
                padding="0 15px",
            ),
        ),
        prelude=_pygments_css(block, pygments_style),
    )


def _pygments_css(selector: str, style: str) -> str:
    return HtmlFormatter(style=style).get_style_defs(selector)


def base_stylesheet(tokens: StyleTokens) -> StyleSheet:
    return global_styles(tokens) + component_styles(tokens)


def style_tag(sheets: Iterable[StyleSheet]) -> str:
    css = "\n".join(s.css() for s in sheets)
    return f"<style>\n{css}</style>"
