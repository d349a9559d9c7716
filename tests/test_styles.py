"""Tests for design tokens and stylesheets."""

import unittest

from markblog.site.styles import (
    MediaRule,
    StyleRule,
    StyleSheet,
    base_stylesheet,
    code_styles,
    global_styles,
    render_css,
    rule,
)
from markblog.site.tokens import BREAKPOINTS, COLORS, DEFAULT_TOKENS, SCREEN_QUERIES


class TestTokens(unittest.TestCase):
    def test_semantic_colors(self) -> None:
        self.assertEqual(DEFAULT_TOKENS.color("text.secondary"), "#717171")
        self.assertEqual(DEFAULT_TOKENS.color("state.danger"), "#D02828")

    def test_unknown_color_raises(self) -> None:
        with self.assertRaises(KeyError):
            DEFAULT_TOKENS.color("text.nope")

    def test_tokens_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            COLORS["primary"] = "#000"  # type: ignore[index]

    def test_screen_queries_follow_breakpoints(self) -> None:
        self.assertEqual(BREAKPOINTS["small"], 767)
        self.assertEqual(SCREEN_QUERIES["small"], "screen and (max-width: 767px)")
        self.assertEqual(SCREEN_QUERIES["medium"], "screen and (min-width: 1025px)")


class TestRenderCss(unittest.TestCase):
    def test_rule_keyword_names(self) -> None:
        r = rule("body", box_sizing="border-box", webkit_font_smoothing="antialiased")
        self.assertEqual(
            r,
            StyleRule("body", (("box-sizing", "border-box"), ("-webkit-font-smoothing", "antialiased"))),
        )

    def test_media_rules_are_nested(self) -> None:
        sheet = StyleSheet(
            name="t",
            rules=(rule("a", color="red"), MediaRule("(min-width: 768px)", (rule("a", color="blue"),))),
        )
        css = render_css(sheet)
        self.assertIn("a { color: red; }", css)
        self.assertIn("@media (min-width: 768px) {\n  a { color: blue; }\n}", css)

    def test_sheets_combine(self) -> None:
        combined = StyleSheet("a", (rule("a", color="red"),)) + StyleSheet("b", (rule("b", color="blue"),))
        self.assertEqual(combined.name, "a+b")
        self.assertEqual(len(combined.rules), 2)


class TestSiteStyles(unittest.TestCase):
    def test_global_styles(self) -> None:
        css = global_styles(DEFAULT_TOKENS).css()
        self.assertIn("* { box-sizing: border-box; }", css)
        self.assertIn("max-width: 44rem;", css)
        self.assertIn("a { color: #0b5d9e; text-decoration: none; }", css)
        self.assertIn("ul { padding-left: 0; }", css)

    def test_base_stylesheet_includes_components(self) -> None:
        css = base_stylesheet(DEFAULT_TOKENS).css()
        self.assertIn(".avatar { border-radius: 50%;", css)
        self.assertIn(f"@media {SCREEN_QUERIES['medium']}", css)
        self.assertIn(".heading:not(.flat) { display: flex; }", css)

    def test_code_styles(self) -> None:
        css = code_styles(DEFAULT_TOKENS).css()
        self.assertIn(".highlight { background-color: #282a36;", css)
        self.assertIn(".highlight .nf, .highlight .fm { color: #ffc9a0; }", css)
        self.assertIn(f"@media {SCREEN_QUERIES['small']}", css)
        self.assertIn("border-left: 5px solid #ffc9a0;", css)

    def test_token_rules_follow_pygments_theme(self) -> None:
        css = code_styles(DEFAULT_TOKENS).css()
        self.assertLess(css.index(".highlight .k {"), css.index(".highlight .nf, .highlight .fm {"))


if __name__ == "__main__":
    unittest.main()
