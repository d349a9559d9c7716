"""Tests for the static site generator."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from markblog.content.metadata import SiteConfigError
from markblog.content.posts import ContentError
from markblog.site.build import build_site
from markblog.site.routes import resolve_route

SITE_YML = """\
title: Test Blog
description: A blog for tests
author: Sam
avatar: assets/me.png
social:
  twitter: samdoe
"""


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class TestSiteBuild(unittest.TestCase):
    def _make_project(self, root: Path) -> tuple[Path, Path]:
        content = root / "content" / "blog"
        _write(root / "site.yml", SITE_YML)
        (root / "assets").mkdir()
        (root / "assets" / "me.png").write_bytes(b"\x89PNG\r\n")
        _write(content / "hello-world" / "index.md", "---\ntitle: Hello World\ndate: 2015-05-01\n---\nHi.\n")
        _write(
            content / "code.md",
            '---\ntitle: Some Code\ndate: 2016-01-01\ndescription: Code <em>inside</em>\n---\n'
            "```python\ndef hello():\n    return 1\n```\n",
        )
        _write(content / "untitled.md", "---\ndate: 2014-01-01\n---\nNo title here.\n")
        return content, root / "site.yml"

    def test_build_site_writes_pages(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            content, site_yml = self._make_project(root)
            out = root / "public"

            report = build_site(content, out, site_config=site_yml)
            self.assertEqual(report.posts, 3)
            self.assertEqual(report.pages, 5)

            self.assertTrue((out / "index.html").exists())
            self.assertTrue((out / "404.html").exists())
            self.assertTrue((out / "hello-world" / "index.html").exists())
            self.assertTrue((out / "code" / "index.html").exists())
            self.assertTrue((out / "untitled" / "index.html").exists())
            self.assertTrue((out / "assets" / "me.png").exists())

            index = (out / "index.html").read_text(encoding="utf-8")
            self.assertLess(index.index('href="/code/"'), index.index('href="/hello-world/"'))
            self.assertLess(index.index('href="/hello-world/"'), index.index('href="/untitled/"'))
            self.assertIn('src="/assets/me.png"', index)

            post = (out / "code" / "index.html").read_text(encoding="utf-8")
            self.assertIn("/* code */", post)
            self.assertIn('rel="prev"', post)
            self.assertNotIn('rel="next"', post)

            self.assertTrue(any("untitled" in w for w in report.warnings))
            self.assertEqual(resolve_route(report.routes, "/nowhere").kind, "not_found")
            self.assertEqual(resolve_route(report.routes, "/code").kind, "post")

    def test_content_failure_writes_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            content, site_yml = self._make_project(root)
            _write(content / "404.md", "---\ntitle: Clash\ndate: 2020-01-01\n---\nReserved.\n")
            out = root / "public"

            with self.assertRaises(ContentError):
                build_site(content, out, site_config=site_yml)
            self.assertFalse(out.exists())

    def test_undated_post_is_a_warning(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            content, site_yml = self._make_project(root)
            _write(content / "undated.md", "---\ntitle: Undated\n---\nNo date.\n")
            out = root / "public"

            report = build_site(content, out, site_config=site_yml)
            self.assertTrue(any("no date" in w for w in report.warnings))
            index = (out / "index.html").read_text(encoding="utf-8")
            self.assertGreater(index.index('href="/undated/"'), index.index('href="/code/"'))
            self.assertTrue((out / "undated" / "index.html").is_file())

    def test_missing_site_config(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            content, _ = self._make_project(root)
            with self.assertRaises(SiteConfigError):
                build_site(content, root / "public", site_config=root / "missing.yml")

    def test_missing_avatar_is_a_warning(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            content, site_yml = self._make_project(root)
            (root / "assets" / "me.png").unlink()
            report = build_site(content, root / "public", site_config=site_yml)
            self.assertTrue(any("avatar" in w for w in report.warnings))
            index = (root / "public" / "index.html").read_text(encoding="utf-8")
            self.assertNotIn("<img", index)

    def test_path_prefix(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            content, site_yml = self._make_project(root)
            out = root / "public"
            build_site(content, out, site_config=site_yml, path_prefix="/blog")
            index = (out / "index.html").read_text(encoding="utf-8")
            self.assertIn('href="/blog/code/"', index)
            self.assertIn('src="/blog/assets/me.png"', index)


if __name__ == "__main__":
    unittest.main()
