"""Tests for routing."""

import tempfile
import unittest
from pathlib import Path

from markblog.site.routes import (
    NOT_FOUND_PATH,
    Route,
    normalize_request_path,
    page_path,
    resolve_route,
    routes_from_dir,
    strip_path_prefix,
)

ROUTES = {
    "/": Route(path="/", file="index.html", kind="index"),
    "/hello/": Route(path="/hello/", file="hello/index.html", kind="post"),
    NOT_FOUND_PATH: Route(path=NOT_FOUND_PATH, file="404.html", kind="not_found"),
}


class TestPagePath(unittest.TestCase):
    def test_root_and_slugs(self) -> None:
        self.assertEqual(page_path("/"), "index.html")
        self.assertEqual(page_path("/hello/"), "hello/index.html")
        self.assertEqual(page_path("/notes/first/"), "notes/first/index.html")

    def test_rejects_parent_segments(self) -> None:
        with self.assertRaises(ValueError):
            page_path("/../etc/")


class TestResolveRoute(unittest.TestCase):
    def test_matches_with_and_without_trailing_slash(self) -> None:
        self.assertEqual(resolve_route(ROUTES, "/hello/").kind, "post")
        self.assertEqual(resolve_route(ROUTES, "/hello").kind, "post")
        self.assertEqual(resolve_route(ROUTES, "/hello/index.html").kind, "post")
        self.assertEqual(resolve_route(ROUTES, "/?ref=x").kind, "index")

    def test_unmatched_gets_not_found(self) -> None:
        self.assertEqual(resolve_route(ROUTES, "/nope/").kind, "not_found")
        self.assertEqual(resolve_route(ROUTES, "/hello/extra").kind, "not_found")

    def test_path_prefix_is_stripped(self) -> None:
        self.assertEqual(normalize_request_path("/blog/hello", "/blog"), "/hello/")
        self.assertEqual(resolve_route(ROUTES, "/blog/hello/", path_prefix="/blog").kind, "post")

    def test_prefix_strips_whole_segments_only(self) -> None:
        self.assertEqual(strip_path_prefix("/blog", "/blog/"), "/")
        self.assertEqual(strip_path_prefix("/blog/a/", "/blog"), "/a/")
        self.assertEqual(strip_path_prefix("/blog?x=1", "/blog"), "/?x=1")
        self.assertEqual(strip_path_prefix("/blogger/", "/blog"), "/blogger/")
        self.assertEqual(strip_path_prefix("/a/", ""), "/a/")
        self.assertEqual(resolve_route(ROUTES, "/bloghello/", path_prefix="/blog").kind, "not_found")

    def test_no_not_found_page_raises(self) -> None:
        with self.assertRaises(KeyError):
            resolve_route({"/": ROUTES["/"]}, "/missing/")


class TestRoutesFromDir(unittest.TestCase):
    def test_scans_generated_site(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "hello").mkdir()
            (root / "index.html").write_text("i", encoding="utf-8")
            (root / "hello" / "index.html").write_text("h", encoding="utf-8")
            (root / "404.html").write_text("n", encoding="utf-8")

            routes = routes_from_dir(root)
        self.assertEqual(set(routes), {"/", "/hello/", NOT_FOUND_PATH})
        self.assertEqual(routes["/hello/"].file, "hello/index.html")


if __name__ == "__main__":
    unittest.main()
