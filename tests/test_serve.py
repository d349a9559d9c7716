"""Tests for the local preview server."""

from __future__ import annotations

import http.client
import tempfile
import threading
import unittest
from pathlib import Path

from markblog.site.serve import make_server


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class _ServerCase(unittest.TestCase):
    path_prefix = ""

    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        site = Path(self._td.name)
        _write(site / "index.html", "home")
        _write(site / "hello" / "index.html", "hello post")
        _write(site / "404.html", "not found page")
        _write(site / "assets" / "style.css", "body {}")

        self.server = make_server(site, "127.0.0.1", 0, path_prefix=self.path_prefix)
        self.port = self.server.server_address[1]
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.thread.start()

    def tearDown(self) -> None:
        self.server.shutdown()
        self.server.server_close()
        self.thread.join()
        self._td.cleanup()

    def _get(self, path: str) -> tuple[int, dict[str, str], bytes]:
        conn = http.client.HTTPConnection("127.0.0.1", self.port, timeout=5)
        try:
            conn.request("GET", path)
            resp = conn.getresponse()
            return resp.status, dict(resp.getheaders()), resp.read()
        finally:
            conn.close()


class TestServe(_ServerCase):
    def test_serves_pages_and_assets(self) -> None:
        self.assertEqual(self._get("/")[::2], (200, b"home"))
        self.assertEqual(self._get("/hello/")[::2], (200, b"hello post"))
        self.assertEqual(self._get("/assets/style.css")[::2], (200, b"body {}"))

    def test_unmatched_path_gets_not_found_page(self) -> None:
        status, _, body = self._get("/nope/")
        self.assertEqual(status, 404)
        self.assertEqual(body, b"not found page")

    def test_not_found_route_itself_is_a_404(self) -> None:
        self.assertEqual(self._get("/404/")[::2], (404, b"not found page"))


class TestServeWithPrefix(_ServerCase):
    path_prefix = "/blog"

    def test_prefixed_paths_are_served(self) -> None:
        self.assertEqual(self._get("/blog/")[::2], (200, b"home"))
        self.assertEqual(self._get("/blog/hello/")[::2], (200, b"hello post"))
        self.assertEqual(self._get("/blog/assets/style.css")[::2], (200, b"body {}"))

    def test_unmatched_prefixed_path_gets_not_found_page(self) -> None:
        self.assertEqual(self._get("/blog/nope/")[::2], (404, b"not found page"))

    def test_directory_redirect_keeps_prefix(self) -> None:
        status, headers, _ = self._get("/blog/hello")
        self.assertEqual(status, 301)
        self.assertEqual(headers["Location"], "/blog/hello/")

    def test_prefix_matches_whole_segments(self) -> None:
        self.assertEqual(self._get("/blogger/")[::2], (404, b"not found page"))


if __name__ == "__main__":
    unittest.main()
