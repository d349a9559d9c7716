"""Local preview server for a generated site."""

from __future__ import annotations

import functools
import http.server
import logging
from pathlib import Path

from .routes import NOT_FOUND_FILE, normalize_request_path, resolve_route, routes_from_dir, strip_path_prefix

logger = logging.getLogger(__name__)


class SiteRequestHandler(http.server.SimpleHTTPRequestHandler):
    """Serves generated pages and assets; anything else gets the 404 page.

    ``self.path`` keeps the prefix, so directory redirects stay under it.
    """

    def __init__(self, *args, directory: str, path_prefix: str = "", **kwargs):
        self.site_dir = Path(directory)
        self.path_prefix = path_prefix
        super().__init__(*args, directory=directory, **kwargs)

    def translate_path(self, path):
        return super().translate_path(strip_path_prefix(path, self.path_prefix))

    def send_head(self):
        routes = routes_from_dir(self.site_dir)
        path = normalize_request_path(self.path, self.path_prefix)
        matched = routes.get(path)
        if matched is not None and matched.kind != "not_found":
            return super().send_head()
        if Path(self.translate_path(self.path)).is_file():
            return super().send_head()

        try:
            route = resolve_route(routes, path)
        except KeyError:
            return super().send_head()
        return self._send_file(self.site_dir / route.file, status=404)

    def _send_file(self, path: Path, status: int):
        try:
            f = path.open("rb")
        except OSError:
            self.send_error(404, "File not found")
            return None
        size = path.stat().st_size
        self.send_response(status)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(size))
        self.end_headers()
        return f

    def log_message(self, format, *args):  # noqa: A002 - stdlib signature
        logger.info("%s - %s", self.address_string(), format % args)


def make_server(
    site_dir: Path, host: str, port: int, path_prefix: str = ""
) -> http.server.ThreadingHTTPServer:
    handler = functools.partial(
        SiteRequestHandler, directory=str(site_dir), path_prefix=path_prefix.rstrip("/")
    )
    return http.server.ThreadingHTTPServer((host, port), handler)


def serve(site_dir: Path, host: str, port: int, path_prefix: str = "") -> None:
    if not (site_dir / NOT_FOUND_FILE).exists():
        logger.warning("%s has no %s; unmatched paths get a plain 404", site_dir, NOT_FOUND_FILE)
    httpd = make_server(site_dir, host, port, path_prefix)
    print(f"Serving http://{host}:{port}{path_prefix.rstrip('/')}/ (site dir: {site_dir})")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        print("Shutting down server.")
    finally:
        httpd.server_close()
