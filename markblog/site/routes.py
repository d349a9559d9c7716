"""Map slugs to output files and request paths to generated pages."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from posixpath import normpath

INDEX_FILE = "index.html"
NOT_FOUND_FILE = "404.html"
NOT_FOUND_PATH = "/404/"


@dataclass(frozen=True)
class Route:
    path: str  # request path, e.g. "/hello-world/"
    file: str  # output file relative to the site root
    kind: str  # "index", "post", or "not_found"


def page_path(slug: str) -> str:
    """Output file for a slug: ``/a/b/`` -> ``a/b/index.html``."""
    parts = [p for p in slug.strip("/").split("/") if p]
    if not parts:
        return INDEX_FILE
    if any(p in (".", "..") for p in parts):
        raise ValueError(f"slug escapes the site root: {slug}")
    return "/".join(parts + [INDEX_FILE])


def strip_path_prefix(path: str, path_prefix: str) -> str:
    """Remove ``path_prefix`` from a request path on a segment boundary.

    ``/blog/a/`` -> ``/a/`` and ``/blog`` -> ``/`` for prefix ``/blog``; a path
    outside the prefix, like ``/blogger/``, is returned unchanged.
    """
    prefix = path_prefix.rstrip("/")
    if not prefix or not path.startswith(prefix):
        return path
    rest = path[len(prefix) :]
    if rest[:1] not in ("", "/", "?", "#"):
        return path
    return rest if rest.startswith("/") else "/" + rest


def normalize_request_path(path: str, path_prefix: str = "") -> str:
    path = path.split("?", 1)[0].split("#", 1)[0] or "/"
    path = strip_path_prefix(path, path_prefix)
    if path.endswith("/" + INDEX_FILE):
        path = path[: -len(INDEX_FILE)]
    path = normpath("/" + path.lstrip("/"))
    return path if path == "/" else path + "/"


def resolve_route(routes: Mapping[str, Route], path: str, path_prefix: str = "") -> Route:
    """Return the page for a request path, or the not-found page.

    Raises:
        KeyError: If nothing matches and no not-found page is registered
    """
    route = routes.get(normalize_request_path(path, path_prefix))
    if route is not None:
        return route
    return routes[NOT_FOUND_PATH]


def routes_from_dir(site_dir: Path) -> dict[str, Route]:
    """Rebuild the route table from a generated site directory."""
    routes: dict[str, Route] = {}
    for index in sorted(site_dir.rglob(INDEX_FILE)):
        rel = index.relative_to(site_dir).parent.as_posix()
        path = "/" if rel == "." else f"/{rel}/"
        kind = "index" if path == "/" else "post"
        routes[path] = Route(path=path, file=index.relative_to(site_dir).as_posix(), kind=kind)
    if (site_dir / NOT_FOUND_FILE).exists():
        routes[NOT_FOUND_PATH] = Route(path=NOT_FOUND_PATH, file=NOT_FOUND_FILE, kind="not_found")
    return routes
