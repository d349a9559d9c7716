"""CLI entry point for markblog.

This CLI intentionally avoids third-party CLI frameworks so the project remains
easy to run in constrained environments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import CONTENT_DIR, DEV_SERVER_HOST, DEV_SERVER_PORT, OUT_DIR, PATH_PREFIX, SITE_CONFIG


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="markblog",
        description="Build a static blog from Markdown posts.",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"markblog {__version__}",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Generate the site")
    p_build.add_argument("--content", "-c", type=Path, default=CONTENT_DIR, help="Posts directory")
    p_build.add_argument("--site", "-s", type=Path, default=SITE_CONFIG, help="Site config (YAML)")
    p_build.add_argument("--out", "-o", type=Path, default=OUT_DIR, help="Output directory")
    p_build.add_argument("--path-prefix", default=PATH_PREFIX, help="Prefix for generated links")

    p_list = sub.add_parser("list", help="List posts in index order")
    p_list.add_argument("--content", "-c", type=Path, default=CONTENT_DIR, help="Posts directory")

    p_serve = sub.add_parser("serve", help="Preview a generated site locally")
    p_serve.add_argument("--out", "-o", type=Path, default=OUT_DIR, help="Generated site directory")
    p_serve.add_argument("--host", default=DEV_SERVER_HOST, help="Interface to bind")
    p_serve.add_argument("--port", "-p", type=int, default=DEV_SERVER_PORT, help="Port to bind")
    p_serve.add_argument("--path-prefix", default=PATH_PREFIX, help="Prefix the site was built with")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "build":
        return _cmd_build(args)
    if args.cmd == "list":
        return _cmd_list(args)
    if args.cmd == "serve":
        return _cmd_serve(args)

    parser.print_help()
    return 2


def _cmd_build(args: Any) -> int:
    from .content.metadata import SiteConfigError
    from .content.posts import ContentError
    from .query.resolver import QueryError
    from .site.build import build_site

    try:
        report = build_site(
            content_dir=args.content,
            out_dir=args.out,
            site_config=args.site,
            path_prefix=args.path_prefix,
        )
    except (SiteConfigError, ContentError, QueryError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Site generated")
    print(f"  Output: {report.out_dir}")
    print(f"  Posts: {report.posts}")
    print(f"  Pages: {report.pages}")
    print(f"  Size: {report.total_bytes / 1024:.1f} KB")

    if report.warnings:
        print(f"\nWarnings ({len(report.warnings)}):")
        for w in report.warnings[:10]:
            print(f"  - {w}")
        if len(report.warnings) > 10:
            print(f"  ... and {len(report.warnings) - 10} more")

    return 0


def _cmd_list(args: Any) -> int:
    from .content.posts import ContentError, load_posts

    try:
        posts = load_posts(args.content)
    except ContentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not posts:
        print("No posts found")
        return 0

    for p in posts:
        when = p.date.isoformat() if p.date else "undated"
        print(f"  {when:10}  {p.slug:30}  {p.display_title}")
    return 0


def _cmd_serve(args: Any) -> int:
    from .site.serve import serve

    if not args.out.exists():
        print(f"Error: {args.out} does not exist; run `markblog build` first", file=sys.stderr)
        return 1

    serve(args.out.resolve(), args.host, int(args.port), path_prefix=args.path_prefix)
    return 0


if __name__ == "__main__":
    app()
