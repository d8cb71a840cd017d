"""Routemap CLI — routemap build.

Entry point for the ``routemap`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from routemap._errors import RoutemapError


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the routemap CLI."""
    parser = argparse.ArgumentParser(
        prog="routemap",
        description="Generate sitemap.xml and robots.txt for a static site.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # routemap build
    build_parser = subparsers.add_parser(
        "build",
        help="Write sitemaps for the routes of an exported site",
    )
    build_parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    build_parser.add_argument("--output", default=None, help="Output directory")
    build_parser.add_argument("--url-prefix", default=None, help="Base URL of the site")
    build_parser.add_argument(
        "--sitemap-filename", default=None, help="Primary sitemap filename",
    )
    build_parser.add_argument(
        "--routes-file",
        default=None,
        help="File with one route per line ('-' for stdin); default: discover from output",
    )
    build_parser.add_argument(
        "--robots", action="store_true", default=None, help="Also write robots.txt",
    )
    build_parser.add_argument(
        "--merge", action="store_true", default=None,
        help="Merge into existing sitemap files",
    )
    build_parser.add_argument(
        "--trailing-slash", action="store_true", default=None,
        help="Append a trailing slash to every URL",
    )
    build_parser.add_argument(
        "--quiet", action="store_true", default=None, help="Suppress status output",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from routemap import __version__

    return __version__


def read_routes(source: str) -> list[str]:
    """Read routes from *source*, one per line (``-`` reads stdin).

    Blank lines and ``#`` comments are skipped.
    """
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    routes: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            routes.append(line)
    return routes


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from routemap.app import build
    from routemap.banner import print_summary

    try:
        routes = read_routes(args.routes_file) if args.routes_file else None
    except OSError as exc:
        print(f"routemap: cannot read routes: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        result = build(
            root=args.root,
            routes=routes,
            output=args.output,
            url_prefix=args.url_prefix,
            sitemap_filename=args.sitemap_filename,
            create_robots_file=args.robots,
            merge=args.merge,
            trailing_slash=args.trailing_slash,
            suppress_log=args.quiet,
        )
    except RoutemapError as exc:
        print(f"routemap: {exc}", file=sys.stderr)
        sys.exit(1)

    if result is not None and not args.quiet:
        print_summary(result)


if __name__ == "__main__":
    main()
