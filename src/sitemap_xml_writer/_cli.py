"""sitemap-xml-writer CLI — build / check.

Entry point for the ``sitemap-xml-writer`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the sitemap-xml-writer CLI."""
    parser = argparse.ArgumentParser(
        prog="sitemap-xml-writer",
        description="Stream validated entries into sitemap.xml or sitemap index files.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # sitemap-xml-writer build
    build_parser = subparsers.add_parser(
        "build",
        help="Write a sitemap (or sitemap index) from an entries file",
    )
    _add_common_arguments(build_parser)
    build_parser.add_argument("--output", default=None, help="Output file (default: sitemap.xml)")
    build_parser.add_argument(
        "--indent", action="store_true", default=None, help="One element per line, indented",
    )

    # sitemap-xml-writer check
    check_parser = subparsers.add_parser(
        "check",
        help="Validate an entries file without writing anything",
    )
    _add_common_arguments(check_parser)

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    # Defaults of None let sitemap.yaml values through
    parser.add_argument("source", help="Entries file (YAML, JSON or TOML)")
    parser.add_argument("--root", default=".", help="Directory holding sitemap.yaml")
    parser.add_argument(
        "--index",
        action="store_const",
        const="index",
        dest="kind",
        default=None,
        help="Treat entries as sitemaps and write a sitemap index",
    )
    parser.add_argument(
        "--base-url", default=None, help="Prefix for relative locations",
    )
    parser.add_argument(
        "--no-check-url",
        action="store_false",
        dest="check_url_syntax",
        default=None,
        help="Accept locations that are not absolute URLs",
    )


def _get_version() -> str:
    """Get the package version."""
    from sitemap_xml_writer import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from sitemap_xml_writer._errors import SitemapError
    from sitemap_xml_writer.app import build, check

    overrides: dict[str, object] = {
        "kind": args.kind,
        "base_url": args.base_url,
        "check_url_syntax": args.check_url_syntax,
    }
    try:
        if args.command == "build":
            build(args.source, root=args.root, output=args.output, indent=args.indent, **overrides)
        elif args.command == "check":
            check(args.source, root=args.root, **overrides)
    except SitemapError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
