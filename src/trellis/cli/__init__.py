"""Trellis CLI: inspect and generate page route tables.

Entry point registered as ``trellis`` in ``pyproject.toml``::

    [project.scripts]
    trellis = "trellis.cli:main"
"""

import argparse
import sys


def _add_pages_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("pages_dir", nargs="+", help="Pages directory (highest priority first)")
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        help="Page file extension (repeatable, default: .vue)",
    )
    parser.add_argument(
        "--meta",
        action="store_true",
        help="Read name/path/alias/redirect from definePageMeta() calls",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        help="Logging level (default: warning)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``trellis`` command."""
    parser = argparse.ArgumentParser(
        prog="trellis",
        description="Trellis: filesystem page routes for client-side routers.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- trellis routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="Print the route tree")
    _add_pages_arguments(routes_parser)

    # -- trellis generate -------------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Render the route module")
    _add_pages_arguments(generate_parser)
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the module to this file instead of stdout",
    )
    generate_parser.add_argument(
        "--runtime-meta-first",
        action="store_true",
        help="Prefer runtime definePageMeta name/path over static values",
    )

    # -- trellis glob -----------------------------------------------------
    glob_parser = subparsers.add_parser("glob", help="Cache-invalidation glob for a route path")
    glob_parser.add_argument("path", help="Route path pattern (e.g. /posts/:id())")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from trellis.cli._routes import run_routes

        run_routes(args)
    elif args.command == "generate":
        from trellis.cli._generate import run_generate

        run_generate(args)
    elif args.command == "glob":
        from trellis.cli._glob import run_glob

        run_glob(args)
