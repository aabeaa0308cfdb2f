"""Shared argument handling for CLI commands."""

import argparse
import logging
import sys

import anyio

from trellis.config import TrellisConfig
from trellis.errors import TrellisError
from trellis.pages.resolve import resolve_pages_routes
from trellis.routing.route import Route


def config_from_args(args: argparse.Namespace) -> TrellisConfig:
    """Build a validated :class:`TrellisConfig` from parsed arguments."""
    config = TrellisConfig(
        pages_dirs=tuple(args.pages_dir),
        extensions=tuple(args.ext) if args.ext else (".vue",),
        extract_meta=args.meta,
        override_meta=not getattr(args, "runtime_meta_first", False),
        log_level=args.log_level,
    )
    try:
        config.validate()
    except TrellisError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    logging.basicConfig(level=config.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    return config


def load_routes(config: TrellisConfig) -> list[Route]:
    """Resolve routes, turning trellis errors into exit status 1."""
    try:
        return anyio.run(resolve_pages_routes, config)
    except TrellisError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
