"""``trellis generate``: render the route module."""

import argparse
from pathlib import Path

from trellis.cli._config import config_from_args, load_routes
from trellis.codegen.module import render_routes_module
from trellis.codegen.serializer import normalize_routes


def run_generate(args: argparse.Namespace) -> None:
    """Render the route module to ``args.output`` or stdout."""
    config = config_from_args(args)
    routes = load_routes(config)
    table = normalize_routes(routes, override_meta=config.override_meta)
    module = render_routes_module(table)

    if args.output is None:
        print(module, end="")
        return

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(module, encoding="utf-8")
    print(f"Wrote {len(routes)} routes to {output}")
