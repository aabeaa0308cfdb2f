"""``trellis glob``: cache-invalidation glob for a route path."""

import argparse
import sys

from trellis.routing.paths import path_to_glob


def run_glob(args: argparse.Namespace) -> None:
    """Print the glob for ``args.path``; exit 1 when there is none."""
    glob = path_to_glob(args.path)
    if glob is None:
        print(f"No glob for {args.path!r}: more than one dynamic parameter.", file=sys.stderr)
        raise SystemExit(1)
    print(glob)
