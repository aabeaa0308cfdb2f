"""``trellis routes``: print the normalized route tree.

Prints a NAME / PATH / FILE table; nested routes are indented under
their parent.
"""

import argparse

from trellis.cli._config import config_from_args, load_routes
from trellis.routing.route import Route


def run_routes(args: argparse.Namespace) -> None:
    """Scan ``args.pages_dir`` and print the route table."""
    config = config_from_args(args)
    routes = load_routes(config)
    if not routes:
        print("No routes found.")
        return

    # Build rows: (name, path, file)
    rows: list[tuple[str, str, str]] = []
    _collect_rows(routes, 0, rows)

    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_name}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("NAME", "PATH", "FILE"))
    sep_len = max_name + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for name, path, file in rows:
        print(fmt.format(name, path, file))


def _collect_rows(routes: list[Route], depth: int, rows: list[tuple[str, str, str]]) -> None:
    indent = "  " * depth
    for route in routes:
        rows.append((indent + (route.name or "-"), indent + route.path, route.file or ""))
        _collect_rows(route.children, depth + 1, rows)
