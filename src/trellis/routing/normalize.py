"""Route name and path normalization.

Runs once over the freshly built tree:

- ``users/index`` names become ``users``, ``users/[id]`` becomes ``users-id``
- child paths lose their leading ``/`` (they are relative to the parent)
- a route whose child has an empty path hands its name to that child
- duplicate names are reported, never rejected
"""

import logging
import re

from trellis.routing.route import Route

logger = logging.getLogger("trellis.routes")

_INDEX_SUFFIX_RE = re.compile(r"/index$")


def prepare_routes(
    routes: list[Route],
    parent: Route | None = None,
    names: dict[str, Route] | None = None,
) -> list[Route]:
    """Normalize *routes* in place (post-order) and return the same list.

    Args:
        routes: Sibling routes to normalize.
        parent: The route owning *routes*, ``None`` at the top level.
        names: Registry of final names seen so far across the whole
            traversal, mapped to the first route that claimed each one.
    """
    if names is None:
        names = {}

    for route in routes:
        if route.name:
            route.name = _INDEX_SUFFIX_RE.sub("", route.name).replace("/", "-")

            existing = names.get(route.name)
            if existing is not None:
                extra = (
                    f"is the same as `{existing.file}`" if existing.file else "is a duplicate"
                )
                logger.warning(
                    "Route name generated for `%s` %s. You may wish to set a custom "
                    "name using `definePageMeta` within the page file.",
                    route.file,
                    extra,
                )

        if parent is not None and route.path.startswith("/"):
            route.path = route.path[1:]

        if route.children:
            prepare_routes(route.children, route, names)

        if any(child.path == "" for child in route.children):
            route.name = None

        if route.name:
            names.setdefault(route.name, route)

    return routes
