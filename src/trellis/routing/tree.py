"""Route tree construction from a sorted page file list.

Each file becomes one route.  A file whose leading segments reproduce an
existing route's name and path is nested under that route::

    parent.vue              -> { name: "parent", path: "/parent" }
    parent/child.vue        ->     child { name: "parent-child", path: "child" }
    parent/index.vue        ->     child { name: "parent", path: "" }

Files must arrive sorted so that ``parent.vue`` precedes ``parent/...``.
"""

import logging
import posixpath
import re
from collections.abc import Mapping

import anyio

from trellis.meta.extractor import MetaExtractor
from trellis.routing.normalize import prepare_routes
from trellis.routing.paths import build_path, join_url, with_leading_slash
from trellis.routing.route import Route, ScannedFile
from trellis.routing.segments import segment_name, tokenize

logger = logging.getLogger("trellis.routes")

_INDEX_PATH_RE = re.compile(r"/index$")


async def generate_routes_from_files(
    files: list[ScannedFile],
    *,
    extractor: MetaExtractor | None = None,
    vfs: Mapping[str, str] | None = None,
) -> list[Route]:
    """Build and normalize the route tree for *files*.

    Args:
        files: Page files, deduplicated by relative path and sorted.
        extractor: When given, each page's source is read and its
            statically declared ``name``/``path``/``alias``/``redirect``
            override the inferred values.
        vfs: In-memory sources keyed by absolute path, consulted before
            the filesystem.

    Raises:
        SegmentParseError: A filename segment is malformed.  No partial
            route table is returned.
    """
    routes: list[Route] = []

    for file in files:
        route, scope = _place_route(file, routes)

        if extractor is not None:
            source = await read_page_source(file.absolute_path, vfs)
            meta = extractor.extract(source, file.absolute_path)
            meta.apply_to(route)

        scope.append(route)

    logger.debug("Built %d top-level routes from %d files", len(routes), len(files))
    return prepare_routes(routes)


def _place_route(file: ScannedFile, routes: list[Route]) -> tuple[Route, list[Route]]:
    """Infer a route for *file* and find the list it belongs in."""
    stem, _ext = posixpath.splitext(file.relative_path)
    segments = stem.split("/")

    route = Route(name="", path="", file=file.absolute_path)
    scope = routes

    for segment in segments:
        tokens = tokenize(segment)
        name = segment_name(tokens)
        segment_path = build_path(tokens)

        route.name = f"{route.name}/{name}" if route.name else name

        path = with_leading_slash(
            join_url(route.path, _INDEX_PATH_RE.sub("/", segment_path))
        )
        parent = next(
            (r for r in scope if r.name == route.name and r.path == path),
            None,
        )

        if parent is not None:
            scope = parent.children
            route.path = ""
        elif name == "index" and not route.path:
            route.path += "/"
        elif name != "index":
            route.path += segment_path

    return route, scope


async def read_page_source(path: str, vfs: Mapping[str, str] | None = None) -> str:
    """Return a page's source from *vfs* if present, else from disk."""
    if vfs is not None and path in vfs:
        return vfs[path]
    return await anyio.Path(path).read_text(encoding="utf-8", errors="replace")
