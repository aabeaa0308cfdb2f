"""Trellis: filesystem page routes for client-side routers.

Turns a pages directory into a nested, named route table:
bracketed segments become parameters, a page next to a like-named
directory becomes a layout route, and ``definePageMeta({...})`` literals
are read statically to override names, paths, aliases and redirects.

Basic usage::

    import anyio
    from trellis import TrellisConfig, resolve_pages_routes, normalize_routes

    config = TrellisConfig(pages_dirs=("pages",), extract_meta=True)
    routes = anyio.run(resolve_pages_routes, config)
    table = normalize_routes(routes)

Lower level::

    from trellis import ScannedFile, generate_routes_from_files

    routes = await generate_routes_from_files([
        ScannedFile("index.vue", "/app/pages/index.vue"),
        ScannedFile("users/[id].vue", "/app/pages/users/[id].vue"),
    ])
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "EmptyParameterError",
    "LRUMetaCache",
    "MetaCache",
    "MetaExtractor",
    "Route",
    "RouteMeta",
    "RouteTable",
    "ScannedFile",
    "SegmentParseError",
    "SegmentToken",
    "SegmentTokenType",
    "TrellisConfig",
    "TrellisError",
    "UnterminatedParameterError",
    "build_path",
    "generate_routes_from_files",
    "normalize_routes",
    "path_to_glob",
    "prepare_routes",
    "render_routes_module",
    "resolve_pages_routes",
    "scan_pages",
    "tokenize",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import trellis`` fast; the tree-sitter grammar and kida are
    only loaded when their features are used.
    """
    if name == "TrellisConfig":
        from trellis.config import TrellisConfig

        return TrellisConfig

    if name in ("Route", "ScannedFile", "SegmentToken", "SegmentTokenType"):
        from trellis.routing import route as _route

        return getattr(_route, name)

    if name == "tokenize":
        from trellis.routing.segments import tokenize

        return tokenize

    if name in ("build_path", "path_to_glob"):
        from trellis.routing import paths as _paths

        return getattr(_paths, name)

    if name == "generate_routes_from_files":
        from trellis.routing.tree import generate_routes_from_files

        return generate_routes_from_files

    if name == "prepare_routes":
        from trellis.routing.normalize import prepare_routes

        return prepare_routes

    if name in ("LRUMetaCache", "MetaCache", "MetaExtractor", "RouteMeta"):
        from trellis import meta as _meta

        return getattr(_meta, name)

    if name in ("RouteTable", "normalize_routes", "render_routes_module"):
        from trellis import codegen as _codegen

        return getattr(_codegen, name)

    if name in ("resolve_pages_routes", "scan_pages"):
        from trellis import pages as _pages

        return getattr(_pages, name)

    if name in (
        "ConfigurationError",
        "EmptyParameterError",
        "SegmentParseError",
        "TrellisError",
        "UnterminatedParameterError",
    ):
        from trellis import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
