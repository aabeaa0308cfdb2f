"""Route generation session for configured pages directories."""

from __future__ import annotations

from collections.abc import Mapping

from trellis.config import TrellisConfig
from trellis.meta.cache import create_cache
from trellis.meta.extractor import MetaExtractor
from trellis.pages.discovery import scan_pages
from trellis.routing.route import Route
from trellis.routing.tree import generate_routes_from_files


def create_extractor(config: TrellisConfig) -> MetaExtractor:
    """Build a :class:`MetaExtractor` with the configured cache bound."""
    return MetaExtractor(
        cache=create_cache(config.meta_cache_size),
        function_name=config.meta_function,
    )


async def resolve_pages_routes(
    config: TrellisConfig,
    *,
    vfs: Mapping[str, str] | None = None,
    extractor: MetaExtractor | None = None,
) -> list[Route]:
    """Scan, build and normalize the routes for *config*.

    Top-level routes sharing a path are deduplicated, first one wins.

    Pass the same *extractor* across rebuilds to reuse its metadata
    cache; one is created from *config* when metadata extraction is
    enabled and none is given.
    """
    config.validate()
    files = scan_pages(config.pages_dirs, config.extensions)

    if config.extract_meta and extractor is None:
        extractor = create_extractor(config)

    routes = await generate_routes_from_files(
        files,
        extractor=extractor if config.extract_meta else None,
        vfs=vfs,
    )
    return unique_by_path(routes)


def unique_by_path(routes: list[Route]) -> list[Route]:
    seen: set[str] = set()
    unique: list[Route] = []
    for route in routes:
        if route.path in seen:
            continue
        seen.add(route.path)
        unique.append(route)
    return unique
