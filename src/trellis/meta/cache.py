"""Content-addressed cache for extracted page metadata.

Keys are the exact raw source text of a page, so two files with
byte-identical content share one entry.  The cache belongs to a
:class:`~trellis.meta.extractor.MetaExtractor` (and through it to one
route generation session), never to the module.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trellis.meta.types import RouteMeta


class MetaCache:
    """Unbounded cache.  Suitable for one-shot builds."""

    __slots__ = ("_entries", "hits", "misses")

    def __init__(self) -> None:
        self._entries: OrderedDict[str, RouteMeta] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, source: str) -> RouteMeta | None:
        meta = self._entries.get(source)
        if meta is None:
            self.misses += 1
        else:
            self.hits += 1
        return meta

    def set(self, source: str, meta: RouteMeta) -> None:
        self._entries[source] = meta

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __contains__(self, source: object) -> bool:
        return source in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class LRUMetaCache(MetaCache):
    """Bounded cache evicting the least recently used source first.

    Use in long-lived processes (dev servers, watchers) that see an
    unbounded stream of distinct page sources.
    """

    __slots__ = ("maxsize",)

    def __init__(self, maxsize: int) -> None:
        if maxsize <= 0:
            msg = f"maxsize must be positive, got {maxsize}"
            raise ValueError(msg)
        super().__init__()
        self.maxsize = maxsize

    def get(self, source: str) -> RouteMeta | None:
        meta = super().get(source)
        if meta is not None:
            self._entries.move_to_end(source)
        return meta

    def set(self, source: str, meta: RouteMeta) -> None:
        self._entries[source] = meta
        self._entries.move_to_end(source)
        while len(self._entries) > self.maxsize:
            self._entries.popitem(last=False)


def create_cache(maxsize: int | None = None) -> MetaCache:
    """Return an unbounded cache for ``None``, an LRU cache otherwise."""
    if maxsize is None:
        return MetaCache()
    return LRUMetaCache(maxsize)
