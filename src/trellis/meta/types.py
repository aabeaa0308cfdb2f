"""RouteMeta: the closed set of statically overridable route fields."""

from __future__ import annotations

import copy
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from trellis.routing.route import Route


@dataclass(frozen=True, slots=True)
class RouteMeta:
    """Fields read from a page's ``definePageMeta({...})`` call.

    ``None`` means the field was absent or could not be read statically.
    Instances are shared through the metadata cache, so they are frozen
    and :meth:`apply_to` copies container values onto the route.

    Attributes:
        name: Route name override.
        path: Route path override.
        alias: A string, or the string literals of an array.
        redirect: A string, or a folded object literal.
    """

    name: Any = None
    path: Any = None
    alias: Any = None
    redirect: Any = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def as_dict(self) -> dict[str, Any]:
        """Return only the fields that were extracted."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def apply_to(self, route: Route) -> None:
        """Overwrite the matching fields of *route* with extracted values."""
        for key, value in self.as_dict().items():
            setattr(route, key, copy.deepcopy(value))
