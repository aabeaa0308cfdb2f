"""ScannedFile, SegmentToken and Route dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True, slots=True)
class ScannedFile:
    """A page file found under a pages directory.

    ``relative_path`` uses ``/`` separators and is the uniqueness key.
    """

    relative_path: str
    absolute_path: str


class SegmentTokenType(Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"
    OPTIONAL = "optional"
    CATCHALL = "catchall"


@dataclass(frozen=True, slots=True)
class SegmentToken:
    """A parsed piece of a path segment.

    Static:   ``about``       (type=STATIC, value="about")
    Dynamic:  ``[id]``        (type=DYNAMIC, value="id")
    Optional: ``[[lang]]``    (type=OPTIONAL, value="lang")
    Catchall: ``[...slug]``   (type=CATCHALL, value="slug")
    """

    type: SegmentTokenType
    value: str


@dataclass(slots=True)
class Route:
    """A node of the generated route tree.

    Mutable while the tree is built and normalized; read-only once handed
    to the serializer.  Each route is owned by exactly one ``children``
    list (or the top-level list).

    Attributes:
        name: Route name.  Segments are joined with ``/`` during building
            and flattened with ``-`` by normalization.  ``None`` once the
            layout-merge rule hands the name to an empty-path child.
        path: Path pattern, relative to the parent for nested routes.
        file: Absolute path of the page file.
        children: Nested routes.
        meta: Static route meta.
        alias: Alias path or paths.
        redirect: Redirect target.
    """

    name: str | None = ""
    path: str = ""
    file: str | None = None
    children: list["Route"] = field(default_factory=list)
    meta: dict[str, Any] | None = None
    alias: Any = None
    redirect: Any = None
