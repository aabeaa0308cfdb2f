"""Route tree serialization to a JavaScript route table.

Every route with a page file gets a companion import of that file's
``?macro=true`` module, which evaluates to the page's full
``definePageMeta`` object at runtime.  The emitted fields merge the
statically known values with that runtime object:

==========  ===================================================
field       emitted expression
==========  ===================================================
name        static literal, else ``M?.name``
path        static literal, else ``M?.path ?? ''``
meta        ``{ ...(M || {}), ...static }`` (static keys win)
alias       ``static.concat(M?.alias || [])``
redirect    static literal, else ``M?.redirect``
==========  ===================================================

With ``override_meta=False`` name and path prefer the runtime value.
"""

import posixpath
from dataclasses import dataclass, field
from typing import Any

from trellis.codegen._gen import (
    gen_array_from_raw,
    gen_default_import,
    gen_dynamic_import,
    gen_safe_variable_name,
    gen_string,
    short_hash,
)
from trellis.routing.route import Route


@dataclass(frozen=True, slots=True)
class RouteTable:
    """Serialized routes plus the metadata imports they reference.

    Attributes:
        imports: One import declaration per page file.
        routes: JavaScript array literal of route records.
    """

    imports: set[str] = field(default_factory=set)
    routes: str = "[]"


def normalize_routes(
    routes: list[Route],
    meta_imports: set[str] | None = None,
    *,
    override_meta: bool = True,
) -> RouteTable:
    """Serialize a normalized route forest.

    Args:
        routes: Output of route generation.  Not modified.
        meta_imports: Import set to extend; a new one is created if omitted.
        override_meta: Prefer static ``name``/``path`` over runtime values.
    """
    imports = meta_imports if meta_imports is not None else set()
    records = [_serialize_route(route, imports, override_meta) for route in routes]
    return RouteTable(imports=imports, routes=gen_array_from_raw(records))


def meta_import_name(file: str) -> str:
    """Local identifier bound to *file*'s metadata module."""
    stem, _ext = posixpath.splitext(posixpath.basename(file))
    return gen_safe_variable_name(stem + short_hash(file)) + "Meta"


def _static_fields(route: Route) -> dict[str, str]:
    """JSON literals for the values known at build time."""
    fields: dict[str, str] = {"path": gen_string(route.path)}
    if route.name is not None:
        fields["name"] = gen_string(route.name)

    meta = {k: v for k, v in (route.meta or {}).items() if v is not None}
    if meta:
        fields["meta"] = gen_string(meta)

    alias = [a for a in _to_list(route.alias) if a]
    if alias:
        fields["alias"] = gen_string(alias)

    if route.redirect:
        fields["redirect"] = gen_string(route.redirect)
    return fields


def _serialize_route(route: Route, imports: set[str], override_meta: bool) -> dict[str, Any]:
    static = _static_fields(route)
    children = [_serialize_route(child, imports, override_meta) for child in route.children]

    if not route.file:
        record: dict[str, Any] = {
            key: static[key]
            for key in ("name", "path", "meta", "alias", "redirect")
            if key in static
        }
        if children:
            record["children"] = children
        return record

    file = posixpath.normpath(route.file.replace("\\", "/"))
    m = meta_import_name(file)
    imports.add(gen_default_import(f"{file}?macro=true", m))

    name = static.get("name")
    path = static.get("path")
    if override_meta:
        name_expr = name if name is not None else f"{m}?.name"
        path_expr = path if path is not None else f"{m}?.path ?? ''"
    else:
        name_expr = f"{m}?.name ?? {name}" if name is not None else f"{m}?.name"
        path_expr = f"{m}?.path ?? {path}" if path is not None else f"{m}?.path ?? ''"

    record = {
        "name": name_expr,
        "path": path_expr,
        "meta": f"{{ ...({m} || {{}}), ...{static['meta']} }}" if "meta" in static else f"{m} || {{}}",
        "alias": f"{static['alias']}.concat({m}?.alias || [])" if "alias" in static else f"{m}?.alias || []",
        "redirect": static.get("redirect", f"{m}?.redirect"),
        "component": gen_dynamic_import(file),
    }
    if children:
        record["children"] = children
    return record


def _to_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list | tuple):
        return list(value)
    return [value]
