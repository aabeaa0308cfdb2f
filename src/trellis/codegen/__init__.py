"""Code generation: route trees to a JavaScript route module."""

from trellis.codegen.module import render_routes_module
from trellis.codegen.serializer import RouteTable, meta_import_name, normalize_routes

__all__ = [
    "RouteTable",
    "meta_import_name",
    "normalize_routes",
    "render_routes_module",
]
