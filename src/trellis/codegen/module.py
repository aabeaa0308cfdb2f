"""Route module rendering.

Wraps a :class:`~trellis.codegen.serializer.RouteTable` into an ES module
through a kida template::

    import { default as index1a2b3c4d5eMeta } from "/app/pages/index.vue?macro=true";

    export default [
      { ... }
    ]
"""

from kida import Environment

from trellis.codegen.serializer import RouteTable

_MODULE_TEMPLATE = """\
// Generated by trellis. Do not edit.
{% for line in imports %}{{ line }}
{% end %}
export default {{ routes }}
"""


def _module_env() -> Environment:
    """Bare kida Environment; output is JavaScript, so nothing is escaped."""
    return Environment(autoescape=False)


def render_routes_module(table: RouteTable) -> str:
    """Render the full route module for *table*, imports sorted."""
    template = _module_env().from_string(_MODULE_TEMPLATE)
    return template.render({"imports": sorted(table.imports), "routes": table.routes})
