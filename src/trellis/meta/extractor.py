"""Static extraction of route overrides from page scripts.

Reads the first ``<script>`` block of a page, finds a top-level
``definePageMeta({...})`` call and folds the ``name``, ``path``, ``alias``
and ``redirect`` properties of its argument::

    <script setup lang="ts">
    definePageMeta({
      name: "home",
      alias: ["/start", "/welcome"],
      middleware: auth,          // ignored: not an overridable key
    })
    </script>

    -> RouteMeta(name="home", alias=["/start", "/welcome"])

Values that cannot be read without running code are skipped one key at
a time and reported at DEBUG level on the ``trellis.meta`` logger.
"""

import logging

from tree_sitter import Node

from trellis.errors import LiteralEvaluationError
from trellis.meta.cache import MetaCache
from trellis.meta.literals import evaluate_literal, node_text, string_value, strip_type_wrappers
from trellis.meta.parser import ScriptParser, TypeScriptParser
from trellis.meta.script import extract_script_content, meta_call_pattern
from trellis.meta.types import RouteMeta

logger = logging.getLogger("trellis.meta")

META_KEYS = ("name", "path", "alias", "redirect")


class MetaExtractor:
    """Memoized ``definePageMeta`` reader.

    Usage::

        extractor = MetaExtractor(cache=LRUMetaCache(512))
        meta = extractor.extract(source, "/app/pages/index.vue")
        meta.apply_to(route)

    Byte-identical sources return the same :class:`RouteMeta` instance
    and are parsed at most once.
    """

    __slots__ = ("_call_re", "_parser", "cache", "function_name")

    def __init__(
        self,
        *,
        cache: MetaCache | None = None,
        parser: ScriptParser | None = None,
        function_name: str = "definePageMeta",
    ) -> None:
        self.cache = cache if cache is not None else MetaCache()
        self.function_name = function_name
        self._parser: ScriptParser = parser if parser is not None else TypeScriptParser()
        self._call_re = meta_call_pattern(function_name)

    def extract(self, source: str, path: str | None = None) -> RouteMeta:
        """Return the statically declared route overrides in *source*.

        Args:
            source: Raw page file contents (the cache key).
            path: Page file path, used only in diagnostics.
        """
        cached = self.cache.get(source)
        if cached is not None:
            return cached

        meta = self._extract(source, path)
        self.cache.set(source, meta)
        return meta

    def _extract(self, source: str, path: str | None) -> RouteMeta:
        script = extract_script_content(source)
        if not script or not self._call_re.search(script):
            return RouteMeta()

        code = script.encode("utf-8")
        tree = self._parser.parse(code)
        if tree.root_node.has_error:
            logger.debug("Script block of `%s` has syntax errors", path)

        argument = self._find_meta_argument(tree.root_node, code)
        if argument is None:
            return RouteMeta()

        extracted: dict[str, object] = {}
        for key in META_KEYS:
            value_node = _find_property(argument, key, code)
            if value_node is None:
                continue
            value = _read_value(key, strip_type_wrappers(value_node), code, path)
            if value is not None:
                extracted[key] = value

        return RouteMeta(**extracted)

    def _find_meta_argument(self, root: Node, code: bytes) -> Node | None:
        """Return the object argument of a top-level meta call, if any."""
        for statement in root.named_children:
            if statement.type != "expression_statement" or not statement.named_children:
                continue
            call = statement.named_children[0]
            if call.type != "call_expression":
                continue
            callee = call.child_by_field_name("function")
            if callee is None or callee.type != "identifier":
                continue
            if node_text(callee, code) != self.function_name:
                continue

            arguments = call.child_by_field_name("arguments")
            if arguments is None or arguments.type != "arguments":
                return None
            args = [a for a in arguments.named_children if a.type != "comment"]
            if not args:
                return None
            first = strip_type_wrappers(args[0])
            return first if first.type == "object" else None
        return None


def _find_property(obj: Node, key: str, code: bytes) -> Node | None:
    for member in obj.named_children:
        if member.type != "pair":
            continue
        key_node = member.child_by_field_name("key")
        if key_node is None or key_node.type != "property_identifier":
            continue
        if node_text(key_node, code) == key:
            return member.child_by_field_name("value")
    return None


def _read_value(key: str, node: Node, code: bytes, path: str | None) -> object | None:
    """Fold one property value, or log why it was skipped and return ``None``."""
    if node.type == "object":
        try:
            return evaluate_literal(node, code)
        except LiteralEvaluationError:
            logger.debug(
                "Skipping extraction of `%s` metadata as it is not JSON-serializable (reading `%s`).",
                key,
                path,
            )
            return None

    if node.type == "array":
        values: list[str] = []
        for element in node.named_children:
            if element.type == "comment":
                continue
            if element.type != "string":
                logger.debug(
                    "Skipping extraction of `%s` metadata as it is not an array of string "
                    "literals (reading `%s`).",
                    key,
                    path,
                )
                continue
            try:
                values.append(string_value(element, code))
            except LiteralEvaluationError:
                logger.debug("Skipping malformed `%s` string in `%s`.", key, path)
        return values

    if node.type == "string":
        try:
            return string_value(node, code)
        except LiteralEvaluationError:
            logger.debug("Skipping malformed `%s` string in `%s`.", key, path)
            return None

    logger.debug(
        "Skipping extraction of `%s` metadata as it is not a string literal or array of "
        "string literals (reading `%s`).",
        key,
        path,
    )
    return None
