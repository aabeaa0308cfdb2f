"""JavaScript source fragments used by the route serializer."""

import hashlib
import json
import re
from typing import Any

_RESERVED_NAMES = frozenset({
    "Infinity", "NaN", "arguments", "await", "break", "case", "catch", "class",
    "const", "continue", "debugger", "default", "delete", "do", "else", "enum",
    "eval", "export", "extends", "false", "finally", "for", "function", "if",
    "implements", "import", "in", "instanceof", "interface", "let", "new", "null",
    "package", "private", "protected", "public", "return", "static", "super",
    "switch", "this", "throw", "true", "try", "typeof", "undefined", "var", "void",
    "while", "with", "yield",
})

_LEADING_DIGIT_RE = re.compile(r"^\d")
_NON_WORD_RE = re.compile(r"\W", re.ASCII)


def gen_string(value: Any) -> str:
    """JSON-encode *value* as a JavaScript literal."""
    return json.dumps(value, ensure_ascii=False)


def gen_safe_variable_name(name: str) -> str:
    """Make *name* usable as a JavaScript identifier.

    ``"[id]"`` becomes ``"_91id_93"``; reserved words get a ``_`` prefix.
    """
    if name in _RESERVED_NAMES:
        return f"_{name}"
    name = _LEADING_DIGIT_RE.sub(lambda m: f"_{m.group(0)}", name)
    return _NON_WORD_RE.sub(lambda m: f"_{ord(m.group(0))}", name)


def short_hash(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()[:10]


def gen_default_import(specifier: str, local_name: str) -> str:
    return f"import {{ default as {local_name} }} from {gen_string(specifier)};"


def gen_dynamic_import(specifier: str) -> str:
    """Lazy import that unwraps a default export when there is one."""
    return f"() => import({gen_string(specifier)}).then(m => m.default || m)"


def gen_raw(value: Any, indent: str = "") -> str:
    """Render raw source strings nested in dicts and lists.

    Strings are emitted verbatim; dicts become object literals and lists
    array literals, indented two spaces per level.
    """
    if isinstance(value, dict):
        return gen_object_from_raw(value, indent)
    if isinstance(value, list):
        return gen_array_from_raw(value, indent)
    return str(value)


def gen_object_from_raw(entries: dict[str, Any], indent: str = "") -> str:
    if not entries:
        return "{}"
    inner = indent + "  "
    lines = [f"{inner}{key}: {gen_raw(value, inner)}" for key, value in entries.items()]
    return "{\n" + ",\n".join(lines) + f"\n{indent}}}"


def gen_array_from_raw(items: list[Any], indent: str = "") -> str:
    if not items:
        return "[]"
    inner = indent + "  "
    lines = [f"{inner}{gen_raw(item, inner)}" for item in items]
    return "[\n" + ",\n".join(lines) + f"\n{indent}]"
