"""Literal folding over tree-sitter syntax nodes.

Turns object, array, string, number, boolean and null literals into
Python values.  Anything else (identifiers, calls, spreads, computed
keys, template substitutions) raises ``LiteralEvaluationError``.  No
script code is ever executed.
"""

import math
import re
from typing import Any

from tree_sitter import Node

from trellis.errors import LiteralEvaluationError

# TypeScript-only wrappers that disappear when the script is transpiled
_TYPE_WRAPPERS = frozenset({"as_expression", "satisfies_expression", "non_null_expression"})

_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])")

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    "\n": "",
    "\r": "",
    "\r\n": "",
    "\u2028": "",
    "\u2029": "",
}

_LEGACY_OCTAL_RE = re.compile(r"^0\d+$")


def node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")


def strip_type_wrappers(node: Node) -> Node:
    """Peel ``x as T``, ``x satisfies T`` and ``x!`` down to ``x``."""
    while node.type in _TYPE_WRAPPERS and node.named_children:
        node = node.named_children[0]
    return node


def evaluate_literal(node: Node, source: bytes) -> Any:
    """Fold a literal expression node into a JSON-compatible value.

    Args:
        node: Expression node from a tree parsed out of *source*.
        source: The exact bytes the tree was parsed from.

    Raises:
        LiteralEvaluationError: *node* (or something nested in it) is not
            a literal.
    """
    node = strip_type_wrappers(node)
    kind = node.type

    if kind == "object":
        return _evaluate_object(node, source)
    if kind == "array":
        return _evaluate_array(node, source)
    if kind in ("string", "template_string"):
        return string_value(node, source)
    if kind == "number":
        return _number_value(node_text(node, source))
    if kind == "true":
        return True
    if kind == "false":
        return False
    if kind == "null":
        return None
    if kind == "parenthesized_expression":
        inner = _named(node)
        if len(inner) != 1:
            raise LiteralEvaluationError(kind)
        return evaluate_literal(inner[0], source)
    if kind == "unary_expression":
        return _evaluate_unary(node, source)

    raise LiteralEvaluationError(kind)


def string_value(node: Node, source: bytes) -> str:
    """Decode a string literal or a template string without substitutions."""
    if node.type == "template_string":
        if any(child.type == "template_substitution" for child in node.named_children):
            raise LiteralEvaluationError(node.type, "template string has substitutions")
    elif node.type != "string":
        raise LiteralEvaluationError(node.type)
    raw = node_text(node, source)
    try:
        return _ESCAPE_RE.sub(_decode_escape, raw[1:-1])
    except ValueError:
        raise LiteralEvaluationError(node.type, "invalid escape sequence") from None


def _named(node: Node) -> list[Node]:
    return [child for child in node.named_children if child.type != "comment"]


def _evaluate_object(node: Node, source: bytes) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for member in _named(node):
        if member.type != "pair":
            raise LiteralEvaluationError(member.type, f"unsupported object member {member.type!r}")
        key_node = member.child_by_field_name("key")
        value_node = member.child_by_field_name("value")
        if key_node is None or value_node is None:
            raise LiteralEvaluationError(member.type, "incomplete property")
        result[_property_key(key_node, source)] = evaluate_literal(value_node, source)
    return result


def _property_key(node: Node, source: bytes) -> str:
    if node.type == "property_identifier":
        return node_text(node, source)
    if node.type == "string":
        return string_value(node, source)
    if node.type == "number":
        value = _number_value(node_text(node, source))
        return str(value)
    raise LiteralEvaluationError(node.type, f"unsupported property key {node.type!r}")


def _evaluate_array(node: Node, source: bytes) -> list[Any]:
    values: list[Any] = []
    expect_element = True
    for child in node.children:
        if child.type == "comment" or child.type == "[":
            continue
        if child.type == ",":
            if expect_element:
                raise LiteralEvaluationError(node.type, "array has holes")
            expect_element = True
            continue
        if child.type == "]":
            break
        values.append(evaluate_literal(child, source))
        expect_element = False
    return values


def _evaluate_unary(node: Node, source: bytes) -> int | float:
    operator = node.child_by_field_name("operator")
    argument = node.child_by_field_name("argument")
    if operator is None or argument is None or operator.type not in ("-", "+"):
        raise LiteralEvaluationError(node.type, "only numeric sign operators are foldable")
    value = evaluate_literal(argument, source)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LiteralEvaluationError(node.type, "sign operator applied to a non-number")
    return -value if operator.type == "-" else value


def _number_value(text: str) -> int | float:
    cleaned = text.replace("_", "")
    lowered = cleaned.lower()
    if lowered.endswith("n"):
        raise LiteralEvaluationError("number", f"BigInt {text!r} is not JSON-serializable")
    if lowered.startswith(("0x", "0o", "0b")):
        return int(lowered, 0)
    if _LEGACY_OCTAL_RE.match(cleaned):
        raise LiteralEvaluationError("number", f"legacy octal literal {text!r}")
    try:
        value = float(cleaned)
    except ValueError:
        raise LiteralEvaluationError("number", f"malformed number {text!r}") from None
    if not math.isfinite(value):
        raise LiteralEvaluationError("number", f"{text!r} is not finite")
    return int(value) if value.is_integer() else value


def _decode_escape(match: re.Match[str]) -> str:
    body = match.group(1)
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    if body.startswith("u{"):
        return chr(int(body[2:-1], 16))
    if body.startswith("u") and len(body) == 5:
        return chr(int(body[1:], 16))
    if body.startswith("x") and len(body) == 3:
        return chr(int(body[1:], 16))
    return body
