"""Script parsing backed by tree-sitter.

The TypeScript grammar accepts plain JavaScript as well, so page scripts
are parsed as written.  Node byte offsets index into the exact bytes
handed to :meth:`ScriptParser.parse`, which is what literal slicing
relies on.
"""

from typing import Protocol

from tree_sitter import Parser, Tree
from tree_sitter_language_pack import get_parser


class ScriptParser(Protocol):
    """Anything that turns script bytes into a tree-sitter ``Tree``."""

    def parse(self, source: bytes) -> Tree: ...


class TypeScriptParser:
    """Default :class:`ScriptParser` using the ``typescript`` grammar.

    The underlying parser is created on first use.
    """

    __slots__ = ("_parser", "language")

    def __init__(self, language: str = "typescript") -> None:
        self.language = language
        self._parser: Parser | None = None

    def parse(self, source: bytes) -> Tree:
        if self._parser is None:
            self._parser = get_parser(self.language)  # type: ignore[arg-type]
        return self._parser.parse(source)
