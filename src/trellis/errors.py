"""Trellis exception hierarchy.

Shared across the tokenizer, tree builder, metadata extractor and CLI so
every module raises and catches the same types.
"""


class TrellisError(Exception):
    """Base for all trellis-specific errors."""


class ConfigurationError(TrellisError):
    """Raised when configuration is invalid.

    Typically raised by ``TrellisConfig.validate()`` or when a configured
    pages directory does not exist.
    """


class SegmentParseError(TrellisError):
    """A page filename segment could not be tokenized.

    Fatal for the whole route generation run: a partial route table is
    never produced.
    """

    def __init__(self, segment: str, detail: str) -> None:
        self.segment = segment
        self.detail = detail
        super().__init__(f"{detail} in segment {segment!r}")


class EmptyParameterError(SegmentParseError):
    """``[]``: a bracketed parameter with no name."""

    def __init__(self, segment: str) -> None:
        super().__init__(segment, "Empty param")


class UnterminatedParameterError(SegmentParseError):
    """``[slug``: the segment ended inside a bracketed parameter."""

    def __init__(self, segment: str, buffer: str) -> None:
        self.buffer = buffer
        super().__init__(segment, f'Unfinished param "{buffer}"')


class LiteralEvaluationError(TrellisError):
    """A syntax node is not a foldable literal.

    Raised by :func:`trellis.meta.literals.evaluate_literal` and always
    handled inside the metadata extractor.
    """

    def __init__(self, node_type: str, detail: str = "") -> None:
        self.node_type = node_type
        self.detail = detail or f"cannot fold {node_type!r} node"
        super().__init__(self.detail)
