"""Page filename segment tokenizer.

Turns one path segment (a file or directory name without extension) into
typed tokens::

    "about"          -> [STATIC "about"]
    "[id]"           -> [DYNAMIC "id"]
    "[[lang]]"       -> [OPTIONAL "lang"]
    "[...slug]"      -> [CATCHALL "slug"]
    "post-[id]"      -> [STATIC "post-", DYNAMIC "id"]
"""

import re
from enum import Enum, auto

from trellis.errors import EmptyParameterError, UnterminatedParameterError
from trellis.routing.route import SegmentToken, SegmentTokenType

# Characters kept inside [...]; everything else is dropped
_PARAM_CHAR_RE = re.compile(r"[\w.]", re.ASCII)


class _State(Enum):
    INITIAL = auto()
    STATIC = auto()
    DYNAMIC = auto()
    OPTIONAL = auto()
    CATCHALL = auto()


_TOKEN_TYPES: dict[_State, SegmentTokenType] = {
    _State.STATIC: SegmentTokenType.STATIC,
    _State.DYNAMIC: SegmentTokenType.DYNAMIC,
    _State.OPTIONAL: SegmentTokenType.OPTIONAL,
    _State.CATCHALL: SegmentTokenType.CATCHALL,
}


def tokenize(segment: str) -> list[SegmentToken]:
    """Parse a path segment into an ordered list of tokens.

    Optional parameters close only on ``]]``; a lone ``]`` inside
    ``[[...`` is ignored.

    Raises ``EmptyParameterError`` for ``[]`` and
    ``UnterminatedParameterError`` when the segment ends inside ``[...``.
    """
    state = _State.INITIAL
    buffer = ""
    tokens: list[SegmentToken] = []

    def consume_buffer() -> None:
        nonlocal buffer
        if not buffer:
            return
        tokens.append(SegmentToken(type=_TOKEN_TYPES[state], value=buffer))
        buffer = ""

    i = 0
    while i < len(segment):
        c = segment[i]

        if state is _State.INITIAL:
            buffer = ""
            if c == "[":
                state = _State.DYNAMIC
            else:
                # Re-read this character as static text
                i -= 1
                state = _State.STATIC

        elif state is _State.STATIC:
            if c == "[":
                consume_buffer()
                state = _State.DYNAMIC
            else:
                buffer += c

        else:
            if buffer == "...":
                buffer = ""
                state = _State.CATCHALL
            if c == "[" and state is _State.DYNAMIC:
                state = _State.OPTIONAL
            if c == "]" and (state is not _State.OPTIONAL or segment[i - 1] == "]"):
                if not buffer:
                    raise EmptyParameterError(segment)
                consume_buffer()
                state = _State.INITIAL
            elif _PARAM_CHAR_RE.match(c):
                buffer += c

        i += 1

    if state is _State.DYNAMIC:
        raise UnterminatedParameterError(segment, buffer)

    consume_buffer()
    return tokens


def segment_name(tokens: list[SegmentToken]) -> str:
    """Concatenate token values verbatim, e.g. ``post-[id]`` -> ``post-id``."""
    return "".join(token.value for token in tokens)
