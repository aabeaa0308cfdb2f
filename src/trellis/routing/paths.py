"""Path-pattern rendering and path utilities.

Renders segment tokens into router path syntax::

    [STATIC "users"]             -> "/users"
    [DYNAMIC "id"]               -> "/:id()"
    [OPTIONAL "lang"]            -> "/:lang?"
    [CATCHALL "slug"]            -> "/:slug(.*)*"
    [STATIC "v1:"]               -> "/v1\\:"
"""

import re
from urllib.parse import quote

from trellis.routing.route import SegmentToken, SegmentTokenType

# encodeURI() reserved set plus "|" (quote() always keeps alphanumerics and "_.-~")
_ENCODE_URI_SAFE = ";,/?:@&=+$!*'()#|"

# Characters a path segment must still escape after encodeURI()
_PATH_ESCAPES = {"#": "%23", "?": "%3F", "&": "%26", "+": "%2B"}
_PATH_ESCAPE_RE = re.compile(r"[#?&+]")
_DOUBLE_ENCODED_SLASH_RE = re.compile(r"%252f", re.IGNORECASE)

# First dynamic segment through the end of the path
_GLOB_TAIL_RE = re.compile(r"/(?:[^:/]+)?:\w+.*$")


def encode_path(text: str) -> str:
    """Percent-encode *text* for use inside a URL path."""
    encoded = quote(text, safe=_ENCODE_URI_SAFE)
    encoded = _PATH_ESCAPE_RE.sub(lambda m: _PATH_ESCAPES[m.group(0)], encoded)
    return _DOUBLE_ENCODED_SLASH_RE.sub("%2F", encoded)


def build_path(tokens: list[SegmentToken]) -> str:
    """Render a token sequence as a path fragment with a leading ``/``."""
    path = "/"
    for token in tokens:
        if token.type is SegmentTokenType.OPTIONAL:
            path += f":{token.value}?"
        elif token.type is SegmentTokenType.DYNAMIC:
            path += f":{token.value}()"
        elif token.type is SegmentTokenType.CATCHALL:
            path += f":{token.value}(.*)*"
        else:
            path += encode_path(token.value).replace(":", "\\:")
    return path


def with_leading_slash(path: str) -> str:
    return path if path.startswith("/") else "/" + path


def join_url(base: str, *segments: str) -> str:
    """Join URL pieces with exactly one ``/`` between them.

    Empty segments and a bare ``/`` are ignored, so
    ``join_url("/about", "/")`` is ``"/about"`` and ``join_url("", "/")``
    is ``""``.
    """
    url = base or ""
    for segment in segments:
        if not segment or segment == "/":
            continue
        if url:
            head = url if url.endswith("/") else url + "/"
            url = head + (segment[1:] if segment.startswith("/") else segment)
        else:
            url = segment
    return url


def path_to_glob(path: str) -> str | None:
    """Derive a cache-invalidation glob from a route path.

    Everything from the first dynamic segment on becomes ``/**``::

        "/posts/:id()"       -> "/posts/**"
        "/about"             -> "/about"
        "/a/:x()/b/:y()"     -> None

    Returns ``None`` for an empty path or a path with more than one
    parameter marker; callers must then skip path-based invalidation.
    """
    if not path:
        return None
    if path.find(":") != path.rfind(":"):
        return None
    return _GLOB_TAIL_RE.sub("/**", path)
