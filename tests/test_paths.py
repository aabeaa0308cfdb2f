"""Tests for trellis.routing.paths: path rendering and globs."""

import pytest

from trellis.routing.paths import (
    build_path,
    encode_path,
    join_url,
    path_to_glob,
    with_leading_slash,
)
from trellis.routing.route import SegmentTokenType
from trellis.routing.segments import tokenize


class TestBuildPath:
    def test_no_tokens(self) -> None:
        assert build_path([]) == "/"

    def test_static(self) -> None:
        assert build_path(tokenize("about")) == "/about"

    def test_dynamic(self) -> None:
        assert build_path(tokenize("[id]")) == "/:id()"

    def test_optional(self) -> None:
        assert build_path(tokenize("[[lang]]")) == "/:lang?"

    def test_catchall(self) -> None:
        assert build_path(tokenize("[...slug]")) == "/:slug(.*)*"

    def test_mixed(self) -> None:
        assert build_path(tokenize("post-[id]")) == "/post-:id()"

    def test_static_colon_escaped(self) -> None:
        assert build_path(tokenize("a:b")) == "/a\\:b"

    def test_static_is_encoded(self) -> None:
        assert build_path(tokenize("hello world")) == "/hello%20world"

    @pytest.mark.parametrize(
        "segment",
        ["about", "[id]", "[[lang]]", "[...slug]", "a-[b]-[[c]]", "[x][y][...z]"],
    )
    def test_one_marker_per_param(self, segment: str) -> None:
        tokens = tokenize(segment)
        path = build_path(tokens)
        params = [t for t in tokens if t.type is not SegmentTokenType.STATIC]
        assert path.startswith("/")
        assert path.count(":") == len(params)


class TestEncodePath:
    def test_reserved_kept(self) -> None:
        assert encode_path("a-b_c.d~e") == "a-b_c.d~e"

    def test_query_and_fragment_encoded(self) -> None:
        assert encode_path("a#b?c") == "a%23b%3Fc"

    def test_ampersand_and_plus_encoded(self) -> None:
        assert encode_path("a&b+c") == "a%26b%2Bc"

    def test_unicode(self) -> None:
        assert encode_path("é") == "%C3%A9"

    def test_brackets_encoded(self) -> None:
        assert encode_path("[x]") == "%5Bx%5D"


class TestJoinURL:
    def test_empty_base(self) -> None:
        assert join_url("", "/about") == "/about"

    def test_bare_slash_ignored(self) -> None:
        assert join_url("", "/") == ""
        assert join_url("/about", "/") == "/about"

    def test_single_separator(self) -> None:
        assert join_url("/users", "/:id()") == "/users/:id()"
        assert join_url("/users/", "/:id()") == "/users/:id()"
        assert join_url("/users", "list") == "/users/list"

    def test_with_leading_slash(self) -> None:
        assert with_leading_slash("") == "/"
        assert with_leading_slash("about") == "/about"
        assert with_leading_slash("/about") == "/about"


class TestPathToGlob:
    def test_single_param(self) -> None:
        assert path_to_glob("/posts/:id()") == "/posts/**"

    def test_two_params(self) -> None:
        assert path_to_glob("/a/:x()/b/:y()") is None

    def test_empty(self) -> None:
        assert path_to_glob("") is None

    def test_static_unchanged(self) -> None:
        assert path_to_glob("/about") == "/about"

    def test_root_catchall(self) -> None:
        assert path_to_glob("/:slug(.*)*") == "/**"

    def test_param_with_static_prefix(self) -> None:
        assert path_to_glob("/posts/post-:id()") == "/posts/**"

    def test_trailing_static_dropped(self) -> None:
        assert path_to_glob("/users/:id()/edit") == "/users/**"
