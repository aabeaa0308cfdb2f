"""Tests for trellis.routing.normalize: name and path normalization."""

import logging

import pytest

from trellis.routing.normalize import prepare_routes
from trellis.routing.route import Route


class TestNames:
    def test_index_suffix_removed(self) -> None:
        routes = prepare_routes([Route(name="users/index", path="/users")])
        assert routes[0].name == "users"

    def test_separators_become_dashes(self) -> None:
        routes = prepare_routes([Route(name="users/id/edit", path="/users/:id()/edit")])
        assert routes[0].name == "users-id-edit"

    def test_bare_index_kept(self) -> None:
        routes = prepare_routes([Route(name="index", path="/")])
        assert routes[0].name == "index"

    def test_index_only_stripped_at_end(self) -> None:
        routes = prepare_routes([Route(name="index/about", path="/index/about")])
        assert routes[0].name == "index-about"

    def test_returns_same_list_in_order(self) -> None:
        original = [Route(name="b", path="/b"), Route(name="a", path="/a")]
        result = prepare_routes(original)
        assert result is original
        assert [r.name for r in result] == ["b", "a"]


class TestPaths:
    def test_top_level_keeps_leading_slash(self) -> None:
        routes = prepare_routes([Route(name="about", path="/about")])
        assert routes[0].path == "/about"

    def test_child_leading_slash_removed(self) -> None:
        parent = Route(name="parent", path="/parent", children=[Route(name="parent/child", path="/child")])
        prepare_routes([parent])
        assert parent.children[0].path == "child"

    def test_grandchild_leading_slash_removed(self) -> None:
        grandchild = Route(name="a/b/c", path="/c")
        child = Route(name="a/b", path="/b", children=[grandchild])
        prepare_routes([Route(name="a", path="/a", children=[child])])
        assert child.path == "b"
        assert grandchild.path == "c"


class TestLayoutMerge:
    def test_empty_child_path_removes_parent_name(self) -> None:
        child = Route(name="parent/index", path="/")
        parent = Route(name="parent", path="/parent", children=[child])
        prepare_routes([parent])
        assert parent.name is None
        assert child.name == "parent"
        assert child.path == ""

    def test_non_empty_child_path_keeps_parent_name(self) -> None:
        parent = Route(name="parent", path="/parent", children=[Route(name="parent/child", path="/child")])
        prepare_routes([parent])
        assert parent.name == "parent"

    def test_no_duplicate_warning_for_merged_name(self, caplog: pytest.LogCaptureFixture) -> None:
        child = Route(name="parent/index", path="/", file="/p/parent/index.vue")
        parent = Route(name="parent", path="/parent", file="/p/parent.vue", children=[child])
        with caplog.at_level(logging.WARNING, logger="trellis.routes"):
            prepare_routes([parent])
        assert caplog.records == []


class TestDuplicateNames:
    def test_siblings_warn_and_both_kept(self, caplog: pytest.LogCaptureFixture) -> None:
        routes = [
            Route(name="foo-bar", path="/foo-bar", file="/p/foo-bar.vue"),
            Route(name="foo/bar", path="/foo/bar", file="/p/foo/bar.vue"),
        ]
        with caplog.at_level(logging.WARNING, logger="trellis.routes"):
            result = prepare_routes(routes)

        assert [r.name for r in result] == ["foo-bar", "foo-bar"]
        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert "`/p/foo/bar.vue`" in message
        assert "is the same as `/p/foo-bar.vue`" in message

    def test_detected_across_subtrees(self, caplog: pytest.LogCaptureFixture) -> None:
        left = Route(name="a", path="/a", file="/p/a.vue", children=[Route(name="a/x", path="/x", file="/p/a/x.vue")])
        right = Route(name="a-x", path="/a-x", file="/p/a-x.vue")
        with caplog.at_level(logging.WARNING, logger="trellis.routes"):
            prepare_routes([left, right])
        assert len(caplog.records) == 1
        assert "/p/a/x.vue" in caplog.records[0].getMessage()

    def test_existing_route_without_file(self, caplog: pytest.LogCaptureFixture) -> None:
        routes = [Route(name="x", path="/x"), Route(name="x", path="/y", file="/p/y.vue")]
        with caplog.at_level(logging.WARNING, logger="trellis.routes"):
            prepare_routes(routes)
        assert "is a duplicate" in caplog.records[0].getMessage()

    def test_shared_registry(self) -> None:
        names: dict[str, Route] = {}
        first = Route(name="a", path="/a")
        prepare_routes([first], names=names)
        assert names == {"a": first}
