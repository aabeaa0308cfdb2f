"""Tests for trellis.routing.tree: route tree construction."""

import pytest

from trellis.errors import EmptyParameterError, UnterminatedParameterError
from trellis.meta.extractor import MetaExtractor
from trellis.routing.route import Route, ScannedFile
from trellis.routing.tree import generate_routes_from_files, read_page_source

pytestmark = pytest.mark.anyio


def _files(*paths: str) -> list[ScannedFile]:
    return [ScannedFile(relative_path=p, absolute_path=f"/pages/{p}") for p in paths]


def _shape(routes: list[Route]) -> list[tuple]:
    """(name, path, children) tuples for compact assertions."""
    return [(r.name, r.path, _shape(r.children)) for r in routes]


class TestFlatRoutes:
    async def test_index_and_about(self) -> None:
        routes = await generate_routes_from_files(_files("index.vue", "about.vue"))
        assert _shape(routes) == [("index", "/", []), ("about", "/about", [])]

    async def test_file_attached(self) -> None:
        routes = await generate_routes_from_files(_files("about.vue"))
        assert routes[0].file == "/pages/about.vue"

    async def test_input_order_preserved(self) -> None:
        routes = await generate_routes_from_files(_files("b.vue", "a.vue", "c.vue"))
        assert [r.name for r in routes] == ["b", "a", "c"]

    async def test_directory_index(self) -> None:
        routes = await generate_routes_from_files(_files("users/index.vue"))
        assert _shape(routes) == [("users", "/users", [])]

    async def test_nested_dynamic(self) -> None:
        routes = await generate_routes_from_files(_files("users/[id].vue"))
        assert _shape(routes) == [("users-id", "/users/:id()", [])]

    async def test_dynamic_directory_index(self) -> None:
        routes = await generate_routes_from_files(_files("users/[id]/index.vue"))
        assert _shape(routes) == [("users-id", "/users/:id()", [])]

    async def test_optional_and_catchall(self) -> None:
        routes = await generate_routes_from_files(
            _files("[[lang]]/about.vue", "[...slug].vue")
        )
        assert _shape(routes) == [
            ("lang-about", "/:lang?/about", []),
            ("slug", "/:slug(.*)*", []),
        ]

    async def test_multiple_extensions_stripped_once(self) -> None:
        routes = await generate_routes_from_files(_files("feed.xml.vue"))
        assert routes[0].path == "/feed.xml"


class TestLayoutMerge:
    async def test_parent_with_child(self) -> None:
        routes = await generate_routes_from_files(_files("parent.vue", "parent/child.vue"))
        assert _shape(routes) == [("parent", "/parent", [("parent-child", "child", [])])]

    async def test_parent_with_index_child(self) -> None:
        routes = await generate_routes_from_files(_files("parent.vue", "parent/index.vue"))
        assert _shape(routes) == [(None, "/parent", [("parent", "", [])])]

    async def test_parent_with_dynamic_child(self) -> None:
        routes = await generate_routes_from_files(_files("users.vue", "users/[id].vue"))
        assert _shape(routes) == [("users", "/users", [("users-id", ":id()", [])])]

    async def test_three_levels(self) -> None:
        routes = await generate_routes_from_files(_files("a.vue", "a/b.vue", "a/b/c.vue"))
        assert _shape(routes) == [("a", "/a", [("a-b", "b", [("a-b-c", "c", [])])])]

    async def test_directory_without_layout_not_nested(self) -> None:
        routes = await generate_routes_from_files(_files("about.vue", "parent/child.vue"))
        assert _shape(routes) == [("about", "/about", []), ("parent-child", "/parent/child", [])]

    async def test_children_keep_file(self) -> None:
        routes = await generate_routes_from_files(_files("parent.vue", "parent/child.vue"))
        assert routes[0].children[0].file == "/pages/parent/child.vue"


class TestDuplicates:
    async def test_duplicate_names_kept(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="trellis.routes"):
            routes = await generate_routes_from_files(_files("foo-bar.vue", "foo/bar.vue"))
        assert [r.name for r in routes] == ["foo-bar", "foo-bar"]
        assert [r.path for r in routes] == ["/foo-bar", "/foo/bar"]
        assert any("/pages/foo/bar.vue" in r.getMessage() for r in caplog.records)


class TestMalformedFilenames:
    async def test_empty_param_fails_whole_run(self) -> None:
        with pytest.raises(EmptyParameterError):
            await generate_routes_from_files(_files("index.vue", "users/[].vue"))

    async def test_unterminated_param(self) -> None:
        with pytest.raises(UnterminatedParameterError):
            await generate_routes_from_files(_files("[id.vue"))


_PAGE = """\
<template><div /></template>
<script setup lang="ts">
definePageMeta({ name: 'home', alias: ['/start'] })
</script>
"""


class TestMetaOverlay:
    async def test_vfs_source(self) -> None:
        files = _files("index.vue")
        routes = await generate_routes_from_files(
            files,
            extractor=MetaExtractor(),
            vfs={"/pages/index.vue": _PAGE},
        )
        assert routes[0].name == "home"
        assert routes[0].alias == ["/start"]
        assert routes[0].path == "/"

    async def test_disk_source(self, tmp_path) -> None:
        page = tmp_path / "index.vue"
        page.write_text(_PAGE, encoding="utf-8")
        files = [ScannedFile("index.vue", str(page))]
        routes = await generate_routes_from_files(files, extractor=MetaExtractor())
        assert routes[0].name == "home"

    async def test_overridden_path_used(self) -> None:
        page = "<script setup>definePageMeta({ path: '/welcome' })</script>"
        routes = await generate_routes_from_files(
            _files("index.vue"),
            extractor=MetaExtractor(),
            vfs={"/pages/index.vue": page},
        )
        assert routes[0].path == "/welcome"
        assert routes[0].name == "index"

    async def test_page_without_meta_unchanged(self) -> None:
        routes = await generate_routes_from_files(
            _files("about.vue"),
            extractor=MetaExtractor(),
            vfs={"/pages/about.vue": "<template><p>About</p></template>"},
        )
        assert _shape(routes) == [("about", "/about", [])]
        assert routes[0].alias is None


class TestReadPageSource:
    async def test_vfs_wins(self, tmp_path) -> None:
        page = tmp_path / "a.vue"
        page.write_text("disk", encoding="utf-8")
        assert await read_page_source(str(page), {str(page): "memory"}) == "memory"

    async def test_falls_back_to_disk(self, tmp_path) -> None:
        page = tmp_path / "a.vue"
        page.write_text("disk", encoding="utf-8")
        assert await read_page_source(str(page), {}) == "disk"

    async def test_invalid_utf8_replaced(self, tmp_path) -> None:
        page = tmp_path / "a.vue"
        page.write_bytes(b"<template>caf\xe9</template>")
        assert await read_page_source(str(page)) == "<template>caf\ufffd</template>"

    async def test_invalid_utf8_page_still_extracted(self, tmp_path) -> None:
        page = tmp_path / "cafe.vue"
        page.write_bytes(
            b"<template>caf\xe9</template>\n<script setup>definePageMeta({ name: 'cafe' })</script>"
        )
        routes = await generate_routes_from_files(
            [ScannedFile("cafe.vue", str(page))], extractor=MetaExtractor()
        )
        assert routes[0].name == "cafe"
