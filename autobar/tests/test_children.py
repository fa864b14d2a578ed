from pathlib import Path

from autobar.navigation.children import (
    collect_pages,
    directory_index_identifier,
    page_identifier,
)
from autobar.providers.filesystem.local_reader import LocalDirectoryReader
from tree_helpers import MemoryDirectoryReader, page


def _collect(root: Path, relative_dir: str = "", recursive: bool = False) -> list[str]:
    return collect_pages(
        root, relative_dir, recursive, reader=LocalDirectoryReader()
    )


class TestPageIdentifier:
    def test_strips_root_and_extension(self):
        root = Path("/docs")
        assert page_identifier(root / "guide" / "setup.md", root) == "guide/setup"

    def test_readme_collapses_onto_directory(self):
        root = Path("/docs")
        assert page_identifier(root / "README.md", root) == ""
        assert page_identifier(root / "guide" / "README.md", root) == "guide/"
        assert page_identifier(root / "guide" / "readme.md", root) == "guide/"

    def test_directory_index_identifier(self):
        assert directory_index_identifier("") == ""
        assert directory_index_identifier("/") == ""
        assert directory_index_identifier("guide") == "guide/"


def test_explicit_order_wins_over_path(docs_tree):
    root = docs_tree(
        {
            "README.md": page(),
            "a.md": page(),
            "b.md": page(order=1),
            "c.md": page(order=1),
            "z.md": page(order=0.5),
        }
    )
    assert _collect(root) == ["", "z", "b", "c", "a"]


def test_readme_with_explicit_order_is_not_forced_first(docs_tree):
    root = docs_tree(
        {
            "README.md": page(order=5),
            "a.md": page(),
            "b.md": page(order=1),
        }
    )
    assert _collect(root) == ["b", "", "a"]


def test_unordered_pages_sort_last_by_path(docs_tree):
    root = docs_tree(
        {
            "02-second.md": page(),
            "01-first.md": page(),
            "10-tenth.md": page(),
            "last.md": page(order=99),
        }
    )
    assert _collect(root) == ["last", "01-first", "02-second", "10-tenth"]


def test_subdirectory_pages_are_relative_to_root(docs_tree):
    root = docs_tree(
        {
            "guide/README.md": page(),
            "guide/02-usage.md": page(),
            "guide/01-intro.md": page(order=5),
            "guide/deep/page.md": page(),
        }
    )
    assert _collect(root, "guide") == ["guide/", "guide/01-intro", "guide/02-usage"]


def test_recursive_collects_nested_pages(docs_tree):
    root = docs_tree(
        {
            "guide/README.md": page(),
            "guide/a.md": page(),
            "guide/deep/README.md": page(),
            "guide/deep/b.md": page(order=1),
            "guide/deep/deeper/c.md": page(),
        }
    )
    assert _collect(root, "guide", recursive=True) == [
        "guide/",
        "guide/deep/b",
        "guide/a",
        "guide/deep/",
        "guide/deep/deeper/c",
    ]


def test_ignores_non_markdown_and_hidden_entries(docs_tree):
    root = docs_tree(
        {
            "a.md": page(),
            "image.png": "binary",
            "notes.txt": "text",
            ".hidden.md": page(),
            ".vuepress/config.md": page(),
        }
    )
    assert _collect(root, recursive=True) == ["a"]


def test_empty_directory_yields_no_pages(docs_tree):
    root = docs_tree({"empty/": ""})
    assert _collect(root, "empty") == []
    assert _collect(root, "missing") == []


def test_uses_injected_reader_and_order_extractor():
    root = Path("/docs")
    reader = MemoryDirectoryReader(
        root, {"a.md": "A", "b.md": "B", "c.md": "C"}
    )
    orders = {"A": 3, "B": None, "C": 1}

    pages = collect_pages(root, "", reader=reader, order_of=orders.get)

    assert pages == ["c", "a", "b"]
    assert sorted(reader.reads) == ["a.md", "b.md", "c.md"]


def test_page_with_invalid_utf8_is_collected_unordered(docs_tree):
    root = docs_tree({"README.md": page(), "b.md": page(order=1)})
    (root / "legacy.md").write_bytes(b"---\norder: 0\n---\ncaf\xe9\n")
    (root / "latin.md").write_bytes(b"caf\xe9\n")

    assert _collect(root) == ["", "legacy", "b", "latin"]


def test_local_reader_replaces_undecodable_bytes(tmp_path):
    path = tmp_path / "legacy.md"
    path.write_bytes(b"caf\xe9\n")
    assert LocalDirectoryReader().read_text(path) == "caf\ufffd\n"
