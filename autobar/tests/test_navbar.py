import pytest
from loguru import logger

from autobar.core.config.bar_config import BarConfig
from autobar.core.errors import ConfigurationError
from autobar.navigation.models import NavGroup, NavLink
from autobar.navigation.navbar import build_nav, has_index_page
from autobar.providers.filesystem.local_reader import LocalDirectoryReader
from tree_helpers import page


def test_two_navbar_sections(docs_tree):
    root = docs_tree(
        {
            "nav-guide/README.md": page(),
            "nav-api/README.md": page(),
            "other/README.md": page(),
        }
    )
    assert build_nav(root, BarConfig()) == [
        NavLink(text="Api", link="/nav-api/"),
        NavLink(text="Guide", link="/nav-guide/"),
    ]


def test_numbered_sections_are_ordered_by_prefix(docs_tree):
    root = docs_tree(
        {
            "nav.01-guide/README.md": page(),
            "nav.02-api/README.md": page(),
        }
    )
    assert build_nav(root, BarConfig()) == [
        NavLink(text="Guide", link="/nav.01-guide/"),
        NavLink(text="Api", link="/nav.02-api/"),
    ]


def test_nested_sections_become_groups(docs_tree):
    root = docs_tree(
        {
            "nav-docs/README.md": page(),
            "nav-docs/nav-v1/README.md": page(),
            "nav-docs/nav-v2/readme.md": page(),
            "nav-docs/plain/x.md": page(),
        }
    )
    assert build_nav(root, BarConfig()) == [
        NavGroup(
            text="Docs",
            items=[
                NavLink(text="V1", link="/nav-docs/nav-v1/"),
                NavLink(text="V2", link="/nav-docs/nav-v2/"),
            ],
        )
    ]


def test_leaf_without_readme_is_skipped(docs_tree):
    root = docs_tree(
        {
            "nav-empty/notes.md": page(),
            "nav-guide/README.md": page(),
        }
    )
    messages: list[str] = []
    sink_id = logger.add(lambda msg: messages.append(str(msg)), level="WARNING")
    try:
        nav = build_nav(root, BarConfig())
    finally:
        logger.remove(sink_id)

    assert nav == [NavLink(text="Guide", link="/nav-guide/")]
    assert any("nav-empty" in message for message in messages)


def test_leaf_without_readme_raises_when_not_skipping(docs_tree):
    root = docs_tree({"nav-empty/notes.md": page()})

    with pytest.raises(ConfigurationError) as excinfo:
        build_nav(root, BarConfig(skip_empty_navbar=False))

    assert excinfo.value.path == root / "nav-empty"
    assert "README.md" in str(excinfo.value)


def test_group_without_usable_leaves_is_dropped(docs_tree):
    root = docs_tree(
        {
            "nav-docs/nav-v1/notes.md": page(),
            "nav-guide/README.md": page(),
        }
    )
    assert build_nav(root, BarConfig()) == [
        NavLink(text="Guide", link="/nav-guide/")
    ]


def test_root_without_sections_has_no_navbar(docs_tree):
    root = docs_tree({"README.md": page(), "guide/README.md": page()})
    assert build_nav(root, BarConfig()) is None


def test_empty_prefix_disables_navbar(docs_tree):
    root = docs_tree({"nav-guide/README.md": page()})
    assert build_nav(root, BarConfig(nav_prefix="")) is None


def test_custom_prefix(docs_tree):
    root = docs_tree(
        {
            "section_guide/README.md": page(),
            "nav-guide/README.md": page(),
        }
    )
    assert build_nav(root, BarConfig(nav_prefix="section")) == [
        NavLink(text="Guide", link="/section_guide/")
    ]


def test_has_index_page_ignores_directories_named_readme(docs_tree):
    root = docs_tree({"a/README.md/x.md": page(), "b/ReadMe.md": page()})
    reader = LocalDirectoryReader()
    assert not has_index_page(root / "a", reader)
    assert has_index_page(root / "b", reader)
