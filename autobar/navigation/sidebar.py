"""Sidebar construction from a directory tree.

Pages of a directory come from :func:`collect_pages`; every eligible
subdirectory becomes a :class:`SidebarGroup` built recursively, down to
``max_level``. Below that level the remaining pages are flattened into the
deepest group.

Group placement when ``mix_directories_and_files_alphabetically`` is on:
each group is inserted before the first sibling whose name sorts after the
raw subdirectory name (plain string comparison, the same one that orders
unordered pages). A page sibling is named by its path component directly
below the directory, a group sibling by the subdirectory it was built from.
The directory's own index page is never overtaken.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from autobar.core.config.bar_config import BarConfig
from autobar.core.utils.path_utils import join_relative, resolve_under_root
from autobar.interfaces.directory_reader import DirectoryReader
from autobar.navigation.children import collect_pages, directory_index_identifier
from autobar.navigation.front_matter import OrderExtractor, extract_order
from autobar.navigation.models import SidebarGroup, SidebarItem
from autobar.navigation.naming import parse_params, resolve_name
from autobar.providers.filesystem.local_reader import LocalDirectoryReader

RESERVED_DIRECTORIES = frozenset({".vuepress"})


def sidebar_subdirectories(
    directory: Path, options: BarConfig, reader: DirectoryReader
) -> list[str]:
    """Subdirectories of ``directory`` that belong in its sidebar."""
    names: list[str] = []
    for name in reader.list_directories(directory):
        if name in RESERVED_DIRECTORIES or name.startswith("."):
            continue
        if options.has_navbar and name.startswith(options.nav_prefix):
            continue
        names.append(name)
    return names


def _sibling_name(page: str, own_index: str) -> str | None:
    if page == own_index:
        return None
    return page[len(own_index) :].split("/", 1)[0]


def _insert_position(names: list[str | None], name: str) -> int:
    for idx, sibling in enumerate(names):
        if sibling is not None and sibling > name:
            return idx
    return len(names)


def _move_readme_into_first_group(items: list[SidebarItem]) -> None:
    if len(items) >= 2 and items[0] == "" and isinstance(items[1], SidebarGroup):
        items.pop(0)
        items[0].children.insert(0, "")


def build_sidebar(
    root_dir: Path,
    relative_dir: str,
    options: BarConfig,
    current_level: int = 1,
    *,
    reader: DirectoryReader | None = None,
    order_of: OrderExtractor = extract_order,
) -> list[SidebarItem]:
    """Build the sidebar items for ``root_dir/relative_dir``."""
    reader = reader or LocalDirectoryReader()
    root_dir = Path(root_dir)

    items: list[SidebarItem] = list(
        collect_pages(
            root_dir,
            relative_dir,
            recursive=current_level > options.max_level,
            reader=reader,
            order_of=order_of,
        )
    )
    if current_level > options.max_level:
        return items

    own_index = directory_index_identifier(relative_dir)
    names: list[str | None] = [_sibling_name(page, own_index) for page in items]

    directory = resolve_under_root(root_dir, relative_dir)
    for name in sidebar_subdirectories(directory, options, reader):
        children = build_sidebar(
            root_dir,
            join_relative(relative_dir, name),
            options,
            current_level + 1,
            reader=reader,
            order_of=order_of,
        )
        if not children and options.skip_empty_sidebar:
            logger.debug(f"Skipping empty sidebar group {directory / name}")
            continue

        params = parse_params(name)
        group = SidebarGroup(
            title=resolve_name(
                name,
                nav_prefix=options.nav_prefix,
                strip_numbers=options.strip_numbers,
            ),
            children=children,
            collapsable=params.collapsable,
            sidebar_depth=params.sidebar_depth,
        )

        if options.mix_directories_and_files_alphabetically:
            position = _insert_position(names, name)
        else:
            position = len(items)
        items.insert(position, group)
        names.insert(position, name)

    if current_level == 1 and options.add_readme_to_first_group:
        _move_readme_into_first_group(items)

    return items
