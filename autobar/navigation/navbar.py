from __future__ import annotations

from pathlib import Path

from loguru import logger

from autobar.core.config.bar_config import BarConfig
from autobar.core.errors import missing_index_error
from autobar.core.utils.path_utils import join_relative, resolve_under_root
from autobar.interfaces.directory_reader import DirectoryReader
from autobar.navigation.children import INDEX_PAGE_STEM, MARKDOWN_SUFFIX
from autobar.navigation.models import NavEntry, NavGroup, NavLink
from autobar.navigation.naming import resolve_name
from autobar.navigation.sidebar import RESERVED_DIRECTORIES
from autobar.providers.filesystem.local_reader import LocalDirectoryReader

_INDEX_FILENAME = f"{INDEX_PAGE_STEM}{MARKDOWN_SUFFIX}"


def nav_subdirectories(
    directory: Path, options: BarConfig, reader: DirectoryReader
) -> list[str]:
    """Subdirectories of ``directory`` marked as navbar sections."""
    if not options.has_navbar:
        return []
    return [
        name
        for name in reader.list_directories(directory)
        if name.startswith(options.nav_prefix) and name not in RESERVED_DIRECTORIES
    ]


def has_index_page(directory: Path, reader: DirectoryReader) -> bool:
    """True when ``directory`` directly contains a README.md (any case)."""
    return any(
        name.lower() == _INDEX_FILENAME and not reader.is_directory(directory / name)
        for name in reader.list_entries(directory)
    )


def build_nav(
    root_dir: Path,
    options: BarConfig,
    relative_dir: str = "/",
    current_nav_level: int = 1,
    *,
    reader: DirectoryReader | None = None,
) -> NavEntry | list[NavEntry] | None:
    """Build navbar entries for the nav-prefixed directories below root.

    At the top level the flat list of entries is returned (``None`` when the
    root has no navbar sections). Deeper levels return a :class:`NavLink`
    for a leaf directory, a :class:`NavGroup` for a directory with nested
    navbar sections, or ``None`` for a leaf that is skipped.

    Raises:
        ConfigurationError: A leaf lacks README.md and ``skip_empty_navbar``
            is disabled.
    """
    reader = reader or LocalDirectoryReader()
    root_dir = Path(root_dir)
    directory = resolve_under_root(root_dir, relative_dir)
    child_dirs = nav_subdirectories(directory, options, reader)
    title = resolve_name(
        relative_dir,
        nav_prefix=options.nav_prefix,
        strip_numbers=options.strip_numbers,
    )

    if current_nav_level > 1 and not child_dirs:
        if not has_index_page(directory, reader):
            if options.skip_empty_navbar:
                logger.warning(
                    f"Skipping navbar entry for {directory}: README.md not found"
                )
                return None
            raise missing_index_error(directory)
        return NavLink(text=title, link=f"{relative_dir.rstrip('/')}/")

    if not child_dirs:
        return None

    items: list[NavEntry] = []
    for name in child_dirs:
        entry = build_nav(
            root_dir,
            options,
            join_relative(relative_dir, name),
            current_nav_level + 1,
            reader=reader,
        )
        if entry is None:
            continue
        if isinstance(entry, list):
            items.extend(entry)
        else:
            items.append(entry)

    if current_nav_level == 1:
        return items

    if not items and options.skip_empty_navbar:
        logger.warning(f"Skipping navbar group for {directory}: no usable entries")
        return None
    return NavGroup(text=title, items=items)
