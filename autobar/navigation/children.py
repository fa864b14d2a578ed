from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from autobar.core.utils.path_utils import get_relative_posix, resolve_under_root
from autobar.interfaces.directory_reader import DirectoryReader
from autobar.navigation.front_matter import OrderExtractor, extract_order

MARKDOWN_SUFFIX = ".md"
INDEX_PAGE_STEM = "readme"


@dataclass
class PageEntry:
    path: str
    order: int | float | None


def page_identifier(md_path: Path, root_dir: Path) -> str:
    """Map a markdown file to its sidebar identifier relative to ``root_dir``.

    ``guide/setup.md`` becomes ``guide/setup``; index pages collapse onto
    their directory, so ``guide/README.md`` becomes ``guide/`` and the root
    ``README.md`` becomes the empty string.
    """
    relative = get_relative_posix(md_path, root_dir)[: -len(MARKDOWN_SUFFIX)]
    head, _, tail = relative.rpartition("/")
    if tail.lower() == INDEX_PAGE_STEM:
        return f"{head}/" if head else ""
    return relative


def directory_index_identifier(relative_dir: str) -> str:
    """Identifier of the index page of ``relative_dir`` (``""`` at the root)."""
    stripped = relative_dir.strip("/")
    return f"{stripped}/" if stripped else ""


def _iter_markdown_files(
    directory: Path, recursive: bool, reader: DirectoryReader
) -> Iterator[Path]:
    for name in reader.list_entries(directory):
        if name.startswith("."):
            continue
        path = directory / name
        if reader.is_directory(path):
            if recursive:
                yield from _iter_markdown_files(path, recursive, reader)
            continue
        if name.endswith(MARKDOWN_SUFFIX):
            yield path


def _sort_key(entry: PageEntry) -> tuple[bool, int | float, str]:
    return (entry.order is None, entry.order or 0, entry.path)


def collect_pages(
    root_dir: Path,
    relative_dir: str = "",
    recursive: bool = False,
    *,
    reader: DirectoryReader,
    order_of: OrderExtractor = extract_order,
) -> list[str]:
    """List page identifiers under ``root_dir/relative_dir`` in sidebar order.

    Pages are ordered by their ``order`` front matter, unordered pages last,
    ties broken by identifier. The directory's own index page counts as
    ``order: 0`` unless it declares another order. With ``recursive`` every
    nested page below the directory is included.
    """
    directory = resolve_under_root(root_dir, relative_dir)
    own_index = directory_index_identifier(relative_dir)

    entries: list[PageEntry] = []
    for md_path in _iter_markdown_files(directory, recursive, reader):
        identifier = page_identifier(md_path, root_dir)
        order = order_of(reader.read_text(md_path))
        if order is None and identifier == own_index:
            order = 0
        entries.append(PageEntry(path=identifier, order=order))

    entries.sort(key=_sort_key)
    logger.debug(
        f"Collected {len(entries)} page(s) in {directory} (recursive={recursive})"
    )
    return [entry.path for entry in entries]
