from __future__ import annotations

from pathlib import Path

from loguru import logger

from autobar.core.config.bar_config import BarConfig
from autobar.core.utils.path_utils import resolve_under_root
from autobar.interfaces.directory_reader import DirectoryReader
from autobar.navigation.front_matter import OrderExtractor, extract_order
from autobar.navigation.models import NavEntry, NavGroup, SidebarMap
from autobar.navigation.sidebar import build_sidebar
from autobar.providers.filesystem.local_reader import LocalDirectoryReader

FALLBACK_SIDEBAR_KEY = "/"


def _collect_link_sidebars(
    root_dir: Path,
    nav_entries: list[NavEntry],
    options: BarConfig,
    sidebars: SidebarMap,
    *,
    reader: DirectoryReader,
    order_of: OrderExtractor,
) -> None:
    for entry in nav_entries:
        if isinstance(entry, NavGroup):
            _collect_link_sidebars(
                root_dir,
                entry.items,
                options,
                sidebars,
                reader=reader,
                order_of=order_of,
            )
            continue
        sidebars[entry.link] = build_sidebar(
            resolve_under_root(root_dir, entry.link),
            "",
            options,
            reader=reader,
            order_of=order_of,
        )


def build_multi_sidebar(
    root_dir: Path,
    nav_entries: list[NavEntry],
    options: BarConfig,
    *,
    reader: DirectoryReader | None = None,
    order_of: OrderExtractor = extract_order,
) -> SidebarMap:
    """Build one sidebar per navbar link plus the ``"/"`` fallback sidebar.

    Nested navbar groups are flattened: every link, however deep, gets its
    own key. With ``skip_empty_sidebar`` empty sidebars are dropped, and so
    is a fallback that only holds the bare root index page.
    """
    reader = reader or LocalDirectoryReader()
    root_dir = Path(root_dir)

    sidebars: SidebarMap = {}
    _collect_link_sidebars(
        root_dir, nav_entries, options, sidebars, reader=reader, order_of=order_of
    )

    if options.skip_empty_sidebar:
        for key in [key for key, items in sidebars.items() if not items]:
            logger.debug(f"Dropping empty sidebar for {key}")
            del sidebars[key]

    fallback = build_sidebar(
        root_dir, "", options, reader=reader, order_of=order_of
    )
    if options.skip_empty_sidebar and (not fallback or fallback == [""]):
        logger.debug("Dropping fallback sidebar: no content outside navbar sections")
    else:
        sidebars[FALLBACK_SIDEBAR_KEY] = fallback

    return sidebars
