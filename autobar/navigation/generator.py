from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from loguru import logger
from pypinyin import lazy_pinyin

from autobar.core.config.bar_config import BarConfig
from autobar.core.errors import ConfigurationError
from autobar.core.utils.path_utils import normalize_root
from autobar.interfaces.directory_reader import DirectoryReader
from autobar.navigation.front_matter import OrderExtractor, extract_order
from autobar.navigation.models import (
    NavEntry,
    NavGroup,
    NavLink,
    SidebarConfig,
    SidebarItem,
    SidebarMap,
)
from autobar.navigation.multi_sidebar import build_multi_sidebar
from autobar.navigation.navbar import build_nav
from autobar.navigation.sidebar import build_sidebar
from autobar.providers.filesystem.local_reader import LocalDirectoryReader
from autobar.utils.text import slugify_kebab

Slugify = Callable[[str], str]


def slugify_segment(text: str) -> str:
    """Transliterate Chinese characters to toneless pinyin and kebab-case it.

    ``"nav-指南"`` becomes ``"nav-zhi-nan"``; text without Han characters is
    only lowercased and dashed.
    """
    return slugify_kebab("-".join(lazy_pinyin(text)), fallback=text)


def slugify_link(link: str, slugify: Slugify) -> str:
    """Apply ``slugify`` to every segment of a navbar link, keeping slashes."""
    return "/".join(slugify(part) if part else part for part in link.split("/"))


def slugify_nav_links(entries: list[NavEntry], slugify: Slugify) -> list[NavEntry]:
    """Return navbar entries with every link slugified, recursing into groups."""
    output: list[NavEntry] = []
    for entry in entries:
        if isinstance(entry, NavGroup):
            output.append(
                NavGroup(text=entry.text, items=slugify_nav_links(entry.items, slugify))
            )
        else:
            output.append(
                NavLink(text=entry.text, link=slugify_link(entry.link, slugify))
            )
    return output


def resolve_options(options: BarConfig | Mapping[str, Any] | None) -> BarConfig:
    if options is None:
        return BarConfig()
    if isinstance(options, BarConfig):
        return options
    return BarConfig(**dict(options))


def get_config(
    root_dir: str | Path,
    options: BarConfig | Mapping[str, Any] | None = None,
    *,
    reader: DirectoryReader | None = None,
    order_of: OrderExtractor = extract_order,
    slugify: Slugify = slugify_segment,
) -> SidebarConfig:
    """Derive the navbar and sidebar config of a documentation tree.

    Args:
        root_dir: Root of the markdown corpus.
        options: ``BarConfig`` or a mapping of option overrides; ``None``
            uses defaults plus ``AUTOBAR_*`` environment variables.
        reader: Directory reader, the local filesystem by default.
        order_of: Extracts the numeric ``order`` from a page's text.
        slugify: Transliterates one link segment when ``pinyin_nav`` is on.

    Returns:
        ``SidebarConfig`` whose ``sidebar`` is a map keyed by navbar link
        when multiple sidebars are enabled and a navbar exists, otherwise a
        flat item list.

    Raises:
        ConfigurationError: Root is not a directory, or a navbar leaf has no
            README.md while ``skip_empty_navbar`` is disabled.
    """
    resolved = resolve_options(options)
    reader = reader or LocalDirectoryReader()
    root = normalize_root(root_dir)

    if not reader.is_directory(root):
        raise ConfigurationError(f"Docs root is not a directory: {root}", path=root)

    logger.debug(f"Resolving navigation for {root} with {resolved!r}")

    nav_result = build_nav(root, resolved, reader=reader)
    nav: list[NavEntry] = nav_result if isinstance(nav_result, list) else []

    sidebar: list[SidebarItem] | SidebarMap
    if resolved.multiple_side_bar and nav:
        sidebar = build_multi_sidebar(
            root, nav, resolved, reader=reader, order_of=order_of
        )
    else:
        sidebar = build_sidebar(root, "", resolved, reader=reader, order_of=order_of)

    if resolved.pinyin_nav:
        nav = slugify_nav_links(nav, slugify)

    logger.info(
        f"Resolved {len(nav)} navbar entr{'y' if len(nav) == 1 else 'ies'} and "
        f"{len(sidebar) if isinstance(sidebar, dict) else 1} sidebar(s) for {root}"
    )
    return SidebarConfig(nav=nav, sidebar=sidebar)
