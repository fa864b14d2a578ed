"""autobar: navbar and sidebar config derived from a docs directory tree.

This module is intentionally small: it exposes the import surface used by
site configs and the `autobar` CLI. Tests import implementation details
directly from `autobar.navigation.*` modules.
"""

from __future__ import annotations

from autobar.core.config.bar_config import BarConfig
from autobar.core.errors import ConfigurationError
from autobar.navigation.generator import get_config
from autobar.navigation.models import NavGroup, NavLink, SidebarConfig, SidebarGroup

__version__ = "0.1.0"

__all__: list[str] = [
    "BarConfig",
    "ConfigurationError",
    "NavGroup",
    "NavLink",
    "SidebarConfig",
    "SidebarGroup",
    "get_config",
]
