from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class SidebarGroup:
    title: str
    children: list[SidebarItem] = field(default_factory=list)
    collapsable: bool | None = None
    sidebar_depth: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "children": [_item_to_dict(child) for child in self.children],
        }
        if self.collapsable is not None:
            data["collapsable"] = self.collapsable
        if self.sidebar_depth is not None:
            data["sidebarDepth"] = self.sidebar_depth
        return data


SidebarItem = Union[str, SidebarGroup]
SidebarMap = dict[str, list[SidebarItem]]


@dataclass
class NavLink:
    text: str
    link: str

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "link": self.link}


@dataclass
class NavGroup:
    text: str
    items: list[NavEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "items": [item.to_dict() for item in self.items]}


NavEntry = Union[NavLink, NavGroup]


@dataclass
class SidebarConfig:
    nav: list[NavEntry]
    sidebar: list[SidebarItem] | SidebarMap

    def to_dict(self) -> dict[str, Any]:
        sidebar: Any
        if isinstance(self.sidebar, dict):
            sidebar = {
                key: [_item_to_dict(item) for item in items]
                for key, items in self.sidebar.items()
            }
        else:
            sidebar = [_item_to_dict(item) for item in self.sidebar]
        return {"nav": [entry.to_dict() for entry in self.nav], "sidebar": sidebar}


def _item_to_dict(item: SidebarItem) -> Any:
    if isinstance(item, SidebarGroup):
        return item.to_dict()
    return item
