"""
Admin Settings Tree

Plain objects describing the hierarchy of admin configuration pages.
Rendering is left to the client; nodes only know how to serialise themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from datacleaner.exceptions import AdminNodeNotFoundError, DuplicateAdminNodeError
from datacleaner.services import config_service

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

CAPABILITY_SITE_CONFIG = "site:config"


@dataclass
class AdminSetting:
    """
    A single setting stored in the plugin config table.

    Attributes:
        plugin:       Config namespace the value is stored under, e.g. "cleaner_core_config".
        name:         Config key within the namespace.
        visible_name: Label shown in the admin UI.
        description:  Help text.
        default:      Value used when nothing is stored.
        value:        Current stored value (filled by populate_values).
    """

    plugin: str
    name: str
    visible_name: str
    description: str = ""
    default: str | None = None
    value: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "plugin": self.plugin,
            "visible_name": self.visible_name,
            "description": self.description,
            "default": self.default,
            "value": self.value if self.value is not None else self.default,
        }


@dataclass
class AdminSettingPage:
    """A page of settings, only visible to holders of `req_capability`."""

    name: str
    visible_name: str
    req_capability: str = CAPABILITY_SITE_CONFIG
    hidden: bool = False
    settings: list[AdminSetting] = field(default_factory=list)

    def add(self, setting: AdminSetting) -> None:
        self.settings.append(setting)

    def get_setting(self, name: str) -> AdminSetting | None:
        for setting in self.settings:
            if setting.name == name:
                return setting
        return None

    def check_access(self, capabilities: set[str]) -> bool:
        return self.req_capability in capabilities

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "page",
            "name": self.name,
            "visible_name": self.visible_name,
            "req_capability": self.req_capability,
            "hidden": self.hidden,
            "settings": [s.to_dict() for s in self.settings],
        }


@dataclass
class AdminCategory:
    """A grouping node holding pages and sub-categories."""

    name: str
    visible_name: str
    hidden: bool = False
    children: list[AdminNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "category",
            "name": self.name,
            "visible_name": self.visible_name,
            "hidden": self.hidden,
            "children": [c.to_dict() for c in self.children],
        }


AdminNode = Union[AdminCategory, AdminSettingPage]


class AdminRoot(AdminCategory):
    """
    Root of the admin tree.

    Keeps a flat index of node names so any node can be located or used as a
    parent without walking the tree.  Node names are unique across the tree.
    """

    def __init__(self, name: str = "root", visible_name: str = "Administration") -> None:
        super().__init__(name=name, visible_name=visible_name)
        self._index: dict[str, AdminNode] = {name: self}

    def add(self, parent_name: str, node: AdminNode) -> None:
        """Attach `node` under the category called `parent_name`."""
        parent = self._index.get(parent_name)
        if not isinstance(parent, AdminCategory):
            raise AdminNodeNotFoundError(parent_name)
        if node.name in self._index:
            raise DuplicateAdminNodeError(node.name)
        parent.children.append(node)
        self._index[node.name] = node
        if isinstance(node, AdminCategory):
            for child in node.children:
                self._index.setdefault(child.name, child)

    def locate(self, name: str) -> AdminNode | None:
        """Return the node called `name`, or None."""
        return self._index.get(name)


async def populate_values(page: AdminSettingPage, db: AsyncSession) -> AdminSettingPage:
    """Fill each setting's current value from the config store."""
    loaded: dict[str, dict[str, str | None]] = {}
    for setting in page.settings:
        if setting.plugin not in loaded:
            loaded[setting.plugin] = await config_service.get_plugin_config(setting.plugin, db)
        setting.value = loaded[setting.plugin].get(setting.name)
    return page
