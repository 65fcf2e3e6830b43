"""
Cleaner Registry

CleanerRegistry: stores registered cleaners and exposes their manifests and
plugin info descriptors.  Operations that need the registry take it as an
argument; `cleaner_registry` is only the instance the web app wires in.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from datacleaner.exceptions import CleanerNotFoundError
from datacleaner.plugins.plugininfo import CleanerInfo

if TYPE_CHECKING:
    from datacleaner.plugins.base import CleanerBase, CleanerMeta

logger = logging.getLogger(__name__)


class CleanerRegistry:
    """In-process registry of cleaner sub-plugins."""

    def __init__(self) -> None:
        self._plugins: dict[str, CleanerBase] = {}
        self._infos: dict[str, CleanerInfo] = {}

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, plugin: CleanerBase) -> CleanerInfo:
        """Register a cleaner and return its plugin info descriptor."""
        name = plugin.meta.name
        self._plugins[name] = plugin
        self._infos[name] = CleanerInfo(plugin)
        logger.info("Cleaner registered: %s v%s (priority %d)", name, plugin.meta.version, plugin.meta.priority)
        return self._infos[name]

    def clear(self) -> None:
        self._plugins.clear()
        self._infos.clear()

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get(self, name: str) -> CleanerBase | None:
        """Return the cleaner with the given name, or None if not registered."""
        return self._plugins.get(name)

    def get_info(self, name: str) -> CleanerInfo:
        """Return the plugin info for `name`, raising CleanerNotFoundError if unknown."""
        info = self._infos.get(name)
        if info is None:
            raise CleanerNotFoundError(name)
        return info

    def all_plugins(self) -> list[CleanerBase]:
        """Return all registered cleaners in registration order."""
        return list(self._plugins.values())

    def is_registered(self, name: str) -> bool:
        return name in self._plugins

    # ── Manifests ─────────────────────────────────────────────────────────────

    def get_present_plugins(self) -> dict[str, CleanerMeta]:
        """Return the manifest of every present cleaner, keyed by name."""
        return {name: plugin.meta for name, plugin in self._plugins.items()}

    def get_plugins_of_type(self) -> dict[str, CleanerInfo]:
        """Return the plugin info of every present cleaner, keyed by name."""
        return dict(self._infos)


# ── Default instance ──────────────────────────────────────────────────────────
# Populated at start-up by loader.initialize_cleaners() and injected into routes.
cleaner_registry = CleanerRegistry()
