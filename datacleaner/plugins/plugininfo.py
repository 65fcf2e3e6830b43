"""
Cleaner Plugin Info

CleanerInfo describes one installed cleaner to the rest of the platform:
whether it is enabled, where its settings live, and how it is ordered
relative to its siblings.  It only reads state; the config store, registry
and admin tree are all passed in.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.datastructures import URL

from datacleaner.admin.tree import CAPABILITY_SITE_CONFIG, AdminSettingPage
from datacleaner.config import settings
from datacleaner.exceptions import DuplicateAdminNodeError
from datacleaner.services import config_service

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from datacleaner.admin.tree import AdminRoot
    from datacleaner.plugins.base import CleanerBase
    from datacleaner.plugins.registry import CleanerRegistry

logger = logging.getLogger(__name__)

PLUGIN_TYPE = "cleaner"
CONFIG_PREFIX = f"{PLUGIN_TYPE}_"


def config_namespace(name: str) -> str:
    """Return the config plugin namespace of a cleaner, e.g. "cleaner_core_config"."""
    return f"{CONFIG_PREFIX}{name}"


class CleanerInfo:
    """Descriptor for a single cleaner sub-plugin."""

    type = PLUGIN_TYPE

    def __init__(self, plugin: CleanerBase) -> None:
        self.plugin = plugin

    def __repr__(self) -> str:
        return f"<CleanerInfo {self.name} priority={self.priority}>"

    # ── Manifest ──────────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self.plugin.meta.name

    @property
    def component(self) -> str:
        return config_namespace(self.name)

    @property
    def display_name(self) -> str:
        return self.plugin.meta.display_name

    @property
    def version(self) -> str:
        return self.plugin.meta.version

    @property
    def priority(self) -> int:
        return self.plugin.meta.priority

    # ── State ─────────────────────────────────────────────────────────────────

    async def is_enabled(self, db: AsyncSession) -> bool:
        """Whether the cleaner is enabled.  No stored flag means disabled."""
        value = await config_service.get_config(self.component, "enabled", db)
        return config_service.as_bool(value)

    async def get_installed_version(self, db: AsyncSession) -> str | None:
        return await config_service.get_config(self.component, "version", db)

    async def is_installed_and_upgraded(self, db: AsyncSession) -> bool:
        """True when the installed version matches the manifest version."""
        return await self.get_installed_version(db) == self.version

    def is_uninstall_allowed(self) -> bool:
        """Cleaners can always be uninstalled."""
        return True

    @staticmethod
    async def get_enabled_plugins(db: AsyncSession) -> dict[str, str]:
        """
        Return the names of all enabled cleaners, alphabetically.

        The result maps each name to itself so it can be used as a set while
        keeping a stable order.
        """
        pattern = CONFIG_PREFIX.replace("_", "\\_") + "%"
        components = await config_service.find_plugins(pattern, "enabled", "1", db)
        final: dict[str, str] = {}
        for component in components:
            name = component[len(CONFIG_PREFIX):]
            final[name] = name
        return final

    @staticmethod
    async def get_enabled_plugins_by_priority(db: AsyncSession, registry: CleanerRegistry) -> list[CleanerInfo]:
        """
        Return enabled cleaners ordered by manifest priority, lowest first.

        Cleaners sharing a priority keep the alphabetical order of
        get_enabled_plugins().  Enabled names with no registered cleaner are
        skipped.
        """
        manifests = registry.get_present_plugins()
        infos = registry.get_plugins_of_type()
        enabled = await CleanerInfo.get_enabled_plugins(db)

        groups: dict[int, list[CleanerInfo]] = {}
        for name in enabled:
            if name not in manifests or name not in infos:
                logger.warning("Enabled cleaner %s is not registered, skipping", name)
                continue
            groups.setdefault(manifests[name].priority, []).append(infos[name])

        final: list[CleanerInfo] = []
        for priority in sorted(groups):
            final.extend(groups[priority])
        return final

    # ── Admin settings ────────────────────────────────────────────────────────

    @staticmethod
    def get_manage_url() -> URL:
        """Return the URL used to manage cleaners."""
        return URL(settings.admin_url).include_query_params(section=settings.settings_section)

    def get_settings_section_name(self) -> str | None:
        """Name of the cleaner's settings section, or None if it has no settings."""
        if self.plugin.has_settings:
            return self.component
        return None

    def get_settings_section_url(self) -> URL | None:
        """URL of the cleaner's settings section, or None if it has no settings."""
        section = self.get_settings_section_name()
        if section is None:
            return None
        return URL(settings.admin_url).include_query_params(section=section)

    async def load_settings(
        self,
        admin_root: AdminRoot,
        parent_node_name: str,
        has_site_config: bool,
        db: AsyncSession,
    ) -> AdminSettingPage | None:
        """
        Build this cleaner's settings page and attach it under `parent_node_name`.

        Nothing is attached when the cleaner is not installed at its current
        version, when the caller lacks site configuration rights, when the
        cleaner has no settings, when its builder returns None, or when the
        page name is already taken in the tree.

        Returns the attached page, or None.
        """
        if not await self.is_installed_and_upgraded(db):
            return None

        if not has_site_config or not self.plugin.has_settings:
            return None

        section = self.get_settings_section_name()
        page = AdminSettingPage(
            name=section,
            visible_name=self.display_name,
            req_capability=CAPABILITY_SITE_CONFIG,
            hidden=not await self.is_enabled(db),
        )
        page = self.plugin.build_settings(page, self)
        if page is None:
            return None

        try:
            admin_root.add(parent_node_name, page)
        except DuplicateAdminNodeError:
            logger.warning("Cleaner %s settings page %s duplicates an existing node, skipping", self.name, page.name)
            return None
        logger.debug("Settings page %s attached under %s", page.name, parent_node_name)
        return page
