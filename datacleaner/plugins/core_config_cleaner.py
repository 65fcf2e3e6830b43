"""
Core Config Cleaner

Removes selected configuration rows so that a copied site does not inherit
production values (API keys, outgoing mail servers and so on).

Settings:
  - names → one "plugin/name" pair per line; each matching row is deleted
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from datacleaner.admin.tree import AdminSetting
from datacleaner.plugins.base import CleanerBase, CleanerMeta
from datacleaner.services import config_service

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from datacleaner.admin.tree import AdminSettingPage
    from datacleaner.plugins.plugininfo import CleanerInfo

logger = logging.getLogger(__name__)

_META = CleanerMeta(
    name="core_config",
    version="1.0.0",
    description="Delete selected plugin configuration values",
    display_name="Core configuration",
    priority=10,
    defaults={"names": ""},
)


def parse_names(raw: str | None) -> list[tuple[str, str]]:
    """Parse "plugin/name" lines, ignoring blanks and lines missing either part."""
    pairs: list[tuple[str, str]] = []
    for line in (raw or "").splitlines():
        line = line.strip()
        if not line or "/" not in line:
            continue
        plugin, name = (part.strip() for part in line.split("/", 1))
        if not plugin or not name:
            continue
        pairs.append((plugin, name))
    return pairs


class CoreConfigCleaner(CleanerBase):
    @property
    def meta(self) -> CleanerMeta:
        return _META

    def build_settings(self, page: AdminSettingPage, plugininfo: CleanerInfo) -> AdminSettingPage | None:
        page.add(
            AdminSetting(
                plugin=plugininfo.component,
                name="names",
                visible_name="Config values to delete",
                description='One "plugin/name" pair per line, e.g. "core/smtphosts".',
                default="",
            )
        )
        return page

    async def execute(self, db: AsyncSession, config: dict[str, Any], dry_run: bool = False) -> dict[str, Any]:
        removed: list[str] = []
        for plugin, name in parse_names(config.get("names")):
            if await config_service.get_config(plugin, name, db) is None:
                continue
            if not dry_run:
                await config_service.unset_config(plugin, name, db)
            removed.append(f"{plugin}/{name}")
        logger.info("core_config: %d config values %s", len(removed), "would be removed" if dry_run else "removed")
        return {"removed": removed}
