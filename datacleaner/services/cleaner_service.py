"""
Cleaner Service

Enabling, disabling and running cleaners.
All functions accept an injected registry and AsyncSession.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from datacleaner.exceptions import CleanerExecutionError, CleanerNotInstalledError
from datacleaner.plugins.plugininfo import CleanerInfo
from datacleaner.services import config_service

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from datacleaner.plugins.registry import CleanerRegistry

logger = logging.getLogger(__name__)


async def set_enabled(name: str, enabled: bool, registry: CleanerRegistry, db: AsyncSession) -> CleanerInfo:
    """
    Store the enabled flag of a registered cleaner.

    Only cleaners installed at their current version can be enabled;
    disabling is always allowed.
    """
    info = registry.get_info(name)
    if enabled and not await info.is_installed_and_upgraded(db):
        raise CleanerNotInstalledError(name)
    await config_service.set_config(info.component, "enabled", enabled, db)
    logger.info("Cleaner %s: %s", "enabled" if enabled else "disabled", name)
    return info


async def describe(info: CleanerInfo, db: AsyncSession) -> dict[str, Any]:
    """Return a serialisable summary of a cleaner."""
    url = info.get_settings_section_url()
    return {
        "name": info.name,
        "display_name": info.display_name,
        "description": info.plugin.meta.description,
        "version": info.version,
        "installed_version": await info.get_installed_version(db),
        "priority": info.priority,
        "enabled": await info.is_enabled(db),
        "uninstall_allowed": info.is_uninstall_allowed(),
        "settings_section": info.get_settings_section_name(),
        "settings_url": str(url) if url is not None else None,
    }


async def run_cleaners(registry: CleanerRegistry, db: AsyncSession, dry_run: bool = False) -> list[dict[str, Any]]:
    """
    Run every enabled cleaner in priority order.

    Cleaners that are not installed at their current version are skipped.

    Each cleaner receives its own stored config.  The first failure stops the
    run and is raised as CleanerExecutionError.
    """
    ordered = await CleanerInfo.get_enabled_plugins_by_priority(db, registry)
    logger.info("Running %d cleaners%s", len(ordered), " (dry run)" if dry_run else "")

    results: list[dict[str, Any]] = []
    for info in ordered:
        if not await info.is_installed_and_upgraded(db):
            logger.warning("Cleaner %s is enabled but not installed at %s, skipping", info.name, info.version)
            continue
        config =await config_service.get_plugin_config(info.component, db)
        try:
            summary = await info.plugin.execute(db, config, dry_run=dry_run)
        except Exception as exc:
            logger.error("Cleaner %s failed: %s", info.name, exc)
            raise CleanerExecutionError(info.name, str(exc)) from exc
        results.append({"name": info.name, "priority": info.priority, "result": summary or {}})
    return results
