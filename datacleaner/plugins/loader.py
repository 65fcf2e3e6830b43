"""
Cleaner Loader

Registers the built-in cleaners at application start-up and acts as the
installer: writes each cleaner's version and default settings into the
config store, and removes them again on uninstall.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from datacleaner.exceptions import CleanerNotFoundError
from datacleaner.plugins.plugininfo import config_namespace
from datacleaner.services import config_service

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from datacleaner.plugins.registry import CleanerRegistry

logger = logging.getLogger(__name__)

INSTALLED = "installed"
UPGRADED = "upgraded"
UP_TO_DATE = "up_to_date"


def initialize_cleaners(registry: CleanerRegistry) -> None:
    """
    Register all built-in cleaners.

    Imports are deferred so the cleaner modules can import the plugin base
    classes without a cycle through the package __init__.
    """
    from datacleaner.plugins.core_config_cleaner import CoreConfigCleaner
    from datacleaner.plugins.cron_disabler_cleaner import CronDisablerCleaner

    for cleaner_class in [CronDisablerCleaner, CoreConfigCleaner]:
        registry.register(cleaner_class())

    logger.info("Cleaner initialisation complete: %d cleaners registered", len(registry.all_plugins()))


async def install_cleaners(registry: CleanerRegistry, db: AsyncSession) -> dict[str, str]:
    """
    Install new cleaners and upgrade changed ones.

    New cleaners get their manifest defaults and start disabled unless the
    defaults say otherwise.  Upgrades only add defaults that are not stored
    yet.  Returns the action taken per cleaner.
    """
    actions: dict[str, str] = {}
    for info in registry.get_plugins_of_type().values():
        installed = await info.get_installed_version(db)
        if installed == info.version:
            actions[info.name] = UP_TO_DATE
            continue

        stored = await config_service.get_plugin_config(info.component, db)
        defaults = {"enabled": "0", **info.plugin.meta.defaults}
        for name, value in defaults.items():
            if name not in stored:
                await config_service.set_config(info.component, name, value, db)
        await config_service.set_config(info.component, "version", info.version, db)

        actions[info.name] = INSTALLED if installed is None else UPGRADED
        logger.info("Cleaner %s %s at version %s", info.name, actions[info.name], info.version)
    return actions


async def uninstall_cleaner(name: str, registry: CleanerRegistry, db: AsyncSession) -> int:
    """
    Delete every config value of a cleaner.  Returns the number of rows removed.

    Cleaners whose code is gone can still be uninstalled as long as config
    remains under their namespace.
    """
    if registry.is_registered(name):
        info = registry.get_info(name)
        if not info.is_uninstall_allowed():
            return 0
        component = info.component
    else:
        component = config_namespace(name)
        if not await config_service.get_plugin_config(component, db):
            raise CleanerNotFoundError(name)
        logger.warning("Uninstalling unregistered cleaner %s from leftover config", name)

    removed = await config_service.unset_config(component, None, db)
    logger.info("Cleaner uninstalled: %s (%d config values removed)", name, removed)
    return removed
