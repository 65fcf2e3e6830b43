"""
Admin tree assembly for the cleaner section.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from datacleaner.admin.tree import AdminCategory, AdminRoot
from datacleaner.config import settings

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from datacleaner.plugins.registry import CleanerRegistry

logger = logging.getLogger(__name__)


async def build_admin_tree(
    registry: CleanerRegistry,
    db: AsyncSession,
    has_site_config: bool = True,
    admin_root: AdminRoot | None = None,
) -> AdminRoot:
    """
    Build (or extend) an admin tree with the cleaner category and the settings
    page of every registered cleaner that provides one.
    """
    root = admin_root or AdminRoot()
    section = settings.settings_section
    if root.locate(section) is None:
        root.add(root.name, AdminCategory(name=section, visible_name="Data cleaner"))

    for info in registry.get_plugins_of_type().values():
        await info.load_settings(root, section, has_site_config, db)

    logger.debug("Admin tree built with %d cleaner pages", len(root.locate(section).children))
    return root
