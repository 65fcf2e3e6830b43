"""
Admin Settings Routes

GET /admin/settings?section=<name>  → JSON of an admin tree node
PUT /admin/settings?section=<name>  → update setting values on a page

The tree is rebuilt per request from the registry and the config store.
Cleaner pages only appear for callers holding the site:config capability.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from datacleaner.admin.builder import build_admin_tree
from datacleaner.admin.tree import CAPABILITY_SITE_CONFIG, AdminCategory, AdminSettingPage, populate_values
from datacleaner.config import settings
from datacleaner.database import get_db
from datacleaner.exceptions import AdminNodeNotFoundError, InvalidSettingError
from datacleaner.plugins.registry import CleanerRegistry
from datacleaner.routes.dependencies import get_capabilities, get_registry
from datacleaner.services import config_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Settings"])


class SettingsUpdate(BaseModel):
    values: dict[str, str | None]


async def _locate(
    section: str, registry: CleanerRegistry, db: AsyncSession, capabilities: set[str]
) -> AdminCategory | AdminSettingPage:
    root = await build_admin_tree(registry, db, has_site_config=CAPABILITY_SITE_CONFIG in capabilities)
    node = root.locate(section)
    if node is None:
        raise AdminNodeNotFoundError(section)
    return node


async def _serialise(node: AdminCategory | AdminSettingPage, db: AsyncSession) -> dict[str, Any]:
    if isinstance(node, AdminSettingPage):
        await populate_values(node, db)
    else:
        for child in node.children:
            if isinstance(child, AdminSettingPage):
                await populate_values(child, db)
    return node.to_dict()


@router.get("/settings")
async def get_settings_section(
    section: str = settings.settings_section,
    db: AsyncSession = Depends(get_db),
    registry: CleanerRegistry = Depends(get_registry),
    capabilities: set[str] = Depends(get_capabilities),
) -> dict[str, Any]:
    """Return an admin settings section with current values."""
    node = await _locate(section, registry, db, capabilities)
    return await _serialise(node, db)


@router.put("/settings")
async def update_settings_section(
    data: SettingsUpdate,
    section: str,
    db: AsyncSession = Depends(get_db),
    registry: CleanerRegistry = Depends(get_registry),
    capabilities: set[str] = Depends(get_capabilities),
) -> dict[str, Any]:
    """
    Store new values for settings on a page.

    Every key must name a setting on the page; None deletes the stored value.
    """
    node = await _locate(section, registry, db, capabilities)
    if not isinstance(node, AdminSettingPage):
        raise AdminNodeNotFoundError(section)

    for name in data.values:
        if node.get_setting(name) is None:
            raise InvalidSettingError(section, name)

    for name, value in data.values.items():
        setting = node.get_setting(name)
        await config_service.set_config(setting.plugin, setting.name, value, db)

    logger.info("Settings section %s updated: %s", section, list(data.values))
    return await _serialise(node, db)
