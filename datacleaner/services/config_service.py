"""
Config Service

Async helpers for the generic plugin configuration table.
All functions accept an injected AsyncSession.
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from datacleaner.models.config_plugin import ConfigPlugin

logger = logging.getLogger(__name__)


def as_bool(value: str | None) -> bool:
    """Interpret a stored config value as a flag ("0", "" and None are false)."""
    return value not in (None, "", "0")


async def get_config(plugin: str, name: str, db: AsyncSession) -> str | None:
    """Return the stored value for plugin/name, or None if there is no row."""
    result = await db.execute(
        select(ConfigPlugin.value).where(ConfigPlugin.plugin == plugin, ConfigPlugin.name == name)
    )
    return result.scalars().first()


async def get_plugin_config(plugin: str, db: AsyncSession) -> dict[str, str | None]:
    """Return every stored value for a plugin as a name -> value dict."""
    result = await db.execute(
        select(ConfigPlugin.name, ConfigPlugin.value).where(ConfigPlugin.plugin == plugin).order_by(ConfigPlugin.name)
    )
    return {name: value for name, value in result.all()}


async def set_config(plugin: str, name: str, value: str | int | bool | None, db: AsyncSession) -> None:
    """
    Store a config value, creating the row if needed.

    Booleans are stored as "1"/"0".  A value of None deletes the row.
    """
    if value is None:
        await unset_config(plugin, name, db)
        return
    if isinstance(value, bool):
        value = "1" if value else "0"

    result = await db.execute(
        select(ConfigPlugin).where(ConfigPlugin.plugin == plugin, ConfigPlugin.name == name)
    )
    row = result.scalars().first()
    if row is None:
        db.add(ConfigPlugin(plugin=plugin, name=name, value=str(value)))
    else:
        row.value = str(value)
    await db.commit()
    logger.debug("Config set: %s/%s=%s", plugin, name, value)


async def unset_config(plugin: str, name: str | None, db: AsyncSession) -> int:
    """
    Delete a single config row, or every row of the plugin when name is None.

    Returns the number of rows removed.
    """
    stmt = delete(ConfigPlugin).where(ConfigPlugin.plugin == plugin)
    if name is not None:
        stmt = stmt.where(ConfigPlugin.name == name)
    result = await db.execute(stmt)
    await db.commit()
    return result.rowcount or 0


async def find_plugins(plugin_pattern: str, name: str, value: str, db: AsyncSession) -> list[str]:
    """
    Return plugin namespaces matching a LIKE pattern whose `name` row equals `value`.

    Backslash escapes LIKE wildcards in the pattern.

    Results are ordered by plugin name ascending.
    """
    result = await db.execute(
        select(ConfigPlugin.plugin)
        .where(
            ConfigPlugin.plugin.like(plugin_pattern, escape="\\"),
            ConfigPlugin.name == name,
            ConfigPlugin.value == value,
        )
        .order_by(ConfigPlugin.plugin.asc())
    )
    return list(result.scalars().all())
