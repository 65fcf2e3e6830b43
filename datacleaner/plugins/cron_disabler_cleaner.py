"""
Cron Disabler Cleaner

Switches scheduled tasks off so a cleaned copy of a site never sends mail or
talks to external systems on its own.  Runs before every other cleaner.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from datacleaner.plugins.base import CleanerBase, CleanerMeta
from datacleaner.services import config_service

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

_META = CleanerMeta(
    name="cron_disabler",
    version="1.0.0",
    description="Disable scheduled tasks on the cleaned site",
    display_name="Cron disabler",
    priority=5,
)


class CronDisablerCleaner(CleanerBase):
    @property
    def meta(self) -> CleanerMeta:
        return _META

    async def execute(self, db: AsyncSession, config: dict[str, Any], dry_run: bool = False) -> dict[str, Any]:
        previous = await config_service.get_config("core", "cron_enabled", db)
        if not dry_run:
            await config_service.set_config("core", "cron_enabled", False, db)
        logger.info("cron_disabler: cron_enabled %s -> 0%s", previous, " (dry run)" if dry_run else "")
        return {"previous": previous, "cron_enabled": "0"}
