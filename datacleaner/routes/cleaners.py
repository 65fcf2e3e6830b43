"""
Cleaner Administration Routes

GET    /api/v1/cleaners               → list cleaners and the management URL
GET    /api/v1/cleaners/ordered       → enabled cleaners in priority order
POST   /api/v1/cleaners/run           → run enabled cleaners
GET    /api/v1/cleaners/{name}        → get single cleaner
POST   /api/v1/cleaners/{name}/enable → enable cleaner
POST   /api/v1/cleaners/{name}/disable → disable cleaner
DELETE /api/v1/cleaners/{name}        → uninstall cleaner (delete its config)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from datacleaner.database import get_db
from datacleaner.plugins.loader import uninstall_cleaner
from datacleaner.plugins.plugininfo import CleanerInfo
from datacleaner.plugins.registry import CleanerRegistry
from datacleaner.routes.dependencies import get_registry
from datacleaner.services import cleaner_service

router = APIRouter(tags=["Cleaners"])
logger = logging.getLogger(__name__)


# ── Pydantic schemas ───────────────────────────────────────────────────────────


class CleanerResponse(BaseModel):
    name: str
    display_name: str
    description: str
    version: str
    installed_version: str | None
    priority: int
    enabled: bool
    uninstall_allowed: bool
    settings_section: str | None
    settings_url: str | None


class CleanerListResponse(BaseModel):
    manage_url: str
    cleaners: list[CleanerResponse]


class CleanerRunResult(BaseModel):
    name: str
    priority: int
    result: dict[str, Any]


class CleanerRunResponse(BaseModel):
    dry_run: bool
    results: list[CleanerRunResult]


class UninstallResponse(BaseModel):
    name: str
    removed: int


# ── Routes ─────────────────────────────────────────────────────────────────────


@router.get("", response_model=CleanerListResponse)
async def list_cleaners(
    db: AsyncSession = Depends(get_db),
    registry: CleanerRegistry = Depends(get_registry),
) -> CleanerListResponse:
    """List all registered cleaners with their state."""
    cleaners = [
        CleanerResponse(**await cleaner_service.describe(info, db)) for info in registry.get_plugins_of_type().values()
    ]
    return CleanerListResponse(manage_url=str(CleanerInfo.get_manage_url()), cleaners=cleaners)


@router.get("/ordered", response_model=list[CleanerResponse])
async def list_ordered_cleaners(
    db: AsyncSession = Depends(get_db),
    registry: CleanerRegistry = Depends(get_registry),
) -> list[CleanerResponse]:
    """Enabled cleaners in the order they run."""
    ordered = await CleanerInfo.get_enabled_plugins_by_priority(db, registry)
    return [CleanerResponse(**await cleaner_service.describe(info, db)) for info in ordered]


@router.post("/run", response_model=CleanerRunResponse)
async def run_cleaners(
    dry_run: bool = False,
    db: AsyncSession = Depends(get_db),
    registry: CleanerRegistry = Depends(get_registry),
) -> CleanerRunResponse:
    """Run every enabled cleaner.  With dry_run=true nothing is changed."""
    results = await cleaner_service.run_cleaners(registry, db, dry_run=dry_run)
    return CleanerRunResponse(dry_run=dry_run, results=[CleanerRunResult(**r) for r in results])


@router.get("/{name}", response_model=CleanerResponse)
async def get_cleaner(
    name: str,
    db: AsyncSession = Depends(get_db),
    registry: CleanerRegistry = Depends(get_registry),
) -> CleanerResponse:
    info = registry.get_info(name)
    return CleanerResponse(**await cleaner_service.describe(info, db))


@router.post("/{name}/enable", response_model=CleanerResponse)
async def enable_cleaner(
    name: str,
    db: AsyncSession = Depends(get_db),
    registry: CleanerRegistry = Depends(get_registry),
) -> CleanerResponse:
    info = await cleaner_service.set_enabled(name, True, registry, db)
    return CleanerResponse(**await cleaner_service.describe(info, db))


@router.post("/{name}/disable", response_model=CleanerResponse)
async def disable_cleaner(
    name: str,
    db: AsyncSession = Depends(get_db),
    registry: CleanerRegistry = Depends(get_registry),
) -> CleanerResponse:
    info = await cleaner_service.set_enabled(name, False, registry, db)
    return CleanerResponse(**await cleaner_service.describe(info, db))


@router.delete("/{name}", response_model=UninstallResponse)
async def delete_cleaner(
    name: str,
    db: AsyncSession = Depends(get_db),
    registry: CleanerRegistry = Depends(get_registry),
) -> UninstallResponse:
    """Uninstall a cleaner by deleting all of its stored config."""
    removed = await uninstall_cleaner(name, registry, db)
    return UninstallResponse(name=name, removed=removed)
