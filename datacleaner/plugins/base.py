"""
Cleaner Base Classes

CleanerMeta: declarative manifest for a cleaner (name, version, priority, settings defaults).
CleanerBase: abstract base class all cleaners must subclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from datacleaner.admin.tree import AdminSettingPage
    from datacleaner.plugins.plugininfo import CleanerInfo

DEFAULT_PRIORITY = 100


@dataclass
class CleanerMeta:
    """
    Declarative manifest describing a cleaner.

    Attributes:
        name:         Machine-readable slug, e.g. "core_config".
        version:      Version string; compared with the installed version.
        description:  Human-readable description shown in admin UI.
        display_name: Title of the cleaner's settings page (defaults to name).
        priority:     Ordering hint, lower values run first.
        author:       Cleaner author.
        defaults:     Config values written at install time.
    """

    name: str
    version: str
    description: str
    display_name: str = ""
    priority: int = DEFAULT_PRIORITY
    author: str = "Data Cleaner Team"
    defaults: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = self.name


class CleanerBase(ABC):
    """
    Abstract base class for all cleaners.

    Subclasses must implement `meta` and `execute`.  Cleaners that expose an
    admin settings page override `build_settings`.
    """

    @property
    @abstractmethod
    def meta(self) -> CleanerMeta:
        """Return the cleaner's manifest."""
        ...

    @property
    def has_settings(self) -> bool:
        """True when this cleaner defines its own settings page."""
        return type(self).build_settings is not CleanerBase.build_settings

    def build_settings(self, page: AdminSettingPage, plugininfo: CleanerInfo) -> AdminSettingPage | None:
        """
        Populate the cleaner's admin settings page.

        Receives a fresh page already gated by capability and hidden when the
        cleaner is disabled.  May add settings to it, return a different page,
        or return None to suppress the page entirely.
        """
        return page

    @abstractmethod
    async def execute(self, db: AsyncSession, config: dict[str, Any], dry_run: bool = False) -> dict[str, Any]:
        """
        Run the cleaning step.

        Args:
            db:      Session on the site database.
            config:  The cleaner's stored config (cleaner_<name> namespace).
            dry_run: Report what would change without changing it.

        Returns:
            A summary dict included in the run report.
        """
