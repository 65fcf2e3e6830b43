"""
Cleaner Sub-Plugin System

Public API:
    CleanerMeta      : cleaner manifest dataclass
    CleanerBase      : abstract base class for all cleaners
    CleanerInfo      : plugin info descriptor (enabled state, priority, settings)
    CleanerRegistry  : registry of present cleaners
    cleaner_registry : registry instance used by the web app
"""

from .base import CleanerBase, CleanerMeta
from .plugininfo import CleanerInfo
from .registry import CleanerRegistry, cleaner_registry

__all__ = ["CleanerBase", "CleanerInfo", "CleanerMeta", "CleanerRegistry", "cleaner_registry"]
