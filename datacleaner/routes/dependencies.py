"""
Shared route dependencies.
"""

from fastapi import Header

from datacleaner.plugins.registry import CleanerRegistry, cleaner_registry


def get_registry() -> CleanerRegistry:
    """Return the registry routes operate on (overridden in tests)."""
    return cleaner_registry


def get_capabilities(x_capabilities: str | None = Header(default=None)) -> set[str]:
    """Capabilities granted to the caller, sent as a comma-separated header."""
    if not x_capabilities:
        return set()
    return {cap.strip() for cap in x_capabilities.split(",") if cap.strip()}
