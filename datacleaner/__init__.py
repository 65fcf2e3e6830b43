"""
Data cleaner: sub-plugin type descriptor for "cleaner" plugins.

Cleaners are small plugins that scrub or reset site data. This package
knows how to enumerate them, order them by priority, track which ones are
enabled and expose their admin settings pages.
"""

__version__ = "1.0.0"
