from .config_plugin import ConfigPlugin

__all__ = [
    "ConfigPlugin",
]
