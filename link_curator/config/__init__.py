"""Configuration module - settings and environment management."""

from link_curator.config.settings import (
    ConfigurationError,
    Settings,
    load_settings,
)

__all__ = [
    "ConfigurationError",
    "Settings",
    "load_settings",
]
