"""Settings and one-call setup."""

from browserkit.config.settings import BrowserkitSettings, clear_settings_cache, get_settings
from browserkit.config.setup import basic_config

__all__ = [
    "BrowserkitSettings",
    "basic_config",
    "clear_settings_cache",
    "get_settings",
]
