"""fsearch-settings — persistence for the file search application's settings."""

from fsearch_settings.domain.models.settings import LoadResult, Settings, build_defaults
from fsearch_settings.infrastructure.config.paths import ConfigPaths
from fsearch_settings.infrastructure.config.settings_store import (
    KeyFileSettingsStore,
    load_settings,
    save_settings,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigPaths",
    "KeyFileSettingsStore",
    "LoadResult",
    "Settings",
    "build_defaults",
    "load_settings",
    "save_settings",
]
