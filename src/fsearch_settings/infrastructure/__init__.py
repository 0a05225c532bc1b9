"""Infrastructure layer — key file storage and config paths."""

from fsearch_settings.infrastructure.config.paths import ConfigPaths
from fsearch_settings.infrastructure.config.settings_store import KeyFileSettingsStore
from fsearch_settings.infrastructure.keyfile.store import KeyFile

__all__ = [
    "ConfigPaths",
    "KeyFile",
    "KeyFileSettingsStore",
]
