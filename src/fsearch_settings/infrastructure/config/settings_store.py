"""Settings store — loads/saves ``Settings`` to ``fsearch.conf``.

``load_settings`` / ``save_settings`` work on an explicit path;
``KeyFileSettingsStore`` implements ``SettingsPort`` on top of them for the
well-known per-user location resolved by ``ConfigPaths``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fsearch_settings.domain.errors import StoreError
from fsearch_settings.domain.models.settings import LoadResult, Settings, build_defaults
from fsearch_settings.domain.ports.settings_port import SettingsPort
from fsearch_settings.infrastructure.config.paths import ConfigPaths
from fsearch_settings.infrastructure.keyfile.codec import (
    FIELDS,
    READERS,
    WRITERS,
    read_locations,
    write_locations,
)
from fsearch_settings.infrastructure.keyfile.store import KeyFile

logger = logging.getLogger(__name__)


def settings_from_key_file(key_file: KeyFile) -> LoadResult:
    """Build ``Settings`` from an already parsed store.

    Every field falls back to its default on its own; the result is always
    ``ok``.
    """
    defaults = build_defaults()
    values: dict[str, dict[str, object]] = {"interface": {}, "search": {}}
    defaulted: list[str] = []

    for field in FIELDS:
        default = getattr(getattr(defaults, field.section), field.key)
        result = READERS[field.kind](key_file, field.group, field.key, default)
        values[field.section][field.key] = result.value
        if result.defaulted:
            defaulted.append(f"{field.section}.{field.key}")

    settings = Settings.model_validate(
        {**values, "locations": read_locations(key_file)}
    )
    return LoadResult(settings, True, tuple(defaulted))


def settings_to_key_file(settings: Settings) -> KeyFile:
    """Write every field and location into a fresh store."""
    key_file = KeyFile()
    for field in FIELDS:
        value = getattr(getattr(settings, field.section), field.key)
        WRITERS[field.kind](key_file, field.group, field.key, value)
    write_locations(key_file, settings.locations)
    return key_file


def load_settings(path: str | Path) -> LoadResult:
    """Load settings from the key file at *path*.

    If the file cannot be opened or parsed, ``ok`` is False and the
    returned settings are factory defaults.
    """
    try:
        key_file = KeyFile.load_from_file(path)
    except StoreError as exc:
        logger.error("load config failed: %s", exc)
        return LoadResult(build_defaults(), False)

    logger.info("loaded config file %s", path)
    return settings_from_key_file(key_file)


def save_settings(path: str | Path, settings: Settings) -> bool:
    """Save *settings* to *path*; False if the file could not be committed.

    The store is built completely in memory before the file is replaced,
    so a failed save leaves any previous file intact.
    """
    key_file = settings_to_key_file(settings)
    try:
        key_file.save_to_file(path)
    except StoreError as exc:
        logger.error("save config failed: %s", exc)
        return False

    logger.info("saved config file %s", path)
    return True


class KeyFileSettingsStore(SettingsPort):
    """Concrete implementation of :class:`SettingsPort`.

    Parameters
    ----------
    paths : ConfigPaths | None
        Where the settings file lives (defaults to the user config root).
    """

    def __init__(self, paths: ConfigPaths | None = None) -> None:
        self._paths = paths or ConfigPaths()

    # -- Public API ----------------------------------------------------------

    def load(self) -> LoadResult:
        """Load settings from the user's ``fsearch.conf``."""
        return load_settings(self._paths.config_path)

    def load_or_default(self) -> Settings:
        """Load settings, using factory defaults if the file is unusable."""
        result = self.load()
        if not result.ok:
            logger.info("Using default settings")
        return result.settings

    def save(self, settings: Settings) -> bool:
        """Create the config directory if needed, then save."""
        if not self._paths.ensure_config_dir():
            return False
        return save_settings(self._paths.config_path, settings)

    def reset_to_defaults(self) -> Settings:
        """Delete the persisted file and return factory defaults."""
        self._paths.config_path.unlink(missing_ok=True)
        return build_defaults()

    @property
    def paths(self) -> ConfigPaths:
        return self._paths

    @property
    def settings_path(self) -> Path:
        """Absolute path to the settings file."""
        return self._paths.config_path
