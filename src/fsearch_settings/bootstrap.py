"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. Other layers refer to ``SettingsPort``.
"""

from __future__ import annotations

from pathlib import Path

from fsearch_settings.application.use_cases.manage_locations import ManageLocationsUseCase
from fsearch_settings.domain.ports.settings_port import SettingsPort
from fsearch_settings.infrastructure.config.paths import ConfigPaths
from fsearch_settings.infrastructure.config.settings_store import KeyFileSettingsStore


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container(config_root=tmp_path)
        uc = container.manage_locations()
        uc.load()
        uc.add("/home/user")
        uc.save()
    """

    def __init__(self, config_root: Path | str | None = None) -> None:
        self._paths = ConfigPaths(config_root)
        self._settings_store = KeyFileSettingsStore(self._paths)

    @property
    def paths(self) -> ConfigPaths:
        return self._paths

    @property
    def settings_store(self) -> SettingsPort:
        return self._settings_store

    def manage_locations(self) -> ManageLocationsUseCase:
        return ManageLocationsUseCase(self._settings_store)
