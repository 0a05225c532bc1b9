"""Domain models for fsearch-settings."""

from fsearch_settings.domain.models.settings import (
    InterfaceSettings,
    LoadResult,
    SearchSettings,
    Settings,
    build_defaults,
)

__all__ = [
    "InterfaceSettings",
    "LoadResult",
    "SearchSettings",
    "Settings",
    "build_defaults",
]
