"""Port (ABC) for settings persistence.

Domain layer interface — infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fsearch_settings.domain.models.settings import LoadResult, Settings


class SettingsPort(ABC):
    """Abstract interface for loading / saving application settings."""

    @abstractmethod
    def load(self) -> LoadResult:
        """Load persisted settings; ``ok`` is False if the store is unusable."""

    @abstractmethod
    def save(self, settings: Settings) -> bool:
        """Persist the given settings, returning False if the commit failed."""

    @abstractmethod
    def reset_to_defaults(self) -> Settings:
        """Delete persisted settings and return factory defaults."""
