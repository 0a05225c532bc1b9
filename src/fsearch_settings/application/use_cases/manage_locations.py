"""Use Case: Manage Locations.

Edit the ordered list of search roots, persisted via SettingsPort.
"""

from fsearch_settings.domain.errors import LocationNotFoundError
from fsearch_settings.domain.models.settings import Settings, build_defaults
from fsearch_settings.domain.ports.settings_port import SettingsPort


class ManageLocationsUseCase:
    """Add / remove / reorder locations, then save them with the settings."""

    def __init__(self, port: SettingsPort) -> None:
        self._port = port
        self._settings = build_defaults()
        self._loaded = False

    # -- Persistence ---------------------------------------------------------

    def load(self) -> list[str]:
        """Load settings from storage (defaults if the store is unusable)."""
        result = self._port.load()
        self._settings = result.settings
        self._loaded = result.ok
        return self.locations

    def save(self) -> bool:
        """Save the current settings, including the edited locations."""
        return self._port.save(self._settings)

    # -- Editing -------------------------------------------------------------

    def add(self, location: str) -> None:
        """Append a location; duplicates are kept."""
        self._settings.locations.append(location)

    def remove(self, index: int) -> str:
        """Remove and return the location at *index*."""
        self._check_index(index)
        return self._settings.locations.pop(index)

    def move(self, index: int, new_index: int) -> None:
        """Move the location at *index* so that it ends up at *new_index*."""
        self._check_index(index)
        self._check_index(new_index)
        location = self._settings.locations.pop(index)
        self._settings.locations.insert(new_index, location)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._settings.locations):
            raise LocationNotFoundError(f"No location at index {index}.")

    @property
    def locations(self) -> list[str]:
        """A copy of the current locations, in order."""
        return list(self._settings.locations)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def loaded(self) -> bool:
        """True if the last load read an actual settings file."""
        return self._loaded
