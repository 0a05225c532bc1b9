"""Config paths — where ``fsearch.conf`` lives.

``<user-config-root>/fsearch/fsearch.conf``, with the root taken from
``platformdirs`` (``~/.config`` on Linux) unless one is injected.
"""

from __future__ import annotations

import logging
from pathlib import Path

import platformdirs

logger = logging.getLogger(__name__)

CONFIG_FOLDER_NAME = "fsearch"
CONFIG_FILE_NAME = "fsearch.conf"


class ConfigPaths:
    """Resolve the settings directory and file.

    Parameters
    ----------
    config_root : Path | None
        Override the user configuration root (useful for testing).
    folder_name, file_name : str
        Names of the application folder and the settings file.
    """

    def __init__(
        self,
        config_root: Path | str | None = None,
        folder_name: str = CONFIG_FOLDER_NAME,
        file_name: str = CONFIG_FILE_NAME,
    ) -> None:
        self._config_root = Path(config_root) if config_root else Path(
            platformdirs.user_config_dir()
        )
        self._folder_name = folder_name
        self._file_name = file_name

    def resolve_dir(self) -> Path:
        return self._config_root / self._folder_name

    def resolve_path(self) -> Path:
        return self.resolve_dir() / self._file_name

    @property
    def config_dir(self) -> Path:
        """Directory holding the settings file."""
        return self.resolve_dir()

    @property
    def config_path(self) -> Path:
        """Absolute path to the settings file."""
        return self.resolve_path()

    def ensure_config_dir(self) -> bool:
        """Create the settings directory (owner-only) if it does not exist."""
        config_dir = self.resolve_dir()
        try:
            config_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Cannot create config directory %s: %s", config_dir, exc)
            return False
        return True
