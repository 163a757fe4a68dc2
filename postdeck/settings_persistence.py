"""Settings persistence for editor preferences.

Preferences such as the undo history ceiling are stored as JSON in an
OS-appropriate config directory and survive application restarts. Undo
history itself is never written here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import HistoryConstants

logger = logging.getLogger(__name__)


class SettingsPersistence:
    """Manages persistent storage of editor settings."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize settings persistence.

        Args:
            config_dir: Directory holding the settings file. Defaults to the
                platform's user config directory for postdeck.
        """
        if config_dir is None:
            config_dir = Path(platformdirs.user_config_dir(HistoryConstants.APP_NAME))
        self._config_dir = Path(config_dir)
        self._settings_file = self._config_dir / HistoryConstants.SETTINGS_FILENAME
        self._settings_cache: Optional[Dict[str, Any]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _ensure_config_dir(self) -> None:
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def load_settings(self) -> Dict[str, Any]:
        """Load settings from disk.

        Returns:
            A copy of the stored settings. Empty dict if the file doesn't
            exist, can't be read, or doesn't hold a JSON object.
        """
        if self._settings_cache is None:
            self._settings_cache = self._read_settings_file()
        return dict(self._settings_cache)

    def _read_settings_file(self) -> Dict[str, Any]:
        if not self._settings_file.exists():
            return {}
        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def save_settings(self, settings: Dict[str, Any]) -> bool:
        """Save settings to disk atomically.

        Returns:
            True if save was successful, False otherwise.
        """
        self._ensure_config_dir()
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False
        self._settings_cache = dict(settings)
        return True

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Unknown keys are accepted so that newer settings files still load.
        """
        if value is None:
            return True

        if key == HistoryConstants.MAX_HISTORY_SETTING:
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            return HistoryConstants.MIN_MAX_SIZE <= value <= HistoryConstants.MAX_MAX_SIZE

        return True

    def get_max_history_size(self) -> int:
        """Return the configured history ceiling, or the default."""
        key = HistoryConstants.MAX_HISTORY_SETTING
        value = self.load_settings().get(key)
        if value is None:
            return HistoryConstants.DEFAULT_MAX_SIZE
        if not self.validate_setting(key, value):
            logger.warning(f"Ignoring invalid {key} setting: {value!r}")
            return HistoryConstants.DEFAULT_MAX_SIZE
        return value

    def set_max_history_size(self, value: int) -> bool:
        key = HistoryConstants.MAX_HISTORY_SETTING
        if value is None or not self.validate_setting(key, value):
            logger.warning(f"Refusing to store invalid {key} setting: {value!r}")
            return False
        settings = self.load_settings()
        settings[key] = value
        return self.save_settings(settings)

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


# Global instance
_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the global settings persistence instance."""
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
