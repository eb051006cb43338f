"""Settings file management with validation and change notifications."""

from __future__ import annotations

import json
import os
import sys
from copy import deepcopy
from pathlib import Path
from typing import Any

from jsonschema import ValidationError
from PySide6.QtCore import QObject, Signal

from ..errors import SettingsLoadError, SettingsValidationError
from .schema import DEFAULT_SETTINGS, merge_with_defaults

_APP_DIR = "photopost"
_SETTINGS_FILE = "settings.json"


def default_settings_path() -> Path:
    """Return where photopost keeps settings.json on this platform."""

    if os.name == "nt":
        config_root = os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        config_root = Path.home() / "Library" / "Application Support"
    else:
        config_root = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(config_root) / _APP_DIR / _SETTINGS_FILE


class SettingsManager(QObject):
    """Load, validate and persist user settings for the application."""

    settingsChanged = Signal(str, object)

    def __init__(self, path: Path | None = None) -> None:
        super().__init__()
        self._path = path
        self._data: dict[str, Any] = deepcopy(DEFAULT_SETTINGS)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def load(self) -> None:
        """Load the settings JSON from disk, creating defaults if missing."""

        path = self._path or default_settings_path()
        self._path = path
        if path.exists():
            try:
                payload = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as exc:
                raise SettingsLoadError(str(exc)) from exc
        else:
            payload = None
        if payload is not None and not isinstance(payload, dict):
            raise SettingsValidationError("settings root must be an object")
        try:
            self._data = merge_with_defaults(payload)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc
        self._write()

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return the value for *key*; ``section.name`` reads inside a section."""

        section, _, name = key.partition(".")
        value = self._data.get(section, default)
        if not name:
            return value
        if not isinstance(value, dict):
            return default
        return value.get(name, default)

    def set(self, key: str, value: Any) -> None:
        """Update *key* with *value* and persist the change.

        The previous settings are kept when the update fails validation.
        """

        if isinstance(value, Path):
            value = str(value)

        candidate = deepcopy(self._data)
        parts = key.split(".")
        target: dict[str, Any] = candidate
        for part in parts[:-1]:
            branch = target.get(part)
            if not isinstance(branch, dict):
                branch = {}
                target[part] = branch
            target = branch
        target[parts[-1]] = value
        try:
            self._data = merge_with_defaults(candidate)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc
        self._write()
        self.settingsChanged.emit(key, value)

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _write(self) -> None:
        path = self._path or default_settings_path()
        self._path = path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self._data, indent=2, ensure_ascii=False), encoding="utf-8")


__all__ = ["SettingsManager", "default_settings_path"]
