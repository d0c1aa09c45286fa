"""Settings file management with validation and change notifications."""

from __future__ import annotations

import os
import sys
from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping, Optional

from jsonschema import ValidationError

from ..config import API_URL_ENV_VAR, RECENT_DATASETS_LIMIT
from ..errors import SettingsLoadError, SettingsValidationError
from ..gui.viewmodels.signal import Signal
from ..utils.jsonio import read_json, write_json
from .schema import DEFAULT_SETTINGS, merge_with_defaults


def default_settings_path() -> Path:
    """Return the default settings.json location for the current platform."""

    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "iGallery" / "settings.json"
        return Path.home() / "AppData" / "Roaming" / "iGallery" / "settings.json"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "iGallery" / "settings.json"
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "iGallery" / "settings.json"
    return Path.home() / ".config" / "iGallery" / "settings.json"


class SettingsManager:
    """Load, validate and persist user settings for the application.

    ``settings_changed`` is emitted with ``(key, value)`` after every
    successful :meth:`set`.
    """

    def __init__(self, path: Path | None = None, environ: Optional[Mapping[str, str]] = None) -> None:
        self._path = path
        self._environ = os.environ if environ is None else environ
        self._data: dict[str, Any] = deepcopy(DEFAULT_SETTINGS)
        self.settings_changed = Signal()

    @property
    def path(self) -> Path:
        return self._path or default_settings_path()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def load(self) -> None:
        """Load the settings JSON from disk, creating defaults if missing."""

        path = self.path
        self._path = path
        if path.exists():
            try:
                payload = read_json(path)
            except (OSError, ValueError) as exc:
                raise SettingsLoadError(f"Cannot read {path}: {exc}") from exc
            if not isinstance(payload, dict):
                raise SettingsLoadError(f"{path} does not contain a JSON object")
        else:
            payload = None
        try:
            self._data = merge_with_defaults(payload)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc
        self._write()

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return the value for *key*, supporting dotted access for nested keys."""

        target: Any = self._data
        parts = key.split(".")
        for index, part in enumerate(parts):
            if not isinstance(target, dict) or part not in target:
                return default
            value = target[part]
            if index == len(parts) - 1:
                return value
            target = value
        return default

    def set(self, key: str, value: Any) -> None:
        """Update *key* with *value* and persist the change."""

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
        self.settings_changed.emit(key, value)

    # ------------------------------------------------------------------
    # Convenience accessors
    # ------------------------------------------------------------------
    def api_base_url(self) -> str:
        """Return the API base URL, honouring the environment override."""

        override = self._environ.get(API_URL_ENV_VAR)
        if override:
            return override.rstrip("/")
        return self.get("api.base_url")

    def request_timeout(self) -> float:
        return float(self.get("api.timeout_sec"))

    def remember_dataset(self, dataset_name: str) -> None:
        """Move *dataset_name* to the front of the recently opened list."""

        if not dataset_name:
            return
        recent = [name for name in self.get("last_datasets", []) if name != dataset_name]
        recent.insert(0, dataset_name)
        self.set("last_datasets", recent[:RECENT_DATASETS_LIMIT])

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _write(self) -> None:
        path = self.path
        self._path = path
        write_json(path, self._data)


__all__ = ["SettingsManager", "default_settings_path"]
