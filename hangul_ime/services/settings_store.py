from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from hangul_ime.domain.enums import BackspaceUnit

logger = logging.getLogger(__name__)

BACKSPACE_UNIT_KEY = "backspace_unit"
MAP_PHYSICAL_KEYS_KEY = "map_physical_keys"
KEYBOARD_VISIBLE_KEY = "keyboard_visible"


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the input-method options

    Notes:
      - Missing or malformed files read as {} so every getter has a default.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to save settings %s: %s", self._path, e)

    def _set(self, key: str, value: Any) -> None:
        s = self.load()
        s[key] = value
        self.save(s)

    def _get_bool(self, key: str, default: bool) -> bool:
        v = self.load().get(key, default)
        return v if isinstance(v, bool) else default

    def get_backspace_unit(self) -> BackspaceUnit:
        return BackspaceUnit.from_value(self.load().get(BACKSPACE_UNIT_KEY), BackspaceUnit.JAMO)

    def set_backspace_unit(self, unit: BackspaceUnit) -> None:
        self._set(BACKSPACE_UNIT_KEY, BackspaceUnit(unit).value)

    def get_map_physical_keys(self) -> bool:
        return self._get_bool(MAP_PHYSICAL_KEYS_KEY, True)

    def set_map_physical_keys(self, value: bool) -> None:
        self._set(MAP_PHYSICAL_KEYS_KEY, bool(value))

    def get_keyboard_visible(self) -> bool:
        return self._get_bool(KEYBOARD_VISIBLE_KEY, False)

    def set_keyboard_visible(self, value: bool) -> None:
        self._set(KEYBOARD_VISIBLE_KEY, bool(value))
