from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Final

import yaml

from hangul_rr.domain.hangul_parser import BREAK_CHARACTERS

logger = logging.getLogger(__name__)


DEFAULT_LOG_FILENAME: Final[str] = "hangul-log.yaml"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _project_root() -> Path:
    # hangul_rr/services/settings_store.py -> hangul_rr/services -> hangul_rr -> <project_root>
    return Path(__file__).resolve().parents[2]


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the parser, vocabulary log and logging

    Notes:
      - A missing or malformed file behaves like an empty mapping.
      - Relative paths in the file resolve against the file's own directory.
    """

    def __init__(self, settings_path: str | Path | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml
            self._path = _project_root() / "settings.yaml"
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
        except (OSError, UnicodeError, yaml.YAMLError) as e:
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

    def get_break_characters(self) -> str:
        v = self.load().get("break_characters")
        if isinstance(v, str) and v:
            return v
        return BREAK_CHARACTERS

    def get_log_path(self) -> Path:
        v = self.load().get("log_path")
        if isinstance(v, str) and v.strip():
            p = Path(v.strip()).expanduser()
            return p if p.is_absolute() else self._path.parent / p
        return self._path.parent / DEFAULT_LOG_FILENAME

    def set_log_path(self, path: str | Path) -> None:
        s = self.load()
        s["log_path"] = str(path)
        self.save(s)

    def get_log_level(self) -> str:
        v = self.load().get("log_level")
        if isinstance(v, str) and v.strip().upper() in _LOG_LEVELS:
            return v.strip().upper()
        return DEFAULT_LOG_LEVEL
