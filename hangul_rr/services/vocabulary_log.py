from __future__ import annotations

"""Vocabulary log: Hangul words with a free-text description.

Entries are kept sorted by Hangul (display order) and a cursor (`index`)
follows the current entry across inserts and removals.

File format (YAML):

    entries:
      - hangul: 한국
        description: Korea
"""

import bisect
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from hangul_rr.domain.errors import HangulError
from hangul_rr.domain.hangul import Hangul

logger = logging.getLogger(__name__)


class VocabularyLog:
    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._keys: list[Hangul] = []
        self._descriptions: list[str] = []
        self._index = 0

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._keys)

    def entries(self) -> list[tuple[Hangul, str]]:
        return list(zip(self._keys, self._descriptions))

    def current_entry(self) -> Optional[tuple[Hangul, str]]:
        if 0 <= self._index < len(self._keys):
            return self._keys[self._index], self._descriptions[self._index]
        return None

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def insert_entry(self, hangul: Hangul, description: str) -> Optional[tuple[Hangul, str]]:
        """Insert or replace an entry; returns the replaced one, if any."""
        key = hangul.copy()
        current = self.current_entry()
        i = bisect.bisect_left(self._keys, key)

        if i < len(self._keys) and self._keys[i] == key:
            replaced = (self._keys[i], self._descriptions[i])
            self._keys[i] = key
            self._descriptions[i] = description
            return replaced

        self._keys.insert(i, key)
        self._descriptions.insert(i, description)
        if current is None:
            self._index = 0
        elif key < current[0]:
            self._index += 1
        return None

    def remove_entry(self, hangul: Hangul) -> Optional[tuple[Hangul, str]]:
        i = bisect.bisect_left(self._keys, hangul)
        if i >= len(self._keys) or self._keys[i] != hangul:
            return None

        removed = (self._keys.pop(i), self._descriptions.pop(i))
        if i < self._index or self._index >= len(self._keys):
            self._index = max(0, self._index - 1)
        return removed

    def index_at(self, hangul: Hangul) -> bool:
        i = bisect.bisect_left(self._keys, hangul)
        if i < len(self._keys) and self._keys[i] == hangul:
            self._index = i
            return True
        return False

    def select(self, index: int) -> None:
        """Move the cursor, clamped to the existing entries."""
        self._index = max(0, min(index, len(self._keys) - 1))

    def clear(self) -> None:
        self._keys.clear()
        self._descriptions.clear()
        self._index = 0

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Replace the in-memory entries with the file's content.

        Failure is non-fatal: a missing or unreadable file yields an empty log,
        and malformed rows are skipped.
        """
        self.clear()
        data = self._read_yaml()
        rows = data.get("entries") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            return

        for row in rows:
            if not isinstance(row, dict):
                logger.error("Skipping malformed log row: %r", row)
                continue
            text = row.get("hangul")
            description = row.get("description", "")
            if not isinstance(text, str) or not text:
                logger.error("Skipping log row without hangul: %r", row)
                continue
            try:
                hangul = Hangul.from_str(text)
            except HangulError as e:
                logger.error("Skipping log row %r: %s", text, e)
                continue
            self.insert_entry(hangul, str(description or ""))
        self._index = 0

    def save(self) -> None:
        if self._path is None:
            return
        data = {
            "entries": [
                {"hangul": str(h), "description": d}
                for h, d in zip(self._keys, self._descriptions)
            ]
        }
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to save vocabulary log %s: %s", self._path, e)

    def _read_yaml(self) -> Any:
        p = self._path
        if p is None or not p.exists() or not p.is_file():
            return None
        try:
            raw = p.read_text(encoding="utf-8")
        except (OSError, UnicodeError) as e:
            logger.warning("Failed to read vocabulary log %s: %s", p, e)
            return None
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            logger.warning("Malformed vocabulary log %s: %s", p, e)
            return None
