"""File-backed key-value store.

Behaves like a browser's ``localStorage``: string keys map to string
values, and everything lives in a single JSON object on disk.
"""

from __future__ import annotations

import json
from pathlib import Path


class LocalStorage:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def get_item(self, key: str) -> str | None:
        """Return the value stored under *key*, or None.

        Raises ValueError if the backing file is not a JSON object.
        """
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._load()
        except ValueError:
            # An unreadable file is replaced rather than blocking writes.
            data = {}
        data[key] = value
        self._persist(data)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"{self._file_path} does not hold a JSON object")
        return raw

    def _persist(self, data: dict[str, str]) -> None:
        self._file_path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
