"""Durable key/value storage for the session (string keys, string values).

JsonFileStorage keeps one flat JSON object on disk; MemoryStorage holds the same
shape in a dict. Pairs of keys are written and removed with a single save, so a
reader never sees one key of a pair without the other.
"""

import json
from pathlib import Path

from madaris.config import DATA_DIR, STORAGE_FILENAME


def get_storage_path() -> Path:
    """Default storage file location (overridable with MADARIS_HOME)."""
    return Path(DATA_DIR) / STORAGE_FILENAME


class MemoryStorage:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set_many(self, items: dict[str, str]) -> None:
        self._data.update(items)

    def remove_many(self, keys: list[str]) -> None:
        for key in keys:
            self._data.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)


class JsonFileStorage(MemoryStorage):
    """File-backed storage. A missing or corrupt file reads as empty."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path) if path else get_storage_path()
        super().__init__(self._load())

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        """Write data to disk, then make it the current state. Raises OSError."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp.replace(self.path)
        self._data = data

    def set_many(self, items: dict[str, str]) -> None:
        self._save({**self._data, **items})

    def remove_many(self, keys: list[str]) -> None:
        if not any(key in self._data for key in keys):
            return
        self._save({k: v for k, v in self._data.items() if k not in keys})

