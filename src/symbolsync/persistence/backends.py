"""Key-value store backends."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from symbolsync.contracts.exceptions import StorageError
from symbolsync.contracts.store import KeyValueStore


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileKeyValueStore(KeyValueStore):
    """Slots kept as string values of a single JSON object on disk.

    A missing file reads as an empty store. Every ``set``/``delete`` rewrites
    the whole file through a temporary sibling that replaces it, so a failed
    write leaves the previous content in place.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload: Any = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"invalid store file: {self.path}") from exc
        if not isinstance(payload, dict):
            raise StorageError(f"invalid store file: {self.path}")
        return {str(k): v for k, v in payload.items() if isinstance(v, str)}

    def _dump(self, data: dict[str, str]) -> None:
        tmp_path: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp", delete=False
            ) as handle:
                tmp_path = Path(handle.name)
                json.dump(data, handle, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise StorageError(f"failed to write store file: {self.path}") from exc

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._dump(data)
