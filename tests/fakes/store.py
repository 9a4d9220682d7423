"""Key-value store fakes."""

from __future__ import annotations

from symbolsync.contracts.exceptions import StorageError
from symbolsync.persistence.backends import MemoryKeyValueStore


class SpyStore(MemoryKeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.get_calls: list[str] = []
        self.set_calls: list[tuple[str, str]] = []

    def get(self, key: str) -> str | None:
        self.get_calls.append(key)
        return super().get(key)

    def set(self, key: str, value: str) -> None:
        self.set_calls.append((key, value))
        super().set(key, value)


class BrokenStore(MemoryKeyValueStore):
    def set(self, key: str, value: str) -> None:
        raise StorageError("disk full")
