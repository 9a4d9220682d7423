"""Durable key-value store contract."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """String slots addressed by key, surviving process restarts."""

    @abstractmethod
    def get(self, key: str) -> str | None: ...  # pragma: no cover

    @abstractmethod
    def set(self, key: str, value: str) -> None: ...  # pragma: no cover

    @abstractmethod
    def delete(self, key: str) -> None: ...  # pragma: no cover
