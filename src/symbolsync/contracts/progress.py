"""Observer for a restore pass over a persisted marker set.

``SymbolStore.restore`` reports the number of stored records up front, then
one outcome per record (added to the manager, or skipped with a reason), then
the final tally or the error that aborted the pass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class RestoreProgress(ABC):
    """Receives restore outcomes record by record."""

    @abstractmethod
    def started(self, total: int) -> None:
        """The slot holds *total* records."""
        ...  # pragma: no cover

    @abstractmethod
    def restored(self, symbol_id: str) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def skipped(self, reason: str) -> None:
        """A record was left out; *reason* is a short human-readable cause."""
        ...  # pragma: no cover

    @abstractmethod
    def finished(self, restored: int, skipped: int) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def failed(self, error: BaseException) -> None:
        """The pass was aborted by *error*, which the caller re-raises."""
        ...  # pragma: no cover


class NullRestoreProgress(RestoreProgress):
    def started(self, total: int) -> None:
        pass

    def restored(self, symbol_id: str) -> None:
        pass

    def skipped(self, reason: str) -> None:
        pass

    def finished(self, restored: int, skipped: int) -> None:
        pass

    def failed(self, error: BaseException) -> None:
        pass
