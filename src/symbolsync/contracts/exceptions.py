"""Exception hierarchy for symbolsync."""

from __future__ import annotations

from typing import Any


class SymbolSyncError(Exception):
    """Base exception for all symbolsync errors."""


class ConfigError(SymbolSyncError):
    """Configuration loading or validation failure."""


class StorageError(SymbolSyncError):
    """Durable key-value store read/write failure."""


class LayerError(SymbolSyncError):
    """Render layer rejected a mutation."""


class SymbolError(SymbolSyncError):
    """Symbol construction or capability failure."""


class SyncError(SymbolSyncError):
    """Synchronizer could not mirror a collection change onto the layer.

    The rejected symbol has already been rolled back out of the collection.
    """

    def __init__(self, message: str, *, symbol: Any = None) -> None:
        super().__init__(message)
        self.symbol = symbol
