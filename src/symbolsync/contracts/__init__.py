"""Contracts-domain exports."""

from symbolsync.contracts.changes import ArrayChange, ChangeStatus
from symbolsync.contracts.config import LAYER_NAME_MARKERS, STORAGE_KEY_MARKERS, SymbolSyncConfig
from symbolsync.contracts.exceptions import (
    ConfigError,
    LayerError,
    StorageError,
    SymbolError,
    SymbolSyncError,
    SyncError,
)
from symbolsync.contracts.layer import RenderLayer, SelectController
from symbolsync.contracts.progress import NullRestoreProgress, RestoreProgress
from symbolsync.contracts.store import KeyValueStore
from symbolsync.contracts.symbol import Position, SymbolParams, SymbolRecord

__all__ = [
    "LAYER_NAME_MARKERS",
    "STORAGE_KEY_MARKERS",
    "ArrayChange",
    "ChangeStatus",
    "ConfigError",
    "KeyValueStore",
    "LayerError",
    "NullRestoreProgress",
    "Position",
    "RenderLayer",
    "RestoreProgress",
    "SelectController",
    "StorageError",
    "SymbolError",
    "SymbolParams",
    "SymbolRecord",
    "SymbolSyncConfig",
    "SymbolSyncError",
    "SyncError",
]
