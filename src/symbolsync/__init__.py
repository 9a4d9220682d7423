"""Public API surface for symbolsync."""

__version__ = "1.0.0"

from symbolsync.config import load_config
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
from symbolsync.engine import LayerSynchronizer
from symbolsync.layers import RenderableLayer, SelectionController
from symbolsync.manager import SymbolManager
from symbolsync.naming import generate_unique_name, split_suffix
from symbolsync.observable import ObservableList, ObservableValue, Subscription
from symbolsync.persistence import JsonFileKeyValueStore, MemoryKeyValueStore, SymbolStore
from symbolsync.sdk import MarkerSet
from symbolsync.symbols import Placemark, TacticalSymbol

__all__ = [
    "LAYER_NAME_MARKERS",
    "STORAGE_KEY_MARKERS",
    "ArrayChange",
    "ChangeStatus",
    "ConfigError",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "LayerError",
    "LayerSynchronizer",
    "MarkerSet",
    "MemoryKeyValueStore",
    "NullRestoreProgress",
    "ObservableList",
    "ObservableValue",
    "Placemark",
    "Position",
    "RenderLayer",
    "RenderableLayer",
    "RestoreProgress",
    "SelectController",
    "SelectionController",
    "StorageError",
    "Subscription",
    "SymbolError",
    "SymbolManager",
    "SymbolParams",
    "SymbolRecord",
    "SymbolStore",
    "SymbolSyncConfig",
    "SymbolSyncError",
    "SyncError",
    "TacticalSymbol",
    "generate_unique_name",
    "load_config",
    "split_suffix",
]
