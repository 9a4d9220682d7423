"""Persistence helpers: the symbol store adapter and key-value backends."""

from symbolsync.persistence.backends import JsonFileKeyValueStore, MemoryKeyValueStore
from symbolsync.persistence.symbol_store import SymbolStore

__all__ = ["JsonFileKeyValueStore", "MemoryKeyValueStore", "SymbolStore"]
