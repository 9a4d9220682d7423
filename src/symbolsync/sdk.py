"""SDK composition root: a manager, its layer and its store wired from config."""

from __future__ import annotations

import asyncio

from symbolsync.contracts.config import SymbolSyncConfig
from symbolsync.contracts.progress import RestoreProgress
from symbolsync.contracts.store import KeyValueStore
from symbolsync.layers import RenderableLayer, SelectionController
from symbolsync.manager import SymbolManager
from symbolsync.observable import Scheduler
from symbolsync.persistence import JsonFileKeyValueStore, SymbolStore


class MarkerSet:
    """Ready-to-use marker collection backed by a durable store.

    Build one with :meth:`from_config`, call :meth:`restore` once at startup
    and :meth:`save` after mutating :attr:`manager`.
    """

    def __init__(
        self,
        config: SymbolSyncConfig,
        *,
        store: KeyValueStore | None = None,
        scheduler: Scheduler | None = None,
        progress: RestoreProgress | None = None,
    ) -> None:
        self.config = config
        self.layer = RenderableLayer(config.layer_name)
        self.selection = SelectionController()
        self.manager = SymbolManager(self.layer, self.selection, scheduler=scheduler)
        self.store = SymbolStore(
            self.manager,
            store if store is not None else JsonFileKeyValueStore(config.store_path),
            key=config.storage_key,
            progress=progress,
        )

    @classmethod
    def from_config(
        cls,
        config: SymbolSyncConfig,
        *,
        store: KeyValueStore | None = None,
        scheduler: Scheduler | None = None,
        progress: RestoreProgress | None = None,
    ) -> MarkerSet:
        if config.deferred and scheduler is None:
            scheduler = asyncio.get_running_loop().call_soon
        return cls(config, store=store, scheduler=scheduler, progress=progress)

    def restore(self) -> int:
        restored = self.store.restore()
        self.manager.flush()
        return restored

    def save(self) -> int:
        self.manager.flush()
        return self.store.save()

    def close(self) -> None:
        self.manager.close()
