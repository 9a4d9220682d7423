"""Collection manager: the single source of truth for managed symbols."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from symbolsync.contracts.exceptions import SymbolError
from symbolsync.contracts.layer import RenderLayer, SelectController
from symbolsync.contracts.symbol import Position, SymbolParams
from symbolsync.engine.synchronizer import LayerSynchronizer
from symbolsync.observable import ObservableList, Scheduler
from symbolsync.symbols import TacticalSymbol

logger = logging.getLogger(__name__)

SymbolFactory = Callable[["SymbolManager", Position, SymbolParams], Any]


class SymbolManager:
    """Owns the observable symbol collection and wires it to a render layer.

    Args:
        layer: Render layer receiving one placemark per valid symbol.
        selection: Selection controller notified when a symbol goes away.
        scheduler: Optional tick scheduler (e.g. ``loop.call_soon``). Without
            one, every add/remove is mirrored before the call returns.
        factory: Symbol constructor used by :meth:`create_symbol` and restore.
    """

    def __init__(
        self,
        layer: RenderLayer,
        selection: SelectController,
        *,
        scheduler: Scheduler | None = None,
        factory: SymbolFactory = TacticalSymbol,
    ) -> None:
        self.layer = layer
        self.selection = selection
        self.factory = factory
        self._symbols: ObservableList[Any] = ObservableList(scheduler=scheduler)
        self._synchronizer = LayerSynchronizer(self._symbols, layer, selection)

    @property
    def symbols(self) -> tuple[Any, ...]:
        return self._symbols.snapshot()

    @property
    def synchronizer(self) -> LayerSynchronizer:
        return self._synchronizer

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._symbols)

    def add_symbol(self, symbol: Any) -> None:
        """Append *symbol*; its name is made unique and its placemark mirrored.

        Adding an instance that is already managed is a no-op.

        Raises:
            SymbolError: Another managed symbol already has the same id.
            SyncError: The layer rejected the placemark (the add is rolled back).
        """
        if symbol in self._symbols:
            logger.debug("symbol %s already managed", symbol.id)
            return
        if self.find_symbol(symbol.id) is not None:
            raise SymbolError(f"duplicate symbol id: {symbol.id}")
        self._symbols.append(symbol)

    def create_symbol(self, position: Position, params: SymbolParams) -> Any:
        symbol = self.factory(self, position, params)
        self.add_symbol(symbol)
        return symbol

    def find_symbol(self, symbol_id: str) -> Any | None:
        for symbol in self._symbols:
            if symbol.id == symbol_id:
                return symbol
        return None

    def remove_symbol(self, symbol: Any) -> bool:
        """Remove *symbol* by identity. Returns ``False`` if it was not managed."""
        return self._symbols.remove(symbol)

    def move_symbol(self, symbol: Any, index: int) -> bool:
        """Reorder *symbol* without touching the layer or its name."""
        return self._symbols.move(symbol, index)

    def flush(self) -> None:
        """Deliver pending collection changes now (deferred mode only)."""
        self._symbols.flush()

    def clear(self) -> None:
        """Remove every symbol, unmirroring and deselecting each one."""
        self._symbols.clear()

    def close(self) -> None:
        self.clear()
        self.flush()
        self._synchronizer.close()
