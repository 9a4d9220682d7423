"""Mirror collection changes onto a render layer."""

from __future__ import annotations

import logging
from typing import Any

from symbolsync.contracts.changes import ArrayChange, ChangeStatus
from symbolsync.contracts.exceptions import LayerError, SyncError
from symbolsync.contracts.layer import RenderLayer, SelectController
from symbolsync.naming import generate_unique_name
from symbolsync.observable import ObservableList, Subscription

logger = logging.getLogger(__name__)


class LayerSynchronizer:
    """Keeps exactly one layer renderable per valid symbol in *collection*.

    Reorder records (``moved`` set) are ignored. A true add gets a unique name
    and its placemark is added to the layer; a true delete removes the
    placemark by identity and clears any selection of the symbol. The
    synchronizer is the only writer of the layer's renderables.

    A layer failure on one record never stops the rest of the batch. A
    rejected add is rolled back out of the collection with its original name;
    a placemark the layer refused to remove stays indexed, so
    :meth:`placemark_for` still reports what the layer holds.
    """

    def __init__(self, collection: ObservableList[Any], layer: RenderLayer, selection: SelectController) -> None:
        self._collection = collection
        self._layer = layer
        self._selection = selection
        self._tracked: dict[str, Any] = {}
        self._placemarks: dict[str, Any] = {}
        self._name_subscriptions: dict[str, Subscription] = {}
        self._subscription: Subscription | None = collection.subscribe(self._on_changes)

    @property
    def layer(self) -> RenderLayer:
        return self._layer

    def mirrored(self, symbol: Any) -> bool:
        placemark = self._placemarks.get(symbol.id)
        return placemark is not None and placemark is symbol.placemark

    def placemark_for(self, symbol_id: str) -> Any | None:
        return self._placemarks.get(symbol_id)

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        for subscription in self._name_subscriptions.values():
            subscription.dispose()
        self._name_subscriptions.clear()

    # ---- Change handling ----

    def _on_changes(self, changes: list[ArrayChange[Any]]) -> None:
        failures: list[tuple[SyncError, LayerError]] = []
        for change in changes:
            if change.is_move:
                continue
            symbol = change.value
            try:
                if change.status == ChangeStatus.ADDED:
                    self._handle_added(symbol)
                elif change.status == ChangeStatus.DELETED:
                    self._handle_deleted(symbol)
            except LayerError as exc:
                action = "mirror" if change.status == ChangeStatus.ADDED else "unmirror"
                failures.append((SyncError(f"failed to {action} symbol {symbol.id}", symbol=symbol), exc))
        if failures:
            error, cause = failures[0]
            raise error from cause

    def _handle_added(self, symbol: Any) -> None:
        if self._tracked.get(symbol.id) is symbol:
            return
        original_name = symbol.name.get()
        symbol.name.set(generate_unique_name(original_name, self._other_names(symbol)))
        self._tracked[symbol.id] = symbol
        self._name_subscriptions[symbol.id] = symbol.name.subscribe(lambda _name: self._on_renamed(symbol))

        if symbol.invalid or symbol.placemark is None:
            logger.debug("symbol %s is invalid; not mirrored", symbol.id)
            return
        if self.mirrored(symbol):
            # Left on the layer by a failed removal.
            logger.debug("symbol %s is still on the layer", symbol.id)
            return

        try:
            self._layer.add_renderable(symbol.placemark)
        except LayerError:
            logger.error("layer rejected symbol %s; rolling back", symbol.id)
            self._untrack(symbol)
            symbol.name.set(original_name)
            self._collection.remove(symbol)
            raise
        self._placemarks[symbol.id] = symbol.placemark
        logger.debug("mirrored symbol %s as %r", symbol.id, symbol.name.get())

    def _handle_deleted(self, symbol: Any) -> None:
        try:
            if self._tracked.get(symbol.id) is symbol:
                self._untrack(symbol)
                self._unmirror(symbol)
        finally:
            self._selection.deselect(symbol)

    def _unmirror(self, symbol: Any) -> None:
        placemark = self._placemarks.get(symbol.id)
        if placemark is None:
            return
        try:
            removed = self._layer.remove_renderable(placemark)
        except LayerError:
            logger.error("layer failed to remove symbol %s; placemark kept", symbol.id)
            raise
        del self._placemarks[symbol.id]
        if removed:
            logger.debug("unmirrored symbol %s", symbol.id)

    def _untrack(self, symbol: Any) -> None:
        self._tracked.pop(symbol.id, None)
        subscription = self._name_subscriptions.pop(symbol.id, None)
        if subscription is not None:
            subscription.dispose()

    def _on_renamed(self, symbol: Any) -> None:
        if self._tracked.get(symbol.id) is not symbol:
            return
        name = symbol.name.get()
        unique_name = generate_unique_name(name, self._other_names(symbol))
        if unique_name != name:
            logger.debug("renamed symbol %s collides; using %r", symbol.id, unique_name)
            symbol.name.set(unique_name)

    def _other_names(self, symbol: Any) -> list[str]:
        # Only symbols already processed count; later adds in the same batch resolve against this one.
        return [
            other.name.get()
            for other in self._collection
            if other is not symbol and self._tracked.get(other.id) is other
        ]
