"""Shared test fixtures for symbolsync tests."""

from __future__ import annotations

import pytest

from symbolsync.contracts.symbol import Position, SymbolParams
from symbolsync.manager import SymbolManager
from symbolsync.symbols import TacticalSymbol
from tests.fakes.layer import FakeLayer, FakeSelection
from tests.fakes.symbols import MakeSymbol


@pytest.fixture
def layer() -> FakeLayer:
    return FakeLayer()


@pytest.fixture
def selection() -> FakeSelection:
    return FakeSelection()


@pytest.fixture
def manager(layer: FakeLayer, selection: FakeSelection) -> SymbolManager:
    """A synchronous manager wired to spy fakes."""
    return SymbolManager(layer, selection)


@pytest.fixture
def make_symbol(manager: SymbolManager) -> MakeSymbol:
    """Build (but do not add) a valid symbol; keyword overrides tweak it."""
    counter = {"value": 0}

    def _make(
        name: str = "Marker",
        *,
        id: str | None = None,
        latitude: float = 34.2,
        longitude: float = -119.2,
        source: str = "SFGPU----------",
        is_movable: bool = True,
    ) -> TacticalSymbol:
        counter["value"] += 1
        params = SymbolParams(
            id=id or f"sym-{counter['value']}",
            name=name,
            image_source=source,
            is_movable=is_movable,
        )
        return TacticalSymbol(manager, Position(latitude, longitude), params)

    return _make
