from __future__ import annotations

import random

import pytest

from symbolsync.contracts.exceptions import SymbolError, SyncError
from symbolsync.contracts.symbol import Position, SymbolParams
from symbolsync.manager import SymbolManager
from tests.fakes.layer import FakeLayer, FakeSelection
from tests.fakes.symbols import MakeSymbol


def _assert_bijection(manager: SymbolManager, layer: FakeLayer) -> None:
    expected = {id(s.placemark) for s in manager.symbols if not s.invalid}
    assert {id(item) for item in layer.items} == expected
    assert len(layer.items) == len(expected)


def _assert_unique_names(manager: SymbolManager) -> None:
    names = [s.name.get() for s in manager.symbols]
    assert len(names) == len(set(names))


def test_add_symbols_with_same_name_get_suffix_sequence(manager: SymbolManager, make_symbol: MakeSymbol) -> None:
    symbols = [make_symbol("A") for _ in range(3)]

    for symbol in symbols:
        manager.add_symbol(symbol)

    assert [s.name.get() for s in symbols] == ["A", "A (2)", "A (3)"]


def test_add_symbols_with_existing_suffix_increment(manager: SymbolManager, make_symbol: MakeSymbol) -> None:
    first, second = make_symbol("B (2)"), make_symbol("B (2)")

    manager.add_symbol(first)
    manager.add_symbol(second)

    assert [first.name.get(), second.name.get()] == ["B (2)", "B (3)"]


def test_add_is_mirrored_before_returning(
    manager: SymbolManager, layer: FakeLayer, make_symbol: MakeSymbol
) -> None:
    symbol = make_symbol()

    manager.add_symbol(symbol)

    assert layer.items == [symbol.placemark]
    assert manager.symbols == (symbol,)
    assert len(manager) == 1
    assert list(manager) == [symbol]


def test_adding_same_instance_twice_is_a_no_op(
    manager: SymbolManager, layer: FakeLayer, make_symbol: MakeSymbol
) -> None:
    symbol = make_symbol()

    manager.add_symbol(symbol)
    manager.add_symbol(symbol)

    assert len(manager) == 1
    assert len(layer.add_calls) == 1


def test_duplicate_id_is_rejected(manager: SymbolManager, layer: FakeLayer, make_symbol: MakeSymbol) -> None:
    manager.add_symbol(make_symbol(id="dup"))

    with pytest.raises(SymbolError, match="duplicate symbol id"):
        manager.add_symbol(make_symbol(id="dup"))

    assert len(manager) == 1
    assert len(layer.items) == 1


def test_find_symbol_returns_first_match_or_none(manager: SymbolManager, make_symbol: MakeSymbol) -> None:
    symbol = make_symbol(id="target")
    manager.add_symbol(make_symbol())
    manager.add_symbol(symbol)

    assert manager.find_symbol("target") is symbol
    assert manager.find_symbol("missing") is None


def test_remove_symbol_unmirrors_and_deselects(
    manager: SymbolManager, layer: FakeLayer, selection: FakeSelection, make_symbol: MakeSymbol
) -> None:
    symbol = make_symbol()
    manager.add_symbol(symbol)
    selection.select(symbol)

    assert manager.remove_symbol(symbol) is True

    assert layer.items == []
    assert selection.selected == []
    assert manager.find_symbol(symbol.id) is None


def test_remove_symbol_twice_is_safe(
    manager: SymbolManager, layer: FakeLayer, selection: FakeSelection, make_symbol: MakeSymbol
) -> None:
    symbol = make_symbol()
    manager.add_symbol(symbol)

    assert manager.remove_symbol(symbol) is True
    assert manager.remove_symbol(symbol) is False

    assert layer.remove_calls == [symbol.placemark]
    assert selection.deselect_calls == [symbol]


def test_remove_never_added_symbol_is_a_no_op(
    manager: SymbolManager, layer: FakeLayer, make_symbol: MakeSymbol
) -> None:
    assert manager.remove_symbol(make_symbol()) is False
    assert layer.mutation_count == 0


def test_move_symbol_is_transparent_to_layer_and_names(
    manager: SymbolManager, layer: FakeLayer, make_symbol: MakeSymbol
) -> None:
    symbols = [make_symbol("A") for _ in range(3)]
    for symbol in symbols:
        manager.add_symbol(symbol)
    mutations = layer.mutation_count
    names = [s.name.get() for s in symbols]

    assert manager.move_symbol(symbols[2], 0) is True

    assert manager.symbols == (symbols[2], symbols[0], symbols[1])
    assert layer.mutation_count == mutations
    assert [s.name.get() for s in symbols] == names


def test_create_symbol_uses_factory(manager: SymbolManager, layer: FakeLayer) -> None:
    symbol = manager.create_symbol(Position(1.0, 2.0), SymbolParams(id="c1", name="Created", image_source="SFGP"))

    assert symbol.manager is manager
    assert manager.find_symbol("c1") is symbol
    assert layer.items == [symbol.placemark]


def test_clear_tears_down_everything(
    manager: SymbolManager, layer: FakeLayer, selection: FakeSelection, make_symbol: MakeSymbol
) -> None:
    symbols = [make_symbol() for _ in range(3)]
    for symbol in symbols:
        manager.add_symbol(symbol)

    manager.clear()

    assert len(manager) == 0
    assert layer.items == []
    assert selection.deselect_calls == symbols


def test_close_detaches_synchronizer(manager: SymbolManager, layer: FakeLayer, make_symbol: MakeSymbol) -> None:
    manager.add_symbol(make_symbol())

    manager.close()
    manager.add_symbol(make_symbol())

    assert layer.items == []


def test_rejected_add_leaves_no_partial_mirror(
    manager: SymbolManager, layer: FakeLayer, make_symbol: MakeSymbol
) -> None:
    symbol = make_symbol()
    layer.fail_on_add.add(id(symbol.placemark))

    with pytest.raises(SyncError):
        manager.add_symbol(symbol)

    assert manager.find_symbol(symbol.id) is None
    _assert_bijection(manager, layer)


def test_random_add_remove_sequences_keep_bijection_and_unique_names(
    manager: SymbolManager, layer: FakeLayer, make_symbol: MakeSymbol
) -> None:
    rng = random.Random(2016)
    names = ["A", "A (2)", "B", " B ", "C (9)"]

    for _ in range(200):
        roll = rng.random()
        if roll < 0.55 or len(manager) == 0:
            source = "" if rng.random() < 0.1 else "SFGP"
            manager.add_symbol(make_symbol(rng.choice(names), source=source))
        elif roll < 0.85:
            manager.remove_symbol(rng.choice(manager.symbols))
        else:
            manager.move_symbol(rng.choice(manager.symbols), rng.randrange(len(manager)))

        _assert_bijection(manager, layer)
        _assert_unique_names(manager)
