"""Marker commands: list, add, remove, rename, move."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table

from symbolsync.cli.common import open_markers, plural
from symbolsync.contracts.exceptions import SymbolError
from symbolsync.contracts.symbol import Position, SymbolParams
from symbolsync.sdk import MarkerSet


def format_marker_table(markers: MarkerSet) -> Table:
    table = Table(title=f"{markers.config.layer_name} ({plural(len(markers.manager), 'marker')})")
    table.add_column("#", justify="right")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")
    table.add_column("Movable")
    table.add_column("Source")
    for index, symbol in enumerate(markers.manager.symbols):
        table.add_row(
            str(index),
            symbol.id,
            symbol.name.get(),
            f"{symbol.latitude:.6f}",
            f"{symbol.longitude:.6f}",
            "yes" if symbol.is_movable else "no",
            symbol.source,
        )
    return table


def _require(markers: MarkerSet, symbol_id: str):
    symbol = markers.manager.find_symbol(symbol_id)
    if symbol is None:
        raise SymbolError(f"no marker with id {symbol_id!r}")
    return symbol


def run_list(args: argparse.Namespace, console: Console | None = None) -> int:
    markers = open_markers(args)
    (console or Console()).print(format_marker_table(markers))
    return len(markers.manager)


def run_add(args: argparse.Namespace) -> str:
    markers = open_markers(args)
    params = SymbolParams(id=args.id, name=args.name, image_source=args.source, is_movable=not args.fixed)
    symbol = markers.manager.factory(markers.manager, Position(args.lat, args.lon), params)
    if symbol.invalid:
        raise SymbolError(f"invalid marker {args.name!r}: check position and source")
    markers.manager.add_symbol(symbol)
    markers.save()
    print(f"added {symbol.id} as {symbol.name.get()!r}")
    return symbol.id


def run_remove(args: argparse.Namespace) -> None:
    markers = open_markers(args)
    markers.manager.remove_symbol(_require(markers, args.id))
    markers.save()
    print(f"removed {args.id}")


def run_rename(args: argparse.Namespace) -> str:
    markers = open_markers(args)
    symbol = _require(markers, args.id)
    symbol.name.set(args.name)
    markers.save()
    print(f"renamed {symbol.id} to {symbol.name.get()!r}")
    return symbol.name.get()


def run_move(args: argparse.Namespace) -> None:
    markers = open_markers(args)
    symbol = _require(markers, args.id)
    markers.manager.move_symbol(symbol, args.index)
    markers.save()
    print(f"moved {symbol.id} to position {markers.manager.symbols.index(symbol)}")


__all__ = ["format_marker_table", "run_add", "run_list", "run_move", "run_remove", "run_rename"]
