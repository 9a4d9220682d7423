"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("symbolsync")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to a symbolsync JSON config file")
    parser.add_argument("--store", default=None, help="Store file path (overrides config store_path)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="symbolsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Show the persisted markers")
    _add_common(list_parser)

    add_parser = subparsers.add_parser("add", help="Add a marker")
    _add_common(add_parser)
    add_parser.add_argument("--name", required=True, help="Display name (made unique on collision)")
    add_parser.add_argument("--source", required=True, help="Image source for the marker")
    add_parser.add_argument("--lat", type=float, required=True, help="Latitude in degrees")
    add_parser.add_argument("--lon", type=float, required=True, help="Longitude in degrees")
    add_parser.add_argument("--id", default=None, help="Marker id (generated when omitted)")
    add_parser.add_argument("--fixed", action="store_true", help="Mark the marker as not movable")

    remove_parser = subparsers.add_parser("remove", help="Remove a marker by id")
    _add_common(remove_parser)
    remove_parser.add_argument("id", help="Marker id")

    rename_parser = subparsers.add_parser("rename", help="Rename a marker")
    _add_common(rename_parser)
    rename_parser.add_argument("id", help="Marker id")
    rename_parser.add_argument("name", help="New display name")

    move_parser = subparsers.add_parser("move", help="Reorder a marker within the set")
    _add_common(move_parser)
    move_parser.add_argument("id", help="Marker id")
    move_parser.add_argument("index", type=int, help="New zero-based position")

    return parser
