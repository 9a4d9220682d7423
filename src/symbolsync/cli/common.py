"""Shared CLI helpers."""

from __future__ import annotations

import argparse
from pathlib import Path

from symbolsync.config import load_config
from symbolsync.contracts.config import SymbolSyncConfig
from symbolsync.sdk import MarkerSet


def resolve_config(args: argparse.Namespace) -> SymbolSyncConfig:
    config = load_config(args.config) if args.config else SymbolSyncConfig()
    # The CLI has no event loop; changes are always mirrored synchronously.
    update: dict[str, object] = {"deferred": False}
    if args.store:
        update["store_path"] = Path(args.store)
    return config.model_copy(update=update)


def open_markers(args: argparse.Namespace) -> MarkerSet:
    """Build the marker set for *args* and restore it from its store."""
    config = resolve_config(args)

    if args.verbose:
        markers = MarkerSet.from_config(config)
        markers.restore()
        return markers

    from symbolsync.cli.progress import RichRestoreProgress

    with RichRestoreProgress() as progress:
        markers = MarkerSet.from_config(config, progress=progress)
        markers.restore()
    return markers


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"


__all__ = ["open_markers", "plural", "resolve_config"]
