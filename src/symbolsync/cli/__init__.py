"""Command-line interface for symbolsync."""

from __future__ import annotations

from symbolsync.cli.app import main
from symbolsync.cli.parser import build_parser

__all__ = ["build_parser", "main"]
