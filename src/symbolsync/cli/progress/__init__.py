"""CLI progress displays."""

from symbolsync.cli.progress.rich import RichRestoreProgress

__all__ = ["RichRestoreProgress"]
