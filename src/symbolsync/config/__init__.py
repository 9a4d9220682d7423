"""Configuration loading exports."""

from symbolsync.config.loader import load_config

__all__ = ["load_config"]
