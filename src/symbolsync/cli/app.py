"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from symbolsync.cli.commands import markers as markers_command
from symbolsync.cli.parser import build_parser
from symbolsync.contracts.exceptions import ConfigError, LayerError, StorageError, SymbolError, SyncError

_COMMANDS = {
    "list": markers_command.run_list,
    "add": markers_command.run_add,
    "remove": markers_command.run_remove,
    "rename": markers_command.run_rename,
    "move": markers_command.run_move,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        _COMMANDS[args.command](args)
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (StorageError, LayerError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (SymbolError, SyncError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
