"""Module entrypoint for ``python -m symbolsync``."""

from __future__ import annotations

import sys

from symbolsync.cli import main

if __name__ == "__main__":
    sys.exit(main())
