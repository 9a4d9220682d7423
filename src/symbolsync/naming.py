"""Unique display-name generation with ``(n)`` suffix sequences."""

from __future__ import annotations

import re
from collections.abc import Iterable

_SUFFIX_RE = re.compile(r"\(([0-9]+)\)\Z")


def split_suffix(name: str) -> tuple[str, int | None]:
    """Split a trailing ``(n)`` sequence number off *name*.

    ``"Alpha (3)"`` -> ``("Alpha ", 3)``; ``"Alpha"`` -> ``("Alpha", None)``.
    """
    match = _SUFFIX_RE.search(name)
    if match is None:
        return name, None
    return name[: match.start()], int(match.group(1))


def generate_unique_name(candidate: str, existing_names: Iterable[str]) -> str:
    """Return *candidate* (trimmed) or the first suffixed variant not in *existing_names*.

    A name without a suffix becomes ``"<name> (2)"`` on its first collision;
    the unsuffixed original counts as the first of the sequence. A name that
    already ends in ``(n)`` is bumped to ``(n+1)``. The caller must leave the
    symbol's own current name out of *existing_names*.
    """
    taken = set(existing_names)
    unique_name = candidate.strip()
    while unique_name in taken:
        base, seq_no = split_suffix(unique_name)
        if seq_no is None:
            unique_name = f"{unique_name} (2)"
        else:
            unique_name = f"{base}({seq_no + 1})"
    return unique_name
