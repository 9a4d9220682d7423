"""Structural change records emitted by observable collections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ChangeStatus(StrEnum):
    ADDED = "added"
    DELETED = "deleted"


@dataclass(frozen=True)
class ArrayChange(Generic[T]):
    """One insertion or deletion applied to an observable list.

    ``moved`` is ``None`` for a true insert/delete. For the two halves of a
    reorder it holds the index of the counterpart record: the new index on the
    ``deleted`` half, the old index on the ``added`` half.
    """

    status: ChangeStatus
    value: T
    index: int
    moved: int | None = None

    @property
    def is_move(self) -> bool:
        return self.moved is not None
