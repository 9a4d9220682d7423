"""Observable value and list primitives.

``ObservableList`` emits :class:`~symbolsync.contracts.changes.ArrayChange`
records for every structural mutation. Listeners receive the records of one
mutation (or, when a scheduler is configured, of one tick) as a single batch,
in emission order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from symbolsync.contracts.changes import ArrayChange, ChangeStatus

T = TypeVar("T")

Scheduler = Callable[[Callable[[], object]], object]
ChangeListener = Callable[[list[ArrayChange[T]]], None]


class Subscription:
    """Handle returned by ``subscribe``; ``dispose`` unregisters the callback."""

    def __init__(self, listeners: list, callback: Callable) -> None:
        self._listeners = listeners
        self._callback = callback
        listeners.append(callback)

    @property
    def active(self) -> bool:
        return any(listener is self._callback for listener in self._listeners)

    def dispose(self) -> None:
        for i, listener in enumerate(self._listeners):
            if listener is self._callback:
                del self._listeners[i]
                return


class ObservableValue(Generic[T]):
    """A single value whose changes are pushed to subscribers."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._listeners: list[Callable[[T], None]] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        return Subscription(self._listeners, callback)

    def __repr__(self) -> str:
        return f"ObservableValue({self._value!r})"


class ObservableList(Generic[T]):
    """Ordered list that reports inserts, deletes and moves to subscribers.

    Membership and removal use identity, never ``==``.

    Without a *scheduler* the records of a mutation are delivered before the
    mutator returns. With one (e.g. ``loop.call_soon``) records are queued and
    delivered together on the next tick; :meth:`flush` delivers them at once.
    """

    def __init__(self, items: list[T] | None = None, *, scheduler: Scheduler | None = None) -> None:
        self._items: list[T] = list(items or [])
        self._listeners: list[ChangeListener[T]] = []
        self._scheduler = scheduler
        self._pending: list[ArrayChange[T]] = []
        self._flush_scheduled = False

    # ---- Read access ----

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return self.index_of(item) is not None

    def index_of(self, item: object) -> int | None:
        for i, candidate in enumerate(self._items):
            if candidate is item:
                return i
        return None

    def snapshot(self) -> tuple[T, ...]:
        return tuple(self._items)

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    # ---- Subscription ----

    def subscribe(self, callback: ChangeListener[T]) -> Subscription:
        return Subscription(self._listeners, callback)

    # ---- Mutators ----

    def append(self, item: T) -> None:
        self._items.append(item)
        self._emit([ArrayChange(ChangeStatus.ADDED, item, len(self._items) - 1)])

    def insert(self, index: int, item: T) -> None:
        if index < 0:
            index = max(0, len(self._items) + index)
        index = min(index, len(self._items))
        self._items.insert(index, item)
        self._emit([ArrayChange(ChangeStatus.ADDED, item, index)])

    def remove(self, item: T) -> bool:
        index = self.index_of(item)
        if index is None:
            return False
        del self._items[index]
        self._emit([ArrayChange(ChangeStatus.DELETED, item, index)])
        return True

    def move(self, item: T, index: int) -> bool:
        """Reposition *item* at *index*. Emits a paired delete/add flagged as a move."""
        old_index = self.index_of(item)
        if old_index is None:
            return False
        del self._items[old_index]
        new_index = max(0, min(index, len(self._items)))
        self._items.insert(new_index, item)
        if new_index == old_index:
            return True
        self._emit(
            [
                ArrayChange(ChangeStatus.DELETED, item, old_index, moved=new_index),
                ArrayChange(ChangeStatus.ADDED, item, new_index, moved=old_index),
            ]
        )
        return True

    def clear(self) -> None:
        removed = self._items
        self._items = []
        self._emit([ArrayChange(ChangeStatus.DELETED, item, i) for i, item in enumerate(removed)])

    # ---- Delivery ----

    def flush(self) -> None:
        """Deliver every queued record now."""
        self._flush_scheduled = False
        if not self._pending:
            return
        changes, self._pending = self._pending, []
        self._deliver(changes)

    def _emit(self, changes: list[ArrayChange[T]]) -> None:
        if not changes:
            return
        if self._scheduler is None:
            self._deliver(changes)
            return
        self._pending.extend(changes)
        if not self._flush_scheduled:
            self._flush_scheduled = True
            self._scheduler(self.flush)

    def _deliver(self, changes: list[ArrayChange[T]]) -> None:
        for listener in list(self._listeners):
            listener(changes)
