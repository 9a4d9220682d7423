"""In-memory render layer and selection controller."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from symbolsync.contracts.layer import RenderLayer, SelectController


class RenderableLayer(RenderLayer):
    """List-backed layer. Removal matches by identity."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.enabled = True
        self._renderables: list[Any] = []

    @property
    def renderables(self) -> Sequence[Any]:
        return tuple(self._renderables)

    def add_renderable(self, renderable: Any) -> None:
        self._renderables.append(renderable)

    def remove_renderable(self, renderable: Any) -> bool:
        for i, candidate in enumerate(self._renderables):
            if candidate is renderable:
                del self._renderables[i]
                return True
        return False

    def find(self, predicate: Callable[[Any], bool]) -> Any | None:
        for renderable in self._renderables:
            if predicate(renderable):
                return renderable
        return None

    def __len__(self) -> int:
        return len(self._renderables)


class SelectionController(SelectController):
    """Tracks the selected symbols, by identity, in selection order."""

    def __init__(self) -> None:
        self._selected: list[Any] = []

    @property
    def selected(self) -> tuple[Any, ...]:
        return tuple(self._selected)

    def is_selected(self, symbol: Any) -> bool:
        return any(candidate is symbol for candidate in self._selected)

    def select(self, symbol: Any) -> None:
        if not self.is_selected(symbol):
            self._selected.append(symbol)

    def deselect(self, symbol: Any) -> None:
        self._selected = [candidate for candidate in self._selected if candidate is not symbol]
