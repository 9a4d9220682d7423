"""Render layer and selection collaborator contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class RenderLayer(ABC):
    """Surface that draws one renderable per managed symbol."""

    @property
    @abstractmethod
    def renderables(self) -> Sequence[Any]: ...  # pragma: no cover

    @abstractmethod
    def add_renderable(self, renderable: Any) -> None: ...  # pragma: no cover

    @abstractmethod
    def remove_renderable(self, renderable: Any) -> bool:
        """Remove *renderable* by identity. Returns ``False`` when it was not present."""
        ...  # pragma: no cover


class SelectController(ABC):
    @abstractmethod
    def deselect(self, symbol: Any) -> None:
        """Clear any selection referencing *symbol*. No-op if it was not selected."""
        ...  # pragma: no cover
