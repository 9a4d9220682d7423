"""Tactical symbols and their placemark representations."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any

from symbolsync.contracts.exceptions import SymbolError
from symbolsync.contracts.symbol import Position, SymbolParams, SymbolRecord
from symbolsync.observable import ObservableValue, Subscription

if TYPE_CHECKING:
    from symbolsync.manager import SymbolManager

logger = logging.getLogger(__name__)


class Placemark:
    """Render-layer item drawn for one symbol.

    Equality is identity: two placemarks at the same spot with the same image
    are still distinct layer items.
    """

    def __init__(
        self,
        position: Position,
        *,
        image_source: str,
        label: str,
        user_object: Any = None,
    ) -> None:
        self.position = position
        self.image_source = image_source
        self.label = label
        self.user_object = user_object

    def __repr__(self) -> str:
        return f"Placemark(label={self.label!r}, position={self.position!r})"


class TacticalSymbol:
    """A positioned, named marker owned by a :class:`SymbolManager`.

    Construction never raises for bad input. A position outside the valid
    latitude/longitude range or a blank image source marks the symbol
    ``invalid`` and leaves it without a placemark.
    """

    def __init__(self, manager: SymbolManager | None, position: Position, params: SymbolParams) -> None:
        self.manager = manager
        self.id: str = params.id or uuid.uuid4().hex
        self.name: ObservableValue[str] = ObservableValue(params.name)
        self.source = params.image_source
        self.latitude = position.latitude
        self.longitude = position.longitude
        self.altitude = position.altitude
        self.is_movable = params.is_movable
        self.invalid = False
        self.placemark: Placemark | None = None
        self._label_subscription: Subscription | None = None

        problem = self._validate(position)
        if problem is not None:
            logger.warning("symbol %s (%r) is invalid: %s", self.id, params.name, problem)
            self.invalid = True
            return

        self.placemark = Placemark(position, image_source=self.source, label=params.name, user_object=self)
        self._label_subscription = self.name.subscribe(self._on_name_changed)

    def _validate(self, position: Position) -> str | None:
        if not position.is_valid:
            return f"position out of range: ({position.latitude}, {position.longitude})"
        if not self.source or not self.source.strip():
            return "missing image source"
        return None

    def _on_name_changed(self, name: str) -> None:
        if self.placemark is not None:
            self.placemark.label = name

    @property
    def position(self) -> Position:
        return Position(self.latitude, self.longitude, self.altitude)

    def move_to(self, latitude: float, longitude: float) -> None:
        if not self.is_movable:
            raise SymbolError(f"symbol {self.id} is not movable")
        position = Position(latitude, longitude, self.altitude)
        if not position.is_valid:
            raise SymbolError(f"position out of range: ({latitude}, {longitude})")
        self.latitude = latitude
        self.longitude = longitude
        if self.placemark is not None:
            self.placemark.position = position

    def to_record(self) -> SymbolRecord:
        return SymbolRecord(
            id=self.id,
            name=self.name.get(),
            source=self.source,
            latitude=self.latitude,
            longitude=self.longitude,
            is_movable=self.is_movable,
        )

    def __repr__(self) -> str:
        return f"TacticalSymbol(id={self.id!r}, name={self.name.get()!r})"
