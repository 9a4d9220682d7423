"""Symbol value contracts: positions, construction parameters, persisted records."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Position:
    """Geographic position in degrees; altitude in meters."""

    latitude: float
    longitude: float
    altitude: float = 0.0

    @property
    def is_valid(self) -> bool:
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0


class SymbolParams(BaseModel):
    """Parameter bag handed to the symbol constructor.

    ``id`` is optional; the constructor assigns one when it is missing.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    name: str = ""
    image_source: str = Field(default="", alias="imageSource")
    is_movable: bool = Field(default=True, alias="isMovable")


class SymbolRecord(BaseModel):
    """Minimal persisted projection of a symbol.

    Serialized with the stored field names ``source`` and ``isMovable``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    source: str
    latitude: float
    longitude: float
    is_movable: bool = Field(alias="isMovable")

    def to_position(self) -> Position:
        return Position(self.latitude, self.longitude, 0.0)

    def to_params(self) -> SymbolParams:
        return SymbolParams(id=self.id, name=self.name, image_source=self.source, is_movable=self.is_movable)
