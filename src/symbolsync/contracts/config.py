"""Configuration contract."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

STORAGE_KEY_MARKERS = "markers"
LAYER_NAME_MARKERS = "Markers"


class SymbolSyncConfig(BaseModel):
    """Settings shared by the CLI and embedding applications.

    Attributes:
        store_path: JSON file backing the durable key-value store.
        storage_key: Slot holding the persisted marker set.
        layer_name: Display name of the marker render layer.
        deferred: Deliver collection changes on the next event-loop tick
            instead of synchronously.
    """

    model_config = ConfigDict(extra="forbid")

    store_path: Path = Path("markers.json")
    storage_key: str = Field(default=STORAGE_KEY_MARKERS, min_length=1)
    layer_name: str = LAYER_NAME_MARKERS
    deferred: bool = False
