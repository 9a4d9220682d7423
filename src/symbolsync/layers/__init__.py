"""In-memory render and selection adapters."""

from symbolsync.layers.memory import RenderableLayer, SelectionController

__all__ = ["RenderableLayer", "SelectionController"]
