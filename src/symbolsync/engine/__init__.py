"""Engine-domain exports."""

from .synchronizer import LayerSynchronizer

__all__ = ["LayerSynchronizer"]
