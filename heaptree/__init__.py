"""Array-backed binary min-heap with a text tree renderer."""

from .datastructures import IndexedStore, MinHeap
from .display import TreeRenderer

__version__ = "0.3.0"

__all__ = ["IndexedStore", "MinHeap", "TreeRenderer", "__version__"]
