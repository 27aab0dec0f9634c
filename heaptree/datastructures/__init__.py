from .indexed_store import IndexedStore, left_child_index, parent_index, right_child_index
from .heap import MinHeap

__all__ = [
    "IndexedStore",
    "MinHeap",
    "parent_index",
    "left_child_index",
    "right_child_index",
]
