from __future__ import annotations
import logging
import random
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .indexed_store import IndexedStore, parent_index

T = TypeVar("T")

logger = logging.getLogger(__name__)


class MinHeap(Generic[T]):
    """A binary min-heap built on top of an :class:`IndexedStore`.

    Every parent is ``<=`` both of its children, so the root is always the
    smallest element. Elements must support a total order through ``<`` and
    ``>``; with an inconsistent ordering the heap property is not guaranteed.

    The raw store primitives (``append``, ``swap``, ``set``, ``remove_last``)
    stay private: the only way in is :meth:`push`.
    """

    __slots__ = ("_store",)

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._store: IndexedStore[T] = IndexedStore()
        if it is not None:
            self.extend(it)

    @classmethod
    def filled_with_random(
        cls,
        count: int,
        value_range: Tuple[int, int],
        rng: Optional[random.Random] = None,
    ) -> "MinHeap[int]":
        """Build a heap of *count* integers drawn uniformly from the closed *value_range*.

        Each value goes through :meth:`push`, so this is just repeated insertion.
        Pass a seeded ``random.Random`` as *rng* for reproducible heaps.

        Raises:
            ValueError: if *count* is negative or the range is empty.
        """
        low, high = value_range
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if low > high:
            raise ValueError(f"empty value range [{low}, {high}]")

        rng = rng or random.Random()
        heap: MinHeap[int] = cls()
        for _ in range(count):
            heap.push(rng.randint(low, high))
        logger.debug("filled heap with %d values from [%d, %d]", count, low, high)
        return heap

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _bubble_up(self, index: int) -> int:
        """Move the element at *index* toward the root until its parent is no greater.

        Returns the number of swaps made; 0 means the element was already in place.
        """
        store = self._store
        swaps = 0
        while store.has_parent(index):
            parent = parent_index(index)
            if not store.get(parent) > store.get(index):
                break
            store.swap(parent, index)
            index = parent
            swaps += 1
        return swaps

    # -----------------------------
    # Public API
    # -----------------------------
    def push(self, value: T) -> None:
        """Insert *value* and restore the heap property (O(log n))."""
        self._store.append(value)
        swaps = self._bubble_up(self._store.last_node_index())
        logger.debug("pushed %r (size=%d, swaps=%d)", value, len(self._store), swaps)

    def extend(self, values: Iterable[T]) -> None:
        """Push every item of *values* in order."""
        for v in values:
            self.push(v)

    def peek(self) -> Optional[T]:
        """Return the smallest item without removing it, or None if empty (O(1))."""
        return self._store.get(1)

    def is_valid(self) -> bool:
        """Check the heap property over every parent/child pair (O(n))."""
        store = self._store
        for i in range(2, len(store) + 1):
            if store.get_parent(i) > store.get(i):
                return False
        return True

    # -----------------------------
    # Read-only view of the store
    # -----------------------------
    def is_empty(self) -> bool:
        return self._store.is_empty()

    def get(self, index: int) -> Optional[T]:
        return self._store.get(index)

    def get_parent(self, index: int) -> Optional[T]:
        return self._store.get_parent(index)

    def get_left_child(self, index: int) -> Optional[T]:
        return self._store.get_left_child(index)

    def get_right_child(self, index: int) -> Optional[T]:
        return self._store.get_right_child(index)

    def get_last_node(self) -> Optional[T]:
        return self._store.get_last_node()

    def last_node_index(self) -> int:
        return self._store.last_node_index()

    def has_parent(self, index: int) -> bool:
        return self._store.has_parent(index)

    def has_left_child(self, index: int) -> bool:
        return self._store.has_left_child(index)

    def has_right_child(self, index: int) -> bool:
        return self._store.has_right_child(index)

    def __len__(self) -> int:
        return len(self._store)

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return not self._store.is_empty()

    def __iter__(self) -> Iterator[T]:
        # Iterate over the internal array (heap order, not sorted order)
        return iter(self._store)

    def to_list(self) -> List[T]:
        return self._store.to_list()

    # -----------------------------
    # Text forms
    # -----------------------------
    def to_display_string(self) -> str:
        """Bracketed, comma-separated elements in array order, e.g. ``[1, 5, 3]``."""
        return "[" + ", ".join(str(v) for v in self._store) + "]"

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"MinHeap({self._store.to_list()!r})"
