from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


# -----------------------------
# Index arithmetic (1-based)
# -----------------------------
def parent_index(index: int) -> int:
    """Tree index of the parent of *index* (the root's parent is 0)."""
    return index // 2


def left_child_index(index: int) -> int:
    return index * 2


def right_child_index(index: int) -> int:
    return left_child_index(index) + 1


def _check_tree_index(index: int) -> None:
    # Tree indices start at 1; anything lower is a bug in the caller.
    if index < 1:
        raise AssertionError(f"tree index must be >= 1, got {index}")


class IndexedStore(Generic[T]):
    """A growable sequence addressed by 1-based complete-binary-tree indices.

    The root lives at index 1, the children of ``i`` at ``2i`` and ``2i + 1``.
    Elements are kept in a plain list at offset ``index - 1``, so there is no
    placeholder slot to manage. No ordering is enforced here.

    Lookups past the end return ``None``; an index below 1 raises
    ``AssertionError`` straight away.
    """

    __slots__ = ("_data",)

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._data: List[T] = list(it) if it is not None else []

    # -----------------------------
    # Size
    # -----------------------------
    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def last_node_index(self) -> int:
        """Index of the most recently appended node (0 when empty)."""
        return len(self._data)

    # -----------------------------
    # Positional access
    # -----------------------------
    def get(self, index: int) -> Optional[T]:
        """Return the element at tree *index*, or None if past the end."""
        _check_tree_index(index)
        if index > len(self._data):
            return None
        return self._data[index - 1]

    def get_mutable(self, index: int) -> Optional[T]:
        """Return the stored object itself so mutable elements can be edited in place."""
        return self.get(index)

    def set(self, index: int, value: T) -> None:
        """Overwrite the occupied slot at *index*."""
        _check_tree_index(index)
        if index > len(self._data):
            raise IndexError(f"tree index {index} out of range (size {len(self._data)})")
        self._data[index - 1] = value

    def get_parent(self, index: int) -> Optional[T]:
        return self.get(parent_index(index))

    def get_left_child(self, index: int) -> Optional[T]:
        return self.get(left_child_index(index))

    def get_right_child(self, index: int) -> Optional[T]:
        return self.get(right_child_index(index))

    def get_last_node(self) -> Optional[T]:
        return self._data[-1] if self._data else None

    # -----------------------------
    # Shape queries
    # -----------------------------
    def has_parent(self, index: int) -> bool:
        return index > 1

    def has_left_child(self, index: int) -> bool:
        return left_child_index(index) <= len(self._data)

    def has_right_child(self, index: int) -> bool:
        return right_child_index(index) <= len(self._data)

    # -----------------------------
    # Raw mutation (no ordering)
    # -----------------------------
    def append(self, value: T) -> None:
        """Place *value* at the new highest index. Amortized O(1)."""
        self._data.append(value)

    def remove_last(self) -> Optional[T]:
        """Remove and return the highest-indexed element, or None if empty."""
        if not self._data:
            return None
        return self._data.pop()

    def swap(self, a: int, b: int) -> None:
        """Exchange the elements at tree indices *a* and *b* in place."""
        _check_tree_index(a)
        _check_tree_index(b)
        size = len(self._data)
        if a > size or b > size:
            raise IndexError(f"swap({a}, {b}) out of range (size {size})")
        data = self._data
        data[a - 1], data[b - 1] = data[b - 1], data[a - 1]

    # -----------------------------
    # Iteration / conversion
    # -----------------------------
    def __iter__(self) -> Iterator[T]:
        # Array order, i.e. breadth-first over the tree
        return iter(self._data)

    def to_list(self) -> List[T]:
        return list(self._data)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"IndexedStore({self._data!r})"
