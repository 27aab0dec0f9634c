import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from heaptree.datastructures.indexed_store import (
    IndexedStore,
    left_child_index,
    parent_index,
    right_child_index,
)


# ----------------------------
# Index arithmetic
# ----------------------------

def test_children_map_back_to_parent():
    for i in range(1, 500):
        assert parent_index(left_child_index(i)) == i
        assert parent_index(right_child_index(i)) == i
        assert left_child_index(i) < right_child_index(i)


def test_index_arithmetic_values():
    assert parent_index(1) == 0
    assert parent_index(7) == 3
    assert left_child_index(3) == 6
    assert right_child_index(3) == 7


# ----------------------------
# Size and lookups
# ----------------------------

def test_new_store_is_empty():
    s = IndexedStore()
    assert len(s) == 0
    assert s.is_empty()
    assert s.get(1) is None
    assert s.get_last_node() is None
    assert s.last_node_index() == 0


def test_append_and_get_use_one_based_indices():
    s = IndexedStore()
    for v in ("a", "b", "c", "d"):
        s.append(v)
    assert len(s) == 4
    assert not s.is_empty()
    assert s.get(1) == "a"
    assert s.get(4) == "d"
    assert s.get_last_node() == "d"
    assert s.last_node_index() == 4


def test_get_past_end_is_absent():
    s = IndexedStore([10, 20, 30])
    assert s.get(len(s) + 1) is None
    assert s.get(100) is None


def test_get_zero_is_a_contract_violation():
    s = IndexedStore([10, 20, 30])
    with pytest.raises(AssertionError):
        s.get(0)
    with pytest.raises(AssertionError):
        s.get(-1)
    with pytest.raises(AssertionError):
        s.get_mutable(0)


def test_relatives():
    s = IndexedStore([1, 2, 3, 4, 5])
    assert s.get_parent(4) == 2
    assert s.get_parent(5) == 2
    assert s.get_left_child(2) == 4
    assert s.get_right_child(2) == 5
    assert s.get_left_child(3) is None
    assert s.get_right_child(3) is None
    with pytest.raises(AssertionError):
        s.get_parent(1)  # the root's parent index is 0


def test_get_mutable_returns_stored_object():
    s = IndexedStore([[1], [2]])
    s.get_mutable(2).append(3)
    assert s.get(2) == [2, 3]


def test_set_overwrites_occupied_slot_only():
    s = IndexedStore([1, 2])
    s.set(2, 9)
    assert s.to_list() == [1, 9]
    with pytest.raises(IndexError):
        s.set(3, 0)
    with pytest.raises(AssertionError):
        s.set(0, 0)


# ----------------------------
# Shape queries
# ----------------------------

def test_has_parent_only_below_root():
    s = IndexedStore([1, 2, 3])
    assert not s.has_parent(1)
    assert s.has_parent(2)
    assert s.has_parent(3)


def test_has_children_follow_length():
    s = IndexedStore([1, 2, 3, 4])
    assert s.has_left_child(1) and s.has_right_child(1)
    assert s.has_left_child(2) and not s.has_right_child(2)
    assert not s.has_left_child(3)


# ----------------------------
# Raw mutation
# ----------------------------

def test_remove_last():
    s = IndexedStore([1, 2, 3])
    assert s.remove_last() == 3
    assert s.remove_last() == 2
    assert s.remove_last() == 1
    assert s.remove_last() is None
    assert s.is_empty()


def test_swap():
    s = IndexedStore([1, 2, 3])
    s.swap(1, 3)
    assert s.to_list() == [3, 2, 1]
    s.swap(2, 2)
    assert s.to_list() == [3, 2, 1]
    with pytest.raises(IndexError):
        s.swap(1, 4)
    with pytest.raises(AssertionError):
        s.swap(0, 1)


def test_to_list_is_a_copy():
    s = IndexedStore([1, 2])
    out = s.to_list()
    out.append(3)
    assert len(s) == 2
    assert list(s) == [1, 2]
