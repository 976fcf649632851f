import pytest

from ogb.growing_array import GrowingArray


def test_default_reserve_is_eight():
    arr = GrowingArray()
    assert arr.allocated_count == 8
    assert len(arr) == 0


def test_reserve_rounds_up_to_power_of_two():
    arr = GrowingArray(count_to_reserve=5)
    assert arr.allocated_count == 8
    arr.reserve(9)
    assert arr.allocated_count == 16
    arr.reserve(3)
    assert arr.allocated_count == 16


def test_add_grows_capacity():
    arr = GrowingArray()
    for i in range(9):
        arr.add(i)
    assert list(arr) == list(range(9))
    assert arr.allocated_count >= len(arr)
    assert arr.allocated_count & (arr.allocated_count - 1) == 0


def test_add_multiple_and_indexing():
    arr = GrowingArray()
    arr.add_multiple(["a", "b", "c"])
    assert arr[1] == "b"
    arr[1] = "B"
    assert arr == ["a", "B", "c"]


def test_resize_grows_with_fill_and_shrinks():
    arr = GrowingArray([1, 2])
    arr.resize(4, fill=0)
    assert arr == [1, 2, 0, 0]
    arr.resize(1)
    assert arr == [1]
    with pytest.raises(ValueError):
        arr.resize(-1)


def test_pop_and_empty_pop():
    arr = GrowingArray([1, 2])
    assert arr.pop() == 2
    assert arr.pop() == 1
    with pytest.raises(IndexError):
        arr.pop()


def test_clear_keeps_capacity():
    arr = GrowingArray(range(20))
    capacity = arr.allocated_count
    arr.clear()
    assert len(arr) == 0
    assert arr.allocated_count == capacity


def test_ordered_remove_keeps_order():
    arr = GrowingArray([10, 20, 30, 40])
    assert arr.ordered_remove_by_index(1) == 20
    assert arr == [10, 30, 40]


def test_unordered_remove_moves_last_in():
    arr = GrowingArray([10, 20, 30, 40])
    assert arr.unordered_remove_by_index(0) == 10
    assert arr == [40, 20, 30]
    assert arr.unordered_remove_by_index(2) == 30
    assert arr == [40, 20]


def test_remove_index_out_of_range():
    arr = GrowingArray([1])
    with pytest.raises(IndexError):
        arr.ordered_remove_by_index(1)
    with pytest.raises(IndexError):
        arr.unordered_remove_by_index(-1)


def test_find_by_identity_versus_value():
    first = [1]
    twin = [1]
    arr = GrowingArray([first])
    assert arr.find_index_by_value(twin) == 0
    assert arr.find_index_by_identity(twin) == -1
    assert arr.find_index_by_identity(first) == 0


def test_remove_by_identity():
    a, b, c = object(), object(), object()
    arr = GrowingArray([a, b, c])
    assert arr.ordered_remove_by_identity(b) is True
    assert list(arr) == [a, c]
    assert arr.unordered_remove_by_identity(object()) is False
    assert arr.unordered_remove_by_identity(a) is True
    assert list(arr) == [c]


def test_remove_one_by_value_removes_only_first():
    arr = GrowingArray([1, 2, 1, 3])
    assert arr.ordered_remove_one_by_value(1) is True
    assert arr == [2, 1, 3]
    assert arr.unordered_remove_one_by_value(2) is True
    assert arr == [3, 1]
    assert arr.ordered_remove_one_by_value(99) is False
    assert arr == [3, 1]