import pytest

from axiom.dynarray import Array, FixedArray


def test_construct_from_items():
    arr = Array([1, 2, 3])
    assert list(arr) == [1, 2, 3]
    assert len(arr) == 3
    assert arr.capacity() >= len(arr)


def test_copy_construct_is_independent():
    original = Array([1, 2, 3])
    copy = Array(original)
    copy[0] = 9
    assert original[0] == 1
    assert copy == [9, 2, 3]


def test_filled():
    arr = Array.filled(4, "x")
    assert arr == ["x", "x", "x", "x"]
    assert arr.capacity() == 4


def test_empty_front_back():
    arr = Array()
    assert arr.empty()
    with pytest.raises(IndexError):
        arr.front()
    with pytest.raises(IndexError):
        arr.back()
    arr.push_back(5)
    arr.push_back(6)
    assert not arr.empty()
    assert arr.front() == 5
    assert arr.back() == 6


def test_pop_back():
    arr = Array([1, 2])
    assert arr.pop_back() == 2
    assert arr == [1]
    arr.pop_back()
    with pytest.raises(IndexError):
        arr.pop_back()


def test_reserve_and_shrink():
    arr = Array()
    arr.reserve(10)
    assert arr.capacity() == 10
    arr.reserve(5)
    assert arr.capacity() == 10
    for value in range(10):
        arr.push_back(value)
    assert arr.capacity() == 10
    arr.pop_back()
    arr.shrink_to_fit()
    assert arr.capacity() == len(arr)


def test_capacity_covers_growth():
    arr = Array()
    for value in range(50):
        arr.push_back(value)
        assert arr.capacity() >= len(arr)
    assert list(arr) == list(range(50))


def test_clear_keeps_capacity():
    arr = Array([1, 2, 3, 4])
    cap = arr.capacity()
    arr.clear()
    assert arr.empty()
    assert arr.capacity() == cap


def test_resize_grow_and_shrink():
    arr = Array([1, 2])
    arr.resize(4, 0)
    assert arr == [1, 2, 0, 0]
    arr.resize(1)
    assert arr == [1]
    with pytest.raises(ValueError):
        arr.resize(-1)


def test_assign():
    arr = Array([1, 2, 3])
    arr.assign(["a", "b"])
    assert arr == ["a", "b"]


def test_swap():
    a = Array([1, 2])
    b = Array([3])
    b.reserve(20)
    a.swap(b)
    assert a == [3]
    assert b == [1, 2]
    assert a.capacity() == 20


def test_insert_and_insert_many():
    arr = Array([1, 4])
    arr.insert(1, 2)
    arr.insert_many(2, [3])
    assert arr == [1, 2, 3, 4]
    arr.insert_many(0, [])
    assert arr == [1, 2, 3, 4]
    with pytest.raises(IndexError):
        arr.insert(9, 0)


def test_insert_many_from_self():
    arr = Array([1, 2])
    arr.insert_many(0, arr)
    assert arr == [1, 2, 1, 2]


def test_erase_keeps_order():
    arr = Array(list(range(6)))
    assert arr.erase(1, 3) == 1
    assert arr == [0, 3, 4, 5]
    arr.erase(0)
    assert arr == [3, 4, 5]
    with pytest.raises(IndexError):
        arr.erase(2, 7)


def test_erase_unordered_moves_tail():
    arr = Array(list(range(6)))
    assert arr.erase_unordered(1, 3) == 1
    assert arr == [0, 4, 5, 3]


def test_erase_unordered_removes_same_elements():
    items = list(range(10))
    arr = Array(items)
    arr.erase_unordered(2, 8)
    assert sorted(arr) == items[:2] + items[8:]


def test_add_emplace_remove():
    arr = Array()
    assert arr.add("a") == "a"
    arr.emplace_at(0, "b")
    assert arr == ["b", "a"]
    assert arr.remove(0) == 0
    assert arr == ["a"]


def test_indexing_and_slices():
    arr = Array([1, 2, 3])
    arr[1] = 7
    assert arr[1] == 7
    assert arr[1:] == [7, 3]
    with pytest.raises(IndexError):
        arr[5]
    with pytest.raises(TypeError):
        arr[0:1] = [1]


def test_equality():
    assert Array([1, 2]) == Array([1, 2])
    assert not (Array([1, 2]) == Array([2, 1]))


def test_fixed_array():
    fixed = FixedArray(3, 0)
    assert len(fixed) == 3
    assert list(fixed) == [0, 0, 0]
    fixed[0] = 5
    assert fixed.front() == 5
    with pytest.raises(IndexError):
        fixed[3] = 1
    with pytest.raises(IndexError):
        FixedArray(0).front()
    with pytest.raises(ValueError):
        FixedArray(-1)