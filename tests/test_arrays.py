import pytest

from dsakit.arrays import BoundedArray, CapacityError, binary_search, linear_search

UNSORTED = [1, 3, 5, 56, 4, 3, 23, 5, 4, 54, 34]
SORTED = [1, 3, 5, 56, 64, 73, 123, 225, 444]
DEMO = [7, 8, 12, 27, 88]


def test_linear_search_finds_first_occurrence():
    index = linear_search(UNSORTED, 54)
    assert UNSORTED[index] == 54
    assert 54 not in UNSORTED[:index]


def test_linear_search_returns_first_of_duplicates():
    index = linear_search(UNSORTED, 3)
    assert index == UNSORTED.index(3)


def test_linear_search_missing():
    assert linear_search(UNSORTED, 1000) == -1


def test_linear_search_empty():
    assert linear_search([], 1) == -1


def test_binary_search_last_element():
    assert binary_search(SORTED, 444) == len(SORTED) - 1


@pytest.mark.parametrize("value", SORTED)
def test_binary_search_every_element(value):
    assert SORTED[binary_search(SORTED, value)] == value


@pytest.mark.parametrize("value", [0, 2, 100, 500])
def test_binary_search_missing(value):
    assert binary_search(SORTED, value) == -1


def test_binary_search_empty():
    assert binary_search([], 5) == -1


def test_construct_and_iterate():
    arr = BoundedArray(100, DEMO)
    assert list(arr) == DEMO
    assert len(arr) == len(DEMO)
    assert arr[2] == DEMO[2]


def test_construct_over_capacity():
    with pytest.raises(CapacityError):
        BoundedArray(2, [1, 2, 3])


def test_negative_capacity():
    with pytest.raises(ValueError):
        BoundedArray(-1)


def test_delete_first():
    arr = BoundedArray(100, DEMO)
    removed = arr.delete(0)
    assert removed == DEMO[0]
    assert list(arr) == DEMO[1:]


def test_delete_out_of_range():
    arr = BoundedArray(100, DEMO)
    with pytest.raises(IndexError):
        arr.delete(len(DEMO))


def test_insert_in_middle():
    arr = BoundedArray(100, DEMO)
    arr.insert(1, 45)
    assert list(arr) == DEMO[:1] + [45] + DEMO[1:]


def test_insert_at_first():
    arr = BoundedArray(100, [2, 3, 4, 5])
    arr.insert(0, 1)
    assert list(arr) == [1, 2, 3, 4, 5]


def test_insert_at_end():
    arr = BoundedArray(10, DEMO)
    arr.insert(len(DEMO), 99)
    assert list(arr) == DEMO + [99]


def test_insert_when_full():
    arr = BoundedArray(len(DEMO), DEMO)
    with pytest.raises(CapacityError):
        arr.insert(0, 1)
    assert list(arr) == DEMO


def test_insert_bad_index():
    arr = BoundedArray(100, DEMO)
    with pytest.raises(IndexError):
        arr.insert(len(DEMO) + 1, 1)


def test_append_until_full():
    arr = BoundedArray(2)
    arr.append(1)
    arr.append(2)
    with pytest.raises(CapacityError):
        arr.append(3)
    assert list(arr) == [1, 2]


def test_update():
    arr = BoundedArray(5, [1, 3, 5, 7, 8])
    arr.update(2, 10)
    assert list(arr) == [1, 3, 10, 7, 8]


def test_update_out_of_range():
    arr = BoundedArray(5, [1])
    with pytest.raises(IndexError):
        arr.update(3, 10)