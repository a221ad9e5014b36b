import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    count_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SOURCE_INPUTS = [
    [8, 4, 2, 2, 8, 3, 3, 1],
    [7, 2, 91, 77, 3],
    [2, 4, 3, 9, 1, 4, 8, 7, 5, 6],
    [7, 11, 9, 2, 17, 4],
    [1, 12, 9, 5, 6, 10],
    [1, 5, 10, 12, 6, 9],
    [9, 14, 4, 8, 7, 5, 6],
    [1, 2, 3, 4, 5, 6],
]

EDGE_INPUTS = [[], [5], [2, 1], [3, 3, 3], [6, 5, 4, 3, 2, 1], [0, 0, 1, 0]]

_RNG = random.Random(1234)
RANDOM_INPUTS = [
    [_RNG.randint(0, 40) for _ in range(_RNG.randint(0, 30))] for _ in range(50)
]


@pytest.mark.parametrize("values", SOURCE_INPUTS + EDGE_INPUTS + RANDOM_INPUTS)
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    results = {
        "bubble": bubble_sort(values),
        "insertion": insertion_sort(values),
        "selection": selection_sort(values),
        "quick": quick_sort(values),
        "merge": merge_sort(values),
        "heap": heap_sort(values),
        "count": count_sort(values),
    }
    assert results == dict.fromkeys(results, expected)


def test_input_not_mutated():
    values = [7, 2, 91, 77, 3]
    snapshot = list(values)
    outputs = [
        bubble_sort(values),
        insertion_sort(values),
        selection_sort(values),
        quick_sort(values),
        merge_sort(values),
        heap_sort(values),
        count_sort(values),
    ]
    assert values == snapshot
    assert outputs == [[2, 3, 7, 77, 91]] * 7


def test_accepts_any_iterable():
    data = (3, 1, 2)
    outputs = [
        bubble_sort(iter(data)),
        insertion_sort(iter(data)),
        selection_sort(iter(data)),
        quick_sort(iter(data)),
        merge_sort(iter(data)),
        heap_sort(iter(data)),
        count_sort(iter(data)),
    ]
    assert outputs == [[1, 2, 3]] * 7


@pytest.mark.parametrize("data", [[3, -1, 0, -7, 2], ["pear", "apple", "fig"]])
def test_comparison_sorts_handle_negatives_and_strings(data):
    outputs = [
        bubble_sort(data),
        insertion_sort(data),
        selection_sort(data),
        quick_sort(data),
        merge_sort(data),
        heap_sort(data),
    ]
    assert outputs == [sorted(data)] * 6


def test_count_sort_rejects_negatives():
    with pytest.raises(ValueError):
        count_sort([3, -1, 2])