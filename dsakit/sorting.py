"""Classic comparison and counting sorts; each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each value into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining value to the front each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low + 1, high
    while True:
        while i <= high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            break
    items[low], items[j] = items[j], items[low]
    return j


def _quick_sort(items: list[Any], low: int, high: int) -> None:
    if low < high:
        split = _partition(items, low, high)
        _quick_sort(items, low, split - 1)
        _quick_sort(items, split + 1, high)


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    items = list(values)
    size = len(items)
    for i in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, i)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def count_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = list(values)
    if not items:
        return []
    if any(value < 0 for value in items):
        raise ValueError("count sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]