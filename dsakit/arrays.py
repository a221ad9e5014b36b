"""A fixed-capacity array and simple searches over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


class CapacityError(Exception):
    """Raised when an array would grow past its capacity."""


class BoundedArray:
    """A sequence of values that may never hold more than ``capacity`` items."""

    def __init__(self, capacity: int, values: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        items = list(values)
        if len(items) > capacity:
            raise CapacityError(
                f"{len(items)} values do not fit in a capacity of {capacity}"
            )
        self.capacity = capacity
        self._items = items

    def _check_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise CapacityError(f"array is full (capacity {self.capacity})")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def append(self, value: Any) -> None:
        """Add ``value`` after the last used slot."""
        self._check_room()
        self._items.append(value)

    def insert(self, index: int, value: Any) -> None:
        """Place ``value`` at ``index``, shifting later values one step right."""
        self._check_room()
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._items.insert(index, value)

    def delete(self, index: int) -> Any:
        """Remove and return the value at ``index``, shifting later values left."""
        self._check_index(index)
        return self._items.pop(index)

    def update(self, index: int, value: Any) -> None:
        """Replace the value at ``index``."""
        self._check_index(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"BoundedArray({self.capacity}, {self._items!r})"


def linear_search(items: Iterable[Any], target: Any) -> int:
    """Return the index of the first item equal to ``target``, or -1."""
    for index, item in enumerate(items):
        if item == target:
            return index
    return -1


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1