"""A max-heap kept in a flat list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class MaxHeap:
    """A binary max-heap; the largest value sits at index 0."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def _sift_down(self, root: int) -> None:
        items, size = self._items, len(self._items)
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

    def _rebuild(self) -> None:
        for i in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(i)

    def push(self, value: Any) -> None:
        """Add ``value`` and restore the heap order."""
        self._items.append(value)
        self._rebuild()

    def remove(self, value: Any) -> None:
        """Remove the first stored occurrence of ``value``."""
        try:
            index = self._items.index(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in the heap") from None
        last = len(self._items) - 1
        self._items[index], self._items[last] = self._items[last], self._items[index]
        self._items.pop()
        self._rebuild()

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def to_list(self) -> list[Any]:
        """Return the heap's values in storage order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"