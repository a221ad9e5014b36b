"""First-in, first-out queues: a one-pass bounded queue, a ring and a linked queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class QueueFull(Exception):
    """Raised when enqueueing onto a full queue."""


class QueueEmpty(Exception):
    """Raised when dequeueing from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("queue capacity must not be negative")


def _empty_error() -> QueueEmpty:
    return QueueEmpty("cannot dequeue from an empty queue")


def _full_error(value: Any) -> QueueFull:
    return QueueFull(f"cannot enqueue {value!r}: queue is full")


class _QueueBase:
    """Display shared by every queue."""

    def __iter__(self) -> Iterator[Any]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class ArrayQueue(_QueueBase):
    """A bounded linear queue whose slots are used once.

    A slot freed by ``dequeue`` is not reused until the queue has been
    emptied completely, so the queue can be full while holding fewer than
    ``capacity`` values.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise _full_error(value)
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise _empty_error()
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        """Yield values from front to rear."""
        return iter(self._slots[self._front:])


class CircularQueue(_QueueBase):
    """A bounded ring queue; freed slots are reused at once."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise _full_error(value)
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise _empty_error()
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield values from front to rear."""
        return iter(self._items)


class LinkedQueue(_QueueBase):
    """An unbounded queue; the initial values are enqueued in order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise _empty_error()
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield values from front to rear."""
        return iter(self._items)