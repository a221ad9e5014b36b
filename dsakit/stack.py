"""Stacks backed by a bounded list or by linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when taking from an empty stack."""


class _StackBase:
    """Behaviour shared by every stack: guards and display."""

    def is_empty(self) -> bool:
        raise NotImplementedError

    def _ensure_not_empty(self, action: str) -> None:
        if self.is_empty():
            raise StackUnderflow(f"cannot {action} an empty stack")

    def __iter__(self) -> Iterator[Any]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(top->{list(self)!r})"


class ArrayStack(_StackBase):
    """A stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("stack capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflow(f"cannot push {value!r}: stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        self._ensure_not_empty("pop from")
        return self._items.pop()

    def peek(self, position: int) -> Any:
        """Return the value at ``position``, counting from 1 at the top."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position {position} is not valid for the stack")
        return self._items[-position]

    def top(self) -> Any:
        """Return the top value."""
        self._ensure_not_empty("read the top of")
        return self._items[-1]

    def bottom(self) -> Any:
        """Return the bottom value."""
        self._ensure_not_empty("read the bottom of")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        return reversed(self._items)


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None


class LinkedStack(_StackBase):
    """An unbounded stack of linked nodes; the last initial value is on top."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._top: _Node | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        self._ensure_not_empty("pop from")
        node = self._top
        assert node is not None
        self._top = node.next
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next