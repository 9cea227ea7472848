"""A singly linked list of values with positional insertion and deletion.

Positions are counted from 1, the first element of the list.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["LinkedList"]


@dataclass(slots=True)
class _Node:
    value: Any
    link: Optional[_Node] = None


class LinkedList:
    """A singly linked list whose positions are counted from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._start: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _node_at(self, position: int) -> _Node:
        node = self._start
        for _ in range(position - 1):
            assert node is not None
            node = node.link
        assert node is not None
        return node

    def append(self, value: Any) -> None:
        """Add *value* at the end of the list."""
        new = _Node(value)
        if self._start is None:
            self._start = new
        else:
            self._node_at(self._size).link = new
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add *value* at the front of the list."""
        self._start = _Node(value, self._start)
        self._size += 1

    def add_after(self, position: int, value: Any) -> None:
        """Insert *value* right after the element at *position*."""
        if not 1 <= position <= self._size:
            raise IndexError("there are less elements")
        node = self._node_at(position)
        node.link = _Node(value, node.link)
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert *value* so that it ends up at *position*.

        The list must not be empty, and *position* may be at most one past
        the last element.
        """
        if position <= 0:
            raise IndexError("enter valid location")
        if self._start is None:
            raise IndexError("list has no elements")
        if position == 1:
            self.prepend(value)
            return
        if position > self._size + 1:
            raise IndexError("there are less elements")
        self.add_after(position - 1, value)

    def remove(self, value: Any) -> None:
        """Remove the first element equal to *value*."""
        if self._start is None:
            raise ValueError("linked list is empty")
        if self._start.value == value:
            self._start = self._start.link
            self._size -= 1
            return
        previous = self._start
        while previous.link is not None:
            if previous.link.value == value:
                previous.link = previous.link.link
                self._size -= 1
                return
            previous = previous.link
        raise ValueError("element not found")

    def delete_at(self, position: int) -> Any:
        """Remove the element at *position* and return its value."""
        if self._start is None:
            raise IndexError("list is empty")
        if not 1 <= position <= self._size:
            raise IndexError("location exceeds")
        if position == 1:
            removed = self._start
            self._start = removed.link
        else:
            previous = self._node_at(position - 1)
            removed = previous.link
            assert removed is not None
            previous.link = removed.link
        self._size -= 1
        return removed.value

    def index(self, value: Any) -> int:
        """Return the position of the first element equal to *value*."""
        if self._start is None:
            raise ValueError("linked list is empty")
        for position, item in enumerate(self, start=1):
            if item == value:
                return position
        raise ValueError("element not found")

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        previous: Optional[_Node] = None
        current = self._start
        while current is not None:
            following = current.link
            current.link = previous
            previous, current = current, following
        self._start = previous

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._start
        while node is not None:
            yield node.value
            node = node.link

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"