"""Small container types: a bounded stack and a singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

MAX_SIZE_STACK = 512


class Stack(Generic[T]):
    """A last-in first-out stack holding fewer than ``capacity`` items."""

    def __init__(self, capacity: int = MAX_SIZE_STACK) -> None:
        if capacity < 1:
            raise ValueError("stack capacity must be at least 1")
        self.capacity = capacity
        self._items: List[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top; raises OverflowError when the stack is full."""
        if len(self._items) + 1 >= self.capacity:
            raise OverflowError(f"stack is full ({self.capacity - 1} items)")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list of values."""

    def __init__(self, values: Any = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: T) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, value: T) -> None:
        """Remove the first node holding ``value``; raises ValueError if absent."""
        previous: Optional[_Node[T]] = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{value!r} is not in the list")

    def insert_after(self, target: T, value: T) -> None:
        """Insert ``value`` right after the first node holding ``target``."""
        for node in self._nodes():
            if node.value == target:
                node.next = _Node(value, node.next)
                if node is self._tail:
                    self._tail = node.next
                self._size += 1
                return
        raise ValueError(f"{target!r} is not in the list")

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"