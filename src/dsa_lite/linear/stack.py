"""LIFO stack: push and pop both work on the head of a linked list."""
from __future__ import annotations

from typing import Generic, TypeVar

from dsa_lite.linear.linked_list import LinkedList

T = TypeVar("T")


class Stack(Generic[T]):
    __slots__ = ("_list",)

    def __init__(self) -> None:
        self._list: LinkedList[T] = LinkedList()

    def push(self, value: T) -> Stack[T]:
        """Push *value* on top.  Returns self so pushes can be chained."""
        self._list.prepend(value)
        return self

    def pop(self) -> T | None:
        """Remove and return the top value, or None if empty."""
        node = self._list.delete_head()
        return node.value if node is not None else None

    def peek(self) -> T | None:
        head = self._list.head
        return head.value if head is not None else None

    @property
    def size(self) -> int:
        return self._list.length

    def __len__(self) -> int:
        return self._list.length

    def __repr__(self) -> str:
        return f"Stack(size={self.size})"
