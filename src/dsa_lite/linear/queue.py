"""FIFO queue over a linked list: enqueue at the tail, dequeue at the head.

Both ends are O(1) because the list keeps a tail pointer.  dequeue()
and peek() return None on an empty queue instead of raising; callers
that may store None themselves should check ``size`` first.
"""
from __future__ import annotations

from typing import Generic, TypeVar

from dsa_lite.linear.linked_list import LinkedList

T = TypeVar("T")


class Queue(Generic[T]):
    __slots__ = ("_list",)

    def __init__(self) -> None:
        self._list: LinkedList[T] = LinkedList()

    def enqueue(self, value: T) -> Queue[T]:
        self._list.append(value)
        return self

    def dequeue(self) -> T | None:
        node = self._list.delete_head()
        return node.value if node is not None else None

    def peek(self) -> T | None:
        """Front of the queue without removing it."""
        head = self._list.head
        return head.value if head is not None else None

    @property
    def size(self) -> int:
        return self._list.length

    def __len__(self) -> int:
        return self._list.length

    def __repr__(self) -> str:
        return f"Queue(size={self.size})"
