"""Singly linked list with head and tail pointers.

Tracking the tail makes append O(1), which is what lets the queue
built on top of this list enqueue and dequeue in constant time.  The
cost is that every mutation has to keep head, tail and length in
sync -- most of the branches below exist for exactly that.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


@dataclass(slots=True, eq=False)
class LinkedListNode(Generic[T]):
    value: T
    next: LinkedListNode[T] | None = None


class LinkedList(Generic[T]):
    """Singly linked list of arbitrary values."""

    __slots__ = ("head", "tail", "length")

    def __init__(self) -> None:
        self.head: LinkedListNode[T] | None = None
        self.tail: LinkedListNode[T] | None = None
        self.length = 0

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> LinkedList[T]:
        lst: LinkedList[T] = cls()
        for v in values:
            lst.append(v)
        return lst

    # ---- mutation --------------------------------------------------------

    def append(self, value: T) -> LinkedList[T]:
        """Add *value* at the tail.  O(1)."""
        node = LinkedListNode(value)
        self.length += 1
        if self.tail is not None:
            self.tail.next = node
            self.tail = node
            return self
        self.head = node
        self.tail = node
        return self

    def prepend(self, value: T) -> LinkedList[T]:
        """Add *value* at the head.  O(1)."""
        node = LinkedListNode(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        self.length += 1
        return self

    def delete_head(self) -> LinkedListNode[T] | None:
        """Detach and return the head node, or None if the list is empty."""
        deleted = self.head
        if deleted is None:
            return None
        self.head = deleted.next
        if deleted is self.tail:
            self.tail = None
        deleted.next = None
        self.length -= 1
        return deleted

    def delete(self, value: Any) -> LinkedListNode[T] | None:
        """Remove the first node holding *value*.  O(n).

        Returns the removed node, or None when no node matches.
        """
        if self.head is None:
            return None
        if self.head.value == value:
            return self.delete_head()

        previous = self.head
        for node in self.traverse(self.head.next):
            if node.value == value:
                previous.next = node.next
                if node is self.tail:
                    self.tail = previous
                node.next = None
                self.length -= 1
                return node
            previous = node
        return None

    # ---- queries ---------------------------------------------------------

    def find_node_by_value(self, value: Any) -> LinkedListNode[T] | None:
        for node in self.traverse():
            if node.value == value:
                return node
        return None

    def traverse(
        self, start: LinkedListNode[T] | None = None
    ) -> Iterator[LinkedListNode[T]]:
        """Yield nodes from *start* (default: head) to the tail."""
        node = self.head if start is None else start
        while node is not None:
            yield node
            node = node.next

    def to_list(self) -> list[T]:
        return list(self)

    # ---- dunder ----------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        for node in self.traverse():
            yield node.value

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return ",".join(str(v) for v in self)

    def __repr__(self) -> str:
        return f"LinkedList([{', '.join(repr(v) for v in self)}])"
