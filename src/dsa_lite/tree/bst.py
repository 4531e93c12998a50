"""Unbalanced binary search tree.

Values greater than or equal to a node go to its right subtree,
smaller values to the left, so duplicates are kept and an in-order
walk returns them in insertion order among equals.

No rebalancing: insert is O(log n) on random input and degrades to
O(n) on sorted input.  Because a sorted insert sequence produces a
tree as deep as the input is long, every traversal below walks the
tree with an explicit Stack or Queue instead of recursing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, TypeVar

from dsa_lite.linear.queue import Queue
from dsa_lite.linear.stack import Stack

T = TypeVar("T")


@dataclass(slots=True, eq=False)
class BinarySearchNode(Generic[T]):
    value: T
    left: BinarySearchNode[T] | None = None
    right: BinarySearchNode[T] | None = None


class BinarySearchTree(Generic[T]):
    __slots__ = ("root", "_size")

    def __init__(self) -> None:
        self.root: BinarySearchNode[T] | None = None
        self._size = 0

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> BinarySearchTree[T]:
        tree: BinarySearchTree[T] = cls()
        for v in values:
            tree.insert(v)
        return tree

    def insert(self, value: T) -> BinarySearchTree[T]:
        """Insert *value* and return self for chaining."""
        node = BinarySearchNode(value)
        self._size += 1
        if self.root is None:
            self.root = node
            return self

        cur = self.root
        while True:
            if value >= cur.value:  # type: ignore[operator]
                if cur.right is None:
                    cur.right = node
                    return self
                cur = cur.right
            else:
                if cur.left is None:
                    cur.left = node
                    return self
                cur = cur.left

    # ---- traversals ------------------------------------------------------

    def in_order(self) -> Iterator[T]:
        """Yield values in sorted order (left, root, right)."""
        stack: Stack[BinarySearchNode[T]] = Stack()
        cur = self.root
        while cur is not None or stack.size:
            while cur is not None:
                stack.push(cur)
                cur = cur.left
            node: BinarySearchNode[T] = stack.pop()  # type: ignore[assignment]
            yield node.value
            cur = node.right

    def pre_order(self) -> Iterator[T]:
        """Yield values root first, then left subtree, then right."""
        if self.root is None:
            return
        stack: Stack[BinarySearchNode[T]] = Stack().push(self.root)
        while stack.size:
            node: BinarySearchNode[T] = stack.pop()  # type: ignore[assignment]
            yield node.value
            # right first so left comes off the stack first
            if node.right is not None:
                stack.push(node.right)
            if node.left is not None:
                stack.push(node.left)

    def post_order(self) -> Iterator[T]:
        """Yield values left subtree first, then right, then root.

        Two-stack variant: the first stack produces root-right-left,
        the second reverses it into left-right-root.
        """
        if self.root is None:
            return
        pending: Stack[BinarySearchNode[T]] = Stack().push(self.root)
        output: Stack[T] = Stack()
        while pending.size:
            node: BinarySearchNode[T] = pending.pop()  # type: ignore[assignment]
            output.push(node.value)
            if node.left is not None:
                pending.push(node.left)
            if node.right is not None:
                pending.push(node.right)
        while output.size:
            yield output.pop()  # type: ignore[misc]

    def breadth_first(self) -> Iterator[T]:
        """Yield values level by level, left to right."""
        if self.root is None:
            return
        queue: Queue[BinarySearchNode[T]] = Queue().enqueue(self.root)
        while queue.size:
            node: BinarySearchNode[T] = queue.dequeue()  # type: ignore[assignment]
            yield node.value
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, value: Any) -> bool:
        cur = self.root
        while cur is not None:
            if value == cur.value:
                return True
            cur = cur.right if value > cur.value else cur.left
        return False

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree(size={self._size})"
