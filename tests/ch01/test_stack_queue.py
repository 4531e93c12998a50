"""Tests for the stack and FIFO queue built on LinkedList."""
from __future__ import annotations

from dsa_lite.linear.queue import Queue
from dsa_lite.linear.stack import Stack


class TestStack:
    def test_push_pop_lifo(self) -> None:
        stack: Stack[int] = Stack()
        stack.push(1).push(2).push(3)
        assert stack.size == 3
        assert stack.pop() == 3
        assert stack.pop() == 2
        assert stack.pop() == 1
        assert stack.pop() is None
        assert stack.size == 0

    def test_peek_does_not_remove(self) -> None:
        stack: Stack[str] = Stack().push("a").push("b")
        assert stack.peek() == "b"
        assert len(stack) == 2

    def test_peek_empty(self) -> None:
        assert Stack().peek() is None


class TestQueue:
    def test_fifo(self) -> None:
        queue: Queue[int] = Queue()
        queue.enqueue(1)
        queue.enqueue(2)
        assert queue.size == 2
        assert queue.dequeue() == 1

        queue.enqueue(3).enqueue(4)
        assert queue.dequeue() == 2
        assert queue.dequeue() == 3
        assert queue.dequeue() == 4
        assert queue.dequeue() is None

    def test_peek(self) -> None:
        queue: Queue[int] = Queue()
        queue.enqueue(10)
        assert queue.peek() == 10
        assert queue.size == 1
        assert queue.dequeue() == 10
        assert queue.size == 0
        assert queue.peek() is None

    def test_reuse_after_drain(self) -> None:
        queue: Queue[int] = Queue()
        queue.enqueue(1)
        queue.dequeue()
        queue.enqueue(2).enqueue(3)
        assert [queue.dequeue(), queue.dequeue()] == [2, 3]

    def test_len_and_repr(self) -> None:
        queue: Queue[int] = Queue().enqueue(1)
        assert len(queue) == 1
        assert repr(queue) == "Queue(size=1)"
