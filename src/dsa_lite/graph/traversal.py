"""Lazy breadth-first and depth-first traversals over an adjacency map.

Both traversals are explicit iterator objects rather than generator
functions: each one owns its frontier (a Queue for BFS, a Stack of
frames for DFS) and its ``seen`` set, and every call to ``next()``
advances by exactly one visited vertex.  Abandoning an iterator part
way needs no cleanup.

The iterators read the graph's vertex dict live.  Mutating the graph
while an iterator is suspended is not supported.

Ordering:
  BFS  -- by distance from the start, ties broken by each vertex's
          connection order.  A vertex is emitted the first time it is
          dequeued unseen; its unseen neighbors are enqueued then, so
          a vertex may sit in the queue more than once.
  DFS  -- pre-order (visit, then descend), neighbors in connection
          order.  Equivalent to the recursive definition but the call
          stack is replaced by a Stack of (name, connection iterator)
          frames, so depth is bounded by memory, not recursion limit.
"""
from __future__ import annotations

from typing import Generic, Hashable, Iterator, Mapping, TypeVar

from dsa_lite.graph.vertex import Vertex
from dsa_lite.linear.queue import Queue
from dsa_lite.linear.stack import Stack

T = TypeVar("T", bound=Hashable)


class BreadthFirstTraversal(Generic[T]):
    """Iterator over the vertices reachable from *start*, in BFS order.

    The start is looked up on the first pull, not at construction.
    Yields nothing if *start* is not in *vertices* by then.
    """

    __slots__ = ("_vertices", "_queue", "_seen", "_start", "_started")

    def __init__(self, vertices: Mapping[T, Vertex[T]], start: T) -> None:
        self._vertices = vertices
        self._queue: Queue[T] = Queue()
        self._seen: set[T] = set()
        self._start = start
        self._started = False

    def __iter__(self) -> BreadthFirstTraversal[T]:
        return self

    def __next__(self) -> Vertex[T]:
        if not self._started:
            self._started = True
            if self._start in self._vertices:
                self._queue.enqueue(self._start)

        while self._queue.size:
            name = self._queue.dequeue()
            if name in self._seen:
                continue
            self._seen.add(name)  # type: ignore[arg-type]
            vertex = self._vertices[name]  # type: ignore[index]
            for neighbor in vertex.connections:
                if neighbor not in self._seen:
                    self._queue.enqueue(neighbor)
            return vertex
        raise StopIteration


class DepthFirstTraversal(Generic[T]):
    """Iterator over the vertices reachable from *start*, in DFS pre-order.

    If *seen* is given it is shared with the caller and updated in
    place, which lets several traversals partition a graph without
    revisiting vertices.  The start is checked on the first pull:
    nothing is yielded if it is missing or already in *seen* by then.
    """

    __slots__ = ("_vertices", "_stack", "_seen", "_start", "_started")

    def __init__(
        self,
        vertices: Mapping[T, Vertex[T]],
        start: T,
        seen: set[T] | None = None,
    ) -> None:
        self._vertices = vertices
        self._stack: Stack[tuple[T, Iterator[T]]] = Stack()
        self._seen: set[T] = set() if seen is None else seen
        self._start = start
        self._started = False

    def __iter__(self) -> DepthFirstTraversal[T]:
        return self

    def _enter(self, name: T) -> Vertex[T]:
        vertex = self._vertices[name]
        self._seen.add(name)
        self._stack.push((name, iter(vertex.connections)))
        return vertex

    def __next__(self) -> Vertex[T]:
        if not self._started:
            self._started = True
            start = self._start
            if start in self._vertices and start not in self._seen:
                return self._enter(start)

        while self._stack.size:
            _, pending = self._stack.peek()  # type: ignore[misc]
            for neighbor in pending:
                if neighbor not in self._seen:
                    return self._enter(neighbor)
            # every neighbor handled: unwind this frame
            self._stack.pop()
        raise StopIteration
