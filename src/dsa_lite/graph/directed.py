"""Directed graph on adjacency lists, with three-color cycle detection.

The three colors are kept as three disjoint collections:
  unvisited  -- not reached yet
  visiting   -- on the current DFS path (ancestors of the current vertex)
  visited    -- fully explored, proven cycle-free from here on

An edge into a ``visiting`` vertex is a back edge and closes a cycle.
Every vertex moves unvisited -> visiting -> visited at most once, so
the scan is O(V + E) over all components and stops at the first back
edge it finds.

The DFS keeps an explicit stack of (name, connection iterator) frames
instead of recursing, so long chains do not hit the recursion limit.
The frame stack doubles as the current path, which is what lets us
report the cycle itself and not just a boolean.

There is no removal API on the graph: it only grows.  The ``vertices``
view is read-only at the mapping level only; the Vertex objects it
hands out are the live ones, so callers must not mutate them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic, Hashable, Iterator, Mapping, TypeVar

from dsa_lite.graph.vertex import Vertex, VertexNotFoundError
from dsa_lite.linear.stack import Stack

log = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


@dataclass(slots=True)
class CycleResult(Generic[T]):
    """Result of cycle detection.

    cycle_path is [v0, v1, ..., vk, v0] where every consecutive pair
    is an edge of the graph; None when there is no cycle.
    """
    has_cycle: bool
    cycle_path: list[T] | None = None


class DirectedGraph(Generic[T]):
    """Append-only directed graph keyed by vertex name."""

    __slots__ = ("_vertices",)

    def __init__(self) -> None:
        self._vertices: dict[T, Vertex[T]] = {}

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, name: T) -> Vertex[T]:
        """Add *name* with no connections.  No-op if it already exists."""
        vertex = self._vertices.get(name)
        if vertex is None:
            vertex = self._vertices[name] = Vertex(name)
        return vertex

    def add_edge(self, source: T, destination: T) -> None:
        """Add the edge source -> destination, creating either end if needed.

        Duplicate edges are appended again, not merged.
        """
        src = self.add_vertex(source)
        self.add_vertex(destination)
        src.connect(destination)

    # ---- cycles ----------------------------------------------------------

    def has_cycle(self) -> bool:
        return self.detect_cycle().has_cycle

    def detect_cycle(self) -> CycleResult[T]:
        """Find a directed cycle anywhere in the graph, if there is one."""
        # dict as an insertion-ordered set keeps the scan deterministic
        unvisited: dict[T, None] = dict.fromkeys(self._vertices)
        visiting: set[T] = set()
        visited: set[T] = set()

        while unvisited:
            root = next(iter(unvisited))
            cycle = self._scan(root, unvisited, visiting, visited)
            if cycle is not None:
                log.debug("cycle found: %s", " -> ".join(map(repr, cycle)))
                return CycleResult(has_cycle=True, cycle_path=cycle)

        log.debug("no cycle in %d vertices", len(visited))
        return CycleResult(has_cycle=False, cycle_path=None)

    def _scan(
        self,
        root: T,
        unvisited: dict[T, None],
        visiting: set[T],
        visited: set[T],
    ) -> list[T] | None:
        """DFS from *root*.  Returns the cycle path on the first back edge."""
        frames: Stack[tuple[T, Iterator[T]]] = Stack()
        path: list[T] = []

        def enter(name: T) -> None:
            del unvisited[name]
            visiting.add(name)
            path.append(name)
            frames.push((name, iter(self._vertices[name].connections)))

        enter(root)
        while frames.size:
            name, pending = frames.peek()  # type: ignore[misc]
            for succ in pending:
                if succ in visited:
                    continue
                if succ in visiting:
                    # back edge: the cycle is the path suffix starting at succ
                    return path[path.index(succ):] + [succ]
                enter(succ)
                break
            else:
                frames.pop()
                path.pop()
                visiting.discard(name)
                visited.add(name)
        return None

    # ---- queries ---------------------------------------------------------

    @property
    def vertices(self) -> Mapping[T, Vertex[T]]:
        """Read-only view of the name -> vertex mapping.

        Only the mapping is read-only: the vertices are the graph's own
        objects.  Use successors() for a copy of a vertex's edges.
        """
        return MappingProxyType(self._vertices)

    def vertex(self, name: T) -> Vertex[T]:
        try:
            return self._vertices[name]
        except KeyError:
            raise VertexNotFoundError(name) from None

    def successors(self, name: T) -> list[T]:
        """Targets of edges leaving *name*, in insertion order."""
        return list(self.vertex(name).connections)

    def has_edge(self, source: T, destination: T) -> bool:
        vertex = self._vertices.get(source)
        return vertex is not None and destination in vertex.connections

    def edges(self) -> Iterator[tuple[T, T]]:
        for name, vertex in self._vertices.items():
            for dst in vertex.connections:
                yield name, dst

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return sum(v.degree for v in self._vertices.values())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._vertices

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return (
            f"DirectedGraph(vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )
