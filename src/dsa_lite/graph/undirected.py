"""Undirected graph on adjacency lists.

Every edge is stored twice, once on each endpoint, and every mutation
touches both sides: if A lists B then B lists A.  A self-loop is
stored as two entries on the one vertex.

Traversals are lazy iterators (see traversal.py) and each call starts
from a fresh ``seen`` set.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Generic, Hashable, Iterator, Mapping, TypeVar

from dsa_lite.graph.traversal import BreadthFirstTraversal, DepthFirstTraversal
from dsa_lite.graph.vertex import Vertex, VertexNotFoundError

log = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class UndirectedGraph(Generic[T]):
    """Undirected graph keyed by vertex name, with symmetric edges."""

    __slots__ = ("_vertices",)

    def __init__(self) -> None:
        self._vertices: dict[T, Vertex[T]] = {}

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, name: T) -> Vertex[T]:
        """Return the vertex for *name*, creating it if absent.  O(1)."""
        vertex = self._vertices.get(name)
        if vertex is None:
            vertex = self._vertices[name] = Vertex(name)
        return vertex

    def add_edge(self, source: T, destination: T) -> None:
        """Connect source and destination in both directions.  O(1)."""
        self.add_vertex(source).connect(destination)
        self.add_vertex(destination).connect(source)

    def remove_edge(self, source: T, destination: T) -> None:
        """Remove every source--destination edge from both endpoints.

        O(degree).  Raises VertexNotFoundError if either endpoint is
        missing; removing an edge that is not there is a no-op.
        """
        src = self.vertex(source)
        dst = self.vertex(destination)
        src.remove_connection(destination)
        dst.remove_connection(source)

    def remove_vertex(self, name: T) -> None:
        """Remove *name* and every edge touching it.  O(V + E).

        Raises VertexNotFoundError if the vertex does not exist.
        """
        vertex = self.vertex(name)
        dropped = 0
        while vertex.is_connected:
            neighbor = vertex.pop_connection()
            self.remove_edge(name, neighbor)
            dropped += 1
        del self._vertices[name]
        log.debug("removed vertex %r (%d edge(s) dropped)", name, dropped)

    # ---- traversal -------------------------------------------------------

    def breadth_first_traversal(self, start: T) -> BreadthFirstTraversal[T]:
        """Lazily visit everything reachable from *start*, nearest first."""
        return BreadthFirstTraversal(self._vertices, start)

    def depth_first_traversal(
        self, start: T, seen: set[T] | None = None
    ) -> DepthFirstTraversal[T]:
        """Lazily visit everything reachable from *start*, depth first.

        Pass *seen* to skip vertices and to collect the ones visited;
        the set is updated in place.
        """
        return DepthFirstTraversal(self._vertices, start, seen)

    def connected_components(self) -> list[list[T]]:
        """Partition the vertices into connected components.

        Components are ordered by their first vertex in insertion
        order; vertices within a component are in DFS order.
        """
        seen: set[T] = set()
        components: list[list[T]] = []
        for name in self._vertices:
            if name in seen:
                continue
            components.append(
                [v.name for v in self.depth_first_traversal(name, seen)]
            )
        return components

    # ---- queries ---------------------------------------------------------

    @property
    def vertices(self) -> Mapping[T, Vertex[T]]:
        """Read-only view of the name -> vertex mapping."""
        return MappingProxyType(self._vertices)

    def vertex(self, name: T) -> Vertex[T]:
        try:
            return self._vertices[name]
        except KeyError:
            raise VertexNotFoundError(name) from None

    def neighbors(self, name: T) -> list[T]:
        return list(self.vertex(name).connections)

    def has_edge(self, a: T, b: T) -> bool:
        vertex = self._vertices.get(a)
        return vertex is not None and b in vertex.connections

    def edges(self) -> Iterator[tuple[T, T]]:
        """Yield each edge once, as seen from the endpoint added first."""
        order = {name: i for i, name in enumerate(self._vertices)}
        for name, vertex in self._vertices.items():
            loops = 0
            for other in vertex.connections:
                if other == name:
                    # a self-loop is stored twice on the same vertex
                    loops += 1
                    if loops % 2:
                        yield name, other
                elif order[name] < order[other]:
                    yield name, other

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._vertices

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return (
            f"UndirectedGraph(vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )
