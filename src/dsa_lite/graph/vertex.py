"""Adjacency-list vertex shared by the directed and undirected graphs.

A vertex stores its neighbors by identifier, never by reference, so a
cyclic graph is still a plain tree of owned objects: the graph owns a
dict of vertices and each vertex owns a list of names.
"""
from __future__ import annotations

from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class VertexNotFoundError(LookupError):
    """Raised when an operation names a vertex the graph does not have."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Vertex {name!r} not found")


class Vertex(Generic[T]):
    """A named node with an ordered list of neighbor identifiers.

    Duplicates are allowed in ``connections``: adding the same edge
    twice records it twice.
    """

    __slots__ = ("name", "connections")

    def __init__(self, name: T) -> None:
        self.name = name
        self.connections: list[T] = []

    def connect(self, other: T) -> Vertex[T]:
        self.connections.append(other)
        return self

    def remove_connection(self, other: T) -> Vertex[T]:
        """Drop every occurrence of *other*; keep all other neighbors in order."""
        self.connections = [c for c in self.connections if c != other]
        return self

    def pop_connection(self) -> T:
        """Remove and return the most recently added connection.

        Raises IndexError if the vertex has no connections.
        """
        return self.connections.pop()

    @property
    def is_connected(self) -> bool:
        return len(self.connections) > 0

    @property
    def degree(self) -> int:
        return len(self.connections)

    def __repr__(self) -> str:
        return f"Vertex({self.name!r}, connections={self.connections!r})"
