"""Tests for the adjacency-list Vertex."""
from __future__ import annotations

import pytest

from dsa_lite.graph.vertex import Vertex, VertexNotFoundError


class TestVertex:
    def test_new_vertex_is_unconnected(self) -> None:
        v: Vertex[int] = Vertex(1)
        assert v.name == 1
        assert v.connections == []
        assert not v.is_connected
        assert v.degree == 0

    def test_connect_preserves_order_and_duplicates(self) -> None:
        v: Vertex[int] = Vertex(1)
        assert v.connect(3) is v
        v.connect(2).connect(3)
        assert v.connections == [3, 2, 3]
        assert v.is_connected

    def test_remove_connection_removes_not_keeps(self) -> None:
        v: Vertex[int] = Vertex(1)
        v.connect(2).connect(3).connect(4)
        v.remove_connection(3)
        assert v.connections == [2, 4]

    def test_remove_connection_drops_duplicates(self) -> None:
        v: Vertex[int] = Vertex(1)
        v.connect(2).connect(3).connect(2)
        v.remove_connection(2)
        assert v.connections == [3]

    def test_remove_missing_connection_is_noop(self) -> None:
        v: Vertex[int] = Vertex(1)
        v.connect(2)
        v.remove_connection(9)
        assert v.connections == [2]

    def test_pop_connection_is_lifo(self) -> None:
        v: Vertex[int] = Vertex(1)
        v.connect(2).connect(3)
        assert v.pop_connection() == 3
        assert v.connections == [2]

    def test_pop_connection_empty_raises(self) -> None:
        with pytest.raises(IndexError):
            Vertex(1).pop_connection()


def test_not_found_error_names_vertex() -> None:
    err = VertexNotFoundError("x")
    assert err.name == "x"
    assert "'x'" in str(err)
    assert isinstance(err, LookupError)
