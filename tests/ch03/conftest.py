"""Shared fixtures for graph tests."""
from __future__ import annotations

import pytest

from dsa_lite.graph.directed import DirectedGraph
from dsa_lite.graph.undirected import UndirectedGraph


@pytest.fixture
def empty_undirected() -> UndirectedGraph[int]:
    return UndirectedGraph()


@pytest.fixture
def seven_graph() -> UndirectedGraph[int]:
    """
       2         6
     /  \\      /
    1    3 -- 5
     \\  /      \\
       4         7
    """
    g: UndirectedGraph[int] = UndirectedGraph()
    for a, b in [(1, 2), (1, 4), (2, 3), (4, 3), (3, 5), (5, 6), (5, 7)]:
        g.add_edge(a, b)
    return g


@pytest.fixture
def cyclic_digraph() -> DirectedGraph[int]:
    """1 <- 4 -> 5 -> 6 -> 4"""
    g: DirectedGraph[int] = DirectedGraph()
    for src, dst in [(1, 2), (4, 1), (4, 5), (5, 6), (6, 4)]:
        g.add_edge(src, dst)
    return g


@pytest.fixture
def diamond_digraph() -> DirectedGraph[str]:
    """
    A -> B -> D
    A -> C -> D
    """
    g: DirectedGraph[str] = DirectedGraph()
    for src, dst in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]:
        g.add_edge(src, dst)
    return g
