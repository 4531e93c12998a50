"""Adjacency-list graphs: directed with cycle detection, undirected with traversals."""

from dsa_lite.graph.directed import CycleResult, DirectedGraph
from dsa_lite.graph.traversal import BreadthFirstTraversal, DepthFirstTraversal
from dsa_lite.graph.undirected import UndirectedGraph
from dsa_lite.graph.vertex import Vertex, VertexNotFoundError

__all__ = [
    "BreadthFirstTraversal",
    "CycleResult",
    "DepthFirstTraversal",
    "DirectedGraph",
    "UndirectedGraph",
    "Vertex",
    "VertexNotFoundError",
]
