"""Benchmark tests for the graph algorithms.

Realistic workloads with wall-clock timing printed for reference.
The bounds are loose sanity checks, not performance targets.
"""
from __future__ import annotations

import random
import time

from dsa_lite.graph.directed import DirectedGraph
from dsa_lite.graph.undirected import UndirectedGraph

SEED = 42


def _make_dag(n_nodes: int, edge_prob: float, seed: int = SEED) -> DirectedGraph[int]:
    """Random DAG with forward edges only."""
    rng = random.Random(seed)
    g: DirectedGraph[int] = DirectedGraph()
    for i in range(n_nodes):
        g.add_vertex(i)
    for i in range(n_nodes):
        for j in range(i + 1, n_nodes):
            if rng.random() < edge_prob:
                g.add_edge(i, j)
    return g


def _make_sparse_graph(n_nodes: int, n_edges: int, seed: int = SEED) -> UndirectedGraph[int]:
    rng = random.Random(seed)
    g: UndirectedGraph[int] = UndirectedGraph()
    for i in range(n_nodes):
        g.add_vertex(i)
    for _ in range(n_edges):
        g.add_edge(rng.randrange(n_nodes), rng.randrange(n_nodes))
    return g


class TestCycleDetectionPerformance:
    def test_has_cycle_1000_dag(self) -> None:
        g = _make_dag(1000, 0.01)
        t0 = time.perf_counter()
        for _ in range(20):
            result = g.has_cycle()
        elapsed = (time.perf_counter() - t0) / 20 * 1000
        print(f"\nhas_cycle 1000-node DAG: {elapsed:.3f} ms")
        print(f"  vertices={g.vertex_count}, edges={g.edge_count}")
        assert not result
        assert elapsed < 500

    def test_has_cycle_1000_with_cycle(self) -> None:
        g = _make_dag(1000, 0.01)
        g.add_edge(999, 0)
        t0 = time.perf_counter()
        for _ in range(20):
            result = g.has_cycle()
        elapsed = (time.perf_counter() - t0) / 20 * 1000
        print(f"\nhas_cycle 1000-node graph with cycle: {elapsed:.3f} ms")
        assert result
        assert elapsed < 500


class TestTraversalPerformance:
    def test_bfs_vs_dfs_sparse(self) -> None:
        g = _make_sparse_graph(5000, 10_000)
        t0 = time.perf_counter()
        bfs = sum(1 for _ in g.breadth_first_traversal(0))
        bfs_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        dfs = sum(1 for _ in g.depth_first_traversal(0))
        dfs_ms = (time.perf_counter() - t0) * 1000

        print(f"\nTraversal over 5000 vertices / 10000 edges:")
        print(f"  BFS: {bfs_ms:.2f} ms ({bfs} visited)")
        print(f"  DFS: {dfs_ms:.2f} ms ({dfs} visited)")
        assert bfs == dfs
        assert bfs_ms < 2000
        assert dfs_ms < 2000
