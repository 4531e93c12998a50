"""dsa-lite CLI entry point.

Usage: uv run dsa-lite [command]

Edges are given as SOURCE:DESTINATION pairs, e.g. ``1:2 2:3 3:1``.
Names that parse as integers are treated as integers.
"""
import argparse
import logging
import sys

from dsa_lite.graph.directed import DirectedGraph
from dsa_lite.graph.undirected import UndirectedGraph


def _name(raw: str) -> int | str:
    try:
        return int(raw)
    except ValueError:
        return raw


def _edge(raw: str) -> tuple[int | str, int | str]:
    src, sep, dst = raw.partition(":")
    if not sep or not src or not dst:
        raise argparse.ArgumentTypeError(
            f"edge {raw!r} must look like SOURCE:DESTINATION"
        )
    return _name(src), _name(dst)


def _add_edges_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "edges", nargs="+", type=_edge, metavar="EDGE",
        help="Edge as SOURCE:DESTINATION (repeatable).",
    )


def _add_traverse_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "traverse",
        help="Print the visit order of an undirected graph traversal.",
    )
    _add_edges_argument(p)
    p.add_argument(
        "--start", type=_name, required=True,
        help="Vertex to start from.",
    )
    p.add_argument(
        "--order", choices=("bfs", "dfs"), default="bfs",
        help="Breadth-first or depth-first (default: bfs)",
    )


def _add_cycle_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "cycle",
        help="Check a directed graph for cycles (exit status 1 if found).",
    )
    _add_edges_argument(p)


def _add_components_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "components",
        help="Print the connected components of an undirected graph.",
    )
    _add_edges_argument(p)


def _undirected(edges: list) -> UndirectedGraph:
    graph: UndirectedGraph = UndirectedGraph()
    for src, dst in edges:
        graph.add_edge(src, dst)
    return graph


def _run_traverse(args: argparse.Namespace) -> int:
    graph = _undirected(args.edges)
    if args.order == "bfs":
        visited = graph.breadth_first_traversal(args.start)
    else:
        visited = graph.depth_first_traversal(args.start)
    print(" ".join(str(v.name) for v in visited))
    return 0


def _run_cycle(args: argparse.Namespace) -> int:
    graph: DirectedGraph = DirectedGraph()
    for src, dst in args.edges:
        graph.add_edge(src, dst)
    result = graph.detect_cycle()
    if not result.has_cycle:
        print("no cycle")
        return 0
    print("cycle: " + " -> ".join(str(n) for n in result.cycle_path or []))
    return 1


def _run_components(args: argparse.Namespace) -> int:
    for component in _undirected(args.edges).connected_components():
        print(" ".join(str(n) for n in component))
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="dsa-lite",
        description="Classic data structures -- pure Python, zero infrastructure.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_traverse_parser(subparsers)
    _add_cycle_parser(subparsers)
    _add_components_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    runners = {
        "traverse": _run_traverse,
        "cycle": _run_cycle,
        "components": _run_components,
    }
    sys.exit(runners[args.command](args))


if __name__ == "__main__":
    main()
