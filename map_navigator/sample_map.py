"""Sample map used by the command-line navigator and the tests."""

from __future__ import annotations

from .graph.store import Graph

SAMPLE_NODES = ("A", "B", "C", "D", "E")

SAMPLE_EDGES = (
    ("A", "B", 1),
    ("A", "C", 4),
    ("B", "C", 2),
    ("B", "D", 5),
    ("C", "D", 1),
    ("D", "E", 7),
)


def create_map() -> Graph:
    """Create the five-node demonstration map A..E."""
    return Graph.from_edges(SAMPLE_EDGES, nodes=SAMPLE_NODES)
