"""Graph representation and path-finding algorithms.

This subpackage contains the in-memory graph store, the per-query
search state, Dijkstra's algorithm and path reconstruction.
"""

from .dijkstra import DijkstraEngine, compute_shortest_paths
from .path import reconstruct_path
from .state import SearchState
from .store import Graph

__all__ = [
    "Graph",
    "SearchState",
    "DijkstraEngine",
    "compute_shortest_paths",
    "reconstruct_path",
]
