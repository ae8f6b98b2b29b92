"""Top-level package for the map navigator.

Single-source shortest paths over a small, static, weighted directed
graph, with reconstruction of the route to a chosen destination.

    from map_navigator import create_map, find_path

    result = find_path(create_map(), "A", "D")
    result.path  # ("A", "B", "C", "D")
"""

from .domain.models import PathResult, PathStatus
from .graph.store import Graph
from .sample_map import create_map
from .services.path_query import PathQueryService, find_path

__all__ = [
    "Graph",
    "PathResult",
    "PathStatus",
    "PathQueryService",
    "create_map",
    "find_path",
]
