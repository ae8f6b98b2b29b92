"""Graph ports - Abstractions for shortest-path computation.

These protocols define the contracts the query service depends on,
so the engine can be swapped (e.g. for an instrumented or alternative
implementation) without touching the service.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Node
    from ..graph.state import SearchState
    from ..graph.store import Graph


class ShortestPathEnginePort(Protocol):
    """Port for single-source shortest-path computation.

    Implementation: graph/dijkstra.py (DijkstraEngine)

    The engine fills a fresh SearchState with the final distance and
    predecessor of every node reachable from the source.
    """

    def compute(self, graph: Graph, source: Node) -> SearchState:
        """Compute shortest paths from a source node.

        Args:
            graph: The graph to search.
            source: Start node, which must belong to ``graph``.

        Returns:
            SearchState with distances and predecessors for every node.
        """
        ...
