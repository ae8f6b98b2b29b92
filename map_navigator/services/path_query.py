"""Path query service - The façade used by front-ends.

This service resolves node names, runs the shortest-path engine,
rebuilds the route and classifies the outcome as a PathResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..adapters.rendering import TextPathRenderer
from ..domain.errors import NoPathError
from ..domain.models import Node, PathResult, PathStatus
from ..graph.dijkstra import DijkstraEngine
from ..graph.path import reconstruct_path
from ..graph.store import Graph
from ..ports.graph import ShortestPathEnginePort
from ..ports.rendering import PathRendererPort


@dataclass
class PathQueryService:
    """Main service for shortest-path queries between named nodes.

    Each call computes a fresh search state, so repeated queries on
    the same graph never see each other's distances or predecessors.

    Attributes:
        engine: Computes single-source shortest paths
        renderer: Optional renderer used by ``describe``
    """

    engine: ShortestPathEnginePort = field(default_factory=DijkstraEngine)
    renderer: Optional[PathRendererPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_path(self, graph: Graph, start_name: str, end_name: str) -> PathResult:
        """Find the shortest path between two named nodes.

        Unknown names and unreachable destinations are ordinary
        outcomes reported through the result status, never raised.

        Args:
            graph: The graph to search.
            start_name: Name of the start node.
            end_name: Name of the destination node.

        Returns:
            PathResult with status FOUND, NO_PATH or INVALID_NODES.
        """
        start = graph.find_by_name(start_name)
        end = graph.find_by_name(end_name)

        if start is None or end is None:
            self._logger.warning(
                "Invalid nodes",
                extra={"start": start_name, "end": end_name},
            )
            return PathResult.invalid_nodes()

        return self._search(graph, start, end)

    def _search(self, graph: Graph, start: Node, end: Node) -> PathResult:
        """Run the engine between two resolved nodes and classify the route."""
        start_name, end_name = start.name, end.name
        state = self.engine.compute(graph, start)
        node_ids = reconstruct_path(state, end)

        if len(node_ids) == 1 and node_ids[0] != start.id:
            self._logger.warning(
                "No path found",
                extra={"start": start_name, "end": end_name},
            )
            return PathResult.no_path()

        result = PathResult.found(
            (graph.node(node_id).name for node_id in node_ids),
            state.distance(end),
        )
        self._logger.info(
            "Path found",
            extra={
                "start": start_name,
                "end": end_name,
                "stops": result.num_stops,
                "total_weight": result.total_weight,
            },
        )
        return result

    def find_path_or_raise(
        self, graph: Graph, start_name: str, end_name: str
    ) -> PathResult:
        """Find the shortest path, raising on unknown names or no path.

        Raises:
            NodeNotFoundError: If either name is not in the graph.
            NoPathError: If the destination is unreachable from the start.
        """
        start = graph.get_node_or_raise(start_name)
        end = graph.get_node_or_raise(end_name)

        result = self._search(graph, start, end)
        if result.status is PathStatus.NO_PATH:
            raise NoPathError(
                f"No path from {start_name} to {end_name}",
                start=start_name,
                end=end_name,
            )
        return result

    def render(self, result: PathResult) -> str:
        """Render a result with the configured renderer (plain text by default)."""
        renderer = self.renderer or TextPathRenderer()
        return renderer.render(result)

    def describe(self, graph: Graph, start_name: str, end_name: str) -> str:
        """Run a query and render its result as text."""
        return self.render(self.find_path(graph, start_name, end_name))


_default_service: Optional[PathQueryService] = None


def find_path(graph: Graph, start_name: str, end_name: str) -> PathResult:
    """Find the shortest path using a default Dijkstra-backed service."""
    global _default_service
    if _default_service is None:
        _default_service = PathQueryService()
    return _default_service.find_path(graph, start_name, end_name)
