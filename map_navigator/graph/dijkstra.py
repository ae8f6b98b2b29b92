"""Single-source shortest paths using Dijkstra's algorithm.

The frontier is a binary heap of ``(distance, node_id)`` entries.
Instead of decrease-key, a node whose distance improves is pushed
again and the outdated entry is skipped when popped, since the node
is already visited by then. Ties pop in node id (insertion) order.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..domain.errors import GraphError
from ..domain.models import Node
from .state import SearchState
from .store import Graph


def compute_shortest_paths(graph: Graph, source: Node) -> SearchState:
    """Compute shortest distances and predecessors from ``source``.

    Parameters
    ----------
    graph:
        Graph with non-negative integer edge weights.
    source:
        Node of ``graph`` to start from.

    Returns
    -------
    SearchState
        Final distances and predecessors for every node. Nodes not
        reachable from ``source`` keep an infinite distance and no
        predecessor.
    """
    return _dijkstra(graph, source)[0]


def _dijkstra(graph: Graph, source: Node) -> Tuple[SearchState, Dict[str, int]]:
    if source not in graph:
        raise GraphError(f"Source node {source.name!r} does not belong to this graph")

    state = SearchState(len(graph))
    state.distances[source.id] = 0

    counters = {"heap_pops": 0, "heap_pushes": 1, "edges_examined": 0, "relaxed": 0}
    heap: List[Tuple[float, int]] = [(0, source.id)]

    while heap:
        current_distance, u = heapq.heappop(heap)
        counters["heap_pops"] += 1

        # Skip outdated entries
        if state.visited[u]:
            continue

        state.visited[u] = True

        for edge in graph.outgoing(graph.node(u)):
            counters["edges_examined"] += 1
            v = edge.destination
            if state.visited[v]:
                continue

            candidate = current_distance + edge.weight
            if candidate < state.distances[v]:
                state.distances[v] = candidate
                state.predecessors[v] = u
                heapq.heappush(heap, (candidate, v))
                counters["heap_pushes"] += 1
                counters["relaxed"] += 1

    return state, counters


@dataclass
class DijkstraEngine:
    """Shortest-path engine with per-invocation instrumentation.

    Implements ShortestPathEnginePort. The ``last_*`` counters describe
    the most recent call to ``compute``.
    """

    last_heap_pops: int = field(default=0, init=False)
    last_heap_pushes: int = field(default=0, init=False)
    last_edges_examined: int = field(default=0, init=False)
    last_relaxed: int = field(default=0, init=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def compute(self, graph: Graph, source: Node) -> SearchState:
        """Run Dijkstra from ``source`` and return the filled search state.

        Raises:
            GraphError: If ``source`` does not belong to ``graph``.
        """
        state, counters = _dijkstra(graph, source)

        self.last_heap_pops = counters["heap_pops"]
        self.last_heap_pushes = counters["heap_pushes"]
        self.last_edges_examined = counters["edges_examined"]
        self.last_relaxed = counters["relaxed"]

        self._logger.debug(
            "Shortest paths computed",
            extra={
                "source": source.name,
                "settled": sum(state.visited),
                **counters,
            },
        )
        return state
