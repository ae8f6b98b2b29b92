"""Per-query search state.

A SearchState holds the transient data of one shortest-path
computation (best known distance, visited flag and predecessor of
every node), indexed by node id. It is owned by a single engine
invocation and never shared between queries.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.models import Node


@dataclass
class SearchState:
    """Distances, visited flags and predecessors for one query."""

    size: int
    distances: List[float] = field(init=False, repr=False)
    visited: List[bool] = field(init=False, repr=False)
    predecessors: List[Optional[int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Set every distance to inf, clear visited flags and predecessors."""
        self.distances = [math.inf] * self.size
        self.visited = [False] * self.size
        self.predecessors = [None] * self.size

    def distance(self, node: Node) -> float:
        return self.distances[node.id]

    def predecessor(self, node_id: int) -> Optional[int]:
        return self.predecessors[node_id]

    def is_reachable(self, node: Node) -> bool:
        return not math.isinf(self.distances[node.id])
