"""Immutable domain models for the map navigator.

All models are frozen dataclasses with slots. Per-query search data
(distances, visited flags, predecessors) is not stored on nodes;
it lives in ``map_navigator.graph.state.SearchState``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable


class PathStatus(Enum):
    """Outcome of a path query."""

    FOUND = auto()
    NO_PATH = auto()
    INVALID_NODES = auto()


@dataclass(frozen=True, slots=True)
class Node:
    """A named vertex of the map.

    Attributes:
        id: Stable handle assigned by the owning graph (insertion order)
        name: Human-readable name, not necessarily unique
    """

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted connection owned by its source node.

    Attributes:
        destination: Id of the destination node in the same graph
        weight: Non-negative integer cost
    """

    destination: int
    weight: int


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query between two named nodes.

    Attributes:
        status: Whether a path was found, missing, or the names were invalid
        path: Node names from start to end, inclusive (empty unless found)
        total_weight: Sum of edge weights along the path (inf unless found)
    """

    status: PathStatus
    path: tuple[str, ...] = field(default_factory=tuple)
    total_weight: float = math.inf

    @classmethod
    def found(cls, path: Iterable[str], total_weight: float) -> PathResult:
        return cls(PathStatus.FOUND, tuple(path), total_weight)

    @classmethod
    def no_path(cls) -> PathResult:
        return cls(PathStatus.NO_PATH)

    @classmethod
    def invalid_nodes(cls) -> PathResult:
        return cls(PathStatus.INVALID_NODES)

    @property
    def is_found(self) -> bool:
        """Check if a path was found."""
        return self.status is PathStatus.FOUND

    @property
    def num_stops(self) -> int:
        """Return the number of nodes on the path."""
        return len(self.path)
