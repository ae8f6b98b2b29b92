"""Typed domain errors for the map navigator.

The path query itself reports unknown names and unreachable
destinations as ``PathResult`` values. These exceptions are raised by
the strict entry points (``find_path_or_raise``, ``get_node_or_raise``)
and for invalid graph construction.

All errors inherit from MapNavigatorError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MapNavigatorError(Exception):
    """Base error for the map navigator domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(MapNavigatorError):
    """Graph construction or integrity error.

    Raised for negative or non-integer weights, edges whose endpoints
    belong to another graph, and searches started from a foreign node.
    """


@dataclass
class NodeNotFoundError(MapNavigatorError):
    """Node name not found in the graph.

    Attributes:
        node_name: The name that was looked up
    """

    node_name: str = ""


@dataclass
class NoPathError(MapNavigatorError):
    """No directed path exists between the requested nodes.

    Attributes:
        start: Name of the start node
        end: Name of the destination node
    """

    start: str = ""
    end: str = ""


@dataclass
class ConfigurationError(MapNavigatorError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
