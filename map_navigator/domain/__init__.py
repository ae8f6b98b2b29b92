"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    MapNavigatorError,
    NodeNotFoundError,
    NoPathError,
)
from .models import Edge, Node, PathResult, PathStatus

__all__ = [
    # Models
    "Node",
    "Edge",
    "PathResult",
    "PathStatus",
    # Errors
    "MapNavigatorError",
    "GraphError",
    "NodeNotFoundError",
    "NoPathError",
    "ConfigurationError",
]
