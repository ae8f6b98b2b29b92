"""Services layer - Application orchestration.

Available services:
- PathQueryService: Resolves names, runs the engine, classifies results
"""

from .path_query import PathQueryService, find_path

__all__ = ["PathQueryService", "find_path"]
