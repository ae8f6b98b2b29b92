"""Path reconstruction from a finished search."""

from __future__ import annotations

from typing import List

from ..domain.models import Node
from .state import SearchState


def reconstruct_path(state: SearchState, end: Node) -> List[int]:
    """Walk predecessor links back from ``end``.

    Returns the node ids in source-to-destination order. The walk stops
    at the first node without a predecessor, so an unreachable ``end``
    yields ``[end.id]``; callers must tell that apart from a self-path.
    """
    path: List[int] = []
    current = end.id
    while current is not None:
        path.append(current)
        current = state.predecessor(current)

    path.reverse()
    return path
