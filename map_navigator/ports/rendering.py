"""Rendering port - Abstraction for presenting path results.

This protocol defines the contract for turning a PathResult into
something a user can read, allowing different front-ends to format
results their own way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult


class PathRendererPort(Protocol):
    """Port for path result rendering.

    Implementation: adapters/rendering/text_renderer.py
    """

    def render(self, result: PathResult) -> str:
        """Render a path result as display text.

        Args:
            result: The outcome of a path query.

        Returns:
            Human-readable text describing the result.
        """
        ...
