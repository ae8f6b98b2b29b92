"""Rendering adapters - Implementations of PathRendererPort.

Available implementations:
- TextPathRenderer: One-line text summary of a path result
"""

from .text_renderer import TextPathRenderer

__all__ = ["TextPathRenderer"]
