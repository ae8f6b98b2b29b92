"""Plain-text path renderer.

Produces the single line of text shown to the user after a query,
e.g. ``Shortest Path: A -> B -> C``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...config import DisplayConfig, get_config
from ...domain.models import PathResult, PathStatus


@dataclass
class TextPathRenderer:
    """Renders PathResult values as text.

    This adapter implements PathRendererPort.

    Attributes:
        config: Display strings (prefix, separator, messages)
    """

    config: DisplayConfig = field(default_factory=lambda: get_config().display)

    def render(self, result: PathResult) -> str:
        if result.status is PathStatus.INVALID_NODES:
            return self.config.invalid_nodes_message
        if result.status is PathStatus.NO_PATH or not result.path:
            return self.config.no_path_message

        names = list(result.path)
        # A trailing name equal to the first one is not repeated.
        if len(names) > 1 and names[-1] == names[0]:
            names.pop()

        return self.config.path_prefix + self.config.separator.join(names)
