"""Command-line navigator for the sample map.

Asks for a start and an end node (unless given as options), runs the
shortest-path query and prints the result line.
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from .config import configure_logging, get_config
from .container import get_container
from .domain.errors import ConfigurationError
from .sample_map import create_map
from .services import PathQueryService

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the shortest path between two nodes of the sample map."
    )
    parser.add_argument("--start", help="Start node name (prompted if omitted).")
    parser.add_argument("--end", help="End node name (prompted if omitted).")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override MAPNAV_LOG_LEVEL for this run (e.g. DEBUG).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    observability = get_config().observability
    if args.log_level:
        observability = observability.model_copy(update={"level": args.log_level})
    try:
        configure_logging(observability)
    except ConfigurationError as exc:
        parser.error(str(exc))

    start_name = args.start if args.start is not None else input("Start Node: ")
    end_name = args.end if args.end is not None else input("End Node: ")

    service: PathQueryService = get_container().resolve(PathQueryService)
    graph = create_map()
    result = service.find_path(graph, start_name, end_name)

    print(service.render(result))
    return 0 if result.is_found else 1


if __name__ == "__main__":
    raise SystemExit(main())
