"""Command-line entry point.

Usage::

    python -m pipe_walker [INPUT] [--direction down] [--max-steps N] [--show-trail] [-v]

Prints ``Path = <letters>`` and ``Steps = <count>``. The step count includes
the entry cell.
"""

import logging
import sys
from typing import List, Optional

from pipe_walker.config import RunConfig, build_parser
from pipe_walker.solve import solve, trace
from pipe_walker.utils.render import render_trail

logger = logging.getLogger(__name__)

EXIT_UNREADABLE = 1
EXIT_NO_ENTRY = 2


def read_all(path: str) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def run(config: RunConfig) -> int:
    """Execute one run; returns the process exit status."""
    try:
        content = read_all(config.input_path)
    except OSError as exc:
        logger.error("cannot read maze %s: %s", config.input_path, exc)
        return EXIT_UNREADABLE

    try:
        solution = solve(content, config.direction, config.max_steps)
    except ValueError as exc:
        logger.error("%s: %s", config.input_path, exc)
        return EXIT_NO_ENTRY

    print(f"Path = {solution.path}")
    print(f"Steps = {solution.steps}")
    if config.show_trail:
        print(render_trail(content, trace(content, config.direction, config.max_steps)))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = RunConfig.from_args(args)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
