"""Run configuration for the command-line program."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional

from pipe_walker.types import Direction

DEFAULT_INPUT = "example"


@dataclass(frozen=True)
class RunConfig:
    """Options for one program run.

    Attributes:
        input_path: File holding the maze drawing.
        direction: Initial facing of the runner.
        max_steps: Optional cap on transitions; ``None`` walks until the path ends.
        show_trail: Also print the drawing with the walked cells highlighted.
        verbose: Enable debug logging.
    """

    input_path: str = DEFAULT_INPUT
    direction: Direction = Direction.DOWN
    max_steps: Optional[int] = None
    show_trail: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> RunConfig:
        return cls(
            input_path=args.input,
            direction=Direction(args.direction),
            max_steps=args.max_steps,
            show_trail=args.show_trail,
            verbose=args.verbose,
        )


def positive_int(value: str) -> int:
    """argparse ``type=`` for ``--max-steps``."""
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pipe_walker",
        description="Walk a pipe-and-letter maze, report its letters and step count.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "input", nargs="?", default=DEFAULT_INPUT, help="Maze drawing file"
    )
    parser.add_argument(
        "--direction",
        choices=[d.value for d in Direction],
        default=Direction.DOWN.value,
        help="Initial facing of the runner",
    )
    parser.add_argument(
        "--max-steps",
        type=positive_int,
        default=None,
        help="Stop after this many transitions (guards against looping drawings)",
    )
    parser.add_argument(
        "--show-trail", action="store_true", help="Print the maze with the walked path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser
