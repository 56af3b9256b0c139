"""Text in, results out.

:func:`solve` wires the parser and the runner together for callers that only
have the drawing. Like the command-line program it runs two independent
walks from the same door, one for the letters and one for the step count;
the maze is immutable so both see identical input.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from pipe_walker.components import Cell, Position
from pipe_walker.levels.parse import find_entry, parse
from pipe_walker.runner import Runner, bounded, collect_path
from pipe_walker.types import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    """Result of walking a maze.

    Attributes:
        entry: Door position the walk started from.
        path: Letters collected in visit order.
        steps: Cells visited including the entry cell (transitions + 1).
    """

    entry: Position
    path: str
    steps: int


def solve(
    text: str,
    direction: Direction = Direction.DOWN,
    max_steps: Optional[int] = None,
) -> Solution:
    """Parse ``text`` and walk it from its door.

    Args:
        text (str): Maze drawing.
        direction (Direction): Initial facing. The door is on the top row, so
            the default is ``DOWN``.
        max_steps (int | None): Optional cap on transitions per walk. ``None``
            keeps the unbounded behavior.

    Raises:
        ValueError: If the first line holds no entry, or ``max_steps`` is not positive.
    """
    entry = find_entry(text)
    maze = parse(text)
    path = collect_path(bounded(Runner(maze, entry, direction), max_steps))
    transitions = sum(1 for _ in bounded(Runner(maze, entry, direction), max_steps))
    logger.debug("walked %d transitions, collected %r", transitions, path)
    return Solution(entry=entry, path=path, steps=transitions + 1)


def trace(
    text: str,
    direction: Direction = Direction.DOWN,
    max_steps: Optional[int] = None,
) -> List[Cell]:
    """Return every visited cell, the entry cell first."""
    entry = find_entry(text)
    maze = parse(text)
    start = maze.cell(entry)
    assert start is not None  # find_entry only returns drawn positions
    return [start, *bounded(Runner(maze, entry, direction), max_steps)]
