"""Direction priority and single-step resolution.

At every step the runner tries at most three directions, derived from its
current facing: straight ahead first, then the two perpendicular turns. The
reverse direction is never tried, so a runner never doubles back along the
corridor it came from.

The table is greedy and stateless beyond the facing. At a junction where two
turns are open, the earlier entry wins.
"""

from typing import Dict, Optional, Sequence, Tuple

from pipe_walker.components import Cell, Position
from pipe_walker.maze import Maze
from pipe_walker.types import Direction

PRIORITY: Dict[Direction, Tuple[Direction, Direction, Direction]] = {
    Direction.DOWN: (Direction.DOWN, Direction.LEFT, Direction.RIGHT),
    Direction.LEFT: (Direction.LEFT, Direction.DOWN, Direction.UP),
    Direction.RIGHT: (Direction.RIGHT, Direction.UP, Direction.DOWN),
    Direction.UP: (Direction.UP, Direction.RIGHT, Direction.LEFT),
}
"""Ordered candidate directions per current facing."""


def candidate_directions(direction: Direction) -> Sequence[Direction]:
    return PRIORITY[direction]


def next_step(
    maze: Maze, position: Position, direction: Direction
) -> Optional[Tuple[Cell, Direction]]:
    """Resolve one move from ``position`` facing ``direction``.

    Returns:
        tuple[Cell, Direction] | None: The first present neighbour in priority
            order together with the direction taken, or ``None`` when every
            candidate is off the maze (end of the path).
    """
    for candidate in candidate_directions(direction):
        cell = maze.cell(position.move(candidate))
        if cell is not None:
            return cell, candidate
    return None
