"""The maze runner: a lazy, pull-based walk along the single path.

A :class:`Runner` owns the only mutable state in the package, its current
position and facing. Each ``next()`` applies :func:`pipe_walker.moves.next_step`
and emits the cell it moved onto. The sequence ends when no candidate
direction leads to a drawn cell. There is no other terminal state.

The maze itself is never modified, so several runners may share one maze.

There is no visited-set: a drawing whose path loops back into itself yields
forever. Callers that cannot trust their input should bound the walk (see
:func:`bounded`).
"""

import logging
from itertools import islice
from typing import Iterable, Iterator, Optional

from pipe_walker.components import Cell, Position
from pipe_walker.maze import Maze
from pipe_walker.moves import next_step
from pipe_walker.types import Direction

logger = logging.getLogger(__name__)


def collect_path(cells: Iterable[Cell]) -> str:
    """Concatenate the markers of ``cells`` in visit order."""
    return "".join(cell.marker for cell in cells if cell.marker is not None)


def bounded(cells: Iterable[Cell], max_steps: Optional[int]) -> Iterator[Cell]:
    """Stop ``cells`` after ``max_steps`` items (``None`` means unbounded)."""
    if max_steps is None:
        return iter(cells)
    if max_steps <= 0:
        raise ValueError(f"max_steps must be positive, got {max_steps}")
    return islice(cells, max_steps)


class Runner:
    """Iterator of the cells visited after ``position``, starting ``direction``.

    Example:
        >>> maze = Maze.from_cells([(3, 5, None), (4, 5, None)])
        >>> list(Runner(maze, Position(3, 5), Direction.DOWN))
        [Cell(position=Position(row=4, col=5), marker=None)]
    """

    def __init__(self, maze: Maze, position: Position, direction: Direction) -> None:
        self.maze = maze
        self.position = position
        self.direction = direction

    def __iter__(self) -> "Runner":
        return self

    def __next__(self) -> Cell:
        step = next_step(self.maze, self.position, self.direction)
        if step is None:
            logger.debug(
                "runner stopped at (%d, %d) facing %s",
                self.position.row,
                self.position.col,
                self.direction,
            )
            raise StopIteration
        cell, self.direction = step
        self.position = cell.position
        return cell

    def path(self) -> str:
        """Consume the runner and return the letters met along the way."""
        return collect_path(self)

    def count(self) -> int:
        """Consume the runner and return the number of cells emitted."""
        return sum(1 for _ in self)


def walk(maze: Maze, position: Position, direction: Direction) -> Iterator[Cell]:
    """Generator form of :class:`Runner`."""
    while True:
        step = next_step(maze, position, direction)
        if step is None:
            return
        cell, direction = step
        position = cell.position
        yield cell


def count_steps(maze: Maze, position: Position, direction: Direction) -> int:
    """Number of transitions from ``position`` (the start cell itself excluded)."""
    return Runner(maze, position, direction).count()
