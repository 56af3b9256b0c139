"""Position component.

Immutable integer grid coordinates keyed into :class:`pipe_walker.maze.Maze`.
Rows are line indices, columns are character indices within a line.
"""

from dataclasses import dataclass

from pipe_walker.types import DIRECTION_VECTORS, Coord, Direction


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Line index (0 at top).
        col: Character index (0 at left).
    """

    row: Coord
    col: Coord

    def move(self, direction: Direction) -> "Position":
        """Return the adjacent position in ``direction``.

        No bounds are applied; negative coordinates are valid keys that are
        simply absent from any parsed maze.
        """
        d_row, d_col = DIRECTION_VECTORS[direction]
        return Position(self.row + d_row, self.col + d_col)
