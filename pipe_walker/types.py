"""Common type aliases and enumerations.

``Marker`` is the optional letter stored per maze cell. ``Direction`` is the
facing of a :class:`pipe_walker.runner.Runner`; its members are string values
so they can be passed straight from the command line.
"""

from enum import StrEnum, auto
from typing import Dict, Optional, Tuple

Coord = int
Marker = Optional[str]


class Direction(StrEnum):
    """Orthogonal facings, in the order the original maze format lists them."""

    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()


# (d_row, d_col) per direction; rows grow downward.
DIRECTION_VECTORS: Dict[Direction, Tuple[Coord, Coord]] = {
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.UP: (-1, 0),
}
