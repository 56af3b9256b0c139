"""Sparse, immutable maze model.

The maze is a persistent map from :class:`Position` to an optional marker.
A key is present exactly when the source drawing had a non-space character
at that row/column, so "off the maze" is represented by absence rather than
by a sentinel tile. Irregular or ragged drawings need no padding.

:meth:`Maze.cell` is the only query the traversal engine uses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple, Union

from pyrsistent import pmap
from pyrsistent.typing import PMap

from pipe_walker.components import Cell, Position
from pipe_walker.types import Coord, Marker

CellSpec = Union[Cell, Tuple[Coord, Coord, Marker]]


def _as_cell(spec: CellSpec) -> Cell:
    if isinstance(spec, Cell):
        return spec
    row, col, marker = spec
    return Cell(Position(row, col), marker)


@dataclass(frozen=True)
class Maze:
    """Immutable mapping of present positions to markers.

    Attributes:
        cells (PMap[Position, Marker]): Every non-blank position of the drawing.
    """

    cells: PMap[Position, Marker] = field(default_factory=pmap)

    @classmethod
    def from_cells(cls, cells: Iterable[CellSpec]) -> Maze:
        """Build a maze from ``Cell`` objects or ``(row, col, marker)`` triples.

        Later entries for the same position win.
        """
        return cls(pmap({c.position: c.marker for c in map(_as_cell, cells)}))

    def cell(self, position: Position) -> Optional[Cell]:
        """Return the ``Cell`` at ``position`` or ``None`` if nothing is drawn there."""
        if position not in self.cells:
            return None
        return Cell(position, self.cells[position])

    def markers(self) -> Iterator[Cell]:
        """Yield the lettered cells in row-major order."""
        for position in sorted(self.cells, key=lambda p: (p.row, p.col)):
            marker = self.cells[position]
            if marker is not None:
                yield Cell(position, marker)

    def __contains__(self, position: object) -> bool:
        return position in self.cells

    def __len__(self) -> int:
        return len(self.cells)
