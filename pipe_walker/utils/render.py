"""Plain-text rendering of a walked path over its drawing."""

from typing import Iterable, List, Set

from pipe_walker.components import Cell, Position
from pipe_walker.levels.parse import split_rows

TRAIL_GLYPH = "#"


def render_trail(text: str, cells: Iterable[Cell], glyph: str = TRAIL_GLYPH) -> str:
    """Redraw ``text`` with visited structural cells replaced by ``glyph``.

    Letters stay as drawn so the collected waypoints remain readable. Cells
    outside the drawing are ignored.
    """
    visited: Set[Position] = {c.position for c in cells if c.is_structural}
    rows: List[str] = []
    for row, line in enumerate(split_rows(text)):
        rows.append(
            "".join(
                glyph if Position(row, col) in visited else char
                for col, char in enumerate(line)
            )
        )
    return "\n".join(rows)
