"""Text drawing -> :class:`Maze` conversion.

Input format:

* space is empty (no cell);
* alphabetic characters are waypoint markers collected along the path;
* any other character (``|``, ``-``, ``+``, ...) is structural fabric.

Rows are delimited by ``\\n`` only (a ``\\r`` before it is dropped). Form
feeds, vertical tabs and Unicode line separators are ordinary characters and
therefore structural cells.

Well-formedness is not validated. Disconnected or dead-ended drawings are
accepted and simply produce a short traversal.
"""

import logging
import unicodedata
from typing import Dict, List

from pyrsistent import pmap

from pipe_walker.components import Position
from pipe_walker.maze import Maze
from pipe_walker.types import Marker

logger = logging.getLogger(__name__)

EMPTY = " "


def split_rows(text: str) -> List[str]:
    """Split ``text`` into rows on ``\\n``, stripping one trailing ``\\r`` per row."""
    return [line.removesuffix("\r") for line in text.split("\n")]


def is_marker(char: str) -> bool:
    """Return True if ``char`` is collected as a letter.

    Letter categories (L*) plus letter numbers (Nl, e.g. Roman numerals).
    """
    return char.isalpha() or unicodedata.category(char) == "Nl"


def parse(text: str) -> Maze:
    """Convert a maze drawing into a sparse :class:`Maze`.

    Args:
        text (str): Multi-line drawing. Rows are 0-based line indices and
            columns 0-based character indices within each line.

    Returns:
        Maze: One entry per non-space character; letters keep their value,
            everything else maps to ``None``.
    """
    cells: Dict[Position, Marker] = {}
    for row, line in enumerate(split_rows(text)):
        for col, char in enumerate(line):
            if char == EMPTY:
                continue
            cells[Position(row, col)] = char if is_marker(char) else None
    logger.debug("parsed maze with %d cells", len(cells))
    return Maze(pmap(cells))


def find_entry(text: str) -> Position:
    """Locate the maze door: the first non-space character of the first line.

    Raises:
        ValueError: If the text is empty or its first line is blank. Traversal
            cannot start without an entry.
    """
    for col, char in enumerate(split_rows(text)[0]):
        if char != EMPTY:
            logger.debug("entry at column %d", col)
            return Position(0, col)
    raise ValueError("First line of the maze has no entry (it is empty or blank).")
