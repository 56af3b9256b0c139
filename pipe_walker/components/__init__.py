"""pipe_walker.components
=======================

Value objects shared by the parser, the maze and the runner::

    from pipe_walker.components import Position, Cell

Both are frozen dataclasses: hashable, comparable by value and never mutated.
"""

from .position import Position
from .cell import Cell

__all__ = ["Position", "Cell"]
