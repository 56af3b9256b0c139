"""Text maze loading.

:func:`parse` builds a :class:`~pipe_walker.maze.Maze`, :func:`find_entry`
locates the door.
"""

from .parse import find_entry, is_marker, parse, split_rows

__all__ = ["find_entry", "is_marker", "parse", "split_rows"]
