# tests/unit/test_maze.py

from pipe_walker.components import Cell, Position
from pipe_walker.maze import Maze
from tests.test_utils import make_maze


def test_cell_lookup_present_and_absent() -> None:
    maze = make_maze([(1, 1, None), (1, 2, "Q")])
    assert maze.cell(Position(1, 2)) == Cell(Position(1, 2), "Q")
    assert maze.cell(Position(5, 5)) is None


def test_from_cells_accepts_cells_and_triples() -> None:
    a = Maze.from_cells([Cell(Position(0, 0), "A"), (0, 1, None)])
    b = make_maze([(0, 0, "A"), (0, 1, None)])
    assert a == b
    assert len(a) == 2


def test_empty_maze() -> None:
    maze = Maze()
    assert len(maze) == 0
    assert maze.cell(Position(0, 0)) is None


def test_markers_row_major() -> None:
    maze = make_maze([(2, 0, "C"), (0, 3, "B"), (0, 1, "A"), (1, 1, None)])
    assert [c.marker for c in maze.markers()] == ["A", "B", "C"]
