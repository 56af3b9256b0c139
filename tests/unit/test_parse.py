# tests/unit/test_parse.py

import pytest

from pipe_walker.components import Cell, Position
from pipe_walker.levels import find_entry, is_marker, parse, split_rows
from pipe_walker.solve import solve
from tests.test_utils import SAMPLE_MAZE


def test_parse_skips_spaces_and_keeps_letters() -> None:
    maze = parse(" |\n+A")
    assert len(maze) == 3
    assert Position(0, 0) not in maze
    assert maze.cell(Position(0, 1)) == Cell(Position(0, 1), None)
    assert maze.cell(Position(1, 0)) == Cell(Position(1, 0), None)
    assert maze.cell(Position(1, 1)) == Cell(Position(1, 1), "A")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("|\n|", ["|", "|"]),
        ("|\r\n|\r\n", ["|", "|", ""]),
        ("|\x0c|", ["|\x0c|"]),
        ("|\x0b|\x1c|\x85|", ["|\x0b|\x1c|\x85|"]),
        ("+ - A", ["+ - A"]),
        ("+\r-", ["+\r-"]),
        ("", [""]),
    ],
)
def test_split_rows_on_newline_only(text: str, expected: list) -> None:
    assert split_rows(text) == expected


def test_form_feed_is_structural_cell_on_same_row() -> None:
    maze = parse("|\x0c|\n")
    assert len(maze) == 3
    assert maze.cell(Position(0, 1)) == Cell(Position(0, 1), None)
    assert maze.cell(Position(0, 2)) == Cell(Position(0, 2), None)
    assert Position(1, 0) not in maze


def test_line_separator_does_not_start_a_row() -> None:
    maze = parse("+\u2028 -A")
    assert {p.row for p in maze.cells} == {0}
    assert maze.cell(Position(0, 1)) == Cell(Position(0, 1), None)
    # entry can only step right onto the separator, then the gap stops it
    solution = solve("+\u2028 -A")
    assert solution.path == ""
    assert solution.steps == 2


def test_crlf_matches_lf() -> None:
    crlf = SAMPLE_MAZE.replace("\n", "\r\n")
    assert parse(crlf) == parse(SAMPLE_MAZE)
    assert find_entry(crlf) == Position(0, 5)


def test_lone_carriage_return_is_structural() -> None:
    maze = parse("+\r-")
    assert len(maze) == 3
    assert maze.cell(Position(0, 1)) == Cell(Position(0, 1), None)


def test_trailing_newline_adds_no_cells() -> None:
    assert parse("|\n|\n") == parse("|\n|")


@pytest.mark.parametrize("char", ["|", "-", "+", "*", "1", "."])
def test_non_letters_are_structural(char: str) -> None:
    maze = parse(char)
    assert maze.cell(Position(0, 0)) == Cell(Position(0, 0), None)


@pytest.mark.parametrize(
    "char, expected",
    [
        ("A", True),
        ("z", True),
        ("é", True),
        ("Ⅻ", True),  # ROMAN NUMERAL TWELVE, category Nl
        ("|", False),
        ("7", False),
    ],
)
def test_is_marker(char: str, expected: bool) -> None:
    assert is_marker(char) is expected


def test_parse_empty_text() -> None:
    assert len(parse("")) == 0


def test_parse_sample_counts() -> None:
    maze = parse(SAMPLE_MAZE)
    assert [c.marker for c in maze.markers()] == ["A", "C", "F", "E", "D", "B"]
    assert maze.cell(Position(3, 1)) == Cell(Position(3, 1), "F")


def test_find_entry_sample() -> None:
    assert find_entry(SAMPLE_MAZE) == Position(0, 5)


def test_find_entry_ignores_later_lines() -> None:
    assert find_entry("  |\n|") == Position(0, 2)


def test_find_entry_control_character_is_an_entry() -> None:
    assert find_entry("  \x0c|\n|") == Position(0, 2)


@pytest.mark.parametrize("text", ["", "    \n  |", "\n|", "\r\n|"])
def test_find_entry_requires_non_blank_first_line(text: str) -> None:
    with pytest.raises(ValueError):
        find_entry(text)
