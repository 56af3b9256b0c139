"""pipe_walker: trace the single path through a pipe-and-letter text maze.

Typical use::

    from pipe_walker import solve

    solution = solve(text)
    solution.path, solution.steps
"""

from pipe_walker.maze import Maze
from pipe_walker.runner import Runner
from pipe_walker.solve import Solution, solve, trace
from pipe_walker.types import Direction

__all__ = ["Direction", "Maze", "Runner", "Solution", "solve", "trace"]
