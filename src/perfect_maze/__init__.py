"""Perfect maze library initialization."""

from .grid import MazeLine, MazeRows, MazeSpace
from .maze import Maze
from .pipeline import MazeConfig, MazeGenerator, MazeResult, MazeStats
from .solver import find_goal, is_tree, reachable_cells
from .structures import DisjointSet

__all__ = [
    "Maze",
    "MazeSpace",
    "MazeLine",
    "MazeRows",
    "MazeConfig",
    "MazeGenerator",
    "MazeResult",
    "MazeStats",
    "DisjointSet",
    "find_goal",
    "is_tree",
    "reachable_cells",
]
