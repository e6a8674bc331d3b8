"""The maze engine: construction, queries and text rendering."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from .carving import carve_passages, expanded_dimensions, layout_grid
from .grid import MazeLine, MazeRows, MazeSpace
from .solver import find_goal, is_tree, reachable_cells

_SYMBOLS = {MazeSpace.WALL: "X", MazeSpace.OPEN: " ", MazeSpace.GOAL: "*"}


def check_dimensions(width: int, height: int) -> None:
    """Raise when `width` or `height` is not a positive room count."""

    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        if value < 1:
            raise ValueError(f"{name} must be at least 1, got {value}")


class Maze:
    """A perfect maze over a grid where walls between rooms are cells too.

    ``width`` and ``height`` given to the constructor count rooms. Rooms sit
    at even/even coordinates of the expanded ``(2W-1) x (2H-1)`` grid that
    every query works on. Once built the maze never changes.
    """

    def __init__(self, width: int, height: int, rng: int | np.random.Generator | None = None) -> None:
        check_dimensions(width, height)
        width, height = int(width), int(height)
        generator = np.random.default_rng(rng)
        spaces, east, south = layout_grid(width, height, generator)
        grid_width, grid_height = expanded_dimensions(width, height)
        carve_passages(spaces, grid_width, east, south)
        self._finish(spaces, grid_width, grid_height)

    @classmethod
    def from_grid(cls, spaces: Iterable[int], width: int, height: int) -> Maze:
        """Build a maze from an already carved grid of expanded dimensions.

        The open cells must form a tree rooted at the origin; anything else
        raises ``ValueError``.
        """

        flat = np.array(spaces, dtype=np.int64).reshape(-1)
        if width < 1 or height < 1 or flat.size != width * height:
            raise ValueError(f"grid of {flat.size} cells does not fit {width}x{height}")
        if not np.isin(flat, [int(space) for space in MazeSpace]).all():
            bad = sorted(set(int(value) for value in flat) - set(int(space) for space in MazeSpace))
            raise ValueError(f"grid holds values that are not maze spaces: {bad}")
        flat = flat.astype(np.uint8)
        if flat[0] == MazeSpace.WALL:
            raise ValueError("origin cell must not be a wall")
        if not is_tree(flat, width, height):
            raise ValueError("open cells must form a single loop-free region")
        flat[flat == MazeSpace.GOAL] = MazeSpace.OPEN

        maze = cls.__new__(cls)
        maze._finish(flat, width, height)
        return maze

    def _finish(self, spaces: np.ndarray, width: int, height: int) -> None:
        self._width = width
        self._height = height
        goal_x, goal_y, distance = find_goal(spaces, width, height)
        spaces[goal_x + goal_y * width] = MazeSpace.GOAL
        spaces.flags.writeable = False
        self._spaces = spaces
        self._goal = (goal_x, goal_y)
        self._goal_distance = distance

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        """Room counts along each axis."""

        return (self._width + 1) // 2, (self._height + 1) // 2

    @property
    def goal(self) -> Tuple[int, int]:
        return self._goal

    @property
    def goal_distance(self) -> int:
        """Steps from the origin to the goal in expanded grid cells."""

        return self._goal_distance

    @property
    def room_distance(self) -> int:
        return self._goal_distance // 2

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def space_at(self, x: int, y: int) -> MazeSpace:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self._width}x{self._height} grid")
        return MazeSpace(int(self._spaces[x + y * self._width]))

    def is_valid_space(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.space_at(x, y) != MazeSpace.WALL

    def is_goal(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.space_at(x, y) == MazeSpace.GOAL

    def row(self, y: int) -> MazeLine:
        if not 0 <= y < self._height:
            raise IndexError(f"row {y} out of range for height {self._height}")
        return MazeLine.row(self._spaces, self._width, y)

    def column(self, x: int) -> MazeLine:
        if not 0 <= x < self._width:
            raise IndexError(f"column {x} out of range for width {self._width}")
        return MazeLine.column(self._spaces, self._width, self._height, x)

    def rows(self) -> MazeRows:
        return MazeRows(self._spaces, self._width, self._height)

    def room_indices(self) -> np.ndarray:
        ys, xs = np.divmod(np.arange(self._spaces.size), self._width)
        return np.flatnonzero((xs % 2 == 0) & (ys % 2 == 0))

    @property
    def passage_count(self) -> int:
        """Open cells that sit between two rooms."""

        ys, xs = np.divmod(np.arange(self._spaces.size), self._width)
        between_rooms = (xs % 2 == 1) | (ys % 2 == 1)
        return int(np.count_nonzero(between_rooms & (self._spaces != MazeSpace.WALL)))

    def is_perfect(self) -> bool:
        """True when every room is reachable and the passages form a tree."""

        rooms = self.room_indices()
        reachable = reachable_cells(self._spaces, self._width, self._height)
        if not all(int(room) in reachable for room in rooms):
            return False
        return self.passage_count == len(rooms) - 1

    def __str__(self) -> str:
        border = "X" * (self._width + 2)
        lines = [border]
        for row in self.rows():
            lines.append("X" + "".join(_SYMBOLS[space] for space in row) + "X")
        lines.append(border)
        width, height = self.size
        return f"{width}x{height} Maze:\n" + "\n".join(lines)

    def __repr__(self) -> str:
        width, height = self.size
        return f"Maze(width={width}, height={height}, goal={self._goal})"
