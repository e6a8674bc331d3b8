"""Cell states and lazy row/column views over the flat maze grid."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from typing import Iterator

import numpy as np


class MazeSpace(IntEnum):
    """State of one cell in the expanded grid."""

    OPEN = 0
    WALL = 1
    GOAL = 2


class MazeLine(Sequence):
    """A row or column of the grid, read straight from the backing array."""

    def __init__(self, spaces: np.ndarray, start: int, step: int, length: int) -> None:
        self._spaces = spaces
        self._start = start
        self._step = step
        self._length = length

    @classmethod
    def row(cls, spaces: np.ndarray, width: int, y: int) -> MazeLine:
        return cls(spaces, y * width, 1, width)

    @classmethod
    def column(cls, spaces: np.ndarray, width: int, height: int, x: int) -> MazeLine:
        return cls(spaces, x, width, height)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, position):
        if isinstance(position, slice):
            return [self[i] for i in range(*position.indices(self._length))]
        if position < 0:
            position += self._length
        if not 0 <= position < self._length:
            raise IndexError("maze line index out of range")
        return MazeSpace(int(self._spaces[self._start + position * self._step]))

    def __iter__(self) -> Iterator[MazeSpace]:
        index = self._start
        for _ in range(self._length):
            yield MazeSpace(int(self._spaces[index]))
            index += self._step

    def __repr__(self) -> str:
        return f"MazeLine({''.join(space.name[0] for space in self)})"


class MazeRows(Sequence):
    """Top-to-bottom sequence of row views."""

    def __init__(self, spaces: np.ndarray, width: int, height: int) -> None:
        self._spaces = spaces
        self._width = width
        self._height = height

    def __len__(self) -> int:
        return self._height

    def __getitem__(self, position):
        if isinstance(position, slice):
            return [self[i] for i in range(*position.indices(self._height))]
        if position < 0:
            position += self._height
        if not 0 <= position < self._height:
            raise IndexError("maze row index out of range")
        return MazeLine.row(self._spaces, self._width, position)

    def __iter__(self) -> Iterator[MazeLine]:
        for y in range(self._height):
            yield MazeLine.row(self._spaces, self._width, y)
