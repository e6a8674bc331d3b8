"""Grid layout and randomized Kruskal carving."""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from .grid import MazeSpace
from .structures import DisjointSet


def expanded_dimensions(width: int, height: int) -> Tuple[int, int]:
    """Return grid dimensions once walls between rooms become cells."""

    return 2 * width - 1, 2 * height - 1


def layout_grid(
    width: int,
    height: int,
    rng: np.random.Generator,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Wall off every non-room cell and shuffle the carving candidates.

    Returns the flat grid plus the eastward and southward candidate lists,
    each holding every room index in its own random order.
    """

    grid_width, grid_height = expanded_dimensions(width, height)
    ys, xs = np.divmod(np.arange(grid_width * grid_height), grid_width)
    is_wall = (xs % 2 == 1) | (ys % 2 == 1)

    spaces = np.full(grid_width * grid_height, MazeSpace.OPEN, dtype=np.uint8)
    spaces[is_wall] = MazeSpace.WALL

    rooms = np.flatnonzero(~is_wall)
    east = rooms.copy()
    south = rooms.copy()
    rng.shuffle(east)
    rng.shuffle(south)
    return spaces, east, south


def carve_passages(
    spaces: np.ndarray,
    width: int,
    east: Sequence[int],
    south: Sequence[int],
) -> int:
    """Open walls between rooms that are not yet connected.

    `width` is the expanded grid width. Candidates are consumed in lockstep,
    east then south for each position. Returns the number of passages opened.
    """

    height = len(spaces) // width
    dsets = DisjointSet(len(spaces))
    carved = 0
    for east_index, south_index in zip(east, south):
        carved += _try_wall(spaces, dsets, width, height, int(east_index), is_east=True)
        carved += _try_wall(spaces, dsets, width, height, int(south_index), is_east=False)
    return carved


def _try_wall(
    spaces: np.ndarray,
    dsets: DisjointSet,
    width: int,
    height: int,
    index: int,
    is_east: bool,
) -> int:
    x, y = index % width, index // width
    if is_east:
        if x >= width - 2:
            return 0
        step = 1
    else:
        if y >= height - 2:
            return 0
        step = width

    far = index + step * 2
    if dsets.find_root(index) == dsets.find_root(far):
        return 0

    spaces[index + step] = MazeSpace.OPEN
    dsets.set_union(index, index + step)
    dsets.set_union(index, far)
    return 1
