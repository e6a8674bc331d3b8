"""Goal selection and reachability over a carved grid."""

from __future__ import annotations

from typing import List, Set, Tuple

import numpy as np

from .grid import MazeSpace

# left, right, up, down
_NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _is_better(candidate: Tuple[int, int, int], best: Tuple[int, int, int]) -> bool:
    x, y, length = candidate
    best_x, best_y, best_length = best
    if length != best_length:
        return length > best_length
    if y != best_y:
        return y > best_y
    return x < best_x


def find_goal(spaces: np.ndarray, width: int, height: int) -> Tuple[int, int, int]:
    """Return `(x, y, distance)` of the cell farthest from the origin.

    Every simple path out of ``(0, 0)`` is walked depth first; cells are
    marked only while they sit on the current path. Ties on distance go to
    the greater ``y``, then to the smaller ``x``.
    """

    visited = np.zeros(width * height, dtype=bool)
    best = (0, 0, 0)

    # Each frame is [x, y, path length, next neighbor to try].
    stack: List[List[int]] = [[0, 0, 0, 0]]
    visited[0] = True
    while stack:
        frame = stack[-1]
        x, y, length, direction = frame
        if direction < len(_NEIGHBOR_OFFSETS):
            frame[3] += 1
            dx, dy = _NEIGHBOR_OFFSETS[direction]
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            neighbor = nx + ny * width
            if visited[neighbor] or spaces[neighbor] == MazeSpace.WALL:
                continue
            visited[neighbor] = True
            stack.append([nx, ny, length + 1, 0])
            continue

        if _is_better((x, y, length), best):
            best = (x, y, length)
        visited[x + y * width] = False
        stack.pop()

    return best


def is_tree(spaces: np.ndarray, width: int, height: int) -> bool:
    """True when the non-wall cells form one connected, loop-free region."""

    passable = (np.asarray(spaces).reshape(height, width) != MazeSpace.WALL)
    open_count = int(np.count_nonzero(passable))
    if open_count == 0:
        return False
    links = int(np.count_nonzero(passable[:, :-1] & passable[:, 1:]))
    links += int(np.count_nonzero(passable[:-1, :] & passable[1:, :]))
    if links != open_count - 1:
        return False
    start = int(np.flatnonzero(passable)[0])
    reachable = reachable_cells(spaces, width, height, start=(start % width, start // width))
    return len(reachable) == open_count


def reachable_cells(
    spaces: np.ndarray,
    width: int,
    height: int,
    start: Tuple[int, int] = (0, 0),
) -> Set[int]:
    """Return flat indices of every non-wall cell connected to `start`."""

    start_x, start_y = start
    start_index = start_x + start_y * width
    if spaces[start_index] == MazeSpace.WALL:
        return set()

    seen = {start_index}
    stack = [(start_x, start_y)]
    while stack:
        x, y = stack.pop()
        for dx, dy in _NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            neighbor = nx + ny * width
            if neighbor in seen or spaces[neighbor] == MazeSpace.WALL:
                continue
            seen.add(neighbor)
            stack.append((nx, ny))
    return seen
