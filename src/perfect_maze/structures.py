"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class DisjointSet:
    """Union-find forest with path compression and union by size.

    Each slot of ``sets`` holds either a parent index or, for a root, the
    negated size of its set.
    """

    size: int
    sets: List[int] = field(init=False)

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.sets = [-1] * self.size

    def __len__(self) -> int:
        return self.size

    def add_sets(self, count: int) -> None:
        """Append `count` singleton sets after the existing elements."""

        if count < 0:
            raise ValueError("count must be non-negative")
        self.sets.extend([-1] * count)
        self.size += count

    def find_root(self, element: int) -> int:
        if element < 0 or element >= self.size:
            raise IndexError(f"element {element} out of range for {self.size} sets")

        parent = self.sets[element]
        if parent < 0:
            return element
        root = self.find_root(parent)
        self.sets[element] = root
        return root

    def set_union(self, left: int, right: int) -> None:
        try:
            root_left = self.find_root(left)
            root_right = self.find_root(right)
        except IndexError as exc:
            raise AssertionError("Unable to get roots in order to merge sets.") from exc
        if root_left == root_right:
            return

        if self.sets[root_left] <= self.sets[root_right]:
            self.sets[root_left] += self.sets[root_right]
            self.sets[root_right] = root_left
        else:
            self.sets[root_right] += self.sets[root_left]
            self.sets[root_left] = root_right

    def set_size(self, element: int) -> int:
        """Return how many elements share a set with `element`."""

        return -self.sets[self.find_root(element)]
