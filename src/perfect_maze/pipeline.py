"""Configured maze generation with stage-by-stage progress output."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .carving import carve_passages, expanded_dimensions, layout_grid
from .maze import Maze, check_dimensions


@dataclass
class MazeStats:
    """Summary metrics for one generation run."""

    logical_size: Tuple[int, int]
    expanded_size: Tuple[int, int]
    room_count: int
    passages_carved: int
    goal: Tuple[int, int]
    goal_distance: int
    runtime_seconds: float


@dataclass
class MazeResult:
    """Result bundle returned by :class:MazeGenerator."""

    maze: Maze
    stats: MazeStats


@dataclass
class MazeConfig:
    """Configuration parameters for :class:MazeGenerator."""

    width: int = 5
    height: int = 5
    seed: int | None = None
    verbose: bool = True

    def __post_init__(self) -> None:
        check_dimensions(self.width, self.height)
        if self.seed is None:
            env_seed = os.getenv("MAZE_SEED")
            if env_seed:
                try:
                    self.seed = int(env_seed)
                except ValueError as exc:
                    raise ValueError(f"MAZE_SEED must be an integer, got '{env_seed}'") from exc
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be non-negative")


class MazeGenerator:
    """Build a maze step by step, reporting each stage."""

    def __init__(self, config: MazeConfig | None = None, rng: np.random.Generator | None = None) -> None:
        self.config = config or MazeConfig()
        self.rng = rng or np.random.default_rng(self.config.seed)

    def generate(self) -> MazeResult:
        config = self.config
        verbose = config.verbose
        overall_start_time = time.time()
        if verbose:
            print(f"--- Generating {config.width}x{config.height} Maze ---")

        t0 = time.time()
        if verbose:
            print("1. Laying out rooms and walls...")
        spaces, east, south = layout_grid(config.width, config.height, self.rng)
        grid_width, grid_height = expanded_dimensions(config.width, config.height)
        if verbose:
            print(f"   Grid is {grid_width}x{grid_height} with {len(east)} rooms.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Carving passages...")
        carved = carve_passages(spaces, grid_width, east, south)
        if verbose:
            print(f"   Opened {carved} passages.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Searching for the goal...")
        maze = Maze.from_grid(spaces, grid_width, grid_height)
        if verbose:
            print(f"   Goal at {maze.goal}, {maze.goal_distance} steps from the entrance.")
            print(f"   Done in {time.time() - t0:.2f}s")

        elapsed = time.time() - overall_start_time
        stats = MazeStats(
            logical_size=maze.size,
            expanded_size=(maze.width, maze.height),
            room_count=len(east),
            passages_carved=carved,
            goal=maze.goal,
            goal_distance=maze.goal_distance,
            runtime_seconds=elapsed,
        )

        if verbose:
            print(f"--- Maze Finished in {elapsed:.2f} seconds ---")

        return MazeResult(maze=maze, stats=stats)


__all__ = [
    "MazeConfig",
    "MazeGenerator",
    "MazeResult",
    "MazeStats",
]
