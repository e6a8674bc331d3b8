import numpy as np
import pytest

from perfect_maze.grid import MazeSpace
from perfect_maze.maze import Maze
from perfect_maze.solver import reachable_cells

O, W, G = MazeSpace.OPEN, MazeSpace.WALL, MazeSpace.GOAL


def _flat(maze):
    return [maze.space_at(x, y) for y in range(maze.height) for x in range(maze.width)]


def test_one_by_one_maze_is_its_own_goal():
    maze = Maze(1, 1, rng=0)
    assert (maze.width, maze.height) == (1, 1)
    assert maze.size == (1, 1)
    assert maze.goal == (0, 0)
    assert maze.goal_distance == 0
    assert maze.is_goal(0, 0)
    assert maze.passage_count == 0


def test_two_by_one_maze_opens_the_middle():
    maze = Maze(2, 1, rng=0)
    assert (maze.width, maze.height) == (3, 1)
    assert _flat(maze) == [O, O, G]
    assert maze.goal == (2, 0)
    assert maze.goal_distance == 2
    assert maze.room_distance == 1


def test_five_by_five_maze():
    maze = Maze(5, 5, rng=7)
    assert (maze.width, maze.height) == (9, 9)
    assert maze.size == (5, 5)
    assert maze.passage_count == 24

    lines = str(maze).split("\n")
    assert lines[0] == "5x5 Maze:"
    frame = lines[1:]
    assert len(frame) == 11
    assert frame[0] == frame[-1] == "X" * 11
    assert all(len(line) == 11 and line[0] == line[-1] == "X" for line in frame)
    assert sum(line.count("*") for line in frame) == 1


@pytest.mark.parametrize(
    "width,height,seed",
    [(1, 6, 1), (6, 1, 2), (3, 4, 3), (8, 8, 4), (13, 5, 5)],
)
def test_every_room_is_connected_by_a_tree(width, height, seed):
    maze = Maze(width, height, rng=seed)
    reachable = reachable_cells(np.array(_flat(maze), dtype=np.uint8), maze.width, maze.height)
    for y in range(0, maze.height, 2):
        for x in range(0, maze.width, 2):
            assert x + y * maze.width in reachable
    assert maze.passage_count == width * height - 1
    assert maze.is_perfect()


def test_exactly_one_goal_reachable_from_origin():
    maze = Maze(6, 4, rng=11)
    goals = [i for i, space in enumerate(_flat(maze)) if space is G]
    assert len(goals) == 1
    goal_x, goal_y = maze.goal
    assert goals == [goal_x + goal_y * maze.width]
    assert maze.goal_distance % 2 == 0
    assert goal_x % 2 == 0 and goal_y % 2 == 0


def test_same_seed_builds_same_maze():
    assert str(Maze(7, 5, rng=123)) == str(Maze(7, 5, rng=123))


def test_accepts_generator_instance():
    rng = np.random.default_rng(5)
    maze = Maze(4, 4, rng=rng)
    assert maze.is_perfect()


def test_rows_match_flat_order():
    maze = Maze(4, 3, rng=2)
    assert [space for row in maze.rows() for space in row] == _flat(maze)
    assert len(maze.rows()) == maze.height


def test_row_and_column_views():
    maze = Maze(3, 3, rng=9)
    assert list(maze.row(1)) == [maze.space_at(x, 1) for x in range(maze.width)]
    assert list(maze.column(2)) == [maze.space_at(2, y) for y in range(maze.height)]
    with pytest.raises(IndexError):
        maze.row(maze.height)
    with pytest.raises(IndexError):
        maze.column(-1)


def test_is_valid_space():
    maze = Maze(3, 3, rng=4)
    assert maze.is_valid_space(0, 0)
    # cells with both coordinates odd are never carved
    assert not maze.is_valid_space(1, 1)
    assert not maze.is_valid_space(-1, 0)
    assert not maze.is_valid_space(maze.width, 0)
    assert not maze.is_valid_space(0, maze.height)


def test_is_goal_out_of_bounds_is_false():
    maze = Maze(2, 2, rng=1)
    assert not maze.is_goal(maze.width, 0)
    assert not maze.is_goal(0, -1)
    with pytest.raises(IndexError):
        maze.space_at(0, maze.height)


def test_grid_is_read_only():
    maze = Maze(3, 3, rng=0)
    with pytest.raises(ValueError):
        maze._spaces[0] = MazeSpace.WALL


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-2, 2)])
def test_rejects_non_positive_dimensions(width, height):
    with pytest.raises(ValueError):
        Maze(width, height)


def test_rejects_non_integer_dimensions():
    with pytest.raises(TypeError):
        Maze(2.5, 3)


def test_from_grid_runs_goal_search_on_fixed_grid():
    spaces = [
        O, O, O,
        W, W, O,
        O, O, O,
    ]
    first = Maze.from_grid(spaces, 3, 3)
    second = Maze.from_grid(spaces, 3, 3)
    assert first.goal == second.goal == (0, 2)
    assert first.goal_distance == 6
    assert first.size == (2, 2)
    assert first.is_perfect()


def test_from_grid_validates_shape():
    with pytest.raises(ValueError):
        Maze.from_grid([O, O], 3, 1)
    with pytest.raises(ValueError):
        Maze.from_grid([W, O, O], 3, 1)


def test_from_grid_rejects_loops():
    with pytest.raises(ValueError):
        Maze.from_grid([O] * 9, 3, 3)


def test_from_grid_rejects_large_open_field_without_searching():
    # An all-open field has exponentially many simple paths.
    with pytest.raises(ValueError):
        Maze.from_grid([O] * 36, 6, 6)


def test_from_grid_rejects_disconnected_cells():
    with pytest.raises(ValueError):
        Maze.from_grid([O, W, O], 3, 1)


def test_from_grid_rejects_unknown_cell_values():
    with pytest.raises(ValueError):
        Maze.from_grid([0, 7, 0], 3, 1)
    with pytest.raises(ValueError):
        Maze.from_grid([0, -1, 0], 3, 1)


def test_from_grid_moves_existing_goal_to_farthest_cell():
    maze = Maze.from_grid([G, O, O], 3, 1)
    assert maze.goal == (2, 0)
    assert not maze.is_goal(0, 0)
