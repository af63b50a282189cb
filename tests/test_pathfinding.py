"""
Unit tests for astar_grid/pathfinding.py and astar_grid/grid.py
"""

from collections import deque

import numpy as np
import pytest

from astar_grid.config import SearchConfig
from astar_grid.errors import InvalidInputError, PathNotFoundError
from astar_grid.grid import (
    CellState,
    copy_grid,
    grid_from_occupancy,
    grid_to_array,
    is_expandable,
    is_valid_coordinate,
)
from astar_grid.pathfinding import (
    DIRECTIONS,
    OpenList,
    SearchNode,
    add_to_open,
    expand_neighbors,
    heuristic,
    search,
    search_grid,
    select_next,
)

E, O = CellState.EMPTY, CellState.OBSTACLE


def bfs_distances(grid, start):
    """Shortest step counts over EMPTY cells, for checking search results."""
    dist = {tuple(start): 0}
    queue = deque([tuple(start)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in DIRECTIONS:
            nxt = (x + dx, y + dy)
            if is_valid_coordinate(*nxt, grid) and grid[nxt[0]][nxt[1]] is E and nxt not in dist:
                dist[nxt] = dist[(x, y)] + 1
                queue.append(nxt)
    return dist


def random_grid(seed, rows=8, cols=10, density=0.3):
    rng = np.random.default_rng(seed)
    occupancy = (rng.random((rows, cols)) < density).astype(int)
    occupancy[0, 0] = 0
    occupancy[rows - 1, cols - 1] = 0
    return grid_from_occupancy(occupancy)


def test_heuristic_is_manhattan():
    assert heuristic(0, 0, 4, 4) == 8
    assert heuristic(3, 1, 1, 4) == 5
    assert heuristic(2, 2, 2, 2) == 0


def test_is_valid_coordinate_bounds(open_5x5, capsys):
    assert is_valid_coordinate(0, 0, open_5x5)
    assert is_valid_coordinate(4, 4, open_5x5)
    assert not is_valid_coordinate(5, 0, open_5x5)
    assert not is_valid_coordinate(0, -1, open_5x5)
    assert not is_valid_coordinate(0, 0, [])

    assert not is_valid_coordinate(-1, 7, open_5x5, verbose=True)
    out = capsys.readouterr().out
    assert "x coord is invalid" in out
    assert "y coord is invalid" in out


def test_is_expandable_only_empty_cells():
    grid = [[E, O], [CellState.CLOSED, CellState.PATH]]
    assert is_expandable(0, 0, grid)
    assert not is_expandable(0, 1, grid)
    assert not is_expandable(1, 0, grid)
    assert not is_expandable(1, 1, grid)
    assert not is_expandable(2, 0, grid)


def test_add_to_open_marks_closed(open_5x5):
    open_list = OpenList()
    node = add_to_open(2, 3, 1, 3, open_list, open_5x5)
    assert node == SearchNode(2, 3, 1, 3)
    assert node.f == 4
    assert len(open_list) == 1
    assert open_5x5[2][3] is CellState.CLOSED


def test_expand_neighbors_fixed_direction_order(open_5x5):
    """Neighbors are opened up, down, left, right."""
    open_list = OpenList()
    came_from = {}
    expand_neighbors(SearchNode(2, 2, 0, 4), (4, 4), open_list, open_5x5, came_from)
    assert list(came_from) == [(1, 2), (3, 2), (2, 1), (2, 3)]
    assert all(parent == (2, 2) for parent in came_from.values())
    assert len(open_list) == 4


def test_expand_neighbors_skips_blocked_and_closed():
    grid = grid_from_occupancy([[0, 1, 0], [0, 0, 0], [0, 0, 0]])
    grid[1][0] = CellState.CLOSED
    open_list = OpenList()
    expand_neighbors(SearchNode(1, 1, 2, 2), (2, 2), open_list, grid)

    nodes = []
    while open_list:
        nodes.append(select_next(open_list))
    assert {(n.x, n.y) for n in nodes} == {(2, 1), (1, 2)}
    assert all(n.g == 3 for n in nodes)
    assert grid[0][1] is O


def test_select_next_tie_break():
    """Lowest f first, then lowest h, then insertion order."""
    open_list = OpenList()
    open_list.push(SearchNode(0, 0, 2, 2))  # f=4, h=2
    open_list.push(SearchNode(1, 1, 3, 1))  # f=4, h=1
    open_list.push(SearchNode(2, 2, 1, 2))  # f=3
    open_list.push(SearchNode(3, 3, 2, 2))  # f=4, h=2, after (0, 0)

    order = [select_next(open_list)[:2] for _ in range(4)]
    assert order == [(2, 2), (1, 1), (0, 0), (3, 3)]
    assert not open_list


def test_init_equals_goal(open_5x5):
    result = search(open_5x5, (2, 2), (2, 2))
    assert result.found
    assert result.cost == 0
    assert result.route == [(2, 2)]
    assert result.expanded == 1
    assert result.grid[2][2] is CellState.FINISH
    others = [cell for i, row in enumerate(result.grid) for j, cell in enumerate(row) if (i, j) != (2, 2)]
    assert all(cell is E for cell in others)


def test_open_5x5_corner_to_corner(open_5x5):
    result = search(open_5x5, [0, 0], [4, 4])
    assert result.found
    assert result.cost == 8
    assert result.route == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (4, 1), (4, 2), (4, 3), (4, 4)]

    marked = [cell for row in result.grid for cell in row
              if cell in (CellState.PATH, CellState.START, CellState.FINISH)]
    assert len(marked) == 9
    assert result.grid[0][0] is CellState.START
    assert result.grid[4][4] is CellState.FINISH


@pytest.mark.parametrize("init,goal", [((0, 0), (3, 4)), ((4, 0), (0, 4)), ((2, 1), (2, 4)), ((1, 3), (4, 0))])
def test_path_cell_count_matches_manhattan_on_open_grid(open_5x5, init, goal):
    result = search(open_5x5, init, goal)
    marked = sum(cell in (CellState.PATH, CellState.START, CellState.FINISH)
                 for row in result.grid for cell in row)
    assert marked == heuristic(*init, *goal) + 1
    assert result.cost == heuristic(*init, *goal)


def test_routes_through_gap_in_middle_row():
    grid = grid_from_occupancy([[0, 0, 0], [1, 0, 1], [0, 0, 0]])
    result = search(grid, (0, 0), (2, 2))
    assert result.found
    assert result.cost == 4
    assert result.route == [(0, 0), (0, 1), (1, 1), (2, 1), (2, 2)]
    assert result.grid[1][1] is CellState.PATH
    assert result.grid[0][2] is CellState.CLOSED


def test_enclosed_goal_not_found(open_5x5):
    open_5x5[3][4] = O
    open_5x5[4][3] = O
    result = search(open_5x5, (0, 0), (4, 4))
    assert not result.found
    assert result.grid is None
    assert result.route == []
    assert result.reason == "No path found!"
    assert result.expanded == 22


@pytest.mark.parametrize("validate", [True, False])
def test_goal_obstacle_not_found(validate):
    grid = grid_from_occupancy([[0, 0], [0, 1]])
    result = search(grid, (0, 0), (1, 1), SearchConfig(validate_endpoints=validate))
    assert not result.found
    assert "obstacle" in result.reason
    with pytest.raises(PathNotFoundError):
        result.require()


def test_require_returns_grid(open_5x5):
    result = search(open_5x5, (0, 0), (1, 1))
    assert result.require() is result.grid


def test_input_grid_not_mutated(open_5x5):
    original = copy_grid(open_5x5)
    result = search(open_5x5, (0, 0), (4, 4))
    assert open_5x5 == original
    assert result.grid is not open_5x5


def test_search_is_deterministic():
    grid = random_grid(seed=7)
    first = search(copy_grid(grid), (0, 0), (7, 9))
    second = search(copy_grid(grid), (0, 0), (7, 9))
    assert first.found == second.found
    assert first.grid == second.grid
    assert first.route == second.route


@pytest.mark.parametrize("seed", range(20))
def test_random_grids_route_is_reachable(seed):
    grid = random_grid(seed)
    goal = (len(grid) - 1, len(grid[0]) - 1)
    dist = bfs_distances(grid, (0, 0))
    result = search(grid, (0, 0), goal)

    assert result.found == (goal in dist)
    if not result.found:
        assert result.grid is None
        return

    assert result.cost >= dist[goal]
    assert len(result.route) == result.cost + 1
    for (x1, y1), (x2, y2) in zip(result.route, result.route[1:]):
        assert heuristic(x1, y1, x2, y2) == 1
    for i, row in enumerate(result.grid):
        for j, cell in enumerate(row):
            if cell in (CellState.PATH, CellState.START, CellState.FINISH):
                assert (i, j) in dist


def test_out_of_bounds_endpoints_raise(open_5x5):
    with pytest.raises(InvalidInputError):
        search(open_5x5, (5, 0), (4, 4))
    with pytest.raises(InvalidInputError):
        search(open_5x5, (0, 0), (0, -1))
    with pytest.raises(InvalidInputError):
        search([], (0, 0), (0, 0))


def test_obstacle_start_strict_and_permissive():
    grid = grid_from_occupancy([[1, 0], [0, 0]])
    with pytest.raises(InvalidInputError):
        search(grid, (0, 0), (1, 1))

    result = search(grid, (0, 0), (1, 1), SearchConfig(validate_endpoints=False))
    assert result.found
    assert result.cost == 2
    assert result.grid[0][0] is CellState.START


@pytest.mark.parametrize("validate", [True, False])
def test_goal_obstacle_wins_over_obstacle_start(validate):
    """An obstacle goal is reported as not found even when the start is blocked too."""
    grid = grid_from_occupancy([[1, 0], [0, 0]])
    result = search(grid, (0, 0), (0, 0), SearchConfig(validate_endpoints=validate))
    assert not result.found
    assert "obstacle" in result.reason

    grid = grid_from_occupancy([[1, 0], [0, 1]])
    assert not search(grid, (0, 0), (1, 1), SearchConfig(validate_endpoints=validate)).found


@pytest.mark.parametrize("init,goal", [
    ((0.9, 0), (1, 1)),
    ((0, 0), (1.0, 1)),
    ((True, 0), (1, 1)),
    ((0, 0, 0), (1, 1)),
    (("0", "0"), (1, 1)),
])
def test_non_integer_coordinates_rejected(open_5x5, init, goal):
    with pytest.raises(InvalidInputError, match="pair of integers"):
        search(open_5x5, init, goal)


def test_numpy_integer_coordinates_accepted(open_5x5):
    result = search(open_5x5, (np.int64(0), np.int32(0)), np.array([2, 2]))
    assert result.found
    assert result.init == (0, 0)
    assert result.cost == 4


def test_ragged_grid_rejected():
    grid = [[E, E, E], [E, E]]
    with pytest.raises(InvalidInputError):
        search(grid, (0, 0), (1, 1))


def test_search_grid_compat(open_5x5, capsys):
    assert search_grid(open_5x5, (0, 0), (4, 4))[4][4] is CellState.FINISH

    open_5x5[3][4] = O
    open_5x5[4][3] = O
    assert search_grid(open_5x5, (0, 0), (4, 4)) == []
    assert "No path found!" in capsys.readouterr().out


def test_grid_from_numpy_occupancy():
    occupancy = np.array([[0, 2], [0, 0]])
    grid = grid_from_occupancy(occupancy)
    assert grid == [[E, O], [E, E]]

    result = search(grid, np.array([0, 0]), (1, 1))
    codes = grid_to_array(result.grid)
    assert codes.shape == (2, 2)
    assert codes[1, 1] == CellState.FINISH.value
    assert codes[0, 1] == CellState.OBSTACLE.value
