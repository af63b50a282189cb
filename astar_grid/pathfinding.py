"""
A* path finding on a 4-connected grid.

The search annotates a copy of the input grid: every cell placed on the open
list is marked CLOSED, every cell popped from it is marked PATH, and on success
the endpoints are stamped START and FINISH.

Open list ordering: lowest f = g + h, then lowest h, then insertion order.
"""

from dataclasses import dataclass, field
from heapq import heappush, heappop
from itertools import count
from numbers import Integral
from typing import Dict, List, NamedTuple, Optional, Sequence

from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .errors import InvalidInputError, PathNotFoundError
from .grid import (
    CellState,
    Coord,
    Grid,
    copy_grid,
    is_expandable,
    is_rectangular,
    is_valid_coordinate,
)

# up, down, left, right
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class SearchNode(NamedTuple):
    """Open list entry: position, cost so far and heuristic estimate."""
    x: int
    y: int
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h


class OpenList:
    """Min-priority queue of search nodes keyed by (f, h, insertion order)."""

    def __init__(self):
        self._heap = []
        self._seq = count()

    def push(self, node: SearchNode) -> None:
        heappush(self._heap, (node.f, node.h, next(self._seq), node))

    def pop(self) -> SearchNode:
        return heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


@dataclass
class SearchResult:
    """Outcome of a single search: either found with an annotated grid, or not."""
    found: bool
    grid: Optional[Grid] = None
    cost: Optional[int] = None
    route: List[Coord] = field(default_factory=list)
    expanded: int = 0
    reason: Optional[str] = None
    init: Optional[Coord] = None
    goal: Optional[Coord] = None

    def require(self) -> Grid:
        """Return the annotated grid, raising PathNotFoundError if the search failed."""
        if not self.found:
            raise PathNotFoundError(self.init, self.goal, self.reason or "No path found!")
        return self.grid


def heuristic(x1: int, y1: int, x2: int, y2: int) -> int:
    """Manhattan distance heuristic."""
    return abs(x2 - x1) + abs(y2 - y1)


def add_to_open(x: int, y: int, g: int, h: int, open_list: OpenList, grid: Grid) -> SearchNode:
    """
    Push a node and mark its cell CLOSED.

    Marking on enqueue keeps a cell from entering the open list twice.
    """
    node = SearchNode(x, y, g, h)
    open_list.push(node)
    grid[x][y] = CellState.CLOSED
    return node


def expand_neighbors(
    node: SearchNode,
    goal: Sequence[int],
    open_list: OpenList,
    grid: Grid,
    came_from: Optional[Dict[Coord, Coord]] = None,
) -> None:
    """
    Add the expandable 4-connected neighbors of a node to the open list.

    Args:
        node: Node being expanded
        goal: Goal (row, col)
        open_list: Open list to push onto
        grid: Grid being searched (mutated)
        came_from: Optional parent map, filled for each opened neighbor
    """
    for dx, dy in DIRECTIONS:
        nx, ny = node.x + dx, node.y + dy
        if is_expandable(nx, ny, grid):
            h = heuristic(nx, ny, goal[0], goal[1])
            add_to_open(nx, ny, node.g + 1, h, open_list, grid)
            if came_from is not None:
                came_from[(nx, ny)] = (node.x, node.y)


def select_next(open_list: OpenList) -> SearchNode:
    """Remove and return the node with the lowest f."""
    return open_list.pop()


def _reconstruct_route(came_from: Dict[Coord, Coord], end: Coord) -> List[Coord]:
    route = [end]
    current = end
    while current in came_from:
        current = came_from[current]
        route.append(current)
    route.reverse()
    return route


def _as_coord(name: str, value: Sequence[int]) -> Coord:
    if len(value) != 2 or not all(isinstance(v, Integral) and not isinstance(v, bool) for v in value):
        raise InvalidInputError(f"{name} must be a pair of integers, got {tuple(value)!r}")
    return int(value[0]), int(value[1])


def _check_endpoints(grid: Grid, init: Coord, goal: Coord, config: SearchConfig) -> None:
    if not grid:
        raise InvalidInputError("grid is empty")
    if config.validate_endpoints and not is_rectangular(grid):
        raise InvalidInputError("grid rows have unequal length")
    for name, (x, y) in (("init", init), ("goal", goal)):
        if not is_valid_coordinate(x, y, grid, verbose=config.verbose):
            raise InvalidInputError(f"{name} {(x, y)} is outside the {len(grid)}x{len(grid[0])} grid")


def search(grid: Grid, init: Sequence[int], goal: Sequence[int],
           config: Optional[SearchConfig] = None) -> SearchResult:
    """
    A* search from init to goal.

    The input grid is copied and never modified.

    Args:
        grid: Grid of CellState values (EMPTY / OBSTACLE)
        init: Start (row, col)
        goal: Goal (row, col)
        config: Search options (endpoint validation, verbosity)

    Returns:
        SearchResult; on success `grid` holds the annotated copy

    Raises:
        InvalidInputError: If init/goal are not integer pairs or are off the grid,
            or init is an obstacle while endpoint validation is enabled
    """
    config = config or DEFAULT_SEARCH_CONFIG
    init = _as_coord("init", init)
    goal = _as_coord("goal", goal)
    _check_endpoints(grid, init, goal, config)

    # An obstacle goal is unreachable whatever the start cell holds
    if grid[goal[0]][goal[1]] is CellState.OBSTACLE:
        return SearchResult(found=False, reason="goal cell is an obstacle", init=init, goal=goal)
    if config.validate_endpoints and grid[init[0]][init[1]] is CellState.OBSTACLE:
        raise InvalidInputError(f"init {init} is an obstacle")

    grid = copy_grid(grid)
    open_list = OpenList()
    came_from: Dict[Coord, Coord] = {}
    expanded = 0

    add_to_open(init[0], init[1], 0, heuristic(init[0], init[1], goal[0], goal[1]), open_list, grid)

    while open_list:
        current = select_next(open_list)
        expanded += 1
        grid[current.x][current.y] = CellState.PATH

        if (current.x, current.y) == goal:
            grid[init[0]][init[1]] = CellState.START
            grid[goal[0]][goal[1]] = CellState.FINISH
            return SearchResult(
                found=True,
                grid=grid,
                cost=current.g,
                route=_reconstruct_route(came_from, goal),
                expanded=expanded,
                init=init,
                goal=goal,
            )

        expand_neighbors(current, goal, open_list, grid, came_from)

    return SearchResult(found=False, expanded=expanded, reason="No path found!", init=init, goal=goal)


def search_grid(grid: Grid, init: Sequence[int], goal: Sequence[int]) -> Grid:
    """
    Search and return only the annotated grid.

    Returns:
        Annotated grid, or an empty list (after printing "No path found!") when
        the goal cannot be reached
    """
    result = search(grid, init, goal)
    if not result.found:
        print("No path found!")
        return []
    return result.grid
