"""
Grid model for A* search: cell states and coordinate helpers.
"""

from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np


class CellState(Enum):
    """State tag of a single grid cell."""
    EMPTY = 0
    OBSTACLE = 1
    CLOSED = 2
    PATH = 3
    START = 4
    FINISH = 5


Grid = List[List[CellState]]
Coord = Tuple[int, int]  # (row, col)


def grid_from_occupancy(occupancy) -> Grid:
    """
    Build a grid from a numeric occupancy map.

    Args:
        occupancy: 2D array or nested sequence where 0=free, anything else=occupied

    Returns:
        Grid of CellState values (row-major)
    """
    return [
        [CellState.EMPTY if value == 0 else CellState.OBSTACLE for value in row]
        for row in occupancy
    ]


def grid_to_array(grid: Grid) -> np.ndarray:
    """
    Convert a grid to an integer array of state codes.

    Args:
        grid: Grid of CellState values

    Returns:
        2D int array (rows, cols) holding CellState values
    """
    if not grid:
        return np.zeros((0, 0), dtype=np.int8)
    return np.array([[cell.value for cell in row] for row in grid], dtype=np.int8)


def copy_grid(grid: Grid) -> Grid:
    """Row-by-row copy; cells are immutable enum members."""
    return [list(row) for row in grid]


def grid_shape(grid: Grid) -> Tuple[int, int]:
    """Return (rows, cols), using the first row as the column count."""
    if not grid:
        return 0, 0
    return len(grid), len(grid[0])


def is_rectangular(grid: Sequence[Sequence]) -> bool:
    """Check that all rows have the same length."""
    return len({len(row) for row in grid}) <= 1


def is_valid_coordinate(x: int, y: int, grid: Grid, verbose: bool = False) -> bool:
    """
    Check that (x, y) lies on the grid.

    Args:
        x: Row index
        y: Column index
        grid: The grid
        verbose: Print which coordinate is out of range

    Returns:
        True if 0 <= x < rows and 0 <= y < cols
    """
    rows, cols = grid_shape(grid)
    valid = True
    if x < 0 or x >= rows:
        if verbose:
            print("x coord is invalid")
        valid = False
    if y < 0 or y >= cols:
        if verbose:
            print("y coord is invalid")
        valid = False
    return valid


def is_expandable(x: int, y: int, grid: Grid) -> bool:
    """A cell can be opened only if it is on the grid and still EMPTY."""
    return is_valid_coordinate(x, y, grid) and grid[x][y] is CellState.EMPTY
