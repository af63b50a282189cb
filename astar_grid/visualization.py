"""
Rendering utilities: text boards, colour images and Rerun viewer setup.
"""

import numpy as np
import rerun as rr

from .grid import CellState, Grid

CELL_GLYPHS = {
    CellState.EMPTY: "0",
    CellState.OBSTACLE: "x",
    CellState.CLOSED: "0",
    CellState.PATH: "*",
    CellState.START: "i",
    CellState.FINISH: "G",
}

CELL_COLORS = {
    CellState.EMPTY: (255, 255, 255),
    CellState.OBSTACLE: (40, 40, 40),
    CellState.CLOSED: (190, 210, 255),
    CellState.PATH: (255, 200, 0),
    CellState.START: (0, 200, 0),
    CellState.FINISH: (220, 0, 0),
}


def cell_string(cell: CellState, width: int = 4) -> str:
    """Fixed-width glyph for one cell."""
    return CELL_GLYPHS[cell].ljust(width)


def render_board(grid: Grid, width: int = 4) -> str:
    """
    Render a grid as text, one fixed-width token per cell.

    Args:
        grid: Grid to render
        width: Token width

    Returns:
        Rows joined by newlines
    """
    return "\n".join("".join(cell_string(cell, width) for cell in row) for row in grid)


def print_board(grid: Grid, width: int = 4) -> None:
    """Print the board."""
    print(render_board(grid, width))


def create_grid_image(grid: Grid, cell_size: int = 1) -> np.ndarray:
    """
    Create colored visualization of a grid.

    Args:
        grid: Grid of CellState values
        cell_size: Pixels per cell along each axis

    Returns:
        Colored image array (H, W, 3) with uint8 dtype
    """
    if cell_size < 1:
        raise ValueError(f"cell_size must be >= 1, got {cell_size}")
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    grid_viz = np.zeros((rows, cols, 3), dtype=np.uint8)
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            grid_viz[i, j] = CELL_COLORS[cell]
    if cell_size > 1:
        grid_viz = np.repeat(np.repeat(grid_viz, cell_size, axis=0), cell_size, axis=1)
    return grid_viz


def setup_pathfinding_viewer_blueprint():
    """
    Set up the blueprint for the path finding viewer.

    Returns:
        Blueprint configuration for Rerun viewer
    """
    blueprint = rr.blueprint.Blueprint(
        rr.blueprint.Horizontal(
            rr.blueprint.Spatial2DView(name="Search Grid", origin="grid"),
            rr.blueprint.TextDocumentView(name="Board", origin="board"),
            column_shares=[2, 1]
        ),
        collapse_panels=False,
    )
    return blueprint


def log_search_result(result, entity_path: str = "grid", cell_size: int = 16):
    """
    Log a search result to an initialized Rerun recording.

    Args:
        result: SearchResult from astar_grid.pathfinding.search
        entity_path: Root entity path for the grid image and route
        cell_size: Pixels per cell in the logged image
    """
    if not result.found:
        rr.log("board", rr.TextDocument(result.reason or "No path found!"))
        return

    rr.log(f"{entity_path}/image", rr.Image(create_grid_image(result.grid, cell_size)))
    rr.log("board", rr.TextDocument(render_board(result.grid)))

    # Route through cell centers, image coordinates are (col, row)
    centers = [((y + 0.5) * cell_size, (x + 0.5) * cell_size) for x, y in result.route]
    if len(centers) > 1:
        rr.log(
            f"{entity_path}/route",
            rr.LineStrips2D([centers], colors=[[0, 120, 255]])
        )
