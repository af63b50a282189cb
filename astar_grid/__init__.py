"""
A* shortest path search on 2D occupancy grids.
"""

from .grid import (
    CellState,
    Grid,
    Coord,
    grid_from_occupancy,
    grid_to_array,
    copy_grid,
    is_valid_coordinate,
    is_expandable
)
from .pathfinding import (
    DIRECTIONS,
    SearchNode,
    OpenList,
    SearchResult,
    heuristic,
    add_to_open,
    expand_neighbors,
    select_next,
    search,
    search_grid
)
from .io_utils import (
    parse_line,
    read_board_file,
    load_board,
    save_board_image
)
from .visualization import (
    cell_string,
    render_board,
    print_board,
    create_grid_image,
    setup_pathfinding_viewer_blueprint,
    log_search_result
)
from .config import (
    SearchConfig,
    BoardConfig,
    RenderConfig,
    DEFAULT_SEARCH_CONFIG,
    DEFAULT_BOARD_CONFIG,
    DEFAULT_RENDER_CONFIG,
    get_output_path
)
from .errors import (
    AStarGridError,
    FileUnreadableError,
    BoardFormatError,
    InvalidInputError,
    PathNotFoundError
)

__all__ = [
    # Grid
    'CellState',
    'Grid',
    'Coord',
    'grid_from_occupancy',
    'grid_to_array',
    'copy_grid',
    'is_valid_coordinate',
    'is_expandable',
    # Path finding
    'DIRECTIONS',
    'SearchNode',
    'OpenList',
    'SearchResult',
    'heuristic',
    'add_to_open',
    'expand_neighbors',
    'select_next',
    'search',
    'search_grid',
    # IO utilities
    'parse_line',
    'read_board_file',
    'load_board',
    'save_board_image',
    # Visualization
    'cell_string',
    'render_board',
    'print_board',
    'create_grid_image',
    'setup_pathfinding_viewer_blueprint',
    'log_search_result',
    # Config
    'SearchConfig',
    'BoardConfig',
    'RenderConfig',
    'DEFAULT_SEARCH_CONFIG',
    'DEFAULT_BOARD_CONFIG',
    'DEFAULT_RENDER_CONFIG',
    'get_output_path',
    # Errors
    'AStarGridError',
    'FileUnreadableError',
    'BoardFormatError',
    'InvalidInputError',
    'PathNotFoundError',
]
