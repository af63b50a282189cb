"""
Input/Output utilities for board files and rendered images.
"""

from pathlib import Path
from typing import List

from PIL import Image

from .config import DEFAULT_BOARD_CONFIG, BoardConfig
from .errors import AStarGridError, BoardFormatError, FileUnreadableError
from .grid import CellState, Grid, is_rectangular
from .visualization import create_grid_image


def parse_line(line: str, separator: str = ",") -> List[CellState]:
    """
    Parse one board row such as "0,1,0,0,".

    Args:
        line: Row text, integers separated by `separator` (trailing separator allowed)
        separator: Single separator character

    Returns:
        List of cell states: 0 -> EMPTY, any other integer -> OBSTACLE

    Raises:
        BoardFormatError: If a token is not an integer
    """
    tokens = line.strip().split(separator)
    if tokens and tokens[-1].strip() == "":
        tokens.pop()

    row = []
    for token in tokens:
        try:
            value = int(token)
        except ValueError:
            raise BoardFormatError(f"invalid token {token!r}") from None
        row.append(CellState.EMPTY if value == 0 else CellState.OBSTACLE)
    return row


def read_board_file(path: Path, config: BoardConfig = DEFAULT_BOARD_CONFIG) -> Grid:
    """
    Read a board file, one row per line.

    Args:
        path: Path to the board file
        config: Separator and blank line handling

    Returns:
        Grid of EMPTY / OBSTACLE cells

    Raises:
        FileUnreadableError: If the file is missing or cannot be read
        BoardFormatError: If a line is malformed or rows differ in length
    """
    path = Path(path)
    if not path.is_file():
        raise FileUnreadableError(path)
    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise FileUnreadableError(path, e) from e

    board = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if config.skip_blank_lines and not line.strip():
            continue
        try:
            board.append(parse_line(line, config.separator))
        except BoardFormatError as e:
            raise BoardFormatError(str(e), line_number=line_number) from None

    if not is_rectangular(board):
        raise BoardFormatError(f"rows of unequal length in {path}")
    return board


def load_board(path: Path, config: BoardConfig = DEFAULT_BOARD_CONFIG) -> Grid:
    """
    Load a board file safely.

    Args:
        path: Path to the board file
        config: Separator and blank line handling

    Returns:
        Grid, or an empty list if the file is missing or malformed
    """
    try:
        return read_board_file(path, config)
    except FileUnreadableError as e:
        print(e)
        return []
    except AStarGridError as e:
        print(f"Error loading board from {path}: {e}")
        return []


def save_board_image(grid: Grid, image_path: Path, cell_size: int = 16) -> bool:
    """
    Save a grid as a colour PNG.

    Args:
        grid: Grid to render
        image_path: Path to save image
        cell_size: Pixels per cell

    Returns:
        True if successful, False otherwise
    """
    try:
        image_path = Path(image_path)
        image_path.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(create_grid_image(grid, cell_size)).save(image_path)
        return True
    except (OSError, ValueError) as e:
        print(f"Error saving image to {image_path}: {e}")
        return False
