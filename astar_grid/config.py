"""
Configuration utilities and default settings.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Configuration for the A* search."""
    validate_endpoints: bool = True  # reject obstacle-seated start / ragged grids
    verbose: bool = False


@dataclass
class BoardConfig:
    """Configuration for reading board files."""
    separator: str = ","
    skip_blank_lines: bool = True


@dataclass
class RenderConfig:
    """Configuration for text and image rendering."""
    cell_width: int = 4
    image_cell_size: int = 16  # pixels per cell in PNG output


# Default configurations
DEFAULT_SEARCH_CONFIG = SearchConfig()
DEFAULT_BOARD_CONFIG = BoardConfig()
DEFAULT_RENDER_CONFIG = RenderConfig()


def get_output_path(board_path: Path, output_dir: Optional[Path] = None) -> Path:
    """
    Get standardized path for the rendered result image.

    Args:
        board_path: Path to the input board file
        output_dir: Optional directory for the image (defaults to the board's directory)

    Returns:
        Path to PNG file, e.g. "maze.board" -> "maze_path.png"
    """
    base_dir = output_dir if output_dir is not None else board_path.parent
    return base_dir / f"{board_path.stem}_path.png"
