# tests/conftest.py

import sys
from pathlib import Path

import pytest

# Add project root to path so astar_grid and scripts import without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from astar_grid.grid import grid_from_occupancy


@pytest.fixture
def open_5x5():
    return grid_from_occupancy([[0] * 5 for _ in range(5)])


@pytest.fixture
def board_file(tmp_path):
    """Write board text to a temporary file and return its path."""
    def _write(text, name="test.board"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
