#!/usr/bin/env python3
"""
Find a shortest path across a board file with A*.

Board files hold one row per line, integers separated by commas:
0 = free cell, anything else = obstacle.

Output glyphs:
- i : start
- G : goal
- * : cell expanded by the search
- x : obstacle
- 0 : free / not expanded
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from astar_grid.config import BoardConfig, RenderConfig, SearchConfig, get_output_path
from astar_grid.errors import AStarGridError, InvalidInputError, PathNotFoundError
from astar_grid.io_utils import read_board_file, save_board_image
from astar_grid.pathfinding import search
from astar_grid.visualization import (
    log_search_result,
    render_board,
    setup_pathfinding_viewer_blueprint,
)


def build_parser():
    parser = argparse.ArgumentParser(description="A* shortest path on a board file")
    parser.add_argument("board", type=Path, help="Path to board file")
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=[0, 0],
                        help="Start cell as row col (default: 0 0)")
    parser.add_argument("--goal", type=int, nargs=2, metavar=("X", "Y"), default=None,
                        help="Goal cell as row col (default: bottom-right cell)")
    parser.add_argument("--separator", default=",",
                        help="Token separator in the board file (default: ',')")
    parser.add_argument("--permissive", action="store_true",
                        help="Do not reject an obstacle-seated start cell")
    parser.add_argument("--verbose", action="store_true",
                        help="Report which coordinate is out of range")
    parser.add_argument("--save-image", action="store_true",
                        help="Save the result as PNG (default path: <board>_path.png)")
    parser.add_argument("--image-path", type=Path, default=None,
                        help="Where to save the PNG (implies --save-image)")
    parser.add_argument("--cell-size", type=int, default=RenderConfig.image_cell_size,
                        help="Pixels per cell in saved/viewed images (default: 16)")
    parser.add_argument("--view", action="store_true",
                        help="Show the result in the Rerun viewer")
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    render_config = RenderConfig(image_cell_size=args.cell_size)

    try:
        board = read_board_file(args.board, BoardConfig(separator=args.separator))
    except AStarGridError as e:
        print(f"✗ Error: {e}")
        return 1

    if not board:
        print(f"✗ Error: Board {args.board} is empty")
        return 1

    goal = args.goal if args.goal is not None else [len(board) - 1, len(board[0]) - 1]

    print(f"📁 Board: {args.board} ({len(board)}x{len(board[0])})")
    print(f"   Start: {tuple(args.start)}  Goal: {tuple(goal)}\n")
    print(render_board(board, render_config.cell_width))
    print()

    config = SearchConfig(validate_endpoints=not args.permissive, verbose=args.verbose)
    try:
        result = search(board, args.start, goal, config)
    except InvalidInputError as e:
        print(f"✗ Error: {e}")
        return 1

    if args.view:
        import rerun as rr

        rr.init("A* Path Finder", spawn=True)
        rr.send_blueprint(setup_pathfinding_viewer_blueprint())
        log_search_result(result, cell_size=render_config.image_cell_size)

    try:
        grid = result.require()
    except PathNotFoundError as e:
        print(f"✗ {e}")
        return 1

    print(render_board(grid, render_config.cell_width))
    print(f"\n✓ Path found: cost {result.cost}, {len(result.route)} cells, "
          f"{result.expanded} nodes expanded")

    if args.save_image or args.image_path is not None:
        image_path = args.image_path if args.image_path is not None else get_output_path(args.board)
        if not save_board_image(grid, image_path, render_config.image_cell_size):
            return 1
        print(f"✓ Saved image: {image_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
