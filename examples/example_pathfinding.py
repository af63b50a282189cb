#!/usr/bin/env python3
"""
Example: Finding a path on a board file.

This demonstrates how to load a board, run the A* search and
render the result as text and as an image.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from astar_grid import (
    load_board,
    search,
    print_board,
    save_board_image,
    get_output_path
)


def pathfinding_example(board_path: Path, start=(0, 0), goal=(4, 5), save_image: bool = False):
    """Example of searching a board."""
    print(f"Loading {board_path}...")

    board = load_board(board_path)
    if not board:
        print("Failed to load board")
        return

    print(f"Loaded {len(board)}x{len(board[0])} board")
    print_board(board)

    print(f"\nSearching {start} -> {goal}...")
    result = search(board, start, goal)
    if not result.found:
        print(f"  {result.reason}")
        return

    print(f"  Cost: {result.cost}")
    print(f"  Route: {' -> '.join(str(cell) for cell in result.route)}")
    print(f"  Expanded: {result.expanded} nodes\n")
    print_board(result.grid)

    if save_image:
        image_path = get_output_path(board_path)
        if save_board_image(result.grid, image_path):
            print(f"\nSaved {image_path}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Path finding example")
    parser.add_argument("-i", "--input", type=Path, default=project_root / "boards" / "1.board",
                       help="Path to board file")
    parser.add_argument("--save-image", action="store_true",
                       help="Save the result as PNG next to the board")
    args = parser.parse_args()

    if not args.input.exists():
        print(f"Error: {args.input} does not exist")
        sys.exit(1)

    pathfinding_example(args.input, save_image=args.save_image)
