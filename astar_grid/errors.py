"""
Error types raised by the board reader and the search.
"""


class AStarGridError(Exception):
    """Base class for all astar-grid errors."""


class FileUnreadableError(AStarGridError, OSError):
    """Board file is missing or cannot be read."""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f'File "{path}" not exists!' if reason is None else f'Cannot read "{path}": {reason}'
        super().__init__(message)


class BoardFormatError(AStarGridError, ValueError):
    """Board text does not follow the integer/separator format."""

    def __init__(self, message, line_number=None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InvalidInputError(AStarGridError, ValueError):
    """Start or goal cannot be used for a search on the given grid."""


class PathNotFoundError(AStarGridError):
    """The open list was exhausted before reaching the goal."""

    def __init__(self, init, goal, reason="No path found!"):
        self.init = tuple(init)
        self.goal = tuple(goal)
        self.reason = reason
        super().__init__(f"{reason} ({self.init} -> {self.goal})")
