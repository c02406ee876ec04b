class MazeError(Exception):
    """Base class for maze_carver errors."""


class InitializationError(MazeError):
    """Window or graphics context could not be created."""


class OutOfBounds(MazeError, IndexError):
    def __init__(self, col: int, row: int):
        super().__init__(f"Coordinate ({col}, {row}) out of bounds")
        self.col = col
        self.row = row


class EntropyError(MazeError):
    """The randomness source stopped working."""
