"""
Engine Errors - Precondition violations raised by the engine core.

Illegal game moves are NOT errors: they are reported through
MoveEvaluation / ClickResult. These exceptions signal a caller bug,
such as a bad pixel-to-board mapping.
"""


class EngineError(Exception):
    """Base class for engine precondition violations."""


class OutOfBoundsError(EngineError, IndexError):
    """Raised when a board query targets a cell outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        super().__init__(
            f"Cell ({x}, {y}) is outside the {width}x{height} board"
        )


class PieceNotOnBoardError(EngineError):
    """Raised when operating on a piece its board does not hold."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(f"No such piece on the board at ({x}, {y})")
