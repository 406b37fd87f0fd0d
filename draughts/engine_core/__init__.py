"""
Engine Core - Board state, piece legality and move application.

The core is a pure, synchronous state machine over a fixed grid:
1. Board owns cells and piece placement
2. Piece evaluates and applies its own moves
3. Board answers aggregate questions (captures available, loss)
"""

from .errors import EngineError, OutOfBoundsError, PieceNotOnBoardError
from .move import MoveEvaluation, MoveRecord
from .pieces import Piece, PieceColor, PLAYER_COLORS
from .board import Board, LayoutMetrics

__all__ = [
    "EngineError",
    "OutOfBoundsError",
    "PieceNotOnBoardError",
    "MoveEvaluation",
    "MoveRecord",
    "Piece",
    "PieceColor",
    "PLAYER_COLORS",
    "Board",
    "LayoutMetrics",
]
