"""
Move Results - Named outcomes of move evaluation and application.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pieces import PieceColor


@dataclass(frozen=True)
class MoveEvaluation:
    """
    Result of checking a move against the rules.

    `legal` says whether the move may be made at all;
    `is_capture` says whether it jumps an opponent piece.
    A capture is always legal, so (False, True) never occurs.
    """
    legal: bool = False
    is_capture: bool = False

    @classmethod
    def illegal(cls) -> MoveEvaluation:
        return cls(legal=False, is_capture=False)

    def permitted(self, mandatory_capture: bool) -> bool:
        """Whether the move may be played given the mandatory-capture rule."""
        if mandatory_capture:
            return self.is_capture
        return self.legal


@dataclass(frozen=True)
class MoveRecord:
    """
    A move that was applied to the board.

    Handed to move listeners and returned in click results.
    """
    color: PieceColor
    from_cell: tuple[int, int]
    to_cell: tuple[int, int]
    is_capture: bool = False
    captured_cell: tuple[int, int] | None = None
    promoted: bool = False
