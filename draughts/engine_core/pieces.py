"""
Pieces - Per-piece identity and move legality.

A Piece knows its color, king status and position, and evaluates
moves relative to the Board that holds it. The Board owns placement;
the piece keeps only a back-reference for legality queries.
"""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING

from .errors import PieceNotOnBoardError
from .move import MoveEvaluation

if TYPE_CHECKING:
    from .board import Board


class PieceColor(Enum):
    """The two sides. LIGHT is player 0 and moves first."""
    LIGHT = "light"
    DARK = "dark"

    @property
    def forward(self) -> int:
        """Row direction a non-king moves in, as sign(-dy)."""
        return 1 if self is PieceColor.LIGHT else -1

    @property
    def opponent(self) -> PieceColor:
        return PieceColor.DARK if self is PieceColor.LIGHT else PieceColor.LIGHT


# Turn order, indexed by GameSession.current_player_idx
PLAYER_COLORS: tuple[PieceColor, PieceColor] = (PieceColor.LIGHT, PieceColor.DARK)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Piece:
    """
    A checker on the board.

    Position is written only by Board.place, so (x, y) always matches
    the cell holding the piece.
    """

    def __init__(self, board: Board, x: int = 0, y: int = 0,
                 color: PieceColor = PieceColor.LIGHT):
        self.board = board
        self.x = x
        self.y = y
        self.color = color
        self.is_king = False

    def __repr__(self) -> str:
        kind = "King" if self.is_king else "Piece"
        return f"{kind}({self.color.value}, {self.x}, {self.y})"

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def forward_sign(self) -> int:
        """+1 if this piece advances toward row 0, -1 otherwise."""
        return self.color.forward

    def evaluate_move(self, x: int, y: int) -> MoveEvaluation:
        """
        Check whether this piece may move to (x, y).

        Rules, in order:
        1. Target must be on the board
        2. Target must be empty
        3. Movement must be exactly diagonal (and non-zero)
        4. Only kings may move backwards
        5. A two-cell jump must pass over an opponent piece (capture)
        6. Otherwise only single steps are allowed
        """
        if not self.board.is_in_bounds(x, y):
            return MoveEvaluation.illegal()
        if not self.board.is_empty(x, y):
            return MoveEvaluation.illegal()

        dx, dy = x - self.x, y - self.y
        dist = abs(dx)
        if dist == 0 or dist != abs(dy):
            return MoveEvaluation.illegal()

        if _sign(-dy) != self.forward_sign() and not self.is_king:
            return MoveEvaluation.illegal()

        if dist == 2:
            jumped = self.board.piece_at(self.x + _sign(dx), self.y + _sign(dy))
            if jumped is None or jumped.color == self.color:
                return MoveEvaluation.illegal()
            return MoveEvaluation(legal=True, is_capture=True)

        return MoveEvaluation(legal=dist == 1, is_capture=False)

    def _targets(self):
        for x in range(self.board.width):
            for y in range(self.board.height):
                yield x, y, self.evaluate_move(x, y)

    def can_move_anywhere(self) -> bool:
        """Whether any cell on the board is a legal destination."""
        return any(ev.legal for _, _, ev in self._targets())

    def can_capture_anywhere(self) -> bool:
        """Whether any cell on the board is reachable by a capture."""
        return any(ev.is_capture for _, _, ev in self._targets())

    def legal_targets(self, captures_only: bool = False) -> list[tuple[int, int]]:
        """Cells this piece may move to, for drawing move hints."""
        return [
            (x, y) for x, y, ev in self._targets()
            if (ev.is_capture if captures_only else ev.legal)
        ]

    def move(self, x: int, y: int) -> bool:
        """
        Move to (x, y), capturing and promoting as needed.

        Trusts that evaluate_move already approved the move.
        Returns True if an opponent piece was captured.
        """
        if self.board.piece_at(self.x, self.y) is not self:
            raise PieceNotOnBoardError(self.x, self.y)

        dx, dy = x - self.x, y - self.y
        capture = abs(dx) == 2
        if capture:
            self.board.remove(self.x + _sign(dx), self.y + _sign(dy))

        if y == self.promotion_row():
            self.is_king = True

        self.board.remove(self.x, self.y)
        self.board.place(x, y, self)
        return capture

    def promotion_row(self) -> int:
        """The far row that crowns this piece."""
        return 0 if self.forward_sign() == 1 else self.board.height - 1
