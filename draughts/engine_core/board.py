"""
Board - Grid ownership, placement and aggregate rule checks.

The Board is the single owner of all pieces in play:
- place() is the only operation that writes a piece's position
- removal nulls the cell; removed pieces are no longer in play
- out-of-bounds queries are caller errors (OutOfBoundsError)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator
import math

from .errors import OutOfBoundsError
from .pieces import Piece, PieceColor


@dataclass(frozen=True)
class LayoutMetrics:
    """
    Geometry for drawing the board centered in a viewport.

    cell_size is the side of one square cell in viewport units;
    the offsets are the position of the board's top-left corner.
    """
    cell_size: float
    x_offset: float
    y_offset: float

    def cell_at(self, px: float, py: float) -> tuple[int, int]:
        """Board cell under a viewport point. May be off the board."""
        return (
            math.floor((px - self.x_offset) / self.cell_size),
            math.floor((py - self.y_offset) / self.cell_size),
        )

    def cell_origin(self, x: int, y: int) -> tuple[float, float]:
        """Top-left viewport point of a board cell."""
        return (
            x * self.cell_size + self.x_offset,
            y * self.cell_size + self.y_offset,
        )


class Board:
    """
    A rectangular checkers board.

    Starting layout: pieces sit on cells where (x + y) is even.
    DARK fills the top `rows_per_side` rows, LIGHT the bottom ones.
    On the standard 8x8 board that is DARK on rows 0-2 and LIGHT on 5-7.
    """

    def __init__(self, width: int = 8, height: int = 8, rows_per_side: int = 3):
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        if rows_per_side < 0 or 2 * rows_per_side > height:
            raise ValueError(
                f"{rows_per_side} starting rows per side do not fit a board of height {height}"
            )
        self.width = width
        self.height = height
        self.rows_per_side = rows_per_side
        self.cells: list[list[Piece | None]] = []
        self.initialize()

    def initialize(self):
        """(Re)build the grid in the starting layout."""
        self.cells = [[None] * self.height for _ in range(self.width)]
        for x in range(self.width):
            for y in range(self.height):
                color = self._starting_color(x, y)
                if color is not None:
                    self.place(x, y, Piece(self, x, y, color))

    def _starting_color(self, x: int, y: int) -> PieceColor | None:
        if (x + y) % 2 != 0:
            return None
        if y >= self.height - self.rows_per_side:
            return PieceColor.LIGHT
        if y < self.rows_per_side:
            return PieceColor.DARK
        return None

    def clear(self):
        """Remove every piece."""
        self.cells = [[None] * self.height for _ in range(self.width)]

    # =========================================================================
    # Positional queries
    # =========================================================================

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int):
        if not self.is_in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def piece_at(self, x: int, y: int) -> Piece | None:
        self._check_bounds(x, y)
        return self.cells[x][y]

    def is_empty(self, x: int, y: int) -> bool:
        return self.piece_at(x, y) is None

    def place(self, x: int, y: int, piece: Piece | None):
        """Set a cell, moving the piece's own position along with it."""
        self._check_bounds(x, y)
        if piece is not None:
            piece.x = x
            piece.y = y
        self.cells[x][y] = piece

    def remove(self, x: int, y: int):
        self.place(x, y, None)

    def add_piece(self, x: int, y: int, color: PieceColor, king: bool = False) -> Piece:
        """Create a new piece at (x, y), for setting up positions."""
        piece = Piece(self, x, y, color)
        piece.is_king = king
        self.place(x, y, piece)
        return piece

    def pieces(self, color: PieceColor | None = None) -> Iterator[Piece]:
        """Live pieces, column by column, optionally of one color."""
        for column in self.cells:
            for piece in column:
                if piece is None:
                    continue
                if color is not None and piece.color != color:
                    continue
                yield piece

    def count_pieces(self, color: PieceColor) -> int:
        return sum(1 for _ in self.pieces(color))

    # =========================================================================
    # Aggregate rule checks
    # =========================================================================

    def has_no_legal_moves(self, color: PieceColor) -> bool:
        """
        Loss condition for `color`.

        True if the color has no pieces left, or none of them can move.
        """
        return not any(piece.can_move_anywhere() for piece in self.pieces(color))

    def can_capture(self, color: PieceColor) -> bool:
        """Whether any piece of `color` has a capture available."""
        return any(piece.can_capture_anywhere() for piece in self.pieces(color))

    def layout_metrics(self, view_width: float, view_height: float) -> LayoutMetrics:
        """Square-cell geometry for the board centered in a viewport."""
        cell_size = min(view_width / self.width, view_height / self.height)
        board_width = cell_size * self.width
        board_height = cell_size * self.height
        return LayoutMetrics(
            cell_size=cell_size,
            x_offset=(view_width - board_width) / 2,
            y_offset=(view_height - board_height) / 2,
        )
