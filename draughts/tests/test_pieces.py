"""
Tests for piece legality and move application.
"""

import pytest

from ..engine_core import MoveEvaluation, PieceColor, PieceNotOnBoardError


class TestForwardSign:
    """Tests for movement direction."""

    def test_light_moves_up(self, board):
        """LIGHT advances toward row 0."""
        assert board.piece_at(1, 5).forward_sign() == 1

    def test_dark_moves_down(self, board):
        """DARK advances toward the last row."""
        assert board.piece_at(0, 2).forward_sign() == -1

    def test_opponent(self):
        assert PieceColor.LIGHT.opponent == PieceColor.DARK
        assert PieceColor.DARK.opponent == PieceColor.LIGHT


class TestEvaluateMove:
    """Tests for evaluate_move."""

    def test_simple_step(self, board):
        """A forward diagonal step onto an empty cell is legal."""
        piece = board.piece_at(1, 5)
        assert piece.evaluate_move(0, 4) == MoveEvaluation(legal=True, is_capture=False)
        assert piece.evaluate_move(2, 4) == MoveEvaluation(legal=True, is_capture=False)

    def test_occupied_target(self, board):
        """Cannot move onto any piece."""
        piece = board.piece_at(1, 5)
        assert piece.evaluate_move(0, 6) == MoveEvaluation.illegal()

    def test_out_of_bounds_target(self, board):
        """Off-board targets are illegal, not errors."""
        piece = board.piece_at(7, 5)
        assert piece.evaluate_move(8, 4) == MoveEvaluation.illegal()

    def test_not_diagonal(self, board):
        """Straight or skewed moves are illegal."""
        piece = board.piece_at(1, 5)
        assert piece.evaluate_move(1, 4) == MoveEvaluation.illegal()
        assert piece.evaluate_move(3, 4) == MoveEvaluation.illegal()

    def test_zero_displacement(self, empty_board):
        """Staying put is never a move."""
        piece = empty_board.add_piece(3, 4, PieceColor.LIGHT, king=True)
        assert piece.evaluate_move(3, 4) == MoveEvaluation.illegal()

    def test_long_diagonal(self, empty_board):
        """Only steps of one or two cells exist."""
        piece = empty_board.add_piece(0, 7, PieceColor.LIGHT, king=True)
        assert piece.evaluate_move(3, 4) == MoveEvaluation.illegal()

    def test_backward_needs_king(self, empty_board):
        """A man cannot step back; a king can."""
        man = empty_board.add_piece(3, 4, PieceColor.LIGHT)
        king = empty_board.add_piece(5, 2, PieceColor.LIGHT, king=True)

        assert not man.evaluate_move(2, 5).legal
        assert not man.evaluate_move(4, 5).legal
        assert king.evaluate_move(4, 3).legal
        assert king.evaluate_move(6, 1).legal

    def test_capture(self, empty_board):
        """Jumping an opponent is a legal capture."""
        piece = empty_board.add_piece(2, 5, PieceColor.LIGHT)
        empty_board.add_piece(3, 4, PieceColor.DARK)

        assert piece.evaluate_move(4, 3) == MoveEvaluation(legal=True, is_capture=True)

    def test_jump_over_empty(self, empty_board):
        """A two-cell move needs something to capture."""
        piece = empty_board.add_piece(2, 5, PieceColor.LIGHT)
        assert piece.evaluate_move(4, 3) == MoveEvaluation.illegal()

    def test_jump_over_own_piece(self, empty_board):
        """Cannot capture your own color."""
        piece = empty_board.add_piece(2, 5, PieceColor.LIGHT)
        empty_board.add_piece(3, 4, PieceColor.LIGHT)
        assert piece.evaluate_move(4, 3) == MoveEvaluation.illegal()

    def test_backward_capture_needs_king(self, empty_board):
        """Men cannot capture backwards; kings can."""
        man = empty_board.add_piece(2, 3, PieceColor.LIGHT)
        empty_board.add_piece(3, 4, PieceColor.DARK)
        assert not man.evaluate_move(4, 5).legal

        man.is_king = True
        assert man.evaluate_move(4, 5) == MoveEvaluation(legal=True, is_capture=True)

    def test_permitted_under_mandatory_capture(self):
        """Mandatory capture only accepts captures."""
        step = MoveEvaluation(legal=True, is_capture=False)
        jump = MoveEvaluation(legal=True, is_capture=True)

        assert step.permitted(mandatory_capture=False)
        assert not step.permitted(mandatory_capture=True)
        assert jump.permitted(mandatory_capture=True)
        assert not MoveEvaluation.illegal().permitted(mandatory_capture=False)


class TestScans:
    """Tests for board-wide scans."""

    def test_can_move_anywhere(self, board):
        """Front-row pieces can move, back-row pieces cannot."""
        assert board.piece_at(1, 5).can_move_anywhere()
        assert not board.piece_at(0, 6).can_move_anywhere()

    def test_can_capture_anywhere(self, empty_board):
        piece = empty_board.add_piece(2, 5, PieceColor.LIGHT)
        assert not piece.can_capture_anywhere()
        empty_board.add_piece(1, 4, PieceColor.DARK)
        assert piece.can_capture_anywhere()

    def test_scan_covers_tall_boards(self):
        """Scans use the board height, not its width."""
        from ..engine_core import Board

        board = Board(width=2, height=6, rows_per_side=0)
        piece = board.add_piece(0, 2, PieceColor.DARK)
        board.add_piece(1, 3, PieceColor.LIGHT)
        assert piece.legal_targets() == []
        board.remove(1, 3)
        assert piece.legal_targets() == [(1, 3)]

    def test_legal_targets(self, empty_board):
        """Targets list every legal destination, or only captures."""
        piece = empty_board.add_piece(2, 5, PieceColor.LIGHT)
        empty_board.add_piece(3, 4, PieceColor.DARK)

        assert sorted(piece.legal_targets()) == [(1, 4), (4, 3)]
        assert piece.legal_targets(captures_only=True) == [(4, 3)]


class TestMove:
    """Tests for move application."""

    def test_simple_move(self, board):
        """A step relocates the piece and reports no capture."""
        piece = board.piece_at(1, 5)
        assert piece.move(2, 4) is False

        assert board.is_empty(1, 5)
        assert board.piece_at(2, 4) is piece
        assert piece.position == (2, 4)

    def test_capture_removes_jumped_piece(self, empty_board):
        """A capture empties the jumped cell."""
        piece = empty_board.add_piece(2, 5, PieceColor.LIGHT)
        empty_board.add_piece(3, 4, PieceColor.DARK)

        assert piece.move(4, 3) is True
        assert empty_board.is_empty(3, 4)
        assert empty_board.is_empty(2, 5)
        assert empty_board.piece_at(4, 3) is piece
        assert empty_board.count_pieces(PieceColor.DARK) == 0

    def test_dark_captures_light(self, empty_board):
        """Dark (3,4) jumps light (4,5) to (5,6)."""
        dark = empty_board.add_piece(3, 4, PieceColor.DARK)
        empty_board.add_piece(4, 5, PieceColor.LIGHT)

        evaluation = dark.evaluate_move(5, 6)
        assert evaluation.legal
        assert evaluation.is_capture

        assert dark.move(5, 6)
        assert empty_board.is_empty(4, 5)
        assert empty_board.is_empty(3, 4)
        assert empty_board.piece_at(5, 6) is dark

    def test_light_promotes_on_row_zero(self, empty_board):
        """LIGHT is crowned on reaching row 0."""
        piece = empty_board.add_piece(1, 1, PieceColor.LIGHT)
        piece.move(0, 0)
        assert piece.is_king

    def test_dark_promotes_on_last_row(self, empty_board):
        """DARK is crowned on reaching the last row."""
        piece = empty_board.add_piece(2, 6, PieceColor.DARK)
        piece.move(3, 7)
        assert piece.is_king

    def test_no_promotion_elsewhere(self, empty_board):
        piece = empty_board.add_piece(2, 6, PieceColor.LIGHT)
        piece.move(3, 5)
        assert not piece.is_king

    def test_king_stays_king(self, empty_board):
        """Promotion is permanent."""
        piece = empty_board.add_piece(1, 1, PieceColor.LIGHT)
        piece.move(0, 0)
        assert piece.evaluate_move(1, 1).legal
        piece.move(1, 1)
        piece.move(2, 2)
        assert piece.is_king

    def test_move_removed_piece_raises(self, empty_board):
        """Moving a piece no longer on the board is a caller error."""
        piece = empty_board.add_piece(2, 5, PieceColor.LIGHT)
        empty_board.remove(2, 5)

        with pytest.raises(PieceNotOnBoardError):
            piece.move(1, 4)
