"""
Pytest fixtures for Draughts tests.
"""

import pytest

from ..config import GameConfig
from ..engine_core import Board
from ..session import GameSession


@pytest.fixture
def board() -> Board:
    """Standard 8x8 board in the starting layout."""
    return Board()


@pytest.fixture
def empty_board() -> Board:
    """8x8 board with no pieces."""
    return Board(8, 8, rows_per_side=0)


@pytest.fixture
def session() -> GameSession:
    """Fresh 8x8 game, LIGHT to move."""
    return GameSession(config=GameConfig())


@pytest.fixture
def empty_session(session: GameSession) -> GameSession:
    """Game session whose board has been cleared for custom positions."""
    session.board.clear()
    return session


@pytest.fixture
def capture_choice_session(empty_session: GameSession) -> GameSession:
    """
    LIGHT to move with one piece able to capture and one that can only step.

    LIGHT (2,5) can jump DARK (3,4) to (4,3); LIGHT (6,5) can only step.
    DARK (0,1) keeps DARK mobile after the capture.
    """
    from ..engine_core import PieceColor

    board = empty_session.board
    board.add_piece(2, 5, PieceColor.LIGHT)
    board.add_piece(6, 5, PieceColor.LIGHT)
    board.add_piece(3, 4, PieceColor.DARK)
    board.add_piece(0, 1, PieceColor.DARK)
    return empty_session
