"""
Game Session - Turn and selection state machine for one game.

The session is the sole mutator of its Board. A UI layer feeds it
cell clicks; each click is one atomic transition:

    Idle --click own piece--> Selected(piece)
    Selected --click own piece--> Selected(other piece)
    Selected --click empty cell--> move if permitted, then Idle

Moves obey mandatory capture: if the current player can capture
anywhere, only capturing moves are accepted. After every applied move
the turn passes and the new player is tested for a loss.

Events (for sound, alerts, etc.):
- on_move(callback(MoveRecord))   every applied move
- on_capture(callback())          every applied capture
- on_game_over(callback(winner))  once, when a player cannot move
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable
import logging
import time
import uuid

from ..config import GameConfig
from ..engine_core import Board, MoveRecord, Piece, PieceColor, PLAYER_COLORS


_log = logging.getLogger(__name__)


class GamePhase(Enum):
    """High-level game phases."""
    PLAYING = "playing"
    GAME_OVER = "game_over"


class ClickOutcome(Enum):
    """What a cell click did."""
    IGNORED = "ignored"  # Off board, opponent piece, empty cell with no selection, game over
    SELECTED = "selected"  # Current player's piece is now selected
    MOVED = "moved"  # Simple move applied
    CAPTURED = "captured"  # Capturing move applied
    REJECTED = "rejected"  # Move not permitted; selection cleared


@dataclass
class ClickResult:
    """
    Result of handling one cell click.

    Carries everything a UI needs to react without re-reading state.
    """
    outcome: ClickOutcome
    selected: tuple[int, int] | None = None
    move: MoveRecord | None = None
    winner: PieceColor | None = None

    @property
    def moved(self) -> bool:
        return self.outcome in {ClickOutcome.MOVED, ClickOutcome.CAPTURED}


@dataclass
class GameSession:
    """
    One game: a board plus whose turn it is and what is selected.

    Sessions share nothing, so any number may run side by side.
    """
    config: GameConfig = field(default_factory=GameConfig)
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: float = field(default_factory=time.time)

    board: Board = field(init=False)
    current_player_idx: int = 0
    selected_piece: Piece | None = None
    phase: GamePhase = GamePhase.PLAYING
    winner: PieceColor | None = None
    turn_number: int = 0

    _move_listeners: list[Callable[[MoveRecord], None]] = field(default_factory=list, repr=False)
    _capture_listeners: list[Callable[[], None]] = field(default_factory=list, repr=False)
    _game_over_listeners: list[Callable[[PieceColor], None]] = field(default_factory=list, repr=False)

    def __post_init__(self):
        self.board = Board(
            width=self.config.width,
            height=self.config.height,
            rows_per_side=self.config.rows_per_side,
        )

    # =========================================================================
    # Events
    # =========================================================================

    def on_move(self, callback: Callable[[MoveRecord], None]):
        self._move_listeners.append(callback)

    def on_capture(self, callback: Callable[[], None]):
        self._capture_listeners.append(callback)

    def on_game_over(self, callback: Callable[[PieceColor], None]):
        self._game_over_listeners.append(callback)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def current_color(self) -> PieceColor:
        return PLAYER_COLORS[self.current_player_idx]

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def must_capture(self) -> bool:
        """Whether the current player is bound by mandatory capture."""
        return self.board.can_capture(self.current_color)

    def move_hints(self) -> list[tuple[int, int]]:
        """Cells the selected piece may move to this turn."""
        if self.selected_piece is None or self.is_over:
            return []
        return self.selected_piece.legal_targets(captures_only=self.must_capture())

    # =========================================================================
    # Transitions
    # =========================================================================

    def handle_cell_click(self, x: int, y: int) -> ClickResult:
        """
        Resolve a click on board cell (x, y).

        Never raises for rule violations; the outcome says what happened.
        """
        if self.is_over or not self.board.is_in_bounds(x, y):
            return self._result(ClickOutcome.IGNORED)

        piece = self.board.piece_at(x, y)
        if piece is not None:
            if piece.color != self.current_color:
                return self._result(ClickOutcome.IGNORED)
            self.selected_piece = piece
            return self._result(ClickOutcome.SELECTED)

        if self.selected_piece is None:
            return self._result(ClickOutcome.IGNORED)

        selected = self.selected_piece
        self.selected_piece = None

        evaluation = selected.evaluate_move(x, y)
        if not evaluation.permitted(self.must_capture()):
            _log.debug(
                "Session %s: rejected %s %s -> %s",
                self.session_id, selected.color.value, selected.position, (x, y),
            )
            return self._result(ClickOutcome.REJECTED)

        record = self._apply_move(selected, x, y)
        self._advance_turn()

        outcome = ClickOutcome.CAPTURED if record.is_capture else ClickOutcome.MOVED
        return self._result(outcome, move=record)

    def reset_game(self):
        """Restore the starting layout and turn state."""
        self.board.initialize()
        self.current_player_idx = 0
        self.selected_piece = None
        self.phase = GamePhase.PLAYING
        self.winner = None
        self.turn_number = 0
        _log.debug("Session %s: reset", self.session_id)

    def _apply_move(self, piece: Piece, x: int, y: int) -> MoveRecord:
        from_cell = piece.position
        was_king = piece.is_king
        captured = piece.move(x, y)

        record = MoveRecord(
            color=piece.color,
            from_cell=from_cell,
            to_cell=(x, y),
            is_capture=captured,
            captured_cell=(
                ((from_cell[0] + x) // 2, (from_cell[1] + y) // 2) if captured else None
            ),
            promoted=piece.is_king and not was_king,
        )
        _log.debug("Session %s: %s", self.session_id, record)

        for listener in self._move_listeners:
            listener(record)
        if captured:
            for listener in self._capture_listeners:
                listener()
        return record

    def _advance_turn(self):
        """Pass the turn; the player who cannot move loses."""
        previous = self.current_color
        self.current_player_idx = (self.current_player_idx + 1) % len(PLAYER_COLORS)
        self.turn_number += 1

        if self.board.has_no_legal_moves(self.current_color):
            self.phase = GamePhase.GAME_OVER
            self.winner = previous
            _log.info("Session %s: %s wins", self.session_id, previous.value)
            for listener in self._game_over_listeners:
                listener(previous)

    def _result(self, outcome: ClickOutcome, move: MoveRecord | None = None) -> ClickResult:
        return ClickResult(
            outcome=outcome,
            selected=self.selected_piece.position if self.selected_piece else None,
            move=move,
            winner=self.winner,
        )
