"""
API Service - Business logic layer between a front end and the engine.

The service:
1. Translates requests into session calls
2. Manages sessions
3. Maps pointer clicks onto board cells
4. Formats responses as view models

This layer is framework-agnostic; a canvas page, a terminal or a web
framework can sit on top of it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from pydantic import ValidationError

from .schemas import (
    # Requests
    CreateSessionRequest,
    CellClickRequest,
    PointerClickRequest,
    # Responses
    SessionResponse,
    BoardResponse,
    ClickResponse,
    LayoutInfo,
    ErrorResponse,
    # Shared
    CellInfo,
    PieceInfo,
    MoveInfo,
    # Enums
    PlayerColor,
    SessionStatus,
    ClickOutcome,
    ErrorCode,
)
from ..config import GameConfig
from ..engine_core import MoveRecord, PieceColor
from ..session import SessionManager, GameSession, ClickResult


_log = logging.getLogger(__name__)


def _color(color: PieceColor | None) -> PlayerColor | None:
    return PlayerColor(color.value) if color else None


def _cell(cell: tuple[int, int] | None) -> CellInfo | None:
    return CellInfo(x=cell[0], y=cell[1]) if cell else None


def _status(session: GameSession) -> SessionStatus:
    return SessionStatus.GAME_OVER if session.is_over else SessionStatus.PLAYING


@dataclass
class APIService:
    """
    Main service for front ends.

    Usage:
        service = APIService()

        # Start a game
        session = service.create_session(CreateSessionRequest())

        # Forward clicks
        result = service.click_cell(session.session_id, CellClickRequest(x=0, y=5))

        # Redraw
        board = service.get_board(session.session_id)
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse | ErrorResponse:
        """Start a new game in the starting position."""
        try:
            config = GameConfig(
                width=request.width,
                height=request.height,
                rows_per_side=request.rows_per_side,
            )
        except ValidationError as e:
            return ErrorResponse(
                error="Invalid board configuration",
                error_code=ErrorCode.INVALID_CONFIG,
                details={"errors": [err["msg"] for err in e.errors()]},
            )

        session = self.session_manager.create_session(config)
        return self._session_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._session_response(session)

    def end_session(self, session_id: str) -> bool:
        return self.session_manager.end_session(session_id)

    def reset_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """Put a session back in the starting position."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.reset_game()
        return self._session_response(session)

    def get_board(self, session_id: str) -> BoardResponse | ErrorResponse:
        """Snapshot of the board for rendering."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        board = session.board
        selected = session.selected_piece
        return BoardResponse(
            session_id=session.session_id,
            status=_status(session),
            width=board.width,
            height=board.height,
            pieces=[
                PieceInfo(x=p.x, y=p.y, color=_color(p.color), is_king=p.is_king)
                for p in board.pieces()
            ],
            current_player=_color(session.current_color),
            selected=_cell(selected.position if selected else None),
            move_hints=[_cell(cell) for cell in session.move_hints()],
            must_capture=False if session.is_over else session.must_capture(),
            piece_counts={color.value: board.count_pieces(color) for color in PieceColor},
            winner=_color(session.winner),
        )

    def get_layout(
        self, session_id: str, view_width: float, view_height: float
    ) -> LayoutInfo | ErrorResponse:
        """Cell size and offsets for drawing the board in a viewport."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        metrics = session.board.layout_metrics(view_width, view_height)
        return LayoutInfo(
            view_width=view_width,
            view_height=view_height,
            cell_size=metrics.cell_size,
            x_offset=metrics.x_offset,
            y_offset=metrics.y_offset,
        )

    def click_cell(self, session_id: str, request: CellClickRequest) -> ClickResponse | ErrorResponse:
        """Forward a board-cell click to the session."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        result = session.handle_cell_click(request.x, request.y)
        on_board = session.board.is_in_bounds(request.x, request.y)
        return self._click_response(session, result, (request.x, request.y) if on_board else None)

    def click_point(
        self, session_id: str, request: PointerClickRequest
    ) -> ClickResponse | ErrorResponse:
        """Map a viewport click to a cell and forward it."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        metrics = session.board.layout_metrics(request.view_width, request.view_height)
        x, y = metrics.cell_at(request.px, request.py)
        return self.click_cell(session_id, CellClickRequest(x=x, y=y))

    # =========================================================================
    # Helpers
    # =========================================================================

    def _not_found(self, session_id: str) -> ErrorResponse:
        _log.warning("Session not found: %s", session_id)
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
            details={"session_id": session_id},
        )

    def _session_response(self, session: GameSession) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            status=_status(session),
            width=session.board.width,
            height=session.board.height,
            current_player=_color(session.current_color),
            turn_number=session.turn_number,
            winner=_color(session.winner),
            created_at=session.created_at,
        )

    def _click_response(
        self,
        session: GameSession,
        result: ClickResult,
        cell: tuple[int, int] | None,
    ) -> ClickResponse:
        return ClickResponse(
            session_id=session.session_id,
            outcome=ClickOutcome(result.outcome.value),
            cell=_cell(cell),
            selected=_cell(result.selected),
            move=self._move_info(result.move) if result.move else None,
            current_player=_color(session.current_color),
            game_over=session.is_over,
            winner=_color(result.winner),
        )

    def _move_info(self, record: MoveRecord) -> MoveInfo:
        return MoveInfo(
            color=_color(record.color),
            from_cell=_cell(record.from_cell),
            to_cell=_cell(record.to_cell),
            is_capture=record.is_capture,
            captured_cell=_cell(record.captured_cell),
            promoted=record.promoted,
        )
