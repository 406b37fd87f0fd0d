"""
API Module - Front-end interface.

Exposes the engine to a renderer/input layer. The front end:
1. Creates a game session
2. Fetches a board snapshot and layout to draw
3. Forwards cell or pointer clicks
4. Shows the winner when the game ends
5. Resets or ends the session

All state is session-scoped and in memory.
"""

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
from .service import APIService

__all__ = [
    # Requests
    "CreateSessionRequest",
    "CellClickRequest",
    "PointerClickRequest",
    # Responses
    "SessionResponse",
    "BoardResponse",
    "ClickResponse",
    "LayoutInfo",
    "ErrorResponse",
    # Shared
    "CellInfo",
    "PieceInfo",
    "MoveInfo",
    # Enums
    "PlayerColor",
    "SessionStatus",
    "ClickOutcome",
    "ErrorCode",
    # Service
    "APIService",
]
