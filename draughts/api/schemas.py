"""
Pydantic Schemas for the UI layer - request/response and view models.

These models define the contract between a front end (canvas, terminal,
web page) and the engine. Every response has an explicit type so a
front end never touches engine objects directly.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has been ended
- INVALID_CONFIG: Board settings are invalid
- GAME_OVER: The game has ended; reset to play again
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class PlayerColor(str, Enum):
    """Piece colors."""
    LIGHT = "light"
    DARK = "dark"


class SessionStatus(str, Enum):
    """Session status values."""
    PLAYING = "playing"
    GAME_OVER = "game_over"


class ClickOutcome(str, Enum):
    """What a click did."""
    IGNORED = "ignored"
    SELECTED = "selected"
    MOVED = "moved"
    CAPTURED = "captured"
    REJECTED = "rejected"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_CONFIG = "INVALID_CONFIG"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class CellInfo(BaseModel):
    """A board coordinate."""
    x: int
    y: int


class PieceInfo(BaseModel):
    """A piece for drawing."""
    x: int
    y: int
    color: PlayerColor
    is_king: bool = False

    model_config = {"from_attributes": True}


class MoveInfo(BaseModel):
    """A move that was applied."""
    color: PlayerColor
    from_cell: CellInfo
    to_cell: CellInfo
    is_capture: bool = False
    captured_cell: Optional[CellInfo] = None
    promoted: bool = False


class LayoutInfo(BaseModel):
    """Geometry for mapping the board into a viewport."""
    view_width: float
    view_height: float
    cell_size: float
    x_offset: float
    y_offset: float


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to start a new game."""
    width: int = Field(8, description="Number of columns")
    height: int = Field(8, description="Number of rows")
    rows_per_side: int = Field(3, description="Starting rows filled per color")


class CellClickRequest(BaseModel):
    """A click on a board cell."""
    x: int
    y: int


class PointerClickRequest(BaseModel):
    """A click at a viewport point, mapped to a cell by the service."""
    px: float = Field(..., description="Pointer x in viewport units")
    py: float = Field(..., description="Pointer y in viewport units")
    view_width: float = Field(..., gt=0)
    view_height: float = Field(..., gt=0)


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")


class SessionResponse(BaseModel):
    """Session summary."""
    session_id: str
    status: SessionStatus
    width: int
    height: int
    current_player: PlayerColor
    turn_number: int = 0
    winner: Optional[PlayerColor] = None
    created_at: float = 0.0


class BoardResponse(BaseModel):
    """Everything a renderer needs to draw the board."""
    session_id: str
    status: SessionStatus
    width: int
    height: int
    pieces: list[PieceInfo] = Field(default_factory=list)
    current_player: PlayerColor
    selected: Optional[CellInfo] = None
    move_hints: list[CellInfo] = Field(
        default_factory=list, description="Cells the selected piece may move to"
    )
    must_capture: bool = False
    piece_counts: dict[str, int] = Field(default_factory=dict)
    winner: Optional[PlayerColor] = None


class ClickResponse(BaseModel):
    """Result of a click."""
    session_id: str
    outcome: ClickOutcome
    cell: Optional[CellInfo] = Field(None, description="Cell clicked, if on the board")
    selected: Optional[CellInfo] = None
    move: Optional[MoveInfo] = None
    current_player: PlayerColor
    game_over: bool = False
    winner: Optional[PlayerColor] = None
