"""
Session Module - Turn handling for games in progress.

A session is one play-through of a game:
- Created when a player starts a game
- Owns the board and whose turn it is
- Resolves cell clicks into selections and moves
- Fires events for captures and game over

Sessions are EPHEMERAL and kept in memory only.
"""

from .game_session import GameSession, GamePhase, ClickOutcome, ClickResult
from .manager import SessionManager

__all__ = [
    "GameSession",
    "GamePhase",
    "ClickOutcome",
    "ClickResult",
    "SessionManager",
]
