"""
Session Manager - Creates and tracks game sessions.

Sessions are in-memory only:
- Created when a game starts
- Looked up by session ID for every click
- Removed when the game is abandoned or goes stale

Nothing is persisted.
"""

from __future__ import annotations
import logging
import time

from ..config import GameConfig
from .game_session import GameSession


_log = logging.getLogger(__name__)


class SessionManager:
    """
    Registry of live game sessions.

    Each session owns its own board and turn state, so sessions
    never interfere with each other.
    """

    def __init__(self, default_config: GameConfig | None = None):
        self.default_config = default_config or GameConfig()
        self._sessions: dict[str, GameSession] = {}

    def create_session(self, config: GameConfig | None = None) -> GameSession:
        """
        Create a new game session in the starting position.

        Args:
            config: Board settings (defaults to the manager's config)

        Returns:
            New GameSession, LIGHT to move
        """
        session = GameSession(config=config or self.default_config)
        self._sessions[session.session_id] = session
        _log.info(
            "Created session %s (%dx%d)",
            session.session_id, session.board.width, session.board.height,
        )
        return session

    def get_session(self, session_id: str) -> GameSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """Remove a session. Returns False if it did not exist."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.selected_piece = None
        _log.info("Ended session %s", session_id)
        return True

    def list_active_sessions(self) -> list[str]:
        """IDs of sessions whose game is still in progress."""
        return [
            sid for sid, session in self._sessions.items()
            if not session.is_over
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Remove finished sessions older than max_age_seconds.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        to_remove = [
            sid for sid, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds and session.is_over
        ]
        for session_id in to_remove:
            self.end_session(session_id)
        return len(to_remove)

    def __len__(self) -> int:
        return len(self._sessions)
