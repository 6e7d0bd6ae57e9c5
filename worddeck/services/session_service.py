"""
Session Service - Maps Socket.IO connections to seated players.

This service handles:
- Session creation when a socket creates or joins a game
- Socket ID to (game, player) lookup for subsequent actions
- Session cleanup on exit and disconnect
"""

import logging
import threading
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class SessionService:
    """Manages player sessions and Socket.IO connections."""

    def __init__(self):
        # socket_id -> {'game_id', 'player_name'}
        self._player_sessions: Dict[str, Dict[str, str]] = {}
        self._lock = threading.Lock()
        logger.info("SessionService initialized")

    def create_session(self, socket_id: str, game_id: str, player_name: str) -> None:
        """Create or update a player session.

        Args:
            socket_id: Socket.IO connection ID
            game_id: Game the player is seated in
            player_name: Player's name in that game
        """
        with self._lock:
            self._player_sessions[socket_id] = {
                'game_id': game_id,
                'player_name': player_name
            }
        logger.debug(f"Created session for player {player_name} in game {game_id}")

    def get_session(self, socket_id: str) -> Optional[Dict[str, str]]:
        """Get player session information by socket ID."""
        with self._lock:
            session_info = self._player_sessions.get(socket_id)
            return dict(session_info) if session_info else None

    def has_session(self, socket_id: str) -> bool:
        with self._lock:
            return socket_id in self._player_sessions

    def remove_session(self, socket_id: str) -> Optional[Dict[str, str]]:
        """Remove a player session.

        Args:
            socket_id: Socket.IO connection ID

        Returns:
            The removed session info or None if not found
        """
        with self._lock:
            session_info = self._player_sessions.pop(socket_id, None)
        if session_info:
            logger.debug(f"Removed session for player {session_info['player_name']} "
                         f"in game {session_info['game_id']}")
        return session_info

    def get_sessions_by_game(self, game_id: str) -> Dict[str, Dict[str, str]]:
        """Get all sessions for a specific game.

        Args:
            game_id: Game identifier

        Returns:
            Dictionary mapping socket_id to session info for the game
        """
        with self._lock:
            return {
                socket_id: dict(session_info)
                for socket_id, session_info in self._player_sessions.items()
                if session_info['game_id'] == game_id
            }
