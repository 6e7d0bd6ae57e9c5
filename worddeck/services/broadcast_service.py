"""
Broadcast Service - Pushes committed game state to connected players.

Subscribes to the SessionStore and, after every commit, sends each
connected player of the game their own view of it as
``game_state_updated``. Commits of one game are notified in order, so
players see states in the order they were committed.
"""

import logging
from typing import Any, Dict, Optional

from worddeck.core.game_state import GameState

logger = logging.getLogger(__name__)


class BroadcastService:
    """Centralized service for all Socket.IO broadcasting operations."""

    STATE_UPDATED_EVENT = 'game_state_updated'

    def __init__(self, socketio, session_service, game_state_presenter, session_store=None):
        """Initialize the broadcast service.

        Args:
            socketio: Flask-SocketIO instance for emitting messages
            session_service: Socket to player mapping
            game_state_presenter: Builds per-player views
            session_store: When given, the service subscribes to its commits
        """
        self.socketio = socketio
        self.session_service = session_service
        self.presenter = game_state_presenter
        if session_store is not None:
            session_store.subscribe(self.on_state_committed)

    # Core emission methods

    def emit_to_player(self, event: str, data: Dict[str, Any], socket_id: str):
        """Emit an event to a specific player."""
        try:
            self.socketio.emit(event, data, room=socket_id)
            logger.debug(f'Emitted {event} to player {socket_id}')
        except Exception as e:
            logger.error(f'Error emitting {event} to player {socket_id}: {e}')

    # High-level broadcast methods

    def on_state_committed(self, game_id: str, state: Optional[GameState]):
        """SessionStore listener."""
        if state is None:
            logger.debug(f'Game {game_id} deleted, nothing to broadcast')
            return
        self.broadcast_game_state(game_id, state)

    def broadcast_game_state(self, game_id: str, state: GameState):
        """Send every connected player of ``game_id`` their own view."""
        sessions = self.session_service.get_sessions_by_game(game_id)
        for socket_id, session_info in sessions.items():
            player_name = session_info['player_name']
            if state.find_player(player_name) is None:
                continue
            view = self.presenter.create_player_view(game_id, state, player_name)
            self.emit_to_player(self.STATE_UPDATED_EVENT, view, socket_id)
        logger.debug(f'Broadcasted state of game {game_id} to {len(sessions)} sessions')
