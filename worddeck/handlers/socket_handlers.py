"""
Socket.IO event handlers for WordDeck.

This module provides the registration function and the connection and
disconnection handlers.
"""

import logging
from flask import request
from flask_socketio import emit

from container import get_container
from .game_connection_handler import GameConnectionHandler
from .game_action_handler import GameActionHandler

logger = logging.getLogger(__name__)


def register_socket_handlers(socketio_instance):
    """Register all socket handlers with the SocketIO instance."""
    connection_handler = GameConnectionHandler()
    action_handler = GameActionHandler()

    events = {
        'connect': handle_connect,
        'disconnect': handle_disconnect,
        'create_game': connection_handler.handle_create_game,
        'join_game': connection_handler.handle_join_game,
        'exit_game': connection_handler.handle_exit_game,
        'get_game_state': connection_handler.handle_get_game_state,
        'play_word': action_handler.handle_play_word,
        'discard_tile': action_handler.handle_discard_tile,
        'challenge_word': action_handler.handle_challenge_word,
    }

    for event, handler in events.items():
        socketio_instance.on_event(event, handler)

    logger.info(f"Registered {len(events)} socket event handlers")


def handle_connect(auth=None):
    """Handle client connection."""
    logger.info(f'Client connected: {request.sid}')
    emit('connected', {'status': 'Connected to WordDeck server'})


def handle_disconnect(reason=None):
    """Handle client disconnection; a seated player leaves their game."""
    container = get_container()
    session_service = container.get('SessionService')
    game_service = container.get('GameService')

    logger.info(f'Client disconnected: {request.sid}')

    session_info = session_service.remove_session(request.sid)
    if not session_info:
        return

    game_id = session_info['game_id']
    player_name = session_info['player_name']
    try:
        game_service.exit_game(game_id, player_name)
        logger.info(f'Player {player_name} removed from game {game_id} on disconnect')
    except Exception as e:
        # The game or the seat may already be gone
        logger.warning(f'Could not remove {player_name} from game {game_id} on disconnect: {e}')
