"""
Game Connection Handler

This module handles Socket.IO events that seat and unseat players:
creating a game, joining one, leaving it and fetching its state.
"""

import logging
from flask import request

from worddeck.services.error_response_factory import with_error_handling
from .base_handler import BaseHandler

logger = logging.getLogger(__name__)


class GameConnectionHandler(BaseHandler):
    """Handler for create, join, exit and state retrieval."""

    @with_error_handling
    def handle_create_game(self, data):
        """
        Handle a player creating a new game.

        Expected data format:
        {
            'player_name': 'display_name'
        }
        """
        self.log_handler_start('handle_create_game', data)
        self.require_no_session()

        validated = self.validate_data_dict(data, ['player_name'])
        player_name = self.validation_service.validate_player_name(validated['player_name'])

        game_id = self.game_service.create_game(player_name)
        self.session_service.create_session(request.sid, game_id, player_name)

        self.log_handler_success('handle_create_game', f'Player {player_name} created game {game_id}')
        self.emit_success('game_created', {
            'game_id': game_id,
            'player_name': player_name,
            'game': self.game_service.get_player_view(game_id, player_name)
        })

    @with_error_handling
    def handle_join_game(self, data):
        """
        Handle a player joining an existing game.

        Expected data format:
        {
            'game_id': 'game identifier',
            'player_name': 'display_name'
        }
        """
        self.log_handler_start('handle_join_game', data)
        self.require_no_session()

        validated = self.validate_data_dict(data, ['game_id', 'player_name'])
        game_id = self.validation_service.validate_game_id(validated['game_id'])
        player_name = self.validation_service.validate_player_name(validated['player_name'])

        self.game_service.join_game(game_id, player_name)
        self.session_service.create_session(request.sid, game_id, player_name)

        self.log_handler_success('handle_join_game', f'Player {player_name} joined game {game_id}')
        self.emit_success('game_joined', {
            'game_id': game_id,
            'player_name': player_name,
            'game': self.game_service.get_player_view(game_id, player_name)
        })

    @with_error_handling
    def handle_exit_game(self, data=None):
        """Handle a player leaving their current game."""
        self.log_handler_start('handle_exit_game', data)
        session_info = self.require_session()
        game_id = session_info['game_id']
        player_name = session_info['player_name']

        game_deleted = self.game_service.exit_game(game_id, player_name)
        self.session_service.remove_session(request.sid)

        self.log_handler_success('handle_exit_game', f'Player {player_name} left game {game_id}')
        self.emit_success('game_exited', {
            'game_id': game_id,
            'game_deleted': game_deleted
        })

    @with_error_handling
    def handle_get_game_state(self, data=None):
        """Send the requesting player their view of their game."""
        self.log_handler_start('handle_get_game_state', data)
        session_info = self.require_session()

        view = self.game_service.get_player_view(session_info['game_id'], session_info['player_name'])
        self.emit_success('game_state', view)

        self.log_handler_success('handle_get_game_state')
