"""
Game Action Handler

This module handles Socket.IO events for in-game actions: playing a word,
discarding a tile and challenging a word on the board. Every player of
the game learns about the result through ``game_state_updated``.
"""

import logging

from worddeck.services.error_response_factory import with_error_handling
from .base_handler import BaseHandler

logger = logging.getLogger(__name__)


class GameActionHandler(BaseHandler):
    """Handler for play, discard and challenge."""

    @with_error_handling
    def handle_play_word(self, data):
        """
        Handle a player playing a word from their hand.

        Expected data format:
        {
            'word': 'CAT'
        }
        """
        self.log_handler_start('handle_play_word', data)
        session_info = self.require_session()
        validated = self.validate_data_dict(data, ['word'])

        entry = self.game_service.play_card(
            session_info['game_id'], session_info['player_name'], validated['word']
        )

        self.log_handler_success('handle_play_word', f'{entry.author} played {entry.word}')
        self.emit_success('word_played', {
            'word': entry.word,
            'author': entry.author
        })

    @with_error_handling
    def handle_discard_tile(self, data):
        """
        Handle a player discarding a tile.

        Expected data format:
        {
            'tile': 'Q'
        }
        """
        self.log_handler_start('handle_discard_tile', data)
        session_info = self.require_session()
        validated = self.validate_data_dict(data, ['tile'])
        tile = self.validation_service.validate_tile(validated['tile'])

        self.game_service.discard_card(session_info['game_id'], session_info['player_name'], tile)

        self.log_handler_success('handle_discard_tile', f'{session_info["player_name"]} discarded {tile}')
        self.emit_success('tile_discarded', {'tile': tile})

    @with_error_handling
    def handle_challenge_word(self, data):
        """
        Handle a player challenging a word on the board.

        Expected data format:
        {
            'word': 'XYZZY'
        }
        """
        self.log_handler_start('handle_challenge_word', data)
        session_info = self.require_session()
        validated = self.validate_data_dict(data, ['word'])

        outcome = self.game_service.challenge_word(
            session_info['game_id'], session_info['player_name'], validated['word']
        )

        self.log_handler_success(
            'handle_challenge_word',
            f'{outcome.word} judged {"valid" if outcome.word_valid else "invalid"}'
        )
        self.emit_success('challenge_resolved', outcome.to_dict())
