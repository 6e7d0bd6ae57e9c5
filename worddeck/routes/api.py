"""
REST API endpoints for WordDeck.

Mirrors the Socket.IO operations for clients that poll. Responses use the
same success and error envelopes as the socket events.
"""

import logging
from flask import Blueprint, request

from worddeck.core.errors import ErrorCode

logger = logging.getLogger(__name__)

# Global references to services - will be set by registration function
game_service = None
error_response_factory = None
presenter = None
validation_service = None


def bind_services(services):
    """Point the API at a set of services (called again when the container is rebuilt)."""
    global game_service, error_response_factory, presenter, validation_service

    game_service = services['game_service']
    error_response_factory = services['error_response_factory']
    presenter = services['presenter']
    validation_service = services['validation_service']


def create_api_blueprint(services):
    """Create and configure the API Blueprint with service dependencies."""
    bind_services(services)

    # Create the blueprint
    api = Blueprint('api', __name__, url_prefix='/api')

    def success(data, status=200):
        return error_response_factory.create_success_response(data), status

    def failure(e, context):
        return error_response_factory.create_http_error(e, context)

    def json_body():
        """The request's JSON object; an absent or unparsable body counts as empty."""
        body = request.get_json(silent=True)
        if body is None:
            return {}
        return validation_service.validate_socket_data(body)

    @api.route('/games', methods=['POST'])
    def create_game():
        """Create a game seating the requesting player."""
        try:
            player_name = json_body().get('player_name')
            game_id = game_service.create_game(player_name)
            return success({'game_id': game_id}, 201)
        except Exception as e:
            return failure(e, 'create_game')

    @api.route('/games/available')
    def find_available_game():
        """Find a game that still has a free seat."""
        try:
            return success({'game_id': game_service.find_open_game()})
        except Exception as e:
            return failure(e, 'find_available_game')

    @api.route('/games/<game_id>')
    def get_game(game_id):
        """Full game state, or one player's view with ?player_name=."""
        try:
            player_name = request.args.get('player_name')
            if player_name is not None:
                return success(game_service.get_player_view(game_id, player_name))

            state = game_service.get_game_state(game_id)
            if state is None:
                return error_response_factory.create_error_response(
                    ErrorCode.GAME_NOT_FOUND, f'Game {game_id} not found', {'game_id': game_id}
                ), 404
            return success(presenter.create_full_state(game_id, state))
        except Exception as e:
            return failure(e, 'get_game')

    @api.route('/games/<game_id>/players', methods=['POST'])
    def join_game(game_id):
        try:
            player_name = json_body().get('player_name')
            game_service.join_game(game_id, player_name)
            return success({'game_id': game_id, 'player_name': player_name.strip()}, 201)
        except Exception as e:
            return failure(e, 'join_game')

    @api.route('/games/<game_id>/words', methods=['POST'])
    def play_word(game_id):
        try:
            body = json_body()
            entry = game_service.play_card(game_id, body.get('player_name'), body.get('word'))
            return success({'word': entry.word, 'author': entry.author}, 201)
        except Exception as e:
            return failure(e, 'play_word')

    @api.route('/games/<game_id>/discards', methods=['POST'])
    def discard_tile(game_id):
        try:
            body = json_body()
            game_service.discard_card(game_id, body.get('player_name'), body.get('tile'))
            return success({'tile': body['tile'].strip().upper()}, 201)
        except Exception as e:
            return failure(e, 'discard_tile')

    @api.route('/games/<game_id>/challenges', methods=['POST'])
    def challenge_word(game_id):
        try:
            body = json_body()
            outcome = game_service.challenge_word(game_id, body.get('player_name'), body.get('word'))
            return success(outcome.to_dict())
        except Exception as e:
            return failure(e, 'challenge_word')

    @api.route('/games/<game_id>/players/<player_name>', methods=['DELETE'])
    def exit_game(game_id, player_name):
        try:
            game_deleted = game_service.exit_game(game_id, player_name)
            return success({'game_id': game_id, 'game_deleted': game_deleted})
        except Exception as e:
            return failure(e, 'exit_game')

    return api

