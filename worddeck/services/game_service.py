"""
Game Service for WordDeck

The operations offered to clients: create, join, inspect, play, discard,
challenge and exit. Inputs are validated here, and every state change is
submitted to the SessionStore as one serialized mutation.
"""

import logging
from typing import Any, Dict, List, Optional

from worddeck.core.errors import ErrorCode, ValidationError
from worddeck.core.game_state import BoardWord, GameState
from worddeck.services.challenge_resolver import ChallengeOutcome, ChallengeResolver
from worddeck.services.game_state_presenter import GameStatePresenter
from worddeck.services.session_store import SessionStore
from worddeck.services.turn_engine import TurnEngine
from worddeck.services.validation_service import ValidationService

logger = logging.getLogger(__name__)


class GameService:
    """Facade over the session store, turn engine and challenge resolver."""

    def __init__(self, session_store: SessionStore, turn_engine: TurnEngine,
                 challenge_resolver: ChallengeResolver,
                 validation_service: ValidationService = None,
                 presenter: GameStatePresenter = None):
        self.session_store = session_store
        self.turn_engine = turn_engine
        self.challenge_resolver = challenge_resolver
        self.validation_service = validation_service or ValidationService()
        self.presenter = presenter or GameStatePresenter()

    def create_game(self, player_name: str) -> str:
        """
        Create a new game with ``player_name`` as its first player.

        Returns:
            The new game id
        """
        player_name = self.validation_service.validate_player_name(player_name)
        return self.session_store.create(player_name)

    def join_game(self, game_id: str, player_name: str) -> bool:
        """
        Seat ``player_name`` in an existing game.

        Returns:
            True once the player is seated

        Raises:
            ValidationError: GAME_NOT_FOUND, NAME_TAKEN or GAME_FULL
        """
        game_id = self.validation_service.validate_game_id(game_id)
        player_name = self.validation_service.validate_player_name(player_name)

        self.session_store.mutate(game_id, lambda state: self.turn_engine.join(state, player_name))
        logger.info(f"Player {player_name} joined game {game_id}")
        return True

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """Latest committed state of a game, or None if it does not exist."""
        game_id = self.validation_service.validate_game_id(game_id)
        return self.session_store.get(game_id)

    def get_player_view(self, game_id: str, player_name: str) -> Dict[str, Any]:
        """
        The game as seen by one of its players.

        Raises:
            ValidationError: GAME_NOT_FOUND or PLAYER_NOT_FOUND
        """
        game_id = self.validation_service.validate_game_id(game_id)
        state = self._require_game(game_id)
        player_name = self.validation_service.validate_player_name(player_name)
        if state.find_player(player_name) is None:
            raise ValidationError(
                ErrorCode.PLAYER_NOT_FOUND,
                f"Player '{player_name}' is not in this game",
                {'player_name': player_name}
            )
        return self.presenter.create_player_view(game_id, state, player_name)

    def play_card(self, game_id: str, player_name: str, word: str) -> BoardWord:
        """Play a word from the player's hand."""
        game_id = self.validation_service.validate_game_id(game_id)
        player_name = self.validation_service.validate_player_name(player_name)
        word = self.validation_service.validate_word(word)

        entry = self.session_store.mutate(
            game_id, lambda state: self.turn_engine.play_word(state, player_name, word)
        )
        logger.info(f"Player {player_name} played {word} in game {game_id}")
        return entry

    def discard_card(self, game_id: str, player_name: str, tile: str) -> bool:
        """Discard one tile from the player's hand."""
        game_id = self.validation_service.validate_game_id(game_id)
        player_name = self.validation_service.validate_player_name(player_name)
        tile = self.validation_service.validate_tile(tile)

        self.session_store.mutate(
            game_id, lambda state: self.turn_engine.discard_card(state, player_name, tile)
        )
        logger.info(f"Player {player_name} discarded {tile} in game {game_id}")
        return True

    def challenge_word(self, game_id: str, challenger_name: str, word: str) -> ChallengeOutcome:
        """Challenge a word on the board."""
        game_id = self.validation_service.validate_game_id(game_id)
        challenger_name = self.validation_service.validate_player_name(challenger_name)
        word = self.validation_service.validate_word(word)

        return self.session_store.mutate(
            game_id, lambda state: self.challenge_resolver.challenge(state, challenger_name, word)
        )

    def exit_game(self, game_id: str, player_name: str) -> bool:
        """
        Remove a player from a game.

        Returns:
            True if the player was the last one and the game was deleted
        """
        game_id = self.validation_service.validate_game_id(game_id)
        player_name = self.validation_service.validate_player_name(player_name)

        deleted = self.session_store.mutate(
            game_id, lambda state: self.turn_engine.exit(state, player_name)
        )
        logger.info(f"Player {player_name} left game {game_id}")
        return deleted

    def find_open_game(self) -> Optional[str]:
        """Id of a game that still has a free seat, or None."""
        for summary in self.list_open_games():
            logger.info(f"Found open game: {summary['game_id']} with {summary['player_count']} players")
            return summary['game_id']
        return None

    def list_open_games(self) -> List[Dict[str, Any]]:
        """Lobby summaries of every game with a free seat."""
        max_players = self.turn_engine.game_settings.max_players_per_game
        open_games = []
        for game_id in self.session_store.list_game_ids():
            state = self.session_store.get(game_id)
            # Deleted between listing and reading
            if state is None:
                continue
            if 1 <= len(state.players) < max_players:
                open_games.append(self.presenter.create_game_summary(game_id, state, max_players))
        return open_games

    def _require_game(self, game_id: str) -> GameState:
        game_id = self.validation_service.validate_game_id(game_id)
        state = self.session_store.get(game_id)
        if state is None:
            raise ValidationError(
                ErrorCode.GAME_NOT_FOUND,
                f"Game {game_id} not found",
                {'game_id': game_id}
            )
        return state
