"""
Turn Engine for WordDeck

Rule-enforcing transitions over a GameState: joining, playing a word,
discarding a tile and leaving. Each method mutates the state it is given
and raises ValidationError, leaving the state untouched, when the action
is not allowed. Callers are expected to pass a private copy and only
publish it once the method returns (see SessionStore.mutate).
"""

import logging
from typing import List

from worddeck.config.game_settings import GameSettings
from worddeck.core.errors import ErrorCode, ValidationError
from worddeck.core.game_state import BoardWord, GameState, Player
from worddeck.core.tiles import deal
from worddeck.core.word_formation import consume_tiles

logger = logging.getLogger(__name__)


class TurnEngine:
    """Applies join/play/discard/exit to a game state."""

    def __init__(self, game_settings: GameSettings = None):
        self.game_settings = game_settings or GameSettings()

    # Helpers

    def _require_player(self, state: GameState, player_name: str) -> Player:
        player = state.find_player(player_name)
        if player is None:
            raise ValidationError(
                ErrorCode.PLAYER_NOT_FOUND,
                f"Player '{player_name}' is not in this game",
                {'player_name': player_name}
            )
        return player

    def _check_turn(self, state: GameState, player_name: str) -> None:
        if not self.game_settings.enforce_turn_order:
            return
        current = state.current_player
        if current is not None and current.name != player_name:
            raise ValidationError(
                ErrorCode.NOT_YOUR_TURN,
                f"It is {current.name}'s turn",
                {'current_player': current.name}
            )

    def _advance_turn(self, state: GameState) -> None:
        state.current_player_index = (state.current_player_index + 1) % len(state.players)

    def _replenish(self, state: GameState, player: Player) -> List[str]:
        """Refill ``player``'s hand up to the hand size while tiles remain."""
        missing = self.game_settings.hand_size - len(player.hand)
        drawn, state.draw_pile = deal(state.draw_pile, missing)
        player.hand.extend(drawn)
        return drawn

    # Transitions

    def join(self, state: GameState, player_name: str) -> Player:
        """
        Seat a new player and deal their hand.

        Raises:
            ValidationError: NAME_TAKEN or GAME_FULL
        """
        if state.find_player(player_name) is not None:
            raise ValidationError(
                ErrorCode.NAME_TAKEN,
                f"Player name '{player_name}' is already taken in this game",
                {'player_name': player_name}
            )

        max_players = self.game_settings.max_players_per_game
        if len(state.players) >= max_players:
            raise ValidationError(
                ErrorCode.GAME_FULL,
                f"Game is full ({max_players} players)",
                {'max_players': max_players}
            )

        hand, state.draw_pile = deal(state.draw_pile, self.game_settings.hand_size)
        player = Player(name=player_name, hand=hand)
        state.players.append(player)
        return player

    def play_word(self, state: GameState, player_name: str, word: str) -> BoardWord:
        """
        Play ``word`` from the player's hand onto the board.

        Raises:
            ValidationError: PLAYER_NOT_FOUND, NOT_YOUR_TURN or INVALID_WORD
        """
        player = self._require_player(state, player_name)
        self._check_turn(state, player_name)

        consumed = consume_tiles(word, player.hand) if word else None
        if consumed is None:
            raise ValidationError(
                ErrorCode.INVALID_WORD,
                f"'{word}' cannot be formed from your hand",
                {'word': word}
            )

        used, remaining = consumed
        player.hand = remaining
        entry = BoardWord(word=word, author=player.name, tiles=used)
        state.board.append(entry)
        self._advance_turn(state)
        self._replenish(state, player)
        return entry

    def discard_card(self, state: GameState, player_name: str, tile: str) -> None:
        """
        Move one ``tile`` from the player's hand to the discard pile.

        Raises:
            ValidationError: PLAYER_NOT_FOUND, NOT_YOUR_TURN or CARD_NOT_IN_HAND
        """
        player = self._require_player(state, player_name)
        self._check_turn(state, player_name)

        if tile not in player.hand:
            raise ValidationError(
                ErrorCode.CARD_NOT_IN_HAND,
                f"Tile '{tile}' is not in your hand",
                {'tile': tile}
            )

        player.hand.remove(tile)
        state.discard_pile.append(tile)
        self._advance_turn(state)
        self._replenish(state, player)

    def exit(self, state: GameState, player_name: str) -> bool:
        """
        Remove a player from the game.

        The departing hand is moved to the discard pile.

        Returns:
            True if no players remain and the game should be deleted

        Raises:
            ValidationError: PLAYER_NOT_FOUND
        """
        index = state.player_index(player_name)
        if index == -1:
            raise ValidationError(
                ErrorCode.PLAYER_NOT_FOUND,
                f"Player '{player_name}' is not in this game",
                {'player_name': player_name}
            )

        player = state.players.pop(index)
        state.discard_pile.extend(player.hand)
        player.hand = []

        if not state.players:
            state.current_player_index = 0
            return True

        if state.current_player_index >= len(state.players):
            state.current_player_index = 0
        return False
