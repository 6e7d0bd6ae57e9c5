"""
Session Store for WordDeck

Owns the mapping from game id to GameState and is the single choke point
for mutations. Every mutation of a game runs under that game's lock:
the latest committed record is loaded, the operation is applied to a
private copy, invariants are checked and the record is saved before the
lock is released. Nothing an operation does is visible to readers until
the save succeeds.
"""

import logging
import threading
import time
import uuid
from typing import Any, Callable, List, Optional, Tuple

from worddeck.config.game_settings import GameSettings
from worddeck.core.errors import ErrorCode, GameStateError, StorageError, ValidationError
from worddeck.core.game_state import GameState, Player
from worddeck.core.tiles import build_deck, deal
from worddeck.services.concurrency_control_service import ConcurrencyControlService
from worddeck.services.state_store import StateStore

logger = logging.getLogger(__name__)

# Called with (game_id, committed state) or (game_id, None) once a game is deleted
StateListener = Callable[[str, Optional[GameState]], None]


class SessionStore:
    """Serializes and persists all mutations of every game."""

    def __init__(self, state_store: StateStore,
                 concurrency_control: ConcurrencyControlService = None,
                 game_settings: GameSettings = None,
                 deck_builder: Callable[[], List[str]] = build_deck,
                 sleep: Callable[[float], None] = time.sleep):
        self.state_store = state_store
        self.concurrency_control = concurrency_control or ConcurrencyControlService()
        self.game_settings = game_settings or GameSettings()
        self._deck_builder = deck_builder
        self._sleep = sleep
        self._listeners: List[StateListener] = []
        self._listeners_lock = threading.Lock()

    # Subscribers

    def subscribe(self, listener: StateListener) -> None:
        """Register a listener notified after every commit, in commit order."""
        with self._listeners_lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        with self._listeners_lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _notify(self, game_id: str, state: Optional[GameState]) -> None:
        with self._listeners_lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(game_id, state)
            except Exception as e:
                logger.error(f"State listener failed for game {game_id}: {e}")

    # Storage retry

    def _with_retry(self, description: str, func: Callable[[], Any]) -> Any:
        """Run ``func``, retrying StorageError with linear backoff."""
        attempts = self.game_settings.storage_retry_attempts
        backoff = self.game_settings.storage_retry_backoff
        for attempt in range(1, attempts + 1):
            try:
                return func()
            except StorageError as e:
                if attempt >= attempts:
                    logger.error(f"Storage failure during {description}, giving up after {attempts} attempts: {e}")
                    raise
                logger.warning(f"Storage failure during {description} (attempt {attempt}/{attempts}): {e}")
                if backoff:
                    self._sleep(backoff * attempt)

    def _check_invariants(self, game_id: str, state: GameState) -> None:
        try:
            state.check_invariants(
                hand_size=self.game_settings.hand_size,
                max_players=self.game_settings.max_players_per_game,
            )
        except GameStateError as e:
            logger.error(f"Mutation of game {game_id} rejected, state would be inconsistent: {e}")
            raise

    # Operations

    def create(self, player_name: str) -> str:
        """
        Start a new game with ``player_name`` seated and dealt a hand.

        Returns:
            The new game id
        """
        game_id = uuid.uuid4().hex
        hand, draw_pile = deal(self._deck_builder(), self.game_settings.hand_size)
        state = GameState(players=[Player(name=player_name, hand=hand)], draw_pile=draw_pile)
        self._check_invariants(game_id, state)

        with self.concurrency_control.game_operation(game_id):
            self._with_retry(f"create {game_id}",
                             lambda: self.state_store.save(game_id, state.to_dict()))
            logger.info(f"Created game {game_id} for player {player_name}")
            self._notify(game_id, state)
        return game_id

    def get(self, game_id: str) -> Optional[GameState]:
        """Return the latest committed state of a game, or None if absent."""
        record = self._with_retry(f"read {game_id}", lambda: self.state_store.load(game_id))
        if record is None:
            return None
        return GameState.from_dict(record)

    def game_exists(self, game_id: str) -> bool:
        return self._with_retry(f"exists {game_id}", lambda: self.state_store.exists(game_id))

    def list_game_ids(self) -> List[str]:
        return self._with_retry("list games", self.state_store.list_ids)

    def _apply(self, game_id: str, operation: Callable[[GameState], Any]) -> Tuple[GameState, Any, bool]:
        record = self.state_store.load(game_id)
        if record is None:
            raise ValidationError(
                ErrorCode.GAME_NOT_FOUND,
                f"Game {game_id} not found",
                {'game_id': game_id}
            )

        state = GameState.from_dict(record)
        result = operation(state)
        self._check_invariants(game_id, state)

        if state.players:
            self.state_store.save(game_id, state.to_dict())
            return state, result, False

        self.state_store.delete(game_id)
        return state, result, True

    def mutate(self, game_id: str, operation: Callable[[GameState], Any]) -> Any:
        """
        Apply ``operation`` to a game as one atomic, serialized step.

        The operation receives a private copy of the latest committed state
        and may raise ValidationError to reject the action. It can be run
        more than once when the store fails transiently, so it must only
        touch the state it is given. A game left without players is
        deleted.

        Returns:
            Whatever ``operation`` returned

        Raises:
            ValidationError: GAME_NOT_FOUND or the operation's rule violation
            StorageError: If the store kept failing after all retries
            GameStateError: If the operation broke a state invariant
        """
        try:
            with self.concurrency_control.game_operation(game_id):
                state, result, deleted = self._with_retry(
                    f"mutate {game_id}", lambda: self._apply(game_id, operation)
                )
                if deleted:
                    logger.info(f"Deleted game {game_id}, no players left")
                self._notify(game_id, None if deleted else state)
        except ValidationError as e:
            # Ids are never reused, so a missing game keeps no lock
            if e.code == ErrorCode.GAME_NOT_FOUND:
                self.concurrency_control.cleanup_game_lock(game_id)
            raise

        if deleted:
            self.concurrency_control.cleanup_game_lock(game_id)
        return result

    def delete(self, game_id: str) -> bool:
        """Remove a game regardless of who is seated."""
        with self.concurrency_control.game_operation(game_id):
            deleted = self._with_retry(f"delete {game_id}", lambda: self.state_store.delete(game_id))
            if deleted:
                logger.info(f"Deleted game {game_id}")
                self._notify(game_id, None)
        if deleted:
            self.concurrency_control.cleanup_game_lock(game_id)
        return deleted
