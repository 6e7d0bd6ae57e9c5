"""
Game Settings Configuration Module

Provides centralized access to game rule values and the storage retry
policy, replacing hardcoded constants throughout the codebase.
"""

import logging

logger = logging.getLogger(__name__)


class GameSettings:
    """Centralized game settings management."""

    def __init__(self, app_config=None):
        """
        Initialize game settings.

        Args:
            app_config: Application configuration instance from config_factory
        """
        self._config = app_config
        if app_config is None:
            try:
                from config_factory import get_config
                self._config = get_config()
            except Exception as e:
                logger.debug(f"Could not load configuration: {e}, using defaults")
                self._config = None

    @property
    def max_players_per_game(self) -> int:
        """Maximum number of players seated in one game."""
        if self._config is None:
            return 4
        return self._config.max_players_per_game

    @property
    def hand_size(self) -> int:
        """Number of tiles a hand is dealt and refilled to."""
        if self._config is None:
            return 10
        return self._config.hand_size

    @property
    def challenge_penalty(self) -> int:
        """Points charged to the loser of a challenge."""
        if self._config is None:
            return 10
        return self._config.challenge_penalty

    @property
    def enforce_turn_order(self) -> bool:
        """Whether plays and discards are limited to the current player."""
        if self._config is None:
            return True
        return self._config.enforce_turn_order

    @property
    def storage_retry_attempts(self) -> int:
        """Total attempts for a mutation when the state store fails."""
        if self._config is None:
            return 3
        return self._config.storage_retry_attempts

    @property
    def storage_retry_backoff(self) -> float:
        """Seconds to wait before the second attempt; grows linearly."""
        if self._config is None:
            return 0.05
        return self._config.storage_retry_backoff_seconds
