"""
Concurrency Control Service for WordDeck

Owns one exclusive lock per game so that mutations of the same game run
one at a time while different games proceed independently.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Dict, List

logger = logging.getLogger(__name__)


class ConcurrencyControlService:
    """Manages per-game locking."""

    def __init__(self):
        # Per-game locks for fine-grained control
        self._game_locks: Dict[str, threading.RLock] = {}
        # Lock for managing game locks themselves
        self._locks_lock = threading.Lock()

    def get_game_lock(self, game_id: str) -> threading.RLock:
        """Get or create the lock for a specific game."""
        with self._locks_lock:
            if game_id not in self._game_locks:
                self._game_locks[game_id] = threading.RLock()
            return self._game_locks[game_id]

    def cleanup_game_lock(self, game_id: str):
        """Clean up the lock for a deleted game."""
        with self._locks_lock:
            if game_id in self._game_locks:
                del self._game_locks[game_id]
                logger.debug(f"Released lock for game {game_id}")

    def get_locked_game_ids(self) -> List[str]:
        """Get the ids of all games that currently own a lock."""
        with self._locks_lock:
            return list(self._game_locks.keys())

    @contextmanager
    def game_operation(self, game_id: str):
        """Context manager for exclusive game operations."""
        game_lock = self.get_game_lock(game_id)
        with game_lock:
            yield
