"""
Game test helpers.
Builders for deterministic decks, states and settings, plus a state store
that fails on demand.
"""

from typing import List, Optional

from config_factory import AppConfig
from worddeck.config.game_settings import GameSettings
from worddeck.core.errors import StorageError
from worddeck.core.game_state import GameState, Player
from worddeck.core.tiles import deal, make_full_deck
from worddeck.services.state_store import InMemoryStateStore


def stacked_deck(top: str = '') -> List[str]:
    """A full deck with the tiles of ``top`` moved to the front, in order."""
    deck = make_full_deck()
    front = []
    for tile in top:
        deck.remove(tile)
        front.append(tile)
    return front + deck


def stacked_deck_builder(top: str = ''):
    """Deck builder for SessionStore that always returns the same stacked deck."""
    return lambda: stacked_deck(top)


def make_settings(**overrides) -> GameSettings:
    """GameSettings backed by an AppConfig with the given overrides."""
    overrides.setdefault('storage_retry_backoff_seconds', 0)
    return GameSettings(AppConfig(**overrides))


def make_state(*player_names: str, top: str = '', hand_size: int = 10) -> GameState:
    """A state with the named players seated and dealt from a stacked deck."""
    pile = stacked_deck(top)
    players = []
    for name in player_names:
        hand, pile = deal(pile, hand_size)
        players.append(Player(name=name, hand=hand))
    return GameState(players=players, draw_pile=pile)


class FlakyStateStore(InMemoryStateStore):
    """In-memory store whose next ``failures`` saves raise StorageError."""

    def __init__(self, failures: int = 0):
        super().__init__()
        self.failures = failures
        self.save_attempts = 0

    def fail_next(self, failures: int):
        self.failures = failures

    def save(self, game_id, record):
        self.save_attempts += 1
        if self.failures > 0:
            self.failures -= 1
            raise StorageError(f"Simulated write failure for {game_id}")
        super().save(game_id, record)


def find_event(received: list, name: str) -> Optional[dict]:
    """Return the first Socket.IO event called ``name`` from a test client."""
    for event in received:
        if event['name'] == name:
            return event
    return None


def find_events(received: list, name: str) -> list:
    return [event for event in received if event['name'] == name]
