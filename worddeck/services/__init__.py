"""
Services package for WordDeck

Game rules, persistence, sessions and client-facing helpers, one concern
per service.
"""

from .concurrency_control_service import ConcurrencyControlService
from .state_store import StateStore, InMemoryStateStore, FileStateStore, create_state_store
from .session_store import SessionStore
from .turn_engine import TurnEngine
from .challenge_resolver import ChallengeResolver, ChallengeOutcome
from .game_service import GameService

__all__ = [
    'ConcurrencyControlService',
    'StateStore',
    'InMemoryStateStore',
    'FileStateStore',
    'create_state_store',
    'SessionStore',
    'TurnEngine',
    'ChallengeResolver',
    'ChallengeOutcome',
    'GameService'
]
