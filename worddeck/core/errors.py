"""
Core error definitions for WordDeck

Provides error codes and the exceptions raised by the game engine and the
storage layer. Nothing here depends on other services.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorCode(Enum):
    """Standardized error codes for the application."""

    # Input Errors
    INVALID_DATA = "INVALID_DATA"
    MISSING_DATA = "MISSING_DATA"
    MISSING_GAME_ID = "MISSING_GAME_ID"
    INVALID_GAME_ID = "INVALID_GAME_ID"
    MISSING_PLAYER_NAME = "MISSING_PLAYER_NAME"
    PLAYER_NAME_TOO_LONG = "PLAYER_NAME_TOO_LONG"
    MISSING_WORD = "MISSING_WORD"
    INVALID_TILE = "INVALID_TILE"

    # Session Errors
    ALREADY_IN_GAME = "ALREADY_IN_GAME"
    NOT_IN_GAME = "NOT_IN_GAME"

    # Game Management Errors
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    GAME_FULL = "GAME_FULL"
    NAME_TAKEN = "NAME_TAKEN"
    PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"

    # Game Rule Errors
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    INVALID_WORD = "INVALID_WORD"
    CARD_NOT_IN_HAND = "CARD_NOT_IN_HAND"
    WORD_NOT_ON_BOARD = "WORD_NOT_ON_BOARD"

    # System Errors
    STORAGE_FAILURE = "STORAGE_FAILURE"
    DATA_CORRUPTION = "DATA_CORRUPTION"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ValidationError(Exception):
    """Raised when an input or a game action is rejected by the rules."""

    def __init__(self, code: ErrorCode, message: str, details: Optional[Dict] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class StorageError(Exception):
    """Transient failure talking to the state store. Safe to retry."""

    code = ErrorCode.STORAGE_FAILURE


class GameStateError(Exception):
    """A mutation left the game state violating one of its invariants."""

    code = ErrorCode.DATA_CORRUPTION
