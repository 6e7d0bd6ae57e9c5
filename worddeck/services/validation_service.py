"""
Validation Service for WordDeck

Provides input validation and normalization for data arriving from
Socket.IO events and REST requests, before it reaches the game engine.
"""

import logging
import re
from typing import Any, Dict, Optional

from worddeck.core.errors import ErrorCode, ValidationError
from worddeck.core.tiles import WILDCARD, is_tile

logger = logging.getLogger(__name__)


class ValidationService:
    """Service responsible for input validation and normalization."""

    # Validation constants
    MAX_GAME_ID_LENGTH = 64
    MAX_PLAYER_NAME_LENGTH = 20
    MAX_WORD_LENGTH = 10

    # Game ID pattern: alphanumeric, hyphens, underscores
    GAME_ID_PATTERN = re.compile(r'^[a-zA-Z0-9_-]+$')
    WORD_PATTERN = re.compile(r'^[A-Z]+$')

    def validate_game_id(self, game_id: Any) -> str:
        """
        Validate and normalize a game ID.

        Args:
            game_id: Raw game ID

        Returns:
            Normalized game ID

        Raises:
            ValidationError: If the game ID is missing or malformed
        """
        if not game_id or not isinstance(game_id, str):
            raise ValidationError(
                ErrorCode.MISSING_GAME_ID,
                "Game ID is required"
            )

        game_id = game_id.strip()

        if not game_id:
            raise ValidationError(
                ErrorCode.MISSING_GAME_ID,
                "Game ID cannot be empty"
            )

        if len(game_id) > self.MAX_GAME_ID_LENGTH:
            raise ValidationError(
                ErrorCode.INVALID_GAME_ID,
                f"Game ID must be {self.MAX_GAME_ID_LENGTH} characters or less",
                {"max_length": self.MAX_GAME_ID_LENGTH, "actual_length": len(game_id)}
            )

        if not self.GAME_ID_PATTERN.match(game_id):
            raise ValidationError(
                ErrorCode.INVALID_GAME_ID,
                "Game ID can only contain letters, numbers, hyphens, and underscores"
            )

        return game_id

    def validate_player_name(self, player_name: Any) -> str:
        """
        Validate and normalize a player name.

        Args:
            player_name: Raw player name

        Returns:
            Player name with surrounding whitespace removed

        Raises:
            ValidationError: If the player name is missing or too long
        """
        if not player_name or not isinstance(player_name, str):
            raise ValidationError(
                ErrorCode.MISSING_PLAYER_NAME,
                "Player name is required"
            )

        player_name = player_name.strip()

        if not player_name:
            raise ValidationError(
                ErrorCode.MISSING_PLAYER_NAME,
                "Player name cannot be empty"
            )

        if len(player_name) > self.MAX_PLAYER_NAME_LENGTH:
            raise ValidationError(
                ErrorCode.PLAYER_NAME_TOO_LONG,
                f"Player name must be {self.MAX_PLAYER_NAME_LENGTH} characters or less",
                {"max_length": self.MAX_PLAYER_NAME_LENGTH, "actual_length": len(player_name)}
            )

        return player_name

    def validate_word(self, word: Any) -> str:
        """
        Validate a word and normalize it to upper case.

        A word longer than a full hand can never be formed, so it is
        rejected here rather than by the engine.

        Raises:
            ValidationError: MISSING_WORD or INVALID_WORD
        """
        if not word or not isinstance(word, str):
            raise ValidationError(
                ErrorCode.MISSING_WORD,
                "Word is required"
            )

        word = word.strip().upper()

        if not word:
            raise ValidationError(
                ErrorCode.MISSING_WORD,
                "Word cannot be empty"
            )

        if not self.WORD_PATTERN.match(word):
            raise ValidationError(
                ErrorCode.INVALID_WORD,
                "Word can only contain the letters A to Z",
                {"word": word}
            )

        if len(word) > self.MAX_WORD_LENGTH:
            raise ValidationError(
                ErrorCode.INVALID_WORD,
                f"Word must be {self.MAX_WORD_LENGTH} letters or less",
                {"max_length": self.MAX_WORD_LENGTH, "actual_length": len(word)}
            )

        return word

    def validate_tile(self, tile: Any) -> str:
        """
        Validate a single tile: one letter A to Z or the wildcard.

        Raises:
            ValidationError: INVALID_TILE
        """
        if isinstance(tile, str):
            tile = tile.strip()
            if tile != WILDCARD:
                tile = tile.upper()

        if not is_tile(tile):
            raise ValidationError(
                ErrorCode.INVALID_TILE,
                f"Tile must be a single letter or '{WILDCARD}'",
                {"tile": tile if isinstance(tile, str) else None}
            )

        return tile

    def validate_socket_data(self, data: Any, required_fields: Optional[list] = None) -> Dict:
        """
        Validate Socket.IO event or JSON request data.

        Args:
            data: Raw event payload
            required_fields: List of required field names

        Returns:
            Validated data dictionary

        Raises:
            ValidationError: If data is invalid
        """
        if not isinstance(data, dict):
            raise ValidationError(
                ErrorCode.INVALID_DATA,
                "Invalid data format - expected dictionary"
            )

        if required_fields:
            missing_fields = [field for field in required_fields if field not in data]
            if missing_fields:
                # For specific common fields, provide more specific error codes
                if len(missing_fields) == 1:
                    field = missing_fields[0]
                    if field == 'game_id':
                        raise ValidationError(
                            ErrorCode.MISSING_GAME_ID,
                            "Game ID is required"
                        )
                    elif field == 'player_name':
                        raise ValidationError(
                            ErrorCode.MISSING_PLAYER_NAME,
                            "Player name is required"
                        )
                    elif field == 'word':
                        raise ValidationError(
                            ErrorCode.MISSING_WORD,
                            "Word is required"
                        )

                raise ValidationError(
                    ErrorCode.MISSING_DATA,
                    f"Missing required fields: {', '.join(missing_fields)}",
                    {"missing_fields": missing_fields, "required_fields": required_fields}
                )

        return data
