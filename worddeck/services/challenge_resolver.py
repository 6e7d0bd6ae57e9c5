"""
Challenge Resolver for WordDeck

Adjudicates a challenge against a word on the board. The loser of a
challenge is charged the challenge penalty: the challenger when the word
is valid, the word's author when it is not. An invalid word leaves the
board and its tiles go to the discard pile.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from worddeck.config.game_settings import GameSettings
from worddeck.core.errors import ErrorCode, ValidationError
from worddeck.core.game_state import GameState
from worddeck.core.word_validity import WordValidity

logger = logging.getLogger(__name__)


@dataclass
class ChallengeOutcome:
    """Result of a resolved challenge."""
    word: str
    challenger: str
    author: str
    word_valid: bool
    penalized_player: Optional[str]
    penalty: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'challenger': self.challenger,
            'author': self.author,
            'word_valid': self.word_valid,
            'penalized_player': self.penalized_player,
            'penalty': self.penalty,
        }


class ChallengeResolver:
    """Resolves challenges using an injected word validity capability."""

    def __init__(self, word_validity: WordValidity, game_settings: GameSettings = None):
        self.word_validity = word_validity
        self.game_settings = game_settings or GameSettings()

    def challenge(self, state: GameState, challenger_name: str, word: str) -> ChallengeOutcome:
        """
        Challenge the most recent board entry for ``word``.

        Raises:
            ValidationError: PLAYER_NOT_FOUND or WORD_NOT_ON_BOARD
        """
        challenger = state.find_player(challenger_name)
        if challenger is None:
            raise ValidationError(
                ErrorCode.PLAYER_NOT_FOUND,
                f"Challenger '{challenger_name}' is not in this game",
                {'player_name': challenger_name}
            )

        index = state.find_board_word(word)
        if index == -1:
            raise ValidationError(
                ErrorCode.WORD_NOT_ON_BOARD,
                f"'{word}' is not on the board",
                {'word': word}
            )

        entry = state.board[index]
        penalty = self.game_settings.challenge_penalty

        word_valid = self.word_validity.is_valid(word)
        if word_valid:
            challenger.score += penalty
            penalized = challenger.name
            logger.info(f"Challenge of '{word}' by {challenger.name} failed; challenger charged {penalty}")
        else:
            del state.board[index]
            state.discard_pile.extend(entry.tiles)
            author = state.find_player(entry.author)
            if author is not None:
                author.score += penalty
                penalized = author.name
            else:
                # Author already left the game
                penalized = None
            logger.info(f"Challenge of '{word}' by {challenger.name} upheld; word removed, "
                        f"author {entry.author} charged {penalty if penalized else 0}")

        return ChallengeOutcome(
            word=word,
            challenger=challenger.name,
            author=entry.author,
            word_valid=word_valid,
            penalized_player=penalized,
            penalty=penalty if penalized else 0,
        )
