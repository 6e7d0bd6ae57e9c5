"""
Word validity capability for challenges.

Challenges are judged by an injected ``WordValidity``. The word list
implementation loads its vocabulary from a YAML file of the form::

    words:
      - CAT
      - DOG
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, Set

import yaml

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"^[A-Za-z]+$")


class WordListValidationError(Exception):
    """Raised when a word list file has an invalid structure."""
    pass


class WordValidity(ABC):
    """Decides whether a played word is a real word."""

    @abstractmethod
    def is_valid(self, word: str) -> bool:
        """Return True if ``word`` is acceptable."""


class AcceptAllWordValidity(WordValidity):
    """Treats every word as valid. Useful when no word list is configured."""

    def is_valid(self, word: str) -> bool:
        return bool(word)


class WordListValidity(WordValidity):
    """Looks words up in a fixed vocabulary, case-insensitively."""

    def __init__(self, words: Iterable[str]):
        self._words: Set[str] = {w.strip().upper() for w in words if w and w.strip()}

    def is_valid(self, word: str) -> bool:
        if not word:
            return False
        return word.upper() in self._words

    def __len__(self) -> int:
        return len(self._words)

    @classmethod
    def from_yaml(cls, yaml_file_path: str) -> 'WordListValidity':
        """
        Load a vocabulary from a YAML word list.

        Raises:
            FileNotFoundError: If the file doesn't exist
            yaml.YAMLError: If YAML parsing fails
            WordListValidationError: If the structure is invalid
        """
        try:
            with open(yaml_file_path, 'r', encoding='utf-8') as file:
                data = yaml.safe_load(file)
        except FileNotFoundError:
            logger.error(f"Word list not found: {yaml_file_path}")
            raise
        except yaml.YAMLError as e:
            logger.error(f"Word list parsing error: {e}")
            raise

        words = cls._validate_structure(data)
        validity = cls(words)
        logger.info(f"Loaded {len(validity)} words from {yaml_file_path}")
        return validity

    @staticmethod
    def _validate_structure(data: Any) -> list:
        if not isinstance(data, dict):
            raise WordListValidationError("Word list root must be a dictionary")

        if 'words' not in data:
            raise WordListValidationError("Word list must contain 'words' key")

        words = data['words']
        if not isinstance(words, list):
            raise WordListValidationError("'words' must be a list")

        if len(words) == 0:
            raise WordListValidationError("'words' list cannot be empty")

        for i, word in enumerate(words):
            if not isinstance(word, str):
                raise WordListValidationError(
                    f"Word {i} must be a string, got {type(word).__name__} {word!r} (quote it in the YAML file)"
                )
            if not word.strip():
                raise WordListValidationError(f"Word {i} must be a non-empty string")
            if not WORD_PATTERN.match(word.strip()):
                raise WordListValidationError(f"Word {i} ('{word}') must contain only letters")

        return words
