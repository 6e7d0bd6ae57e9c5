"""
Word formation rules.

A word can be built from a hand when every letter is covered either by a
matching tile or by a wildcard, with no tile used twice. Exact letters are
always spent before wildcards.
"""

from collections import Counter
from typing import Iterable, List, Optional, Tuple

from worddeck.core.tiles import WILDCARD


def consume_tiles(word: str, hand: Iterable[str]) -> Optional[Tuple[List[str], List[str]]]:
    """
    Work out which tiles of ``hand`` a play of ``word`` would use.

    Args:
        word: Letters to form
        hand: Tiles available

    Returns:
        Tuple of (tiles used, tiles left in hand), or None when the word
        cannot be formed. The order of the remaining tiles follows ``hand``.
    """
    hand = list(hand)
    available = Counter(hand)
    used: List[str] = []

    for letter in word:
        if available[letter] > 0:
            available[letter] -= 1
            used.append(letter)
        elif available[WILDCARD] > 0:
            available[WILDCARD] -= 1
            used.append(WILDCARD)
        else:
            return None

    # Rebuild the remainder in hand order
    to_remove = Counter(used)
    remaining: List[str] = []
    for tile in hand:
        if to_remove[tile] > 0:
            to_remove[tile] -= 1
        else:
            remaining.append(tile)

    return used, remaining


def can_form(word: str, hand: Iterable[str]) -> bool:
    """Check whether ``word`` can be assembled from ``hand``."""
    return consume_tiles(word, hand) is not None
