"""
Tile supply for WordDeck.

Defines the fixed tile distribution of a game deck and the helpers to
build a shuffled deck and deal from it. The front of a pile is its top:
every draw takes tiles from index 0.
"""

import random
from typing import Dict, List, Optional, Sequence, Tuple

WILDCARD = '*'

TILE_DISTRIBUTION: Dict[str, int] = {
    # Vowels
    'A': 4, 'E': 4, 'I': 4,
    'O': 3, 'U': 3,
    # Common consonants
    'H': 3, 'L': 3, 'R': 3, 'S': 3, 'T': 3, 'W': 3,
    # Everything else
    'B': 1, 'C': 1, 'D': 1, 'F': 1, 'G': 1, 'J': 1, 'K': 1, 'M': 1,
    'N': 1, 'P': 1, 'Q': 1, 'V': 1, 'X': 1, 'Y': 1, 'Z': 1,
    WILDCARD: 1,
}

DECK_SIZE = sum(TILE_DISTRIBUTION.values())  # 52

_system_random = random.SystemRandom()


def make_full_deck() -> List[str]:
    """Return every tile of the deck in distribution order (unshuffled)."""
    deck: List[str] = []
    for tile, count in TILE_DISTRIBUTION.items():
        deck.extend([tile] * count)
    return deck


def build_deck(rng: Optional[random.Random] = None) -> List[str]:
    """
    Build a freshly shuffled deck.

    Args:
        rng: Random source to shuffle with. Defaults to the OS entropy
            source; pass a seeded ``random.Random`` for reproducible decks.

    Returns:
        List of 52 tiles in uniformly random order
    """
    deck = make_full_deck()
    # random.shuffle is Fisher-Yates
    (rng or _system_random).shuffle(deck)
    return deck


def deal(pile: Sequence[str], count: int) -> Tuple[List[str], List[str]]:
    """
    Take up to ``count`` tiles from the top of ``pile``.

    Args:
        pile: Tiles to deal from (left untouched)
        count: Number of tiles wanted

    Returns:
        Tuple of (dealt tiles, remaining pile). Fewer than ``count`` tiles
        are dealt when the pile runs short.
    """
    count = max(0, count)
    return list(pile[:count]), list(pile[count:])


def is_tile(value) -> bool:
    """Check whether ``value`` is a single tile face."""
    return isinstance(value, str) and value in TILE_DISTRIBUTION
