"""
Tile Supply Unit Tests

Tests for deck composition, shuffling and dealing.
"""

import random
from collections import Counter

from worddeck.core.tiles import (
    DECK_SIZE, TILE_DISTRIBUTION, WILDCARD, build_deck, deal, is_tile, make_full_deck
)


class TestDeckComposition:
    """Test the fixed tile distribution"""

    def test_deck_has_52_tiles(self):
        assert DECK_SIZE == 52
        assert len(make_full_deck()) == 52

    def test_distribution_counts(self):
        counts = Counter(make_full_deck())

        for vowel in 'AEI':
            assert counts[vowel] == 4
        for vowel in 'OU':
            assert counts[vowel] == 3
        for consonant in 'HLRSTW':
            assert counts[consonant] == 3
        for consonant in 'BCDFGJKMNPQVXYZ':
            assert counts[consonant] == 1
        assert counts[WILDCARD] == 1

    def test_every_letter_is_present(self):
        letters = set(make_full_deck()) - {WILDCARD}
        assert letters == set('ABCDEFGHIJKLMNOPQRSTUVWXYZ')


class TestBuildDeck:
    """Test shuffled deck creation"""

    def test_shuffled_deck_is_permutation(self):
        deck = build_deck()

        assert len(deck) == DECK_SIZE
        assert Counter(deck) == Counter(TILE_DISTRIBUTION)

    def test_seeded_rng_is_reproducible(self):
        first = build_deck(random.Random(42))
        second = build_deck(random.Random(42))

        assert first == second

    def test_decks_are_independent(self):
        deck = build_deck(random.Random(1))
        deck.pop()

        assert len(build_deck(random.Random(1))) == DECK_SIZE


class TestDeal:
    """Test dealing from the top of a pile"""

    def test_deal_takes_from_front(self):
        dealt, rest = deal(['A', 'B', 'C', 'D'], 2)

        assert dealt == ['A', 'B']
        assert rest == ['C', 'D']

    def test_deal_does_not_mutate_pile(self):
        pile = ['A', 'B', 'C']
        deal(pile, 2)

        assert pile == ['A', 'B', 'C']

    def test_deal_stops_when_pile_runs_short(self):
        dealt, rest = deal(['A', 'B'], 10)

        assert dealt == ['A', 'B']
        assert rest == []

    def test_deal_zero_or_negative(self):
        assert deal(['A'], 0) == ([], ['A'])
        assert deal(['A'], -3) == ([], ['A'])


class TestIsTile:
    """Test tile face checks"""

    def test_letters_and_wildcard_are_tiles(self):
        assert is_tile('A')
        assert is_tile('Z')
        assert is_tile(WILDCARD)

    def test_other_values_are_not_tiles(self):
        assert not is_tile('a')
        assert not is_tile('AB')
        assert not is_tile('')
        assert not is_tile(None)
        assert not is_tile(1)
