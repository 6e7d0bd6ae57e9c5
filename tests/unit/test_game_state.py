"""
Game State Unit Tests

Tests for the game state model, its record layout and invariant checks.
"""

import pytest

from worddeck.core.errors import GameStateError
from worddeck.core.game_state import BoardWord, GameState, Player
from tests.helpers.game_helpers import make_state


class TestLookups:
    """Test player and board lookups"""

    def setup_method(self):
        self.state = make_state('Alice', 'Bob')

    def test_find_player(self):
        assert self.state.find_player('Bob').name == 'Bob'
        assert self.state.find_player('Carol') is None

    def test_player_index(self):
        assert self.state.player_index('Alice') == 0
        assert self.state.player_index('Bob') == 1
        assert self.state.player_index('Carol') == -1

    def test_current_player(self):
        assert self.state.current_player.name == 'Alice'
        self.state.current_player_index = 1
        assert self.state.current_player.name == 'Bob'

    def test_current_player_of_empty_game(self):
        assert GameState().current_player is None

    def test_find_board_word_returns_most_recent(self):
        self.state.board = [
            BoardWord('CAT', 'Alice', list('CAT')),
            BoardWord('DOG', 'Bob', list('DOG')),
            BoardWord('CAT', 'Bob', list('CAT')),
        ]

        assert self.state.find_board_word('CAT') == 2
        assert self.state.find_board_word('DOG') == 1
        assert self.state.find_board_word('EMU') == -1
        assert self.state.words == ['CAT', 'DOG', 'CAT']


class TestInvariants:
    """Test invariant checks"""

    def test_fresh_state_is_valid(self):
        state = make_state('Alice', 'Bob', 'Carol', 'Dave')

        state.check_invariants()
        assert state.tile_count() == 52

    def test_lost_tile_is_detected(self):
        state = make_state('Alice')
        state.draw_pile.pop()

        with pytest.raises(GameStateError):
            state.check_invariants()

    def test_substituted_tile_is_detected(self):
        state = make_state('Alice', top='A')
        state.players[0].hand[0] = 'Z'

        with pytest.raises(GameStateError):
            state.check_invariants()

    def test_board_tiles_count_towards_conservation(self):
        state = make_state('Alice', top='CAT')
        hand = state.players[0].hand
        for letter in 'CAT':
            hand.remove(letter)
        state.board.append(BoardWord('CAT', 'Alice', list('CAT')))

        state.check_invariants(hand_size=10)
        assert state.tile_count() == 52

    def test_index_out_of_range(self):
        state = make_state('Alice', 'Bob')
        state.current_player_index = 2

        with pytest.raises(GameStateError):
            state.check_invariants()

    def test_duplicate_names(self):
        state = make_state('Alice', 'Alice')

        with pytest.raises(GameStateError):
            state.check_invariants()

    def test_oversized_hand(self):
        state = make_state('Alice')
        state.players[0].hand.append(state.draw_pile.pop(0))

        with pytest.raises(GameStateError):
            state.check_invariants(hand_size=10)

    def test_too_many_players(self):
        state = make_state('A', 'B', 'C', 'D', hand_size=2)
        state.players.append(Player('E', hand=[]))

        with pytest.raises(GameStateError):
            state.check_invariants(max_players=4)

    def test_empty_game_with_all_tiles_in_piles_is_valid(self):
        state = make_state()

        state.check_invariants()


class TestRecordLayout:
    """Test conversion to and from the persisted record"""

    def test_to_dict_layout(self):
        state = make_state('Alice')
        state.board.append(BoardWord('HI', 'Alice', ['H', '*']))
        record = state.to_dict()

        assert set(record) == {'players', 'currentPlayerIndex', 'board', 'drawPile', 'discardPile'}
        assert record['players'][0] == {'name': 'Alice', 'score': 0, 'hand': state.players[0].hand}
        assert record['board'] == [{'word': 'HI', 'author': 'Alice', 'tiles': ['H', '*']}]

    def test_from_dict_restores_state(self):
        state = make_state('Alice', 'Bob')
        state.current_player_index = 1
        state.players[1].score = 20

        restored = GameState.from_dict(state.to_dict())

        assert restored == state

    def test_from_dict_accepts_plain_board_words(self):
        record = make_state('Alice').to_dict()
        record['board'] = ['CAT']

        restored = GameState.from_dict(record)

        assert restored.board == [BoardWord('CAT', '', ['C', 'A', 'T'])]

    def test_to_dict_is_a_copy(self):
        state = make_state('Alice')
        record = state.to_dict()
        record['players'][0]['hand'].clear()

        assert len(state.players[0].hand) == 10
