"""
Game State model for WordDeck

The canonical record of one game session, the codec to and from the
persisted record layout, and the invariant checks every committed
mutation must satisfy.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from worddeck.core.errors import GameStateError
from worddeck.core.tiles import DECK_SIZE, TILE_DISTRIBUTION

MAX_PLAYERS = 4
MAX_HAND_SIZE = 10


@dataclass
class Player:
    """A seated player."""
    name: str
    score: int = 0
    hand: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'score': self.score, 'hand': list(self.hand)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Player':
        return cls(
            name=data['name'],
            score=int(data.get('score', 0)),
            hand=list(data.get('hand') or []),
        )


@dataclass
class BoardWord:
    """A word on the board, the player who played it and the tiles it used."""
    word: str
    author: str
    tiles: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'word': self.word, 'author': self.author, 'tiles': list(self.tiles)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BoardWord':
        return cls(
            word=data['word'],
            author=data.get('author', ''),
            # Records without tiles were played with exact letters only
            tiles=list(data.get('tiles') or data['word']),
        )


@dataclass
class GameState:
    """Mutable state of a single game."""
    players: List[Player] = field(default_factory=list)
    current_player_index: int = 0
    board: List[BoardWord] = field(default_factory=list)
    draw_pile: List[str] = field(default_factory=list)
    discard_pile: List[str] = field(default_factory=list)

    # Lookups

    def find_player(self, name: str) -> Optional[Player]:
        for player in self.players:
            if player.name == name:
                return player
        return None

    def player_index(self, name: str) -> int:
        for index, player in enumerate(self.players):
            if player.name == name:
                return index
        return -1

    @property
    def current_player(self) -> Optional[Player]:
        if not self.players:
            return None
        return self.players[self.current_player_index]

    @property
    def words(self) -> List[str]:
        return [entry.word for entry in self.board]

    def find_board_word(self, word: str) -> int:
        """Index of the most recent board entry for ``word``, or -1."""
        for index in range(len(self.board) - 1, -1, -1):
            if self.board[index].word == word:
                return index
        return -1

    # Bookkeeping

    def tile_count(self) -> int:
        """Total number of tiles across hands, piles and board words."""
        return (
            sum(len(player.hand) for player in self.players)
            + len(self.draw_pile)
            + len(self.discard_pile)
            + sum(len(entry.tiles) for entry in self.board)
        )

    def tile_multiset(self) -> Counter:
        tiles = Counter(self.draw_pile)
        tiles.update(self.discard_pile)
        for player in self.players:
            tiles.update(player.hand)
        for entry in self.board:
            tiles.update(entry.tiles)
        return tiles

    def check_invariants(self, hand_size: int = MAX_HAND_SIZE,
                         max_players: int = MAX_PLAYERS) -> None:
        """
        Verify the invariants that hold after every committed mutation.

        Raises:
            GameStateError: If any invariant is violated
        """
        if self.tile_count() != DECK_SIZE:
            raise GameStateError(f"Tile count is {self.tile_count()}, expected {DECK_SIZE}")

        if self.tile_multiset() != Counter(TILE_DISTRIBUTION):
            raise GameStateError("Tile multiset no longer matches the deck distribution")

        if len(self.players) > max_players:
            raise GameStateError(f"Game has {len(self.players)} players, limit is {max_players}")

        if self.players and not 0 <= self.current_player_index < len(self.players):
            raise GameStateError(f"Current player index {self.current_player_index} out of range")

        names = [player.name for player in self.players]
        if len(set(names)) != len(names):
            raise GameStateError("Player names are not unique")

        for player in self.players:
            if len(player.hand) > hand_size:
                raise GameStateError(f"Player {player.name} holds {len(player.hand)} tiles")
            if player.score < 0:
                raise GameStateError(f"Player {player.name} has a negative score")

        for entry in self.board:
            if len(entry.tiles) != len(entry.word):
                raise GameStateError(f"Board word {entry.word} does not match its tiles")

    # Persisted record layout

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted record layout."""
        return {
            'players': [player.to_dict() for player in self.players],
            'currentPlayerIndex': self.current_player_index,
            'board': [entry.to_dict() for entry in self.board],
            'drawPile': list(self.draw_pile),
            'discardPile': list(self.discard_pile),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameState':
        """Rebuild a state from its persisted record."""
        return cls(
            players=[Player.from_dict(p) for p in data.get('players') or []],
            current_player_index=int(data.get('currentPlayerIndex', 0)),
            board=[
                BoardWord.from_dict(entry) if isinstance(entry, dict)
                else BoardWord(word=entry, author='', tiles=list(entry))
                for entry in data.get('board') or []
            ],
            draw_pile=list(data.get('drawPile') or []),
            discard_pile=list(data.get('discardPile') or []),
        )
