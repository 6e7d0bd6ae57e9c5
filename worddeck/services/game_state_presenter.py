"""
Game State Presenter - Centralized game state transformation for clients.

Provides canonical transformations of a GameState into the payloads sent
over Socket.IO and REST, so every surface shows the same shapes. Player
views hide opponents' hands behind a tile count.
"""

import logging
from typing import Any, Dict, List, Optional

from worddeck.core.game_state import GameState

logger = logging.getLogger(__name__)


class GameStatePresenter:
    """Transforms game state for client consumption."""

    def create_player_list(self, state: GameState, viewer: Optional[str] = None) -> List[Dict[str, Any]]:
        """Create the player list, revealing only ``viewer``'s own hand.

        Args:
            state: Game state
            viewer: Name of the player the list is for, or None for a
                spectator view with no hands revealed

        Returns:
            List of player objects in seat order
        """
        current = state.current_player
        player_list = []
        for player in state.players:
            entry = {
                'name': player.name,
                'score': player.score,
                'hand_size': len(player.hand),
                'is_current': current is not None and player.name == current.name,
            }
            if viewer is not None and player.name == viewer:
                entry['hand'] = list(player.hand)
            player_list.append(entry)
        return player_list

    def create_board(self, state: GameState) -> List[Dict[str, str]]:
        return [{'word': entry.word, 'author': entry.author} for entry in state.board]

    def create_public_state(self, game_id: str, state: GameState) -> Dict[str, Any]:
        """Create the game state visible to anyone, without any hand."""
        current = state.current_player
        return {
            'game_id': game_id,
            'players': self.create_player_list(state),
            'current_player_index': state.current_player_index,
            'current_player': current.name if current else None,
            'board': self.create_board(state),
            'draw_pile_count': len(state.draw_pile),
            'discard_pile_count': len(state.discard_pile),
            'discard_top': state.discard_pile[-1] if state.discard_pile else None,
        }

    def create_player_view(self, game_id: str, state: GameState, player_name: str) -> Dict[str, Any]:
        """Create the game state as seen by one seated player.

        Args:
            game_id: Game identifier
            state: Game state
            player_name: Seated player the view is for

        Returns:
            Public state plus the player's own hand
        """
        view = self.create_public_state(game_id, state)
        view['players'] = self.create_player_list(state, viewer=player_name)
        player = state.find_player(player_name)
        view['you'] = player_name
        view['hand'] = list(player.hand) if player else []
        return view

    def create_full_state(self, game_id: str, state: GameState) -> Dict[str, Any]:
        """The complete persisted record, for getGameState."""
        return {'game_id': game_id, 'state': state.to_dict()}

    def create_game_summary(self, game_id: str, state: GameState, max_players: int) -> Dict[str, Any]:
        """Short lobby entry for a game."""
        return {
            'game_id': game_id,
            'player_count': len(state.players),
            'max_players': max_players,
            'players': [player.name for player in state.players],
        }
