"""
Session Service Unit Tests

Tests for mapping Socket.IO connections to seated players.
"""

import threading

from worddeck.services.session_service import SessionService


class TestSessionService:
    """Test session bookkeeping"""

    def setup_method(self):
        self.service = SessionService()

    def test_create_and_get_session(self):
        self.service.create_session('sock1', 'game1', 'Alice')

        assert self.service.get_session('sock1') == {'game_id': 'game1', 'player_name': 'Alice'}
        assert self.service.has_session('sock1')

    def test_missing_session(self):
        assert self.service.get_session('nope') is None
        assert not self.service.has_session('nope')

    def test_get_session_returns_copy(self):
        self.service.create_session('sock1', 'game1', 'Alice')

        self.service.get_session('sock1')['player_name'] = 'Mallory'

        assert self.service.get_session('sock1')['player_name'] == 'Alice'

    def test_create_session_replaces_existing(self):
        self.service.create_session('sock1', 'game1', 'Alice')
        self.service.create_session('sock1', 'game2', 'Alice')

        assert self.service.get_session('sock1') == {'game_id': 'game2', 'player_name': 'Alice'}
        assert self.service.get_sessions_by_game('game1') == {}

    def test_remove_session(self):
        self.service.create_session('sock1', 'game1', 'Alice')

        removed = self.service.remove_session('sock1')

        assert removed == {'game_id': 'game1', 'player_name': 'Alice'}
        assert self.service.remove_session('sock1') is None
        assert not self.service.has_session('sock1')

    def test_get_sessions_by_game(self):
        self.service.create_session('sock1', 'game1', 'Alice')
        self.service.create_session('sock2', 'game1', 'Bob')
        self.service.create_session('sock3', 'game2', 'Carol')

        sessions = self.service.get_sessions_by_game('game1')

        assert set(sessions) == {'sock1', 'sock2'}
        assert sessions['sock2']['player_name'] == 'Bob'

    def test_concurrent_session_creation(self):
        def worker(i):
            self.service.create_session(f'sock{i}', 'game1', f'Player_{i}')

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5.0)

        assert len(self.service.get_sessions_by_game('game1')) == 20
