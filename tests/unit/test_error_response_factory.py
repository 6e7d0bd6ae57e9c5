"""
Unit tests for the ErrorResponseFactory module.

Tests response envelopes, exception mapping, HTTP statuses and the Socket.IO
error handling decorator.
"""

import pytest
from unittest.mock import patch

from worddeck.core.errors import ErrorCode, GameStateError, StorageError, ValidationError
from worddeck.services.error_response_factory import ErrorResponseFactory, with_error_handling


class TestErrorResponseFactory:
    """Test cases for ErrorResponseFactory class."""

    def setup_method(self):
        self.factory = ErrorResponseFactory()

    def test_create_success_response(self):
        data = {"game_id": "abc", "count": 42}

        assert self.factory.create_success_response(data) == {"success": True, "data": data}

    def test_create_error_response(self):
        response = self.factory.create_error_response(
            ErrorCode.NOT_YOUR_TURN, "Wait", {"current_player": "Bob"}
        )

        assert response == {
            "success": False,
            "error": {
                "code": "NOT_YOUR_TURN",
                "message": "Wait",
                "details": {"current_player": "Bob"}
            }
        }

    def test_create_error_response_without_details(self):
        response = self.factory.create_error_response(ErrorCode.INTERNAL_ERROR, "Internal error")

        assert response["error"]["details"] == {}

    @patch('worddeck.services.error_response_factory.emit')
    def test_emit_error(self, mock_emit):
        self.factory.emit_error(ErrorCode.GAME_FULL, "Full", {"max_players": 4})

        mock_emit.assert_called_once_with('error', {
            "success": False,
            "error": {
                "code": "GAME_FULL",
                "message": "Full",
                "details": {"max_players": 4}
            }
        })

    @patch('worddeck.services.error_response_factory.emit')
    def test_emit_validation_error(self, mock_emit):
        error = ValidationError(ErrorCode.NAME_TAKEN, "Taken", {"player_name": "Alice"})

        self.factory.emit_validation_error(error)

        payload = mock_emit.call_args[0][1]
        assert payload["error"]["code"] == "NAME_TAKEN"
        assert payload["error"]["details"] == {"player_name": "Alice"}


class TestHandleException:
    """Test mapping exceptions to error codes"""

    def setup_method(self):
        self.factory = ErrorResponseFactory()

    def test_validation_error_keeps_its_code(self):
        code, message = self.factory.handle_exception(
            ValidationError(ErrorCode.CARD_NOT_IN_HAND, "No such tile")
        )

        assert code == ErrorCode.CARD_NOT_IN_HAND
        assert message == "No such tile"

    def test_storage_error(self):
        code, message = self.factory.handle_exception(StorageError("disk"))

        assert code == ErrorCode.STORAGE_FAILURE
        assert "disk" not in message

    def test_game_state_error(self):
        code, _ = self.factory.handle_exception(GameStateError("bad count"))

        assert code == ErrorCode.DATA_CORRUPTION

    def test_unexpected_error(self):
        code, message = self.factory.handle_exception(RuntimeError("secret detail"), "test_context")

        assert code == ErrorCode.INTERNAL_ERROR
        assert "secret detail" not in message

    @pytest.mark.parametrize('code,status', [
        (ErrorCode.GAME_NOT_FOUND, 404),
        (ErrorCode.GAME_FULL, 409),
        (ErrorCode.NOT_YOUR_TURN, 409),
        (ErrorCode.INVALID_WORD, 422),
        (ErrorCode.STORAGE_FAILURE, 503),
        (ErrorCode.INTERNAL_ERROR, 500),
        (ErrorCode.MISSING_PLAYER_NAME, 400),
    ])
    def test_http_status_for(self, code, status):
        assert self.factory.http_status_for(code) == status

    def test_create_http_error(self):
        body, status = self.factory.create_http_error(
            ValidationError(ErrorCode.GAME_NOT_FOUND, "Gone", {"game_id": "g1"})
        )

        assert status == 404
        assert body["error"] == {"code": "GAME_NOT_FOUND", "message": "Gone", "details": {"game_id": "g1"}}


class TestWithErrorHandling:
    """Test the Socket.IO handler decorator"""

    @patch('worddeck.services.error_response_factory.emit')
    def test_success_passes_through(self, mock_emit):
        @with_error_handling
        def handler(value):
            return value * 2

        assert handler(21) == 42
        mock_emit.assert_not_called()

    @patch('worddeck.services.error_response_factory.emit')
    def test_validation_error_is_emitted(self, mock_emit):
        @with_error_handling
        def handler():
            raise ValidationError(ErrorCode.GAME_FULL, "Full")

        assert handler() is None
        payload = mock_emit.call_args[0][1]
        assert mock_emit.call_args[0][0] == 'error'
        assert payload["error"]["code"] == "GAME_FULL"

    @patch('worddeck.services.error_response_factory.emit')
    def test_storage_error_is_emitted(self, mock_emit):
        @with_error_handling
        def handler():
            raise StorageError("down")

        handler()

        assert mock_emit.call_args[0][1]["error"]["code"] == "STORAGE_FAILURE"

    @patch('worddeck.services.error_response_factory.emit')
    def test_unexpected_error_is_emitted(self, mock_emit):
        @with_error_handling
        def handler():
            raise KeyError("boom")

        handler()

        assert mock_emit.call_args[0][1]["error"]["code"] == "INTERNAL_ERROR"

    def test_wraps_preserves_name(self):
        @with_error_handling
        def handle_play_word():
            pass

        assert handle_play_word.__name__ == 'handle_play_word'
