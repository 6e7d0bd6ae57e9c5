"""
Error Response Factory for WordDeck

Provides standardized error and success response creation, the mapping of
exceptions to error codes and HTTP statuses, and the error handling
decorator used by the Socket.IO handlers.
"""

import logging
import traceback
from functools import wraps
from typing import Dict, Optional, Tuple

from flask_socketio import emit

from worddeck.core.errors import ErrorCode, GameStateError, StorageError, ValidationError

logger = logging.getLogger(__name__)


# HTTP status used by the REST API for each error code
HTTP_STATUS_BY_CODE = {
    ErrorCode.GAME_NOT_FOUND: 404,
    ErrorCode.PLAYER_NOT_FOUND: 404,
    ErrorCode.GAME_FULL: 409,
    ErrorCode.NAME_TAKEN: 409,
    ErrorCode.ALREADY_IN_GAME: 409,
    ErrorCode.NOT_YOUR_TURN: 409,
    ErrorCode.INVALID_WORD: 422,
    ErrorCode.CARD_NOT_IN_HAND: 422,
    ErrorCode.WORD_NOT_ON_BOARD: 422,
    ErrorCode.STORAGE_FAILURE: 503,
    ErrorCode.DATA_CORRUPTION: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


class ErrorResponseFactory:
    """Factory responsible for creating standardized error and success responses."""

    def create_success_response(self, data: Dict) -> Dict:
        """
        Create standardized success response.

        Args:
            data: Response data

        Returns:
            Standardized success response
        """
        return {
            "success": True,
            "data": data
        }

    def create_error_response(self, code: ErrorCode, message: str, details: Optional[Dict] = None) -> Dict:
        """
        Create standardized error response.

        Args:
            code: Error code enum
            message: Human-readable error message
            details: Optional additional error details

        Returns:
            Standardized error response
        """
        return {
            "success": False,
            "error": {
                "code": code.value,
                "message": message,
                "details": details or {}
            }
        }

    def emit_error(self, code: ErrorCode, message: str, details: Optional[Dict] = None):
        """
        Emit standardized error response to the requesting client.

        Args:
            code: Error code enum
            message: Human-readable error message
            details: Optional additional error details
        """
        error_response = self.create_error_response(code, message, details)

        logger.warning(f"Emitting error: {code.value} - {message}")
        emit('error', error_response)

    def emit_validation_error(self, error: ValidationError):
        """Emit a ValidationError to the requesting client."""
        self.emit_error(error.code, error.message, error.details)

    def handle_exception(self, e: Exception, context: str = "Unknown") -> Tuple[ErrorCode, str]:
        """
        Map an exception to an error code and a client-facing message.

        Args:
            e: Exception instance
            context: Context where the exception occurred

        Returns:
            Tuple of (error_code, error_message)
        """
        if isinstance(e, ValidationError):
            return e.code, e.message

        if isinstance(e, StorageError):
            logger.error(f"Storage failure in {context}: {e}")
            return ErrorCode.STORAGE_FAILURE, "The game could not be saved, please try again"

        if isinstance(e, GameStateError):
            logger.error(f"Inconsistent game state in {context}: {e}")
            return ErrorCode.DATA_CORRUPTION, "The action would corrupt the game and was discarded"

        logger.error(f"Unexpected exception in {context}: {str(e)}")
        logger.error(f"Exception traceback: {traceback.format_exc()}")

        return ErrorCode.INTERNAL_ERROR, "An internal error occurred"

    def http_status_for(self, code: ErrorCode) -> int:
        """HTTP status for an error code; input errors default to 400."""
        return HTTP_STATUS_BY_CODE.get(code, 400)

    def create_http_error(self, e: Exception, context: str = "Unknown") -> Tuple[Dict, int]:
        """
        Build a (body, status) pair for a failed REST request.

        Args:
            e: Exception raised while serving the request
            context: Context where the exception occurred

        Returns:
            Tuple of (error response, HTTP status)
        """
        code, message = self.handle_exception(e, context)
        details = e.details if isinstance(e, ValidationError) else None
        return self.create_error_response(code, message, details), self.http_status_for(code)


def with_error_handling(func):
    """
    Decorator for Socket.IO event handlers to provide consistent error handling.

    Args:
        func: Socket.IO event handler function

    Returns:
        Wrapped function that emits an ``error`` event instead of raising
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ValidationError as e:
            logger.info(f"{func.__name__} rejected: {e.code.value} - {e.message}")
            factory = ErrorResponseFactory()
            factory.emit_validation_error(e)
        except Exception as e:
            factory = ErrorResponseFactory()
            error_code, error_message = factory.handle_exception(e, func.__name__)
            factory.emit_error(error_code, error_message)

    return wrapper
