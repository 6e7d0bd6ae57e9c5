"""
Base Handler Classes

This module provides base classes for Socket.IO handlers with common patterns
for service access, session lookup, validation and response formatting.
"""

import logging
from typing import Any, Dict, Optional
from flask import request
from flask_socketio import emit

from container import get_container
from worddeck.core.errors import ErrorCode, ValidationError

logger = logging.getLogger(__name__)


class BaseHandler:
    """
    Base class for all Socket.IO handlers.

    Services are resolved from the container on every access so that a
    reconfigured container (as in tests) is always picked up.
    """

    @property
    def _container(self):
        return get_container()

    @property
    def game_service(self):
        return self._container.get('GameService')

    @property
    def validation_service(self):
        return self._container.get('ValidationService')

    @property
    def error_response_factory(self):
        return self._container.get('ErrorResponseFactory')

    @property
    def session_service(self):
        return self._container.get('SessionService')

    @property
    def presenter(self):
        return self._container.get('GameStatePresenter')

    def get_current_session(self) -> Optional[Dict[str, Any]]:
        """Get the current session info for the requesting client."""
        return self.session_service.get_session(request.sid)  # type: ignore[attr-defined]

    def require_session(self) -> Dict[str, Any]:
        """
        Get the current session info, raising an error if not in a game.

        Returns:
            Session info dictionary

        Raises:
            ValidationError: If the client has not created or joined a game
        """
        session_info = self.get_current_session()
        if not session_info:
            raise ValidationError(
                ErrorCode.NOT_IN_GAME,
                'You are not currently in a game'
            )
        return session_info

    def require_no_session(self) -> None:
        """Raise ALREADY_IN_GAME if the client is already seated somewhere."""
        if self.session_service.has_session(request.sid):  # type: ignore[attr-defined]
            raise ValidationError(
                ErrorCode.ALREADY_IN_GAME,
                'You are already in a game. Exit it first.'
            )

    def validate_data_dict(self, data: Any, required_fields: Optional[list] = None) -> Dict[str, Any]:
        """Validate that data is a dictionary containing the required fields."""
        return self.validation_service.validate_socket_data(data, required_fields)

    def emit_success(self, event_name: str, data: Optional[Dict[str, Any]] = None) -> None:
        """
        Emit a success response to the requesting client.

        Args:
            event_name: The name of the event to emit
            data: Optional data to include in the response
        """
        response = self.error_response_factory.create_success_response(data or {})
        emit(event_name, response)

    def log_handler_start(self, handler_name: str, data: Any = None) -> None:
        """Log the start of handler execution."""
        logger.info(f'{handler_name} called by client: {request.sid}')  # type: ignore[attr-defined]
        if data:
            logger.debug(f'{handler_name} data: {data}')

    def log_handler_success(self, handler_name: str, message: Optional[str] = None) -> None:
        """Log successful handler completion."""
        log_msg = f'{handler_name} completed successfully for client: {request.sid}'  # type: ignore[attr-defined]
        if message:
            log_msg += f' - {message}'
        logger.info(log_msg)
