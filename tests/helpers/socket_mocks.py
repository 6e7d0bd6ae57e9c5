"""
Common SocketIO mock patterns for testing.
Provides standardized mock objects for testing Socket.IO broadcasting.
"""

from unittest.mock import Mock


def create_mock_socketio():
    """Create a standardized mock SocketIO object for testing.

    Returns:
        Mock: A configured mock SocketIO object with common methods
    """
    mock_socketio = Mock()
    mock_socketio.emit = Mock()
    mock_socketio.reset_mock()
    return mock_socketio


def emitted_events(mock_socketio, event=None):
    """List of (event, data, room) tuples emitted on a mock SocketIO."""
    calls = []
    for call in mock_socketio.emit.call_args_list:
        args, kwargs = call
        name = args[0]
        data = args[1] if len(args) > 1 else kwargs.get('data')
        room = kwargs.get('room', kwargs.get('to'))
        if event is None or name == event:
            calls.append((name, data, room))
    return calls
