"""
Global pytest configuration and fixtures.
Provides service fixtures for proper dependency injection in tests.
"""

import pytest
import os

# Ensure testing environment before the app module is imported
os.environ['TESTING'] = '1'
os.environ['FLASK_ENV'] = 'testing'


@pytest.fixture(scope="function", autouse=True)
def reset_global_container():
    """Reset the global container before each test to ensure clean state."""
    from container import reset_container, configure_container
    from config_factory import ConfigurationFactory

    reset_container()

    # Reconfigure it with the app's socketio instance so handlers see fresh services
    from app import socketio as app_socketio
    config_factory = ConfigurationFactory()
    config_factory.reset()
    config_factory.load_from_environment()
    service_container = configure_container(socketio=app_socketio, config=config_factory.to_dict())

    # The REST blueprint keeps module-level service references
    from worddeck.routes.api import bind_services
    bind_services({
        'game_service': service_container.get('GameService'),
        'error_response_factory': service_container.get('ErrorResponseFactory'),
        'presenter': service_container.get('GameStatePresenter'),
        'validation_service': service_container.get('ValidationService')
    })

    yield


@pytest.fixture(scope="session")
def app():
    """Create Flask app for testing."""
    from app import app as flask_app
    return flask_app


@pytest.fixture(scope="session")
def socketio():
    """Create SocketIO instance for testing."""
    from app import socketio as socketio_instance
    return socketio_instance


@pytest.fixture(scope="function")
def container():
    """The configured global service container."""
    from container import get_container
    return get_container()


@pytest.fixture(scope="function")
def game_service(container):
    """Provide GameService through dependency injection."""
    return container.get('GameService')


@pytest.fixture(scope="function")
def session_store(container):
    """Provide SessionStore through dependency injection."""
    return container.get('SessionStore')


@pytest.fixture(scope="function")
def session_service(container):
    """Provide SessionService through dependency injection."""
    return container.get('SessionService')


@pytest.fixture(scope="function")
def validation_service(container):
    """Provide ValidationService through dependency injection."""
    return container.get('ValidationService')


@pytest.fixture(scope="function")
def error_response_factory(container):
    """Provide ErrorResponseFactory through dependency injection."""
    return container.get('ErrorResponseFactory')
