"""
WordDeck - A multiplayer word-building card game.

Builds the Flask app and its Socket.IO server, wires the service container,
then registers the REST blueprint and the socket event handlers.
"""

from flask import Flask
from flask_socketio import SocketIO
import os
import logging
import sys
import yaml

from container import configure_container
from config_factory import load_config, ConfigurationFactory
from worddeck.core.word_validity import WordListValidationError

app = Flask(__name__)

app_config = load_config()
config_factory = ConfigurationFactory()
app.config.update(config_factory.get_flask_config())

logging.basicConfig(level=getattr(logging, app_config.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


def _cors_origins():
    """Allowed Socket.IO origins: any origin outside production, the listed ones in it."""
    if not app_config.is_production:
        return "*"
    origins = os.environ.get('SOCKETIO_CORS_ALLOWED_ORIGINS', '')
    return [origin.strip() for origin in origins.split(',') if origin.strip()]


socketio = SocketIO(app, cors_allowed_origins=_cors_origins(), async_mode=app_config.socketio_async_mode)

container = configure_container(socketio=socketio, config=config_factory.to_dict())

# Challenges cannot be adjudicated without a word list
try:
    word_validity = container.get('WordValidity')
    logger.info(f"Loaded {len(word_validity)} words from {app_config.word_list_file}")
except (FileNotFoundError, yaml.YAMLError, WordListValidationError) as e:
    logger.critical(f"FATAL: Word list validation failed. Server shutting down. Error: {e}")
    sys.exit(1)

from worddeck.routes.api import create_api_blueprint
app.register_blueprint(create_api_blueprint({
    'game_service': container.get('GameService'),
    'error_response_factory': container.get('ErrorResponseFactory'),
    'presenter': container.get('GameStatePresenter'),
    'validation_service': container.get('ValidationService')
}))

from worddeck.handlers.socket_handlers import register_socket_handlers
register_socket_handlers(socketio)

if __name__ == '__main__':
    logger.info(f"Starting WordDeck server on {app_config.host}:{app_config.port}")
    try:
        socketio.run(app, host=app_config.host, port=app_config.port, debug=app_config.debug)
    except KeyboardInterrupt:
        logger.info("Received interrupt signal")
