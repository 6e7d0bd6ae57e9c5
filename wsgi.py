"""
WSGI entry point for WordDeck.

Gunicorn loads ``wsgi:app`` with a single eventlet worker; running this
file directly serves the app with the Socket.IO development server on the
configured host and port.
"""

from app import app, app_config, socketio

application = app

if __name__ == "__main__":
    socketio.run(app, host=app_config.host, port=app_config.port, debug=app_config.debug)
