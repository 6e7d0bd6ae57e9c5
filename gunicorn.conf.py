"""
Gunicorn configuration for WordDeck.

Socket.IO sessions live in the worker's memory, so a single eventlet worker
serves every connection. The word list is checked in the master before the
worker is forked; a bad list stops the server instead of failing challenges
later.
"""

import os
import sys
import logging
import yaml

from config_factory import load_config
from worddeck.core.word_validity import WordListValidity, WordListValidationError

# Named app_config so it does not shadow gunicorn's own 'config'
app_config = load_config()


def _word_list_path() -> str:
    path = app_config.word_list_file
    if os.path.isabs(path):
        return path
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), path)


def on_starting(server):
    """Validate the word list before workers are forked."""
    logger = logging.getLogger(__name__)
    word_list_file = _word_list_path()

    logger.info(f"Validating {word_list_file} before starting workers...")
    try:
        word_validity = WordListValidity.from_yaml(word_list_file)
    except (FileNotFoundError, yaml.YAMLError, WordListValidationError) as e:
        logger.critical(f"FATAL: Word list validation failed. Server shutting down. Error: {e}")
        sys.exit(1)
    logger.info(f"Loaded {len(word_validity)} words from {word_list_file}")


bind = f"{app_config.host}:{app_config.port}"

workers = 1
worker_class = "eventlet"
worker_connections = app_config.worker_connections
timeout = app_config.timeout
keepalive = app_config.keepalive
preload_app = False

accesslog = "-"
errorlog = "-"
loglevel = app_config.log_level

proc_name = "worddeck"
