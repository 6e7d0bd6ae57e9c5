#!/usr/bin/env python3
"""
Development server for WordDeck.

Starts Gunicorn with the eventlet worker from gunicorn.conf.py and reloads
on code changes. Pass --no-reload to keep the worker running across edits,
or --log-level to override the configured level.
"""

import argparse
import os
import subprocess
import sys


def build_command(log_level: str, reload: bool) -> list:
    cmd = ['gunicorn', '--config', 'gunicorn.conf.py', '--log-level', log_level]
    if reload:
        cmd.append('--reload')
    cmd.append('wsgi:app')
    return cmd


def main():
    """Run the development server with Gunicorn."""
    parser = argparse.ArgumentParser(description='Run the WordDeck development server')
    parser.add_argument('--no-reload', action='store_true', help='do not restart on code changes')
    parser.add_argument('--log-level', default=None, help='gunicorn log level (default: LOG_LEVEL)')
    args = parser.parse_args()

    os.environ.setdefault('FLASK_ENV', 'development')
    os.environ.setdefault('PORT', '8000')

    from config_factory import ConfigError, load_config
    try:
        config = load_config()
    except ConfigError as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    cmd = build_command(args.log_level or config.log_level, reload=not args.no_reload)

    print(f"Starting WordDeck development server on http://{config.host}:{config.port}")
    print(f"Storage backend: {config.storage_backend}, word list: {config.word_list_file}")
    print("Press Ctrl+C to stop the server")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        print("\nShutting down development server...")
    except subprocess.CalledProcessError as e:
        print(f"Gunicorn exited with status {e.returncode}")
        sys.exit(e.returncode)


if __name__ == '__main__':
    main()
