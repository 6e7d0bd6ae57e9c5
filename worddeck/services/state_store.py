"""
State Store for WordDeck

The durable home of persisted game records. A store only saves, loads and
deletes whole records; serialization of concurrent mutations is handled by
the SessionStore on top of it. Failures talking to the backing medium are
reported as StorageError so callers can retry them.
"""

import copy
import json
import logging
import os
import re
import tempfile
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from worddeck.core.errors import StorageError

logger = logging.getLogger(__name__)


class StateStore(ABC):
    """Interface of a persisted record store keyed by game id."""

    @abstractmethod
    def load(self, game_id: str) -> Optional[Dict[str, Any]]:
        """Return a private copy of the record, or None if absent."""

    @abstractmethod
    def save(self, game_id: str, record: Dict[str, Any]) -> None:
        """Atomically replace the record for ``game_id``."""

    @abstractmethod
    def delete(self, game_id: str) -> bool:
        """Delete the record. Returns False if it did not exist."""

    @abstractmethod
    def exists(self, game_id: str) -> bool:
        """Check whether a record exists."""

    @abstractmethod
    def list_ids(self) -> List[str]:
        """List the ids of all stored records."""


class InMemoryStateStore(StateStore):
    """Keeps records in process memory. Records are copied in and out."""

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.RLock()

    def load(self, game_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._records.get(game_id)
            return copy.deepcopy(record) if record is not None else None

    def save(self, game_id: str, record: Dict[str, Any]) -> None:
        snapshot = copy.deepcopy(record)
        with self._lock:
            self._records[game_id] = snapshot

    def delete(self, game_id: str) -> bool:
        with self._lock:
            return self._records.pop(game_id, None) is not None

    def exists(self, game_id: str) -> bool:
        with self._lock:
            return game_id in self._records

    def list_ids(self) -> List[str]:
        with self._lock:
            return list(self._records.keys())

    def clear(self) -> None:
        """Drop every record (useful for testing)."""
        with self._lock:
            self._records.clear()


class FileStateStore(StateStore):
    """Stores each record as a JSON file in a directory."""

    FILE_SUFFIX = '.json'
    SAFE_ID_PATTERN = re.compile(r'^[a-zA-Z0-9_-]+$')

    def __init__(self, directory: str):
        self.directory = directory
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create storage directory {directory}: {e}") from e

    def _path(self, game_id: str) -> str:
        if not self.SAFE_ID_PATTERN.match(game_id):
            raise ValueError(f"Unsafe game id for file storage: {game_id!r}")
        return os.path.join(self.directory, game_id + self.FILE_SUFFIX)

    def load(self, game_id: str) -> Optional[Dict[str, Any]]:
        path = self._path(game_id)
        try:
            with open(path, 'r', encoding='utf-8') as file:
                return json.load(file)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read game {game_id}: {e}") from e

    def save(self, game_id: str, record: Dict[str, Any]) -> None:
        path = self._path(game_id)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as file:
                json.dump(record, file, separators=(',', ':'))
            # Rename is atomic, so readers see the old or the new record
            os.replace(tmp_path, path)
        except OSError as e:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Failed to write game {game_id}: {e}") from e

    def delete(self, game_id: str) -> bool:
        try:
            os.remove(self._path(game_id))
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(f"Failed to delete game {game_id}: {e}") from e

    def exists(self, game_id: str) -> bool:
        return os.path.exists(self._path(game_id))

    def list_ids(self) -> List[str]:
        try:
            names = os.listdir(self.directory)
        except OSError as e:
            raise StorageError(f"Failed to list games: {e}") from e
        return [name[:-len(self.FILE_SUFFIX)] for name in names if name.endswith(self.FILE_SUFFIX)]


def create_state_store(config: Optional[Dict[str, Any]] = None) -> StateStore:
    """
    Build the state store named by the configuration.

    Args:
        config: Application configuration dict (``storage_backend``,
            ``storage_dir``). Defaults to an in-memory store.
    """
    config = config or {}
    backend = config.get('storage_backend', 'memory')
    if backend == 'file':
        directory = config.get('storage_dir', 'games')
        logger.info(f"Using file state store in {directory}")
        return FileStateStore(directory)
    if backend != 'memory':
        raise ValueError(f"Unknown storage backend: {backend}")
    logger.info("Using in-memory state store")
    return InMemoryStateStore()
