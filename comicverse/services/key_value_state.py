"""
Persistent key-value state.

A small get/set/remove layer over a durable string store. Values are
serialized as JSON. The store is user-controlled local state, so reads
never fail: a missing key, a corrupt value, or an unreachable backend all
yield the caller's empty default.

Backends:
- InMemoryBackend: dict-backed, for tests and throwaway sessions
- SqlBackend: SQLAlchemy table scoped by a namespace (the "profile")
"""

import json
import logging
from collections.abc import Callable
from typing import Any, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from comicverse.db.database import get_session
from comicverse.db.operations import delete_record, get_record, put_record

logger = logging.getLogger(__name__)


class StorageUnavailableError(Exception):
    """Raised by a backend when the durable store cannot be reached."""

    pass


class KeyValueBackend(Protocol):
    """Durable string store. Implementations raise StorageUnavailableError on I/O failure."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class InMemoryBackend:
    """Key-value backend held in a dict. Contents are lost with the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class SqlBackend:
    """
    Key-value backend stored in the ``key_value_records`` table.

    Each call runs in its own short transaction. Database errors are
    re-raised as StorageUnavailableError.
    """

    def __init__(self, factory: sessionmaker[Session], namespace: str = "default"):
        self.factory = factory
        self.namespace = namespace

    def get(self, key: str) -> str | None:
        try:
            with get_session(self.factory) as session:
                record = get_record(session, self.namespace, key)
                return record.value if record else None
        except SQLAlchemyError as e:
            raise StorageUnavailableError(str(e)) from e

    def set(self, key: str, value: str) -> None:
        try:
            with get_session(self.factory) as session:
                put_record(session, self.namespace, key, value)
        except SQLAlchemyError as e:
            raise StorageUnavailableError(str(e)) from e

    def delete(self, key: str) -> None:
        try:
            with get_session(self.factory) as session:
                delete_record(session, self.namespace, key)
        except SQLAlchemyError as e:
            raise StorageUnavailableError(str(e)) from e


class PersistentState:
    """
    JSON read/write/remove over a KeyValueBackend.

    This is the only component that touches the durable substrate.
    """

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    def read(self, key: str, default: Callable[[], Any] = list) -> Any:
        """
        Read and deserialize the value stored under ``key``.

        Args:
            key: Storage key
            default: Factory for the empty default (called on every miss)

        Returns:
            The decoded JSON value, or ``default()`` if the key is absent,
            the stored text is not valid JSON, or the backend is unavailable.
        """
        try:
            raw = self.backend.get(key)
        except StorageUnavailableError as e:
            logger.warning("Durable store unavailable reading %s: %s", key, e)
            return default()

        if raw is None:
            return default()

        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding corrupt value stored under %s", key)
            return default()

    def write(self, key: str, value: Any) -> bool:
        """
        Serialize ``value`` and store it under ``key``, replacing any prior value.

        Returns:
            True if stored, False if the backend is unavailable.
        """
        try:
            self.backend.set(key, json.dumps(value))
        except StorageUnavailableError as e:
            logger.warning("Durable store unavailable writing %s: %s", key, e)
            return False
        return True

    def remove(self, key: str) -> bool:
        """
        Delete ``key`` if present. Missing keys are a no-op.

        Returns:
            True unless the backend is unavailable.
        """
        try:
            self.backend.delete(key)
        except StorageUnavailableError as e:
            logger.warning("Durable store unavailable removing %s: %s", key, e)
            return False
        return True
