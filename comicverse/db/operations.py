"""
Database CRUD operations.

Provides functions for reading, replacing, and deleting key-value
records within a namespace.
"""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from comicverse.models.db import KeyValueRecordDB


def get_record(session: Session, namespace: str, key: str) -> KeyValueRecordDB | None:
    """
    Get a stored record by namespace and key.

    Returns None if nothing is stored under this key.
    """
    result = session.execute(
        select(KeyValueRecordDB).where(
            KeyValueRecordDB.namespace == namespace,
            KeyValueRecordDB.key == key,
        )
    )
    return result.scalar_one_or_none()


def put_record(session: Session, namespace: str, key: str, value: str) -> KeyValueRecordDB:
    """
    Insert or replace a record.

    If a record with the same namespace+key exists, its value is overwritten.
    Otherwise a new record is created.
    """
    existing = get_record(session, namespace, key)

    if existing:
        existing.value = value
        session.flush()
        return existing

    record = KeyValueRecordDB(namespace=namespace, key=key, value=value)
    session.add(record)
    session.flush()
    return record


def delete_record(session: Session, namespace: str, key: str) -> bool:
    """
    Delete a record.

    Returns True if deleted, False if not found.
    """
    result = session.execute(
        delete(KeyValueRecordDB).where(
            KeyValueRecordDB.namespace == namespace,
            KeyValueRecordDB.key == key,
        )
    )
    # rowcount is available on DELETE results; type stubs incomplete
    return bool(result.rowcount)  # type: ignore[attr-defined]


def list_keys(session: Session, namespace: str) -> list[str]:
    """List all keys stored in a namespace, alphabetically."""
    result = session.execute(
        select(KeyValueRecordDB.key)
        .where(KeyValueRecordDB.namespace == namespace)
        .order_by(KeyValueRecordDB.key)
    )
    return list(result.scalars().all())
