"""Tests for database CRUD operations."""

from pathlib import Path

import pytest
from sqlalchemy import Engine, inspect
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from comicverse.db import database
from comicverse.db.database import (
    create_db_engine,
    create_session_factory,
    drop_db,
    get_session,
    init_db,
)
from comicverse.db.operations import delete_record, get_record, list_keys, put_record


class TestRecordOperations:
    def test_put_record(self, session: Session) -> None:
        """Can store a new record."""
        record = put_record(session, "default", "comicverse_cart", "[]")

        assert record.id is not None
        assert record.namespace == "default"
        assert record.value == "[]"

    def test_get_record(self, session: Session) -> None:
        put_record(session, "default", "comicverse_cart", "[]")
        session.commit()

        record = get_record(session, "default", "comicverse_cart")

        assert record is not None
        assert record.value == "[]"

    def test_get_record_not_found(self, session: Session) -> None:
        """Returns None for a key that was never written."""
        assert get_record(session, "default", "nothing") is None

    def test_put_record_replaces_value(self, session: Session) -> None:
        """Writing the same key twice keeps one row with the latest value."""
        first = put_record(session, "default", "k", '["001"]')
        session.commit()

        second = put_record(session, "default", "k", '["002"]')
        session.commit()

        assert second.id == first.id
        assert list_keys(session, "default") == ["k"]
        record = get_record(session, "default", "k")
        assert record is not None
        assert record.value == '["002"]'

    def test_same_key_in_different_namespaces(self, session: Session) -> None:
        put_record(session, "alice", "k", "a")
        put_record(session, "bob", "k", "b")
        session.commit()

        alice = get_record(session, "alice", "k")
        bob = get_record(session, "bob", "k")
        assert alice is not None and alice.value == "a"
        assert bob is not None and bob.value == "b"

    def test_delete_record(self, session: Session) -> None:
        put_record(session, "default", "k", "[]")
        session.commit()

        deleted = delete_record(session, "default", "k")
        session.commit()

        assert deleted is True
        assert get_record(session, "default", "k") is None

    def test_delete_record_not_found(self, session: Session) -> None:
        """Returns False when deleting a missing key."""
        assert delete_record(session, "default", "nothing") is False

    def test_list_keys_sorted(self, session: Session) -> None:
        put_record(session, "default", "comicverse_wishlist", "[]")
        put_record(session, "default", "comicverse_cart", "[]")
        put_record(session, "other", "ignored", "[]")
        session.commit()

        assert list_keys(session, "default") == ["comicverse_cart", "comicverse_wishlist"]


class TestSessionManagement:
    def test_get_session_commits(self, session_factory: sessionmaker[Session]) -> None:
        with get_session(session_factory) as session:
            put_record(session, "default", "k", "[]")

        with get_session(session_factory) as session:
            assert get_record(session, "default", "k") is not None

    def test_get_session_rolls_back_on_error(
        self, engine: Engine, session_factory: sessionmaker[Session]
    ) -> None:
        drop_db(engine)

        with pytest.raises(OperationalError):
            with get_session(session_factory) as session:
                put_record(session, "default", "k", "[]")

    def test_init_and_drop(self, engine: Engine) -> None:
        drop_db(engine)
        assert "key_value_records" not in inspect(engine).get_table_names()

        init_db(engine)
        assert "key_value_records" in inspect(engine).get_table_names()

    def test_no_engine_at_import(self) -> None:
        """Importing the module builds no engine or session factory."""
        assert not hasattr(database, "engine")
        assert not hasattr(database, "session_factory")

    def test_create_db_engine_uses_given_url(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'store.db'}"
        engine = create_db_engine(url)
        try:
            assert str(engine.url) == url
        finally:
            engine.dispose()

    def test_session_factory_binds_engine(self, engine: Engine) -> None:
        factory = create_session_factory(engine)

        with get_session(factory) as session:
            put_record(session, "default", "k", "[]")
            assert session.get_bind() is engine

        with get_session(factory) as session:
            assert get_record(session, "default", "k") is not None
