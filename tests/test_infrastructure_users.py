"""
Tests for the SQL user store adapter.

Runs the adapter against an in-memory SQLite database.
"""

import pytest
from sqlalchemy import inspect, text

from userapi.domain.users.entities import (
    Patch,
    Predicate,
    UserFields,
    by_id,
    full_overwrite,
)
from userapi.domain.users.errors import StoreError
from userapi.infrastructure.db import build_engine
from userapi.infrastructure.users.schema import create_schema
from userapi.infrastructure.users.sql_user_store import SqlUserStore

ANN = UserFields(name="Ann", username="ann1", email="ann@x.com", password="p")
BOB = UserFields(name="Bob", username="bob", email="bob@x.com", password="q")


class TestSchema:
    """Tests for schema provisioning."""

    def test_create_schema_is_idempotent(self, engine) -> None:
        create_schema(engine)
        columns = {c["name"] for c in inspect(engine).get_columns("users")}
        assert columns == {"id", "name", "username", "email", "password"}

    def test_file_database_is_shared_between_engines(self, tmp_path) -> None:
        url = f"sqlite:///{tmp_path / 'users.db'}"
        first = build_engine(url)
        create_schema(first)
        SqlUserStore(first).create(ANN)
        first.dispose()

        second = build_engine(url)
        assert len(SqlUserStore(second).find_all()) == 1
        second.dispose()


class TestSqlUserStore:
    """Tests for SqlUserStore against SQLite."""

    def test_find_all_on_empty_table(self, store) -> None:
        assert store.find_all() == []

    def test_create_assigns_unique_ids(self, store) -> None:
        first = store.create(ANN)
        second = store.create(ANN)
        assert first.id and second.id
        assert first.id != second.id
        assert first.name == "Ann"
        assert first.password == "p"

    def test_find_unique_returns_created_record(self, store) -> None:
        created = store.create(ANN)
        assert store.find_unique(by_id(created.id)) == created

    def test_find_unique_missing_returns_none(self, store) -> None:
        assert store.find_unique(by_id("missing")) is None

    def test_find_all_returns_every_record(self, store) -> None:
        ann = store.create(ANN)
        bob = store.create(BOB)
        assert {r.id for r in store.find_all()} == {ann.id, bob.id}

    def test_update_overwrites_fields(self, store) -> None:
        created = store.create(ANN)
        updated = store.update(by_id(created.id), full_overwrite(BOB))
        assert updated.id == created.id
        assert (updated.name, updated.username, updated.email, updated.password) == (
            "Bob",
            "bob",
            "bob@x.com",
            "q",
        )
        assert store.find_unique(by_id(created.id)) == updated

    def test_update_missing_returns_none(self, store) -> None:
        assert store.update(by_id("missing"), full_overwrite(BOB)) is None

    def test_delete_returns_removed_record(self, store) -> None:
        created = store.create(ANN)
        assert store.delete(by_id(created.id)) == created
        assert store.find_unique(by_id(created.id)) is None

    def test_delete_missing_returns_none(self, store) -> None:
        assert store.delete(by_id("missing")) is None

    def test_delete_of_row_removed_after_select_returns_none(
        self, store, monkeypatch
    ) -> None:
        """A row deleted by another transaction after the lookup is reported
        as missing, not as deleted twice."""
        created = store.create(ANN)

        def select_then_vanish(conn, clause, value):
            record = SqlUserStore._select_one(conn, clause, value)
            conn.execute(text("DELETE FROM users WHERE id = :id"), {"id": value})
            return record

        monkeypatch.setattr(store, "_select_one", select_then_vanish)

        assert store.delete(by_id(created.id)) is None

    def test_unknown_filter_field_raises_store_error(self, store) -> None:
        with pytest.raises(StoreError):
            store.find_unique(Predicate(field="id; DROP TABLE users", value="x"))

    def test_id_cannot_be_patched(self, store) -> None:
        created = store.create(ANN)
        with pytest.raises(StoreError):
            store.update(by_id(created.id), [Patch(field="id", value="other")])

    def test_empty_patch_list_raises_store_error(self, store) -> None:
        with pytest.raises(StoreError):
            store.update(by_id("x"), [])

    def test_database_failure_becomes_store_error(self, engine, store) -> None:
        with engine.begin() as conn:
            conn.execute(text("DROP TABLE users"))

        with pytest.raises(StoreError) as excinfo:
            store.find_all()
        assert "find_all failed" in excinfo.value.reason

        for call in (
            lambda: store.find_unique(by_id("x")),
            lambda: store.create(ANN),
            lambda: store.update(by_id("x"), full_overwrite(ANN)),
            lambda: store.delete(by_id("x")),
        ):
            with pytest.raises(StoreError):
                call()
