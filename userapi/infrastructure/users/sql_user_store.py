"""
Adapter: SQL user store.

Implements the UserStore port on top of a SQLAlchemy engine.
Every SQLAlchemy failure is re-raised as StoreError; a missing target
row is reported as None.
"""

import logging
from collections.abc import Mapping
from typing import Optional
from uuid import uuid4

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from userapi.domain.users.entities import (
    USER_ID_FIELD,
    WRITABLE_FIELDS,
    Patch,
    Predicate,
    UserFields,
    UserRecord,
)
from userapi.domain.users.errors import StoreError
from userapi.domain.users.ports import UserStore

logger = logging.getLogger(__name__)

USER_COLUMNS = (USER_ID_FIELD, *WRITABLE_FIELDS)
_SELECT_COLUMNS = ", ".join(USER_COLUMNS)


def _to_record(row: Mapping) -> UserRecord:
    """Map a result row to a UserRecord."""
    return UserRecord(
        id=str(row["id"]),
        name=row["name"],
        username=row["username"],
        email=row["email"],
        password=row["password"],
    )


def _where_clause(where: Predicate) -> str:
    """Render ``where`` as SQL. Only known columns are accepted."""
    if where.field not in USER_COLUMNS:
        raise StoreError(f"unknown filter field {where.field!r}")
    return f"{where.field} = :where_value"


def _set_clause(patches: list[Patch]) -> tuple[str, dict]:
    """Render ``patches`` as a SET list with its bound parameters."""
    if not patches:
        raise StoreError("update requires at least one patch")

    assignments = []
    params = {}
    for index, patch in enumerate(patches):
        if patch.field not in WRITABLE_FIELDS:
            raise StoreError(f"field {patch.field!r} cannot be updated")
        param = f"set_{index}"
        assignments.append(f"{patch.field} = :{param}")
        params[param] = patch.value
    return ", ".join(assignments), params


class SqlUserStore(UserStore):
    """Relational implementation of the user store.

    Reads and writes the ``users`` table. Statements use bound
    parameters only; column names come from a fixed whitelist.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_all(self) -> list[UserRecord]:
        query = text(f"SELECT {_SELECT_COLUMNS} FROM users")
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).mappings().fetchall()
        except SQLAlchemyError as exc:
            raise StoreError(f"find_all failed: {exc}") from exc
        return [_to_record(row) for row in rows]

    def find_unique(self, where: Predicate) -> Optional[UserRecord]:
        clause = _where_clause(where)
        try:
            with self._engine.connect() as conn:
                return self._select_one(conn, clause, where.value)
        except SQLAlchemyError as exc:
            raise StoreError(f"find_unique failed: {exc}") from exc

    def create(self, fields: UserFields) -> UserRecord:
        record = UserRecord(
            id=str(uuid4()),
            name=fields.name,
            username=fields.username,
            email=fields.email,
            password=fields.password,
        )
        query = text(
            f"INSERT INTO users ({_SELECT_COLUMNS}) "
            "VALUES (:id, :name, :username, :email, :password)"
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    query,
                    {
                        "id": record.id,
                        "name": record.name,
                        "username": record.username,
                        "email": record.email,
                        "password": record.password,
                    },
                )
        except SQLAlchemyError as exc:
            raise StoreError(f"create failed: {exc}") from exc
        return record

    def update(self, where: Predicate, patches: list[Patch]) -> Optional[UserRecord]:
        clause = _where_clause(where)
        assignments, params = _set_clause(patches)
        params["where_value"] = where.value
        query = text(f"UPDATE users SET {assignments} WHERE {clause}")
        try:
            with self._engine.begin() as conn:
                result = conn.execute(query, params)
                if result.rowcount == 0:
                    return None
                return self._select_one(conn, clause, where.value)
        except SQLAlchemyError as exc:
            raise StoreError(f"update failed: {exc}") from exc

    def delete(self, where: Predicate) -> Optional[UserRecord]:
        clause = _where_clause(where)
        query = text(f"DELETE FROM users WHERE {clause}")
        try:
            with self._engine.begin() as conn:
                record = self._select_one(conn, clause, where.value)
                if record is None:
                    return None
                result = conn.execute(query, {"where_value": where.value})
                if result.rowcount == 0:
                    # Removed by a concurrent transaction after the select
                    return None
                return record
        except SQLAlchemyError as exc:
            raise StoreError(f"delete failed: {exc}") from exc

    @staticmethod
    def _select_one(conn: Connection, clause: str, value) -> Optional[UserRecord]:
        query = text(f"SELECT {_SELECT_COLUMNS} FROM users WHERE {clause}")
        row = conn.execute(query, {"where_value": value}).mappings().first()
        return _to_record(row) if row else None
