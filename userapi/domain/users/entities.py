"""
Domain entities and store query vocabulary for the users context.

``UserRecord`` is the persisted row as the store hands it back.
``Predicate`` and ``Patch`` are the generic filter / assignment pieces
the store port consumes, so use cases never touch a query builder.
"""

from dataclasses import dataclass
from typing import Any

USER_ID_FIELD = "id"
WRITABLE_FIELDS = ("name", "username", "email", "password")


@dataclass(frozen=True)
class UserFields:
    """The writable fields of a user.

    The password is kept verbatim; hashing is out of scope for this
    service.
    """

    name: str
    username: str
    email: str
    password: str


@dataclass(frozen=True)
class UserRecord:
    """A user row as stored. ``id`` is assigned by the store."""

    id: str
    name: str
    username: str
    email: str
    password: str


@dataclass(frozen=True)
class Predicate:
    """Equality filter: ``field == value``."""

    field: str
    value: Any


@dataclass(frozen=True)
class Patch:
    """Single field assignment: ``field := value``."""

    field: str
    value: Any


def by_id(user_id: str) -> Predicate:
    """Return the predicate matching a single user by id."""
    return Predicate(field=USER_ID_FIELD, value=user_id)


def full_overwrite(fields: UserFields) -> list[Patch]:
    """Return one patch per writable field, in declaration order."""
    return [Patch(field=name, value=getattr(fields, name)) for name in WRITABLE_FIELDS]
