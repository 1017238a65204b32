"""
Port interfaces (ABCs) for the users context.

The store port is the only contract the use cases need from the outside
world. Infrastructure adapters implement it; use cases receive an
instance by constructor injection.
"""

from abc import ABC, abstractmethod
from typing import Optional

from userapi.domain.users.entities import Patch, Predicate, UserFields, UserRecord


class UserStore(ABC):
    """Port for persisting and retrieving users.

    A missing target is reported as ``None``. Every other failure is
    raised as ``StoreError``.
    """

    @abstractmethod
    def find_all(self) -> list[UserRecord]:
        """Return every user, in the order the store yields them."""
        raise NotImplementedError

    @abstractmethod
    def find_unique(self, where: Predicate) -> Optional[UserRecord]:
        """Return the single user matching ``where``, or None."""
        raise NotImplementedError

    @abstractmethod
    def create(self, fields: UserFields) -> UserRecord:
        """Persist a new user and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    def update(self, where: Predicate, patches: list[Patch]) -> Optional[UserRecord]:
        """Apply ``patches`` to the user matching ``where``.

        Returns:
            The updated user, or None if no user matched.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, where: Predicate) -> Optional[UserRecord]:
        """Remove the user matching ``where``.

        Returns:
            The removed user, or None if no user matched.
        """
        raise NotImplementedError
