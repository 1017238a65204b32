"""
Use case: Create a user.

Input: CreateUserCommand (name, username, email, password)
Output: UserCreated
Side effects: One new row in the user store.
Failure cases: StoreError.
"""

import logging

from userapi.application.users.dtos import CreateUserCommand, UserCreated
from userapi.domain.users.entities import UserFields
from userapi.domain.users.ports import UserStore

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Persists a new user. No format or uniqueness checks are made here."""

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def execute(self, command: CreateUserCommand) -> UserCreated:
        """Create the user.

        Args:
            command: Field values for the new user.

        Returns:
            The stored public fields and a confirmation message. Neither
            the id nor the password is included.

        Raises:
            StoreError: If the store rejects or fails the insert.
        """
        record = self._store.create(
            UserFields(
                name=command.name,
                username=command.username,
                email=command.email,
                password=command.password,
            )
        )
        logger.info("Created user id=%s username=%s", record.id, record.username)
        return UserCreated(
            name=record.name,
            username=record.username,
            email=record.email,
        )
