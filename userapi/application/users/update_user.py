"""
Use case: Overwrite an existing user.

Input: UpdateUserCommand (user_id, name, username, email, password)
Output: UserUpdated
Side effects: Every writable field of the row is replaced.
Failure cases: UserNotFoundError, StoreError.
"""

import logging

from userapi.application.users.dtos import UpdateUserCommand, UserUpdated
from userapi.domain.users.entities import UserFields, by_id, full_overwrite
from userapi.domain.users.errors import UserNotFoundError
from userapi.domain.users.ports import UserStore

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Replaces all writable fields of a user. There is no partial patch."""

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def execute(self, command: UpdateUserCommand) -> UserUpdated:
        """Run the overwrite.

        Args:
            command: Target id and the new value of every field.

        Returns:
            The stored fields after the update, password included.

        Raises:
            UserNotFoundError: If no user has this id.
            StoreError: If the store call itself fails.
        """
        if not command.user_id:
            raise UserNotFoundError(command.user_id)

        patches = full_overwrite(
            UserFields(
                name=command.name,
                username=command.username,
                email=command.email,
                password=command.password,
            )
        )
        record = self._store.update(by_id(command.user_id), patches)
        if record is None:
            raise UserNotFoundError(command.user_id)

        logger.info("Updated user id=%s", record.id)
        return UserUpdated(
            name=record.name,
            username=record.username,
            email=record.email,
            password=record.password,
        )
