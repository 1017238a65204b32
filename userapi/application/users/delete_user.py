"""
Use case: Delete a user.

Input: DeleteUserCommand (user_id)
Output: UserDeleted
Side effects: The row is removed from the user store.
Failure cases: UserNotFoundError, StoreError.
"""

import logging

from userapi.application.users.dtos import DeleteUserCommand, UserDeleted
from userapi.domain.users.entities import by_id
from userapi.domain.users.errors import UserNotFoundError
from userapi.domain.users.ports import UserStore

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Removes a user and returns what was removed."""

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def execute(self, command: DeleteUserCommand) -> UserDeleted:
        """Run the deletion.

        Raises:
            UserNotFoundError: If no user has this id.
            StoreError: If the store call itself fails.
        """
        if not command.user_id:
            raise UserNotFoundError(command.user_id)

        record = self._store.delete(by_id(command.user_id))
        if record is None:
            raise UserNotFoundError(command.user_id)

        logger.info("Deleted user id=%s", record.id)
        return UserDeleted(
            name=record.name,
            username=record.username,
            email=record.email,
        )
