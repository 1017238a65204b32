"""
Use case: Get a single user by id.

Input: GetUserQuery (user_id)
Output: UserProfile
Side effects: None.
Failure cases: UserNotFoundError, StoreError.
"""

import logging

from userapi.application.users.dtos import GetUserQuery, UserProfile
from userapi.domain.users.entities import by_id
from userapi.domain.users.errors import UserNotFoundError
from userapi.domain.users.ports import UserStore

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Looks up one user and returns its profile projection."""

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def execute(self, query: GetUserQuery) -> UserProfile:
        """Run the lookup.

        Args:
            query: The id of the user to fetch.

        Returns:
            Name, username and email of the user.

        Raises:
            UserNotFoundError: If no user has this id.
            StoreError: If the store call itself fails.
        """
        if not query.user_id:
            raise UserNotFoundError(query.user_id)

        record = self._store.find_unique(by_id(query.user_id))
        if record is None:
            raise UserNotFoundError(query.user_id)

        logger.info("Fetched user id=%s", record.id)
        return UserProfile(
            name=record.name,
            username=record.username,
            email=record.email,
        )
