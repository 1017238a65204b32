"""
Use case: List every user.

Input: none
Output: list[UserSummary], in store order
Side effects: None.
Failure cases: StoreError.
"""

import logging

from userapi.application.users.dtos import UserSummary
from userapi.domain.users.ports import UserStore

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Returns a summary projection of every stored user."""

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def execute(self) -> list[UserSummary]:
        records = self._store.find_all()
        logger.info("Listed %d users", len(records))
        return [
            UserSummary(
                id=record.id,
                name=record.name,
                username=record.username,
                email=record.email,
            )
            for record in records
        ]
