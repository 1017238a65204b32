"""
Dependency injection for the users context.

Provides FastAPI dependency functions that wire the store adapter into
use cases via constructor injection. Tests replace ``get_user_store``
through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.engine import Engine

from userapi.application.users.create_user import CreateUserUseCase
from userapi.application.users.delete_user import DeleteUserUseCase
from userapi.application.users.get_user import GetUserUseCase
from userapi.application.users.list_users import ListUsersUseCase
from userapi.application.users.update_user import UpdateUserUseCase
from userapi.core.config import settings
from userapi.domain.users.ports import UserStore
from userapi.infrastructure.db import build_engine
from userapi.infrastructure.users.sql_user_store import SqlUserStore


@lru_cache(maxsize=1)
def get_db_engine() -> Engine:
    """Build the SQLAlchemy engine once; it owns the connection pool."""
    return build_engine(settings.database_url)


def get_user_store() -> UserStore:
    """Build the store adapter for one request."""
    return SqlUserStore(engine=get_db_engine())


def get_list_users_use_case(
    store: UserStore = Depends(get_user_store),
) -> ListUsersUseCase:
    """Build ListUsersUseCase with its store."""
    return ListUsersUseCase(store=store)


def get_get_user_use_case(
    store: UserStore = Depends(get_user_store),
) -> GetUserUseCase:
    """Build GetUserUseCase with its store."""
    return GetUserUseCase(store=store)


def get_create_user_use_case(
    store: UserStore = Depends(get_user_store),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with its store."""
    return CreateUserUseCase(store=store)


def get_update_user_use_case(
    store: UserStore = Depends(get_user_store),
) -> UpdateUserUseCase:
    """Build UpdateUserUseCase with its store."""
    return UpdateUserUseCase(store=store)


def get_delete_user_use_case(
    store: UserStore = Depends(get_user_store),
) -> DeleteUserUseCase:
    """Build DeleteUserUseCase with its store."""
    return DeleteUserUseCase(store=store)
