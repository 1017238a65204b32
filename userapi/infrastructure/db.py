"""
SQLAlchemy engine factory.

SQLite is accepted for local development and tests; any other URL
(PostgreSQL in production) gets a pre-pinged connection pool.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

_IN_MEMORY_DATABASES = (None, "", ":memory:")


def build_engine(database_url: str) -> Engine:
    """Build an engine for ``database_url``.

    In-memory SQLite uses a single shared connection so every session
    sees the same database.

    Args:
        database_url: SQLAlchemy database URL.

    Returns:
        A configured Engine.
    """
    url = make_url(database_url)
    logger.info("Creating database engine for backend=%s", url.get_backend_name())

    if url.get_backend_name() == "sqlite":
        connect_args = {"check_same_thread": False}
        if url.database in _IN_MEMORY_DATABASES:
            return create_engine(
                url, connect_args=connect_args, poolclass=StaticPool
            )
        return create_engine(url, connect_args=connect_args)

    return create_engine(url, pool_pre_ping=True)
