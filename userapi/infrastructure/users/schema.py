"""
Schema provisioning for the users table.

Run once at startup in debug builds, or on demand through
``python -m userapi.cli init-db``. Idempotent.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

USERS_TABLE = "users"

CREATE_USERS_TABLE = text(
    """
    CREATE TABLE IF NOT EXISTS users (
        id VARCHAR(36) PRIMARY KEY,
        name TEXT NOT NULL,
        username TEXT NOT NULL,
        email TEXT NOT NULL,
        password TEXT NOT NULL
    )
    """
)


def create_schema(engine: Engine) -> None:
    """Create the users table if it does not exist yet."""
    with engine.begin() as conn:
        conn.execute(CREATE_USERS_TABLE)
    logger.info("Schema ready: table %s", USERS_TABLE)
