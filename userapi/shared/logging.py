"""
Logging setup.

One stdout handler on the root logger, configured once at app creation
and again by the CLI. Passwords and request bodies are never logged;
raw store errors appear only in server-side log lines.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers capped regardless of the configured level
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "uvicorn.error": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
}


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value; unknown names mean INFO."""
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Install the stdout handler and cap noisy third-party loggers.

    Args:
        level: The log level name (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name, cap in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(cap)
