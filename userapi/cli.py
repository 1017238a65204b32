"""
Command line entry point.

Usage:
    # Serve the API (defaults to 0.0.0.0:5500)
    python -m userapi.cli serve

    # Serve on another port
    python -m userapi.cli serve --port 8080

    # Create the users table on the configured database
    python -m userapi.cli init-db
"""

import argparse
import logging
from typing import Optional

from userapi.core.config import settings
from userapi.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API with uvicorn."""
    import uvicorn

    logger.info("Starting API at http://%s:%d", args.host, args.port)
    uvicorn.run("userapi.main:app", host=args.host, port=args.port, reload=False)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Provision the users table on ``settings.database_url``."""
    from userapi.infrastructure.db import build_engine
    from userapi.infrastructure.users.schema import create_schema

    engine = build_engine(settings.database_url)
    try:
        create_schema(engine)
    finally:
        engine.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="User Directory API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)
    serve_parser.set_defaults(func=cmd_serve)

    init_parser = subparsers.add_parser("init-db", help="Create the users table")
    init_parser.set_defaults(func=cmd_init_db)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
