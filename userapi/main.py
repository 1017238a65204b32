"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (index/health and users)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Schema provisioning in debug mode

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from userapi.core.config import settings
from userapi.infrastructure.users.schema import create_schema
from userapi.interfaces.index import router as index_router
from userapi.interfaces.users.dependencies import get_db_engine
from userapi.interfaces.users.router import router as users_router
from userapi.shared.errors.handlers import register_error_handlers
from userapi.shared.logging import configure_logging
from userapi.shared.security.headers import SecurityHeadersMiddleware
from userapi.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Provision the users table on startup when running in debug mode."""
    if settings.debug:
        logger.info("Debug mode: provisioning schema")
        create_schema(get_db_engine())
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(index_router)
    app.include_router(users_router)

    return app


app = create_app()
