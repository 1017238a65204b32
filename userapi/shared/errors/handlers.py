"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses:
- UserNotFoundError -> 404
- StoreError and any other failure -> 500 with an opaque incident code

No stack traces or store error text are exposed to clients; the details
are logged together with the incident code. Error responses carry the
secure headers even when rendered outside the middleware stack.
"""

import logging
import secrets

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userapi.domain.users.errors import StoreError, UserDomainError, UserNotFoundError
from userapi.shared.security.headers import apply_security_headers

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_405 = 405
HTTP_500 = 500

NOT_FOUND = "Not Found"
INTERNAL_ERROR = "Internal server error"


def _error_response(
    status_code: int,
    error: str,
    detail: str | None = None,
    code: str | None = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str] = {"error": error}
    if detail:
        body["detail"] = detail
    if code:
        body["code"] = code
    return apply_security_headers(JSONResponse(status_code=status_code, content=body))


def _new_incident_code() -> str:
    """Return an opaque reference shared by the response and the log."""
    return secrets.token_hex(8)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UserNotFoundError)
    async def handle_user_not_found(
        _request: Request, exc: UserNotFoundError
    ) -> JSONResponse:
        """Handle a missing get/update/delete target."""
        logger.warning("User not found: %s", exc.user_id)
        return _error_response(HTTP_404, "User not found")

    @app.exception_handler(StoreError)
    async def handle_store_error(
        _request: Request, exc: StoreError
    ) -> JSONResponse:
        """Handle any store failure other than a missing record."""
        code = _new_incident_code()
        logger.error("Store error [%s]: %s", code, exc.reason)
        return _error_response(HTTP_500, INTERNAL_ERROR, code=code)

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(
        _request: Request, exc: UserDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled users domain errors."""
        code = _new_incident_code()
        logger.error("Unhandled users domain error [%s]: %s", code, exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR, code=code)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render routing errors with the standard body.

        An unmatched method on a known path is reported as not found.
        """
        if exc.status_code in (HTTP_404, HTTP_405):
            return _error_response(HTTP_404, NOT_FOUND)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        code = _new_incident_code()
        logger.exception("Unexpected error [%s]: %s", code, type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR, code=code)
