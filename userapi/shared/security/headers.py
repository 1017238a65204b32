"""
Secure HTTP headers.

``SecurityHeadersMiddleware`` stamps the headers on every response that
passes through the middleware stack. Responses built by the catch-all
error handler are rendered outside that stack, so the error handlers
call ``apply_security_headers`` themselves.
"""

from collections.abc import Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS: Mapping[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
}


def apply_security_headers(
    response: Response, headers: Mapping[str, str] = SECURE_HEADERS
) -> Response:
    """Set any of ``headers`` the response does not already carry."""
    for name, value in headers.items():
        response.headers.setdefault(name, value)
    return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that sets restrictive default headers on responses.

    Args:
        app: The wrapped ASGI application.
        headers: Header set to apply; defaults to ``SECURE_HEADERS``.
    """

    def __init__(
        self, app: ASGIApp, headers: Mapping[str, str] = SECURE_HEADERS
    ) -> None:
        super().__init__(app)
        self._headers = dict(headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        return apply_security_headers(await call_next(request), self._headers)
