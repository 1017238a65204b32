"""
Tests for the shared cross-cutting helpers.

Logging setup and security headers, in isolation.
"""

import logging

from starlette.responses import Response

from userapi.shared.logging import QUIET_LOGGERS, configure_logging, resolve_level
from userapi.shared.security.headers import SECURE_HEADERS, apply_security_headers


class TestLogging:
    """Tests for the logging setup."""

    def test_resolve_known_level(self) -> None:
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" WARNING ") == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        assert resolve_level("chatty") == logging.INFO

    def test_configure_caps_third_party_loggers(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        for name, cap in QUIET_LOGGERS.items():
            assert logging.getLogger(name).level == cap
        configure_logging("INFO")


class TestSecurityHeaders:
    """Tests for apply_security_headers."""

    def test_sets_every_header(self) -> None:
        response = apply_security_headers(Response("ok"))
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_keeps_headers_already_set(self) -> None:
        response = Response("ok", headers={"X-Frame-Options": "SAMEORIGIN"})
        apply_security_headers(response)
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
