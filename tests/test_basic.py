"""
Basic application tests.

Validates that the FastAPI app starts correctly, the index and health
endpoints respond, and security headers are set.
"""

from fastapi.testclient import TestClient

from userapi.main import app
from userapi.shared.security.headers import SECURE_HEADERS

client = TestClient(app)


class TestIndexEndpoint:
    """Tests for GET /."""

    def test_index_returns_plain_text(self) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "API is running"
        assert response.headers["content-type"].startswith("text/plain")


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert "version" in body


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self) -> None:
        response = client.get("/")
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_security_headers_on_not_found(self) -> None:
        response = client.get("/missing")
        assert response.status_code == 404
        assert response.headers["X-Frame-Options"] == "DENY"


class TestDocs:
    """Docs are only served in debug mode."""

    def test_docs_disabled_by_default(self) -> None:
        assert client.get("/docs").status_code == 404


class TestWsgi:
    """Tests for the WSGI wrapper."""

    def test_application_wraps_asgi_app(self) -> None:
        from a2wsgi import ASGIMiddleware

        from userapi.wsgi import application

        assert isinstance(application, ASGIMiddleware)
