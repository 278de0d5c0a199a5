"""Tests for the healthcheck endpoint."""

from __future__ import annotations

from orderly import Config, create_app


class TestConfig(Config):
    """Configuration used during testing."""

    TESTING = True


def create_test_app():
    """Create an application instance configured for tests."""

    return create_app(TestConfig)


def test_health_endpoint_returns_ok():
    """The healthcheck endpoint should identify the service."""

    app = create_test_app()
    client = app.test_client()

    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "service": "orderly-starter"}


def test_auth_callback_is_a_placeholder():
    client = create_test_app().test_client()

    response = client.get("/auth/callback?code=abc&shop=acme.myshopify.com")

    assert response.status_code == 200
    assert response.mimetype == "text/plain"
    assert "not implemented" in response.get_data(as_text=True)
