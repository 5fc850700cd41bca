"""Tests for the FastAPI application: health, middleware and static files."""

from pathlib import Path
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from storefront_api.main import create_app
from storefront_api.middleware.correlation import CORRELATION_ID_HEADER
from storefront_api.routes.static import resolve_static_file
from storefront_shared.config import Settings


class TestHealthCheck:
    """Tests for /api/health."""

    def test_reports_stripe_configured(self, client: TestClient):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"]
        assert data["stripeConfigured"] is True

    def test_reports_stripe_missing(
        self,
        unconfigured_settings: Settings,
        make_client: Callable[[Settings], TestClient],
    ):
        response = make_client(unconfigured_settings).get("/api/health")

        assert response.status_code == 200
        assert response.json()["stripeConfigured"] is False


class TestCorrelationId:
    """Tests for the correlation ID middleware."""

    def test_echoes_incoming_id(self, client: TestClient):
        response = client.get("/api/health", headers={CORRELATION_ID_HEADER: "req-42"})

        assert response.headers[CORRELATION_ID_HEADER] == "req-42"

    def test_generates_id_when_missing(self, client: TestClient):
        response = client.get("/api/health")

        assert response.headers[CORRELATION_ID_HEADER]


class TestCorsConfiguration:
    """Tests for CORS middleware configuration."""

    def test_preflight_allowed(self, client: TestClient):
        response = client.options(
            "/api/create-checkout-session",
            headers={
                "Origin": "https://elsewhere.example",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] in ("*", "https://elsewhere.example")


class TestStaticFiles:
    """Tests for front-end serving with index.html fallback."""

    def test_root_serves_index(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == 200
        assert "storefront" in response.text

    def test_existing_file_served(self, client: TestClient):
        response = client.get("/success.html")

        assert response.status_code == 200
        assert "thanks" in response.text

    def test_unknown_path_falls_back_to_index(self, client: TestClient):
        response = client.get("/products/karma")

        assert response.status_code == 200
        assert "storefront" in response.text

    def test_missing_index_returns_404(
        self,
        tmp_path: Path,
        make_client: Callable[[Settings], TestClient],
    ):
        client = make_client(Settings(static_dir=tmp_path / "empty"))

        assert client.get("/").status_code == 404

    def test_resolve_refuses_paths_outside_root(self, static_dir: Path):
        secret = static_dir.parent / "secret.txt"
        secret.write_text("nope")

        assert resolve_static_file(static_dir, "../secret.txt") is None
        assert resolve_static_file(static_dir, str(secret)) is None

    def test_resolve_finds_file(self, static_dir: Path):
        assert resolve_static_file(static_dir, "success.html") == (static_dir / "success.html").resolve()

    def test_resolve_ignores_directories(self, static_dir: Path):
        (static_dir / "img").mkdir()

        assert resolve_static_file(static_dir, "img") is None


class TestRoutesRegistered:
    """Tests that all expected routes are registered."""

    def test_api_routes_registered(self, settings: Settings):
        app = create_app(settings)
        route_paths = [route.path for route in app.routes]

        assert "/api/health" in route_paths
        assert "/api/create-checkout-session" in route_paths
        assert "/api/webhook" in route_paths

    def test_catch_all_registered_last(self, settings: Settings):
        app = create_app(settings)

        assert app.routes[-1].path == "/{path:path}"

    def test_services_attached_to_state(self, settings: Settings):
        app = create_app(settings)

        assert app.state.settings is settings
        assert app.state.stripe_service is not None
        assert app.state.webhook_handler is not None

    @pytest.mark.parametrize("path", ["/docs", "/openapi.json"])
    def test_docs_available(self, client: TestClient, path: str):
        assert client.get(path).status_code == 200
