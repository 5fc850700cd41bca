"""Pytest configuration and fixtures for the storefront checkout server tests.

This module provides reusable fixtures for testing:
- Settings with and without Stripe credentials
- A Stripe client mock patched where the service imports it
- API test clients built from explicit settings
- Stripe webhook signing helpers
"""

import hashlib
import hmac
import json
import time
from pathlib import Path
from typing import Any, Callable, Generator
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from storefront_api.main import create_app
from storefront_shared.config import Settings

# === Test Configuration ===

TEST_SECRET_KEY = "sk_test_abc123xyz"
TEST_WEBHOOK_SECRET = "whsec_test_secret_for_testing"
TEST_DOMAIN = "shop.example.com"
TEST_SESSION_ID = "cs_test_a1B2c3D4e5F6"


# === Webhook Helpers ===


def create_stripe_signature(
    payload: bytes,
    secret: str = TEST_WEBHOOK_SECRET,
    timestamp: int | None = None,
) -> str:
    """Create a valid Stripe webhook signature.

    Stripe signatures use HMAC-SHA256 with format: t={timestamp},v1={signature}
    """
    ts = str(int(time.time()) if timestamp is None else timestamp)
    signed_payload = f"{ts}.{payload.decode('utf-8')}"
    signature = hmac.new(
        secret.encode("utf-8"),
        signed_payload.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
    return f"t={ts},v1={signature}"


def create_event(
    event_type: str = "checkout.session.completed",
    event_id: str = "evt_1ABC123DEF456",
    data_object: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create a Stripe webhook event document."""
    return {
        "id": event_id,
        "object": "event",
        "type": event_type,
        "created": int(time.time()),
        "data": {"object": data_object if data_object is not None else {}},
    }


def create_checkout_completed_event(event_id: str = "evt_1ABC123DEF456") -> dict[str, Any]:
    """Create a checkout.session.completed webhook event."""
    return create_event(
        "checkout.session.completed",
        event_id,
        {
            "id": TEST_SESSION_ID,
            "object": "checkout.session",
            "amount_total": 2500,
            "currency": "usd",
            "payment_status": "paid",
            "customer_details": {
                "email": "buyer@example.com",
                "name": "Jane Buyer",
            },
            "metadata": {
                "product": "karma",
                "size": "M",
                "order_type": "pre-order",
                "delivery_date": "March 2026",
            },
        },
    )


def encode_event(event: dict[str, Any]) -> bytes:
    return json.dumps(event).encode("utf-8")


# === Settings Fixtures ===


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """A static root holding a minimal storefront."""
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<html>storefront</html>")
    (root / "success.html").write_text("<html>thanks</html>")
    return root


@pytest.fixture
def settings(static_dir: Path) -> Settings:
    """Fully configured settings."""
    return Settings(
        stripe_secret_key=SecretStr(TEST_SECRET_KEY),
        stripe_webhook_secret=SecretStr(TEST_WEBHOOK_SECRET),
        public_domain=TEST_DOMAIN,
        static_dir=static_dir,
    )


@pytest.fixture
def unconfigured_settings(static_dir: Path) -> Settings:
    """Settings with no Stripe credentials at all."""
    return Settings(static_dir=static_dir)


# === Stripe Fixtures ===


@pytest.fixture
def mock_stripe_client() -> Generator[MagicMock, None, None]:
    """Mock Stripe client for API calls.

    Patches StripeClient where stripe_service imports it. The class mock is
    available as ``mock_client.client_class``.
    """
    with patch("storefront_shared.services.stripe_service.StripeClient") as mock_client_class:
        mock_client = MagicMock()
        mock_session = MagicMock()
        mock_session.id = TEST_SESSION_ID
        mock_client.checkout.sessions.create.return_value = mock_session
        mock_client_class.return_value = mock_client
        mock_client.client_class = mock_client_class
        yield mock_client


# === API Fixtures ===


@pytest.fixture
def make_client() -> Callable[[Settings], TestClient]:
    """Factory for test clients bound to specific settings."""

    def _make(app_settings: Settings) -> TestClient:
        return TestClient(create_app(app_settings))

    return _make


@pytest.fixture
def client(settings: Settings, make_client: Callable[[Settings], TestClient]) -> TestClient:
    """Test client for a fully configured app."""
    return make_client(settings)
