"""Unit tests for Stripe Connect API routes.

Tests for:
- POST /api/stripe/connect - Authorization code exchange
"""

from typing import Generator
from unittest.mock import MagicMock

import pytest
import stripe
from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK
from stripe.oauth_error import InvalidGrantError

from api.dependencies import get_stripe
from api.main import app
from shared.services.stripe_service import StripeService, StripeServiceError

CONNECT_URL = "/api/stripe/connect"


@pytest.fixture
def mock_stripe_service() -> Generator[MagicMock, None, None]:
    """StripeService double injected through dependency overrides."""
    service = MagicMock(spec=StripeService)
    app.dependency_overrides[get_stripe] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture
def client(mock_stripe_service) -> TestClient:
    return TestClient(app)


class TestConnectStripe:
    """Tests for POST /api/stripe/connect."""

    def test_connects_account(self, client: TestClient, mock_stripe_service) -> None:
        """A successful exchange reports the new wallet."""
        mock_stripe_service.connect.return_value = MagicMock(stripe_user_id="acct_1032D82eZvKYlo2C")

        response = client.post(CONNECT_URL, json={"code": "ac_123456789"})

        assert response.status_code == HTTP_200_OK
        assert response.json() == {"has_wallet": True, "stripe_user_id": "acct_1032D82eZvKYlo2C"}
        mock_stripe_service.connect.assert_called_once_with("ac_123456789")

    def test_no_account_id_means_no_wallet(self, client: TestClient, mock_stripe_service) -> None:
        mock_stripe_service.connect.return_value = MagicMock(stripe_user_id=None)

        response = client.post(CONNECT_URL, json={"code": "ac_123456789"})

        assert response.status_code == HTTP_200_OK
        assert response.json()["has_wallet"] is False

    def test_rejected_code_returns_402(self, client: TestClient, mock_stripe_service) -> None:
        mock_stripe_service.connect.side_effect = InvalidGrantError(
            "invalid_grant", "Authorization code does not exist: ac_123456789"
        )

        response = client.post(CONNECT_URL, json={"code": "ac_123456789"})

        assert response.status_code == 402
        data = response.json()
        assert data["success"] is False
        assert data["error_code"] == "ERR_STRIPE_001"
        assert data["details"]["reason"] == "The authorization code has expired or was already used."

    def test_stripe_api_error_returns_502(self, client: TestClient, mock_stripe_service) -> None:
        mock_stripe_service.connect.side_effect = stripe.APIConnectionError("Network down")

        response = client.post(CONNECT_URL, json={"code": "ac_123456789"})

        assert response.status_code == 502
        assert response.json()["error_code"] == "ERR_STRIPE_003"

    def test_missing_credentials_return_503(self, client: TestClient, mock_stripe_service) -> None:
        mock_stripe_service.connect.side_effect = StripeServiceError(
            "Failed to initialize Stripe client: SSM parameter not found"
        )

        response = client.post(CONNECT_URL, json={"code": "ac_123456789"})

        assert response.status_code == 503
        assert response.json()["error_code"] == "ERR_STRIPE_002"

    @pytest.mark.parametrize("body", [{}, {"code": ""}, {"code": 123}])
    def test_invalid_body_returns_422(self, client: TestClient, mock_stripe_service, body) -> None:
        response = client.post(CONNECT_URL, json=body)

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "ERR_VALIDATION"
        assert data["details"]
        mock_stripe_service.connect.assert_not_called()

    def test_echoes_correlation_id(self, client: TestClient, mock_stripe_service) -> None:
        mock_stripe_service.connect.return_value = MagicMock(stripe_user_id="acct_1")

        response = client.post(
            CONNECT_URL,
            json={"code": "ac_123456789"},
            headers={"X-Correlation-ID": "req-42"},
        )

        assert response.headers["X-Correlation-ID"] == "req-42"
