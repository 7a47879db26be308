"""Stripe Connect service for linking host payout accounts.

Provides integration with Stripe using the v8+ StripeClient pattern.
The secret key comes from ``S_SECRET_KEY`` or, when unset, from SSM
Parameter Store.
"""

import logging
from functools import lru_cache

from stripe import StripeClient

from shared.config import Settings, get_settings

from .ssm_service import SSMServiceError, get_ssm_service

logger = logging.getLogger(__name__)

AUTHORIZATION_CODE_GRANT = "authorization_code"


class StripeServiceError(Exception):
    """Raised when the Stripe client cannot be set up."""


class StripeService:
    """Service for Stripe Connect operations.

    Usage:
        stripe_svc = get_stripe_service()
        token = stripe_svc.connect("ac_123456789")
        wallet_id = token["stripe_user_id"]
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the service.

        Args:
            settings: Runtime settings. Defaults to the process settings.
        """
        self._settings = settings or get_settings()
        self._client: StripeClient | None = None

    def _get_secret_key(self) -> str:
        if self._settings.stripe_secret_key:
            return self._settings.stripe_secret_key
        try:
            return get_ssm_service().get_parameter(
                self._settings.stripe_secret_key_parameter
            )
        except SSMServiceError as e:
            raise StripeServiceError(f"Failed to initialize Stripe client: {e}") from e

    def _get_client(self) -> StripeClient:
        """Get or create the Stripe client (lazy initialization).

        Raises:
            StripeServiceError: If credentials cannot be retrieved.
        """
        if self._client is None:
            self._client = StripeClient(self._get_secret_key())
            logger.info(
                "Stripe client initialized for environment: %s",
                self._settings.environment,
            )
        return self._client

    def connect(self, code: str):
        """Exchange an OAuth authorization code for the connected account's credentials.

        The response is returned as Stripe sent it; errors raised by the SDK
        propagate unchanged.

        Args:
            code: Authorization code from the Stripe OAuth redirect.

        Returns:
            Stripe's OAuth token response (includes ``stripe_user_id``).
        """
        client = self._get_client()
        return client.oauth.token(
            params={"grant_type": AUTHORIZATION_CODE_GRANT, "code": code}
        )


@lru_cache(maxsize=1)
def get_stripe_service() -> StripeService:
    """Get the shared StripeService instance (singleton pattern)."""
    return StripeService()
