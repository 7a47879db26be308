"""Models for Stripe Connect account linking."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .base import RemoteModel


class WalletStatus(RemoteModel):
    has_wallet: Optional[bool] = None


class ConnectStripeData(RemoteModel):
    """Result of the connectStripe mutation."""

    connect_stripe: Optional[WalletStatus] = None


class DisconnectStripeData(RemoteModel):
    """Result of the disconnectStripe mutation."""

    disconnect_stripe: Optional[WalletStatus] = None


class StripeConnectRequest(BaseModel):
    """Request body for exchanging a Stripe OAuth authorization code."""

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={"examples": [{"code": "ac_123456789"}]},
    )

    code: str = Field(
        ...,
        min_length=1,
        description="Authorization code returned by Stripe's OAuth redirect",
        examples=["ac_123456789"],
    )


class StripeConnectResponse(BaseModel):
    """Outcome of a successful Stripe authorization code exchange."""

    model_config = ConfigDict(strict=True)

    has_wallet: bool = Field(..., description="Whether a Stripe account is now connected")
    stripe_user_id: Optional[str] = Field(
        default=None,
        description="Connected Stripe account ID (acct_xxx)",
        examples=["acct_1032D82eZvKYlo2C"],
    )
