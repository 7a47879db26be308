"""Stripe Connect endpoints.

Provides REST endpoints for:
- Exchanging a Stripe OAuth authorization code for a connected account
"""

import logging

import stripe
from fastapi import APIRouter, Depends
from starlette.status import HTTP_200_OK
from stripe.oauth_error import OAuthError

from api.dependencies import get_stripe
from shared.models.errors import ErrorCode, TinyHouseError, get_user_friendly_stripe_message
from shared.models.stripe import StripeConnectRequest, StripeConnectResponse
from shared.services.stripe_service import StripeService, StripeServiceError
from shared.utils.logging import log_stripe_operation

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stripe"])


@router.post(
    "/stripe/connect",
    summary="Connect a Stripe account",
    description="""
Exchange the authorization code from Stripe's OAuth redirect for the
host's connected account.

**Notes:**
- Each code can be exchanged once; Stripe rejects reused codes
- `has_wallet` is true when Stripe returned a connected account ID
""",
    response_description="Wallet status after the exchange",
    response_model=StripeConnectResponse,
    status_code=HTTP_200_OK,
    responses={
        200: {"description": "Stripe account connected"},
        402: {"description": "Stripe rejected the authorization code"},
        422: {"description": "Missing or malformed code"},
        502: {"description": "Stripe API error"},
        503: {"description": "Stripe credentials not configured"},
    },
)
async def connect_stripe(
    body: StripeConnectRequest,
    stripe_service: StripeService = Depends(get_stripe),
) -> StripeConnectResponse:
    try:
        token = stripe_service.connect(body.code)
    except StripeServiceError as e:
        log_stripe_operation(logger, "connect", error=str(e))
        raise TinyHouseError(code=ErrorCode.STRIPE_NOT_CONFIGURED) from e
    except OAuthError as e:
        log_stripe_operation(logger, "connect", error=str(e), stripe_error_code=e.code)
        raise TinyHouseError(
            code=ErrorCode.STRIPE_CONNECT_FAILED,
            details={"reason": get_user_friendly_stripe_message(e.code)},
        ) from e
    except stripe.StripeError as e:
        log_stripe_operation(logger, "connect", error=str(e))
        raise TinyHouseError(code=ErrorCode.STRIPE_API_ERROR) from e

    stripe_user_id = getattr(token, "stripe_user_id", None)
    log_stripe_operation(logger, "connect", stripe_user_id=stripe_user_id)

    return StripeConnectResponse(
        has_wallet=bool(stripe_user_id),
        stripe_user_id=stripe_user_id,
    )
