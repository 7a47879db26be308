"""Pydantic models for TinyHouse data entities."""

from .enums import ListingType, UploadStatus
from .errors import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    STRIPE_OAUTH_ERROR_MESSAGES,
    ErrorCode,
    ErrorResponse,
    TinyHouseError,
    get_user_friendly_stripe_message,
)
from .listing import (
    CreatedListing,
    HostListingData,
    HostListingInput,
    Listing,
    ListingDraft,
)
from .stripe import (
    ConnectStripeData,
    DisconnectStripeData,
    StripeConnectRequest,
    StripeConnectResponse,
    WalletStatus,
)
from .user import Booking, User, UserBookings, UserData, UserListings
from .viewer import Viewer

__all__ = [
    # Enums
    "ListingType",
    "UploadStatus",
    # Viewer
    "Viewer",
    # Listing
    "CreatedListing",
    "HostListingData",
    "HostListingInput",
    "Listing",
    "ListingDraft",
    # User page
    "Booking",
    "User",
    "UserBookings",
    "UserData",
    "UserListings",
    # Stripe
    "ConnectStripeData",
    "DisconnectStripeData",
    "StripeConnectRequest",
    "StripeConnectResponse",
    "WalletStatus",
    # Errors
    "ErrorCode",
    "ErrorResponse",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "STRIPE_OAUTH_ERROR_MESSAGES",
    "TinyHouseError",
    "get_user_friendly_stripe_message",
]
