"""Models for the combined user page query."""

from typing import Optional

from pydantic import Field

from .base import RemoteModel
from .listing import Listing


class UserListings(RemoteModel):
    """One page of listings owned by a user."""

    total: int = Field(..., ge=0)
    result: list[Listing] = Field(default_factory=list)


class Booking(RemoteModel):
    """A booking made by a user."""

    id: str
    listing: Listing
    check_in: str = Field(..., description="Check in date (YYYY-MM-DD)")
    check_out: str = Field(..., description="Check out date (YYYY-MM-DD)")


class UserBookings(RemoteModel):
    """One page of bookings made by a user."""

    total: int = Field(..., ge=0)
    result: list[Booking] = Field(default_factory=list)


class User(RemoteModel):
    """A user profile with one page of listings and bookings.

    ``income`` and ``bookings`` are only returned when the viewer is the user.
    """

    id: str
    name: str
    avatar: str
    contact: str
    has_wallet: bool
    income: Optional[int] = Field(default=None, description="Income in USD cents")
    bookings: Optional[UserBookings] = None
    listings: Optional[UserListings] = None


class UserData(RemoteModel):
    """Result of the user query."""

    user: Optional[User] = None
