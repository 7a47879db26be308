"""Listing models: the host form draft and the remote listing shapes.

Prices entered by hosts are in dollars; the API stores them in cents.
"""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field

from .base import RemoteModel
from .enums import ListingType

TITLE_MAX_LENGTH = 45
DESCRIPTION_MAX_LENGTH = 400


class ListingDraft(BaseModel):
    """Values collected by the host listing form, validated on submit.

    Every field is required. The address is split over four fields in the
    form and merged into one string by ``to_host_listing_input``.
    """

    type: ListingType = Field(..., description="Home type")
    num_of_guests: int = Field(..., ge=1, description="Max # of guests")
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str = Field(..., min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    address: str = Field(..., min_length=1, examples=["251 North Bristol Avenue"])
    city: str = Field(..., min_length=1, examples=["Los Angeles"])
    state: str = Field(..., min_length=1, examples=["California"])
    postal_code: str = Field(..., min_length=1, examples=["90210"])
    image: str = Field(..., min_length=1, description="Image as a base64 data URL")
    price: Decimal = Field(..., ge=0, description="Price in USD per day")

    @property
    def full_address(self) -> str:
        return f"{self.address}, {self.city}, {self.state}, {self.postal_code}"

    @property
    def price_cents(self) -> int:
        return int((self.price * 100).to_integral_value(rounding=ROUND_HALF_UP))

    def to_host_listing_input(self) -> "HostListingInput":
        """Build the mutation input: one address string and the price in cents."""
        return HostListingInput(
            type=self.type,
            num_of_guests=self.num_of_guests,
            title=self.title,
            description=self.description,
            address=self.full_address,
            image=self.image,
            price=self.price_cents,
        )


class HostListingInput(RemoteModel):
    """Input of the hostListing mutation."""

    type: ListingType
    num_of_guests: int = Field(..., ge=1)
    title: str
    description: str
    address: str = Field(..., description="Address, city, state and postal code")
    image: str
    price: int = Field(..., ge=0, description="Price in USD cents per day")


class CreatedListing(RemoteModel):
    id: str


class HostListingData(RemoteModel):
    """Result of the hostListing mutation."""

    host_listing: CreatedListing | None = None


class Listing(RemoteModel):
    """A listing as returned inside user page results."""

    id: str
    title: str
    image: str
    address: str
    price: int = Field(..., description="Price in USD cents per day")
    num_of_guests: int
