"""Sub-views of the user page: profile, listings and bookings."""

import logging
import math
from collections.abc import Callable
from typing import Optional

from client.context import ViewerContext
from client.graphql import DISCONNECT_STRIPE
from client.hooks import Mutation
from client.notifications import Notifier
from client.views import View, format_listing_price
from shared.models.listing import Listing
from shared.models.stripe import DisconnectStripeData
from shared.models.user import User, UserBookings, UserListings
from shared.services.graphql_client import GraphQLClient, RemoteDataError
from shared.utils.logging import log_stripe_operation

logger = logging.getLogger(__name__)

DISCONNECTED_MESSAGE = "You've successfully disconnected from Stripe!"
DISCONNECTED_DESCRIPTION = "You'll have to reconnect with Stripe to continue to create listings."
DISCONNECT_FAILED_MESSAGE = (
    "Sorry! We weren't able to disconnect you from Stripe. Please try again later!"
)


class UserProfileView(View):
    name: str
    avatar: str
    contact: str
    viewer_is_user: bool
    has_wallet: bool
    income: Optional[str] = None
    connect_url: Optional[str] = None
    disconnecting: bool = False


class ListingItemView(View):
    id: str
    title: str
    image: str
    address: str
    price: str
    num_of_guests: int
    href: str


class BookingItemView(View):
    id: str
    listing: ListingItemView
    check_in: str
    check_out: str


class PaginatedView(View):
    total: int
    page: int
    limit: int

    @property
    def page_count(self) -> int:
        return max(1, math.ceil(self.total / self.limit))


class UserListingsView(PaginatedView):
    title: str = "Listings"
    empty_text: str = "This user doesn't have any listings yet!"
    items: list[ListingItemView]


class UserBookingsView(PaginatedView):
    title: str = "Bookings"
    empty_text: str = "You haven't made any bookings!"
    items: list[BookingItemView]


class UserProfile:
    """Profile card with the Stripe connect/disconnect actions.

    ``on_refetch`` reloads the user page after a successful disconnect.
    """

    def __init__(
        self,
        viewer_context: ViewerContext,
        client: GraphQLClient,
        notifier: Notifier,
        on_refetch: Callable[[], object],
        connect_url: Optional[str] = None,
    ) -> None:
        self._viewer_context = viewer_context
        self._notifier = notifier
        self._on_refetch = on_refetch
        self._connect_url = connect_url

        self._disconnect_stripe = Mutation(
            client,
            DISCONNECT_STRIPE,
            DisconnectStripeData,
            operation_name="DisconnectStripe",
            on_completed=self._on_disconnected,
            on_error=self._on_disconnect_failed,
        )

    def disconnect_stripe(self) -> None:
        self._disconnect_stripe()

    def _on_disconnected(self, data: DisconnectStripeData) -> None:
        if data.disconnect_stripe is None:
            return
        self._viewer_context.update_viewer(has_wallet=data.disconnect_stripe.has_wallet)
        log_stripe_operation(logger, "disconnect", viewer_id=self._viewer_context.viewer.id)
        self._notifier.success(DISCONNECTED_MESSAGE, DISCONNECTED_DESCRIPTION)
        self._on_refetch()

    def _on_disconnect_failed(self, error: RemoteDataError) -> None:
        log_stripe_operation(
            logger,
            "disconnect",
            viewer_id=self._viewer_context.viewer.id,
            error=str(error),
        )
        self._notifier.error(DISCONNECT_FAILED_MESSAGE)

    def render(self, user: User, viewer_is_user: bool) -> UserProfileView:
        show_wallet = viewer_is_user and user.has_wallet
        return UserProfileView(
            name=user.name,
            avatar=user.avatar,
            contact=user.contact,
            viewer_is_user=viewer_is_user,
            has_wallet=show_wallet,
            income=(
                format_listing_price(user.income)
                if show_wallet and user.income is not None
                else None
            ),
            connect_url=self._connect_url if viewer_is_user and not show_wallet else None,
            disconnecting=self._disconnect_stripe.loading,
        )


def _listing_item(listing: Listing) -> ListingItemView:
    return ListingItemView(
        id=listing.id,
        title=listing.title,
        image=listing.image,
        address=listing.address,
        price=format_listing_price(listing.price),
        num_of_guests=listing.num_of_guests,
        href=f"/listing/{listing.id}",
    )


def render_user_listings(listings: UserListings, page: int, limit: int) -> UserListingsView:
    return UserListingsView(
        total=listings.total,
        page=page,
        limit=limit,
        items=[_listing_item(listing) for listing in listings.result],
    )


def render_user_bookings(
    bookings: Optional[UserBookings], page: int, limit: int
) -> UserBookingsView:
    """Render a bookings page; a missing collection renders as empty."""
    if bookings is None:
        return UserBookingsView(total=0, page=page, limit=limit, items=[])

    return UserBookingsView(
        total=bookings.total,
        page=page,
        limit=limit,
        items=[
            BookingItemView(
                id=booking.id,
                listing=_listing_item(booking.listing),
                check_in=booking.check_in,
                check_out=booking.check_out,
            )
            for booking in bookings.result
        ],
    )
