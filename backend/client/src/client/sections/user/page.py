"""User page: profile plus paginated listings and bookings.

One ``user`` query loads everything; the listings and bookings page cursors
are part of its variables, so moving either cursor re-issues the query.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, Optional

from client.context import ViewerContext
from client.graphql import USER
from client.hooks import Query
from client.navigation import History
from client.notifications import Notifier
from client.sections.user.components import (
    UserBookingsView,
    UserListingsView,
    UserProfile,
    UserProfileView,
    render_user_bookings,
    render_user_listings,
)
from client.views import ErrorBanner, PageSkeleton, View
from shared.config import get_settings
from shared.models.user import UserData
from shared.services.graphql_client import GraphQLClient

logger = logging.getLogger(__name__)

PAGE_LIMIT = 4
STRIPE_ERROR_DESCRIPTION = (
    "We had an issue connecting with Stripe. Please try again soon!"
)
USER_ERROR_DESCRIPTION = (
    "This user may not exist or we've encountered an error. Please try again later."
)


class UserPageState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


class UserPageView(View):
    stripe_error_banner: Optional[ErrorBanner] = None
    error_banner: Optional[ErrorBanner] = None
    skeleton: Optional[PageSkeleton] = None
    profile: Optional[UserProfileView] = None
    listings: Optional[UserListingsView] = None
    bookings: Optional[UserBookingsView] = None


class UserPage:
    def __init__(
        self,
        user_id: str,
        viewer_context: ViewerContext,
        client: GraphQLClient,
        history: History,
        notifier: Notifier,
        *,
        connect_url: Optional[str] = None,
    ) -> None:
        self.user_id = user_id
        self._viewer_context = viewer_context
        self._history = history
        self.listings_page = 1
        self.bookings_page = 1
        self._stripe_error_dismissed = False

        self._user_query = Query(client, USER, UserData, operation_name="User")
        self.profile = UserProfile(
            viewer_context,
            client,
            notifier,
            on_refetch=self.handle_user_refetch,
            connect_url=connect_url or get_settings().stripe_connect_url,
        )

        self._renderers: dict[UserPageState, Callable[[], UserPageView]] = {
            UserPageState.LOADING: self._render_loading,
            UserPageState.ERROR: self._render_error,
            UserPageState.LOADED: self._render_loaded,
        }

    @property
    def variables(self) -> dict[str, Any]:
        return {
            "id": self.user_id,
            "bookingsPage": self.bookings_page,
            "listingsPage": self.listings_page,
            "limit": PAGE_LIMIT,
        }

    @property
    def state(self) -> UserPageState:
        # Before the first fetch there is nothing to show but the skeleton.
        if self._user_query.loading or not self._user_query.called:
            return UserPageState.LOADING
        if self._user_query.error is not None:
            return UserPageState.ERROR
        return UserPageState.LOADED

    @property
    def viewer_is_user(self) -> bool:
        return self._viewer_context.viewer.id == self.user_id

    @property
    def stripe_error(self) -> bool:
        if self._stripe_error_dismissed:
            return False
        return bool(self._history.location.query_param("stripe_error"))

    def mount(self) -> None:
        self._user_query.fetch(self.variables)

    def set_listings_page(self, page: int) -> None:
        if page < 1:
            raise ValueError(f"Page must be a positive integer, got {page}")
        self.listings_page = page
        self._user_query.fetch(self.variables)

    def set_bookings_page(self, page: int) -> None:
        if page < 1:
            raise ValueError(f"Page must be a positive integer, got {page}")
        self.bookings_page = page
        self._user_query.fetch(self.variables)

    def handle_user_refetch(self) -> None:
        self._user_query.refetch()

    def dismiss_stripe_error(self) -> None:
        self._stripe_error_dismissed = True

    def render(self) -> UserPageView:
        return self._renderers[self.state]()

    def _render_loading(self) -> UserPageView:
        return UserPageView(skeleton=PageSkeleton())

    def _render_error(self) -> UserPageView:
        return UserPageView(
            error_banner=ErrorBanner(description=USER_ERROR_DESCRIPTION),
            skeleton=PageSkeleton(),
        )

    def _render_loaded(self) -> UserPageView:
        data = self._user_query.data
        user = data.user if data is not None else None

        stripe_error_banner = (
            ErrorBanner(description=STRIPE_ERROR_DESCRIPTION, dismissible=True)
            if self.stripe_error
            else None
        )

        if user is None:
            return UserPageView(stripe_error_banner=stripe_error_banner)

        user_listings = user.listings

        # Bookings are gated on the listings collection, not on bookings.
        # Kept as-is; see "Known discrepancies" in DESIGN.md.
        listings_view = (
            render_user_listings(user_listings, self.listings_page, PAGE_LIMIT)
            if user_listings is not None
            else None
        )
        bookings_view = (
            render_user_bookings(user.bookings, self.bookings_page, PAGE_LIMIT)
            if user_listings is not None
            else None
        )

        return UserPageView(
            stripe_error_banner=stripe_error_banner,
            profile=self.profile.render(user, self.viewer_is_user),
            listings=listings_view,
            bookings=bookings_view,
        )
