"""Unit tests for the user page and its profile card.

Tests for:
- User query variables and pagination
- Loading, error and loaded views
- Stripe error banner
- Stripe disconnect from the profile card
"""

import copy

import httpx
import pytest

from client.navigation import History
from client.notifications import NotificationLevel
from client.sections.user import PAGE_LIMIT, UserPage, UserPageState
from client.sections.user.components import (
    DISCONNECT_FAILED_MESSAGE,
    DISCONNECTED_MESSAGE,
)
from client.sections.user.page import STRIPE_ERROR_DESCRIPTION, USER_ERROR_DESCRIPTION
from client.views import PageSkeleton
from shared.services.graphql_client import GraphQLClient, RemoteDataError

OTHER_USER_ID = "5d378db94e84753160e08b57"
CONNECT_URL = "https://connect.stripe.com/oauth/authorize?response_type=code&client_id=ca_1&scope=read_write"


@pytest.fixture
def make_page(viewer_context, graphql_client, notifier):
    def _make(user_id=None, url=None, history=None) -> UserPage:
        user_id = user_id or viewer_context.viewer.id
        return UserPage(
            user_id,
            viewer_context,
            graphql_client,
            history or History(url or f"/user/{user_id}"),
            notifier,
            connect_url=CONNECT_URL,
        )

    return _make


@pytest.fixture
def page(make_page, graphql_client, sample_user_data) -> UserPage:
    graphql_client.execute.return_value = sample_user_data
    user_page = make_page()
    user_page.mount()
    return user_page


def last_variables(graphql_client) -> dict:
    return graphql_client.execute.call_args.args[1]


class TestVariables:
    def test_initial_fetch(self, page, graphql_client, viewer_context) -> None:
        assert last_variables(graphql_client) == {
            "id": viewer_context.viewer.id,
            "bookingsPage": 1,
            "listingsPage": 1,
            "limit": PAGE_LIMIT,
        }

    def test_listings_page_keeps_bookings_page(self, page, graphql_client) -> None:
        page.set_bookings_page(2)
        page.set_listings_page(3)

        variables = last_variables(graphql_client)
        assert (variables["listingsPage"], variables["bookingsPage"]) == (3, 2)
        assert graphql_client.execute.call_count == 3

    def test_rejects_non_positive_page(self, page) -> None:
        with pytest.raises(ValueError):
            page.set_listings_page(0)

    def test_refetch_uses_unchanged_variables(self, page, graphql_client) -> None:
        page.set_listings_page(2)

        page.handle_user_refetch()

        assert graphql_client.execute.call_args_list[-1] == graphql_client.execute.call_args_list[-2]


class TestRender:
    def test_loading_before_first_result(self, make_page, graphql_client) -> None:
        user_page = make_page()
        assert user_page.render().skeleton == PageSkeleton()

        observed = []
        graphql_client.execute.side_effect = lambda *args: observed.append(user_page.state) or {}
        user_page.mount()

        assert observed == [UserPageState.LOADING]

    def test_error_view(self, make_page, graphql_client) -> None:
        graphql_client.execute.side_effect = RemoteDataError("failed to query user")
        user_page = make_page()
        user_page.mount()

        view = user_page.render()

        assert user_page.state == UserPageState.ERROR
        assert view.error_banner.description == USER_ERROR_DESCRIPTION
        assert view.skeleton == PageSkeleton()
        assert view.profile is None

    def test_loaded_view(self, page) -> None:
        view = page.render()

        assert view.profile.name == "James J."
        assert view.profile.viewer_is_user is True
        assert view.profile.has_wallet is True
        assert view.profile.income == "$7238"
        assert view.profile.connect_url is None
        assert view.listings.total == 1
        assert view.listings.items[0].price == "$100"
        assert view.listings.items[0].href == "/listing/5d378db94e84753160e08b31"
        assert view.bookings.items[0].check_in == "2019-10-29"
        assert view.stripe_error_banner is None

    def test_other_users_profile_hides_wallet(
        self, make_page, graphql_client, sample_user_data
    ) -> None:
        data = copy.deepcopy(sample_user_data)
        data["user"]["id"] = OTHER_USER_ID
        data["user"]["income"] = None
        data["user"]["bookings"] = None
        graphql_client.execute.return_value = data
        user_page = make_page(user_id=OTHER_USER_ID)
        user_page.mount()

        view = user_page.render()

        assert view.profile.viewer_is_user is False
        assert view.profile.has_wallet is False
        assert view.profile.income is None
        assert view.profile.connect_url is None
        assert view.bookings.items == []

    def test_connect_link_for_user_without_wallet(
        self, make_page, graphql_client, sample_user_data
    ) -> None:
        data = copy.deepcopy(sample_user_data)
        data["user"]["hasWallet"] = False
        graphql_client.execute.return_value = data
        user_page = make_page()
        user_page.mount()

        profile = user_page.render().profile

        assert profile.has_wallet is False
        assert profile.connect_url == CONNECT_URL
        assert profile.income is None

    def test_wallet_follows_fetched_user_not_session(self, page, viewer_context) -> None:
        """A stale session flag does not hide the wallet the server reports."""
        viewer_context.update_viewer(has_wallet=False)

        profile = page.render().profile

        assert profile.has_wallet is True
        assert profile.income == "$7238"
        assert profile.connect_url is None

    @pytest.mark.parametrize("body", [[], {"errors": ["boom"]}])
    def test_malformed_response_renders_error_view(
        self, viewer_context, notifier, body
    ) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=body))
        client = GraphQLClient(
            "http://tinyhouse.test/api", http_client=httpx.Client(transport=transport)
        )
        user_page = UserPage(
            viewer_context.viewer.id,
            viewer_context,
            client,
            History(f"/user/{viewer_context.viewer.id}"),
            notifier,
            connect_url=CONNECT_URL,
        )

        user_page.mount()

        assert user_page.state == UserPageState.ERROR
        assert user_page.render().error_banner.description == USER_ERROR_DESCRIPTION

    def test_bookings_follow_listings_presence(self, make_page, graphql_client, sample_user_data) -> None:
        data = copy.deepcopy(sample_user_data)
        data["user"]["listings"] = None
        graphql_client.execute.return_value = data
        user_page = make_page()
        user_page.mount()

        view = user_page.render()

        assert view.listings is None
        assert view.bookings is None


class TestStripeErrorBanner:
    def test_shown_when_flag_in_url(self, make_page, graphql_client, sample_user_data, viewer_context) -> None:
        graphql_client.execute.return_value = sample_user_data
        user_page = make_page(url=f"/user/{viewer_context.viewer.id}?stripe_error=true")
        user_page.mount()

        banner = user_page.render().stripe_error_banner

        assert banner.description == STRIPE_ERROR_DESCRIPTION
        assert banner.dismissible is True

    def test_dismiss_hides_banner(self, make_page, graphql_client, sample_user_data, viewer_context) -> None:
        graphql_client.execute.return_value = sample_user_data
        user_page = make_page(url=f"/user/{viewer_context.viewer.id}?stripe_error=true")
        user_page.mount()

        user_page.dismiss_stripe_error()

        assert user_page.render().stripe_error_banner is None

    def test_not_shown_while_loading(self, make_page, viewer_context) -> None:
        user_page = make_page(url=f"/user/{viewer_context.viewer.id}?stripe_error=true")

        assert user_page.render().stripe_error_banner is None


class TestDisconnectStripe:
    def test_success_updates_viewer_and_refetches(
        self, page, graphql_client, viewer_context, notifier, sample_user_data
    ) -> None:
        graphql_client.execute.return_value = {"disconnectStripe": {"hasWallet": False}}

        page.profile.disconnect_stripe()

        assert viewer_context.viewer.has_wallet is False
        assert notifier.pending[0].level == NotificationLevel.SUCCESS
        assert notifier.pending[0].message == DISCONNECTED_MESSAGE
        # disconnect mutation then the user query again
        assert graphql_client.execute.call_count == 3
        assert last_variables(graphql_client)["id"] == viewer_context.viewer.id

    def test_failure_notifies(self, page, graphql_client, viewer_context, notifier) -> None:
        graphql_client.execute.side_effect = RemoteDataError("failed to disconnect")

        page.profile.disconnect_stripe()

        assert viewer_context.viewer.has_wallet is True
        assert [(n.level, n.message) for n in notifier.pending] == [
            (NotificationLevel.ERROR, DISCONNECT_FAILED_MESSAGE)
        ]
        assert graphql_client.execute.call_count == 2
