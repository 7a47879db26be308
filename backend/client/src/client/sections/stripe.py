"""Stripe Connect OAuth callback.

Stripe redirects here with ``?code=...`` after the host authorizes the
platform. The code is exchanged once per mount; a page without a code sends
the viewer to the login page.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Optional

from client.context import ViewerContext
from client.graphql import CONNECT_STRIPE
from client.hooks import Mutation
from client.navigation import LOGIN_PATH, History
from client.notifications import Notifier
from client.views import Redirect, Spinner, View
from shared.models.stripe import ConnectStripeData
from shared.services.graphql_client import GraphQLClient
from shared.utils.logging import log_stripe_operation

logger = logging.getLogger(__name__)

CONNECTING_TIP = "Connecting your Stripe account..."
CONNECTED_MESSAGE = "You've successfully connected your Stripe Account!"
CONNECTED_DESCRIPTION = "You can now begin to create listings in the host page."


class StripeConnectState(str, Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    FAILED = "failed"


class StripeConnect:
    def __init__(
        self,
        viewer_context: ViewerContext,
        client: GraphQLClient,
        history: History,
        notifier: Notifier,
    ) -> None:
        self._viewer_context = viewer_context
        self._history = history
        self._notifier = notifier
        self._exchange_started = False

        self._connect_stripe = Mutation(
            client,
            CONNECT_STRIPE,
            ConnectStripeData,
            operation_name="ConnectStripe",
            on_completed=self._on_connected,
        )

        self._renderers: dict[StripeConnectState, Callable[[], Optional[View]]] = {
            StripeConnectState.CONNECTED: self._render_connected,
            StripeConnectState.CONNECTING: self._render_connecting,
            StripeConnectState.FAILED: self._render_failed,
            StripeConnectState.IDLE: lambda: None,
        }

    @property
    def state(self) -> StripeConnectState:
        data = self._connect_stripe.data
        if data is not None and data.connect_stripe is not None:
            return StripeConnectState.CONNECTED
        if self._connect_stripe.loading:
            return StripeConnectState.CONNECTING
        if self._connect_stripe.error is not None:
            return StripeConnectState.FAILED
        return StripeConnectState.IDLE

    def mount(self) -> None:
        """Exchange the authorization code in the URL, at most once."""
        if self._exchange_started:
            return
        self._exchange_started = True

        code = self._history.location.query_param("code")
        if not code:
            logger.info("Stripe callback without an authorization code")
            self._history.replace(LOGIN_PATH)
            return

        self._connect_stripe({"input": {"code": code}})
        if self._connect_stripe.error is not None:
            log_stripe_operation(
                logger,
                "connect",
                viewer_id=self._viewer_context.viewer.id,
                error=str(self._connect_stripe.error),
            )

    def _on_connected(self, data: ConnectStripeData) -> None:
        if data.connect_stripe is None:
            return
        self._viewer_context.update_viewer(has_wallet=data.connect_stripe.has_wallet)
        log_stripe_operation(logger, "connect", viewer_id=self._viewer_context.viewer.id)
        self._notifier.success(CONNECTED_MESSAGE, CONNECTED_DESCRIPTION)

    def render(self) -> Optional[View]:
        return self._renderers[self.state]()

    def _profile_path(self) -> str:
        return f"/user/{self._viewer_context.viewer.id}"

    def _render_connected(self) -> View:
        return Redirect(to=self._profile_path())

    def _render_connecting(self) -> View:
        return Spinner(tip=CONNECTING_TIP)

    def _render_failed(self) -> View:
        return Redirect(to=f"{self._profile_path()}?stripe_error=true")
