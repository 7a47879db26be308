"""Client composition root.

Builds the collaborators every section shares (GraphQL client, history,
notifications, viewer context) and hands them to sections by reference.
"""

import logging
from typing import Optional

from client.context import ViewerContext
from client.navigation import History
from client.notifications import NotificationCenter
from client.sections.app_header import AppHeader
from client.sections.host import Host
from client.sections.stripe import StripeConnect
from client.sections.user import UserPage
from shared.models.viewer import Viewer
from shared.services.graphql_client import GraphQLClient
from shared.services.upload_client import ImageUploadClient

logger = logging.getLogger(__name__)


class ClientApp:
    def __init__(
        self,
        *,
        client: Optional[GraphQLClient] = None,
        uploader: Optional[ImageUploadClient] = None,
        history: Optional[History] = None,
        viewer: Optional[Viewer] = None,
    ) -> None:
        self.client = client or GraphQLClient()
        self.uploader = uploader or ImageUploadClient()
        self.history = history or History()
        self.notifications = NotificationCenter()
        self.viewer_context = ViewerContext(viewer, client=self.client)
        self.header = AppHeader(self.viewer_context, self.history, self.notifications)
        self.header.mount()

    def host(self) -> Host:
        return Host(
            self.viewer_context,
            self.client,
            self.notifications,
            uploader=self.uploader,
        )

    def stripe_connect(self) -> StripeConnect:
        section = StripeConnect(
            self.viewer_context, self.client, self.history, self.notifications
        )
        section.mount()
        return section

    def user_page(self, user_id: str) -> UserPage:
        page = UserPage(
            user_id,
            self.viewer_context,
            self.client,
            self.history,
            self.notifications,
        )
        page.mount()
        return page

    def close(self) -> None:
        """Release the HTTP connections held by the transports."""
        self.client.close()
        self.uploader.close()
