"""Session context shared by every section of the client."""

import logging
from collections.abc import Callable
from typing import Any, Optional

from shared.models.viewer import Viewer
from shared.services.graphql_client import GraphQLClient

logger = logging.getLogger(__name__)

ViewerListener = Callable[[Viewer], None]


class ViewerContext:
    """Holds the signed in viewer.

    Components receive the context at construction and read ``viewer``;
    the viewer only changes through ``set_viewer`` or ``update_viewer``.
    When a GraphQL client is attached its CSRF token follows the viewer.
    """

    def __init__(
        self,
        viewer: Optional[Viewer] = None,
        *,
        client: Optional[GraphQLClient] = None,
    ) -> None:
        self._viewer = viewer or Viewer()
        self._client = client
        self._listeners: list[ViewerListener] = []
        if client is not None:
            client.set_token(self._viewer.token)

    @property
    def viewer(self) -> Viewer:
        return self._viewer

    def set_viewer(self, viewer: Viewer) -> None:
        self._viewer = viewer
        if self._client is not None:
            self._client.set_token(viewer.token)
        for listener in list(self._listeners):
            listener(viewer)

    def update_viewer(self, **changes: Any) -> Viewer:
        """Replace selected viewer fields and return the new viewer."""
        viewer = self._viewer.model_copy(update=changes)
        logger.debug("Viewer updated: %s", sorted(changes))
        self.set_viewer(viewer)
        return viewer

    def subscribe(self, listener: ViewerListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
