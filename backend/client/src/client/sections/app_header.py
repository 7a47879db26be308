"""App header: logo, listings search bar and menu.

The search input follows the current path: it shows the search term while
the user is on ``/listings/<term>`` and is cleared anywhere else.
"""

import logging
from collections.abc import Callable
from typing import Optional

from client.context import ViewerContext
from client.navigation import LOGIN_PATH, History, Location
from client.notifications import Notifier
from client.views import View

logger = logging.getLogger(__name__)

LISTINGS_SEGMENT = "/listings"
SEARCH_PLACEHOLDER = "Search 'San Fransisco'"
INVALID_SEARCH_MESSAGE = "Please enter a valid search term"


class SearchBarView(View):
    value: str
    placeholder: str = SEARCH_PLACEHOLDER


class MenuItemView(View):
    label: str
    href: str


class AppHeaderView(View):
    logo_href: str = "/"
    search: SearchBarView
    menu: list[MenuItemView]


class SearchBar:
    """Search input synchronized with the navigation path."""

    def __init__(self, history: History, notifier: Notifier) -> None:
        self._history = history
        self._notifier = notifier
        self._unlisten: Optional[Callable[[], None]] = None
        self.value = ""

    def mount(self) -> None:
        self.sync_with_location(self._history.location)
        if self._unlisten is None:
            self._unlisten = self._history.listen(self.sync_with_location)

    def unmount(self) -> None:
        if self._unlisten is not None:
            self._unlisten()
            self._unlisten = None

    def sync_with_location(self, location: Location) -> None:
        pathname = location.pathname

        if LISTINGS_SEGMENT not in pathname:
            self.value = ""
            return

        segments = pathname.split("/")
        if len(segments) == 3:
            self.value = segments[2]

    def on_change(self, value: str) -> None:
        self.value = value

    def on_search(self, value: Optional[str] = None) -> bool:
        """Navigate to the listings of the trimmed term.

        Returns:
            True when navigation happened, False for an empty term.
        """
        trimmed = (self.value if value is None else value).strip()

        if not trimmed:
            self._notifier.error(INVALID_SEARCH_MESSAGE)
            return False

        self._history.push(f"{LISTINGS_SEGMENT}/{trimmed}")
        return True

    def render(self) -> SearchBarView:
        return SearchBarView(value=self.value)


class AppHeader:
    def __init__(
        self,
        viewer_context: ViewerContext,
        history: History,
        notifier: Notifier,
    ) -> None:
        self._viewer_context = viewer_context
        self.search_bar = SearchBar(history, notifier)

    def mount(self) -> None:
        self.search_bar.mount()

    def unmount(self) -> None:
        self.search_bar.unmount()

    def _menu(self) -> list[MenuItemView]:
        viewer = self._viewer_context.viewer
        items = [MenuItemView(label="Host", href="/host")]
        if viewer.id:
            items.append(MenuItemView(label="Profile", href=f"/user/{viewer.id}"))
        else:
            items.append(MenuItemView(label="Sign In", href=LOGIN_PATH))
        return items

    def render(self) -> AppHeaderView:
        return AppHeaderView(search=self.search_bar.render(), menu=self._menu())
