"""In-memory navigation history.

Mirrors a browser history object: ``push`` adds an entry, ``replace``
overwrites the current one, and listeners are told about every change.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"


@dataclass(frozen=True)
class Location:
    """A pathname plus query string (without the leading ``?``)."""

    pathname: str = "/"
    search: str = ""

    @classmethod
    def from_url(cls, url: str) -> "Location":
        parts = urlsplit(url)
        return cls(pathname=parts.path or "/", search=parts.query)

    @property
    def href(self) -> str:
        return f"{self.pathname}?{self.search}" if self.search else self.pathname

    def query_param(self, name: str) -> str | None:
        """First value of a query parameter, or None when absent."""
        values = parse_qs(self.search, keep_blank_values=True).get(name)
        return values[0] if values else None


LocationListener = Callable[[Location], None]


class History:
    """Navigation stack with change listeners."""

    def __init__(self, initial: str = "/") -> None:
        self._entries: list[Location] = [Location.from_url(initial)]
        self._listeners: list[LocationListener] = []

    @property
    def location(self) -> Location:
        return self._entries[-1]

    @property
    def entries(self) -> tuple[Location, ...]:
        return tuple(self._entries)

    def push(self, url: str) -> None:
        logger.debug("Navigating to %s", url)
        self._entries.append(Location.from_url(url))
        self._notify()

    def replace(self, url: str) -> None:
        logger.debug("Replacing location with %s", url)
        self._entries[-1] = Location.from_url(url)
        self._notify()

    def listen(self, listener: LocationListener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unlisten() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unlisten

    def _notify(self) -> None:
        location = self.location
        for listener in list(self._listeners):
            listener(location)
