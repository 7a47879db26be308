"""Transient success and error messages shown to the user."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str
    description: Optional[str] = None


class Notifier(Protocol):
    """Anything that can display notifications."""

    def success(self, message: str, description: Optional[str] = None) -> None: ...

    def error(self, message: str, description: Optional[str] = None) -> None: ...


class NotificationCenter:
    """Queues notifications until the UI shell drains and displays them."""

    def __init__(self) -> None:
        self._pending: list[Notification] = []

    @property
    def pending(self) -> tuple[Notification, ...]:
        return tuple(self._pending)

    def success(self, message: str, description: Optional[str] = None) -> None:
        logger.info("Success notification: %s", message)
        self._pending.append(Notification(NotificationLevel.SUCCESS, message, description))

    def error(self, message: str, description: Optional[str] = None) -> None:
        logger.info("Error notification: %s", message)
        self._pending.append(Notification(NotificationLevel.ERROR, message, description))

    def drain(self) -> list[Notification]:
        """Return queued notifications and clear the queue."""
        drained, self._pending = self._pending, []
        return drained
