"""Fire-and-forget notification delivery."""

import logging
from dataclasses import dataclass
from typing import Protocol

_logger = logging.getLogger(__name__)

APPLICATION_ACCEPTED = "application-accepted"
BOOKING_CONFIRMED = "booking-confirmed"


@dataclass(frozen=True)
class Notification:
    """A templated message for one recipient."""

    type: str
    recipient: str
    template_data: dict[str, object]


class NotificationSink(Protocol):
    """Delivers notifications to an external channel."""

    async def send(self, notification: Notification) -> bool:
        """Deliver a notification and report success."""


@dataclass
class NotificationService:
    """Sends notifications without letting failures escape."""

    sink: NotificationSink
    enabled: bool = True

    async def notify(self, notification: Notification) -> bool:
        """Send one notification, logging any failure."""
        if not self.enabled:
            _logger.info("Notifications disabled, skipping %s", notification.type)
            return True
        try:
            delivered = await self.sink.send(notification)
        except Exception:
            _logger.exception(
                "Notification delivery raised",
                extra={"notification_type": notification.type},
            )
            return False
        if not delivered:
            _logger.warning(
                "Notification delivery failed",
                extra={"notification_type": notification.type},
            )
        return delivered

    async def notify_all(self, notifications: list[Notification]) -> int:
        """Send notifications in order and return the number that failed."""
        failed = 0
        for notification in notifications:
            if not await self.notify(notification):
                failed += 1
        return failed
