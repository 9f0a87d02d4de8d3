"""HTTP notification sink posting to the site's email endpoints."""

import logging
from dataclasses import dataclass

import httpx

from talent_booking.services.notifications import Notification, NotificationSink

_logger = logging.getLogger(__name__)


@dataclass
class HttpxNotificationSink(NotificationSink):
    """Delivers notifications to ``<site_url>/api/email/send-<type>``."""

    site_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, site_url: str) -> "HttpxNotificationSink":
        """Create a sink with a managed httpx session."""
        return cls(site_url=site_url, http_client=httpx.AsyncClient())

    async def send(self, notification: Notification) -> bool:
        """POST the notification and report whether it was accepted."""
        url = f"{self.site_url}/api/email/send-{notification.type}"
        payload = {"email": notification.recipient, **notification.template_data}
        try:
            response = await self.http_client.post(url, json=payload, timeout=10)
        except httpx.HTTPError as exc:
            _logger.warning("Notification request failed: %s", exc)
            return False
        return response.is_success

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
