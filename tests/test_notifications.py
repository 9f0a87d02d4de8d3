"""Tests for notification delivery."""

import asyncio
import json

import httpx

from talent_booking.adapters.notification_client import HttpxNotificationSink
from talent_booking.services.notifications import (
    APPLICATION_ACCEPTED,
    Notification,
    NotificationService,
)
from tests.fakes import FakeNotificationSink

_NOTIFICATION = Notification(
    type=APPLICATION_ACCEPTED,
    recipient="jane@example.com",
    template_data={"talentName": "Jane Doe", "gigTitle": "Runway"},
)


def test_httpx_sink_posts_to_email_route() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"ok": True})

    sink = HttpxNotificationSink(
        site_url="https://talent.example.com",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    delivered = asyncio.run(sink.send(_NOTIFICATION))

    assert delivered is True
    assert str(requests[0].url) == (
        "https://talent.example.com/api/email/send-application-accepted"
    )
    assert json.loads(requests[0].content) == {
        "email": "jane@example.com",
        "talentName": "Jane Doe",
        "gigTitle": "Runway",
    }


def test_httpx_sink_reports_failures() -> None:
    def rejecting(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "boom"})

    def unreachable(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    rejected = HttpxNotificationSink(
        site_url="https://talent.example.com",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(rejecting)),
    )
    offline = HttpxNotificationSink(
        site_url="https://talent.example.com",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(unreachable)),
    )

    assert asyncio.run(rejected.send(_NOTIFICATION)) is False
    assert asyncio.run(offline.send(_NOTIFICATION)) is False


def test_service_swallows_sink_errors() -> None:
    sink = FakeNotificationSink(error=RuntimeError("smtp down"))
    service = NotificationService(sink=sink)

    assert asyncio.run(service.notify(_NOTIFICATION)) is False
    assert asyncio.run(service.notify_all([_NOTIFICATION, _NOTIFICATION])) == 2


def test_disabled_service_skips_delivery() -> None:
    sink = FakeNotificationSink()
    service = NotificationService(sink=sink, enabled=False)

    assert asyncio.run(service.notify_all([_NOTIFICATION])) == 0
    assert sink.sent == []
