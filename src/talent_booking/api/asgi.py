"""ASGI entrypoint for the talent booking API."""

from talent_booking.api.app import create_app
from talent_booking.containers import build_container

app = create_app(build_container())
