"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import Header, Request

from talent_booking.domain.errors import BookingNotFound
from talent_booking.domain.profiles import Principal

if TYPE_CHECKING:
    from talent_booking.containers import AppContainer

_BEARER_PREFIX = "bearer "


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    if authorization.lower().startswith(_BEARER_PREFIX):
        return authorization[len(_BEARER_PREFIX) :].strip() or None
    return None


async def get_principal(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Principal:
    """Resolve the caller; anonymous when no valid token is supplied."""
    container: AppContainer = request.app.state.container
    return container.profile_service.authenticate(bearer_token(authorization))


def parse_booking_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError as exc:
        raise BookingNotFound() from exc
