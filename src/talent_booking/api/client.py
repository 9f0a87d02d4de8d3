"""Client-facing application and booking endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from talent_booking.api.dependencies import get_principal, parse_booking_id
from talent_booking.api.models import (
    AcceptApplicationBody,
    BookingStatusBody,
    CancelBookingBody,
)
from talent_booking.domain.bookings import AcceptApplicationRequest, BookingRecord
from talent_booking.domain.profiles import Principal  # noqa: TC001

if TYPE_CHECKING:
    from talent_booking.containers import AppContainer

router = APIRouter(prefix="/api/client", tags=["client"])


@router.post("/applications/accept")
async def accept_application(
    body: AcceptApplicationBody,
    request: Request,
    principal: Principal = Depends(get_principal),
) -> dict[str, object]:
    """Accept an application and create its booking."""
    container: AppContainer = request.app.state.container
    result = await container.accept_application_service.accept(
        principal, to_accept_request(body)
    )
    return {"ok": True, "bookingId": str(result.booking_id)}


@router.post("/bookings/cancel")
async def cancel_booking(
    body: CancelBookingBody,
    request: Request,
    principal: Principal = Depends(get_principal),
) -> dict[str, object]:
    """Cancel a booking owned by the caller."""
    container: AppContainer = request.app.state.container
    booking = container.booking_service.cancel(
        principal, parse_booking_id(body.booking_id), body.reason
    )
    return {"ok": True, "booking": serialize_booking(booking)}


@router.post("/bookings/status")
async def update_booking_status(
    body: BookingStatusBody,
    request: Request,
    principal: Principal = Depends(get_principal),
) -> dict[str, object]:
    """Update the status of a booking owned by the caller."""
    container: AppContainer = request.app.state.container
    booking = container.booking_service.update_status(
        principal, parse_booking_id(body.booking_id), body.status, body.notes
    )
    return {"ok": True, "booking": serialize_booking(booking)}


def to_accept_request(body: AcceptApplicationBody) -> AcceptApplicationRequest:
    return AcceptApplicationRequest(
        application_id=body.application_id,
        date=body.date,
        compensation=body.compensation,
        notes=body.notes,
    )


def serialize_booking(booking: BookingRecord) -> dict[str, object]:
    return {
        "id": str(booking.id),
        "gigId": str(booking.gig_id),
        "talentId": str(booking.talent_id),
        "clientId": str(booking.client_id),
        "date": booking.date.isoformat(),
        "compensation": booking.compensation,
        "notes": booking.notes,
        "status": booking.status,
    }
