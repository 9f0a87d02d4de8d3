"""Admin application endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from talent_booking.api.client import to_accept_request
from talent_booking.api.dependencies import get_principal
from talent_booking.api.models import AcceptApplicationBody, ApplicationStatusBody
from talent_booking.domain.profiles import Principal  # noqa: TC001

if TYPE_CHECKING:
    from talent_booking.containers import AppContainer

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/applications/status")
async def set_application_status(
    body: ApplicationStatusBody,
    request: Request,
    principal: Principal = Depends(get_principal),
) -> JSONResponse:
    """Override an application's status."""
    container: AppContainer = request.app.state.container
    result = container.admin_application_service.set_status(
        principal, body.application_id, body.status
    )
    return JSONResponse(status_code=result.status_code, content=result.to_dict())


@router.post("/applications/accept")
async def admin_accept_application(
    body: AcceptApplicationBody,
    request: Request,
    principal: Principal = Depends(get_principal),
) -> dict[str, object]:
    """Accept an application on behalf of its gig owner."""
    container: AppContainer = request.app.state.container
    result = await container.accept_application_service.accept_as_admin(
        principal, to_accept_request(body)
    )
    return {"ok": True, "bookingId": str(result.booking_id)}
