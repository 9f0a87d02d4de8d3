"""Pydantic models for HTTP request bodies."""

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class AcceptApplicationBody(_CamelModel):
    """Accept-application request body."""

    application_id: str | None = Field(default=None, alias="applicationId")
    date: str | None = None
    compensation: str | float | None = None
    notes: str | None = None


class ApplicationStatusBody(_CamelModel):
    """Admin status-change request body."""

    application_id: str | None = Field(default=None, alias="applicationId")
    status: str | None = None


class CancelBookingBody(_CamelModel):
    """Booking cancellation request body."""

    booking_id: str = Field(alias="bookingId")
    reason: str | None = None


class BookingStatusBody(_CamelModel):
    """Booking status update request body."""

    booking_id: str = Field(alias="bookingId")
    status: str
    notes: str | None = None
