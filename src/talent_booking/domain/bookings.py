"""Booking domain models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

BOOKING_PENDING = "pending"
BOOKING_CONFIRMED = "confirmed"
BOOKING_COMPLETED = "completed"
BOOKING_CANCELLED = "cancelled"

BOOKING_STATUSES = (
    BOOKING_PENDING,
    BOOKING_CONFIRMED,
    BOOKING_COMPLETED,
    BOOKING_CANCELLED,
)

ACCEPT_CREATED = "created"
ACCEPT_ALREADY_ACCEPTED = "already_accepted"
ACCEPT_REJECTED = "rejected"
ACCEPT_NOT_FOUND = "not_found"


@dataclass(frozen=True)
class BookingRecord:
    """A confirmed engagement between a client and a talent."""

    id: UUID
    application_id: UUID | None
    gig_id: UUID
    talent_id: UUID
    client_id: UUID
    date: datetime
    compensation: float | None
    notes: str | None
    status: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class BookingDraft:
    """Caller-supplied booking terms, already normalized."""

    date: datetime
    compensation: float | None
    notes: str | None


@dataclass(frozen=True)
class AcceptOutcome:
    """Result of the atomic accept write."""

    result: str
    booking_id: UUID | None = None


@dataclass(frozen=True)
class AcceptApplicationRequest:
    """Raw accept request as received at the boundary."""

    application_id: str | None
    date: str | None = None
    compensation: str | float | None = None
    notes: str | None = None
