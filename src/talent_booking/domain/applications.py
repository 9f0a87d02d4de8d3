"""Gig and application domain models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

STATUS_NEW = "new"
STATUS_UNDER_REVIEW = "under_review"
STATUS_SHORTLISTED = "shortlisted"
STATUS_REJECTED = "rejected"
STATUS_ACCEPTED = "accepted"

APPLICATION_STATUSES = (
    STATUS_NEW,
    STATUS_UNDER_REVIEW,
    STATUS_SHORTLISTED,
    STATUS_REJECTED,
    STATUS_ACCEPTED,
)
TERMINAL_STATUSES = frozenset({STATUS_REJECTED, STATUS_ACCEPTED})


@dataclass(frozen=True)
class GigRecord:
    """Subset of a gig needed for ownership checks and notifications."""

    id: UUID
    client_id: UUID
    title: str | None = None
    location: str | None = None


@dataclass(frozen=True)
class ApplicationRecord:
    """A talent's application to a gig, joined with its gig."""

    id: UUID
    gig_id: UUID
    talent_id: UUID
    status: str
    gig: GigRecord
    admin_notes: str | None = None
    created_at: datetime | None = None
