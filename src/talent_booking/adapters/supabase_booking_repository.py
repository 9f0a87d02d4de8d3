"""Supabase-backed booking repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from talent_booking.domain.bookings import AcceptOutcome, BookingDraft, BookingRecord
from talent_booking.services.bookings import BookingRepository

_BOOKING_COLUMNS = (
    "id, application_id, gig_id, talent_id, client_id, date, compensation, "
    "notes, status, created_at"
)


@dataclass
class SupabaseBookingRepository(BookingRepository):
    """Supabase implementation for bookings.

    ``accept`` runs the ``accept_application`` database function, which locks
    the application row, inserts the booking and flips the status in a single
    transaction.
    """

    client: Client

    def accept(self, application_id: UUID, draft: BookingDraft) -> AcceptOutcome:
        """Run the atomic accept function."""
        response = self.client.rpc(
            "accept_application",
            {
                "p_application_id": str(application_id),
                "p_date": draft.date.isoformat(),
                "p_compensation": draft.compensation,
                "p_notes": draft.notes,
            },
        ).execute()
        data = response.data
        row = data[0] if isinstance(data, list) and data else data
        if not isinstance(row, dict) or "outcome" not in row:
            raise RuntimeError("accept_application returned no outcome")
        booking_id = row.get("booking_id")
        return AcceptOutcome(
            result=row["outcome"],
            booking_id=UUID(booking_id) if booking_id else None,
        )

    def get_booking(self, booking_id: UUID) -> BookingRecord | None:
        """Return a booking by id."""
        response = (
            self.client.table("bookings")
            .select(_BOOKING_COLUMNS)
            .eq("id", str(booking_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_booking(response.data[0])

    def find_by_application(self, application_id: UUID) -> BookingRecord | None:
        """Return the booking created for an application."""
        response = (
            self.client.table("bookings")
            .select(_BOOKING_COLUMNS)
            .eq("application_id", str(application_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_booking(response.data[0])

    def update_booking(
        self, booking_id: UUID, status: str, notes: str | None, expected_status: str
    ) -> bool:
        """Update booking status and notes if the status is unchanged."""
        response = (
            self.client.table("bookings")
            .update(
                {
                    "status": status,
                    "notes": notes,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("id", str(booking_id))
            .eq("status", expected_status)
            .execute()
        )
        return bool(response.data)


def _to_booking(row: dict[str, object]) -> BookingRecord:
    application_id = row.get("application_id")
    compensation = row.get("compensation")
    created_at = row.get("created_at")
    return BookingRecord(
        id=UUID(str(row["id"])),
        application_id=UUID(str(application_id)) if application_id else None,
        gig_id=UUID(str(row["gig_id"])),
        talent_id=UUID(str(row["talent_id"])),
        client_id=UUID(str(row["client_id"])),
        date=datetime.fromisoformat(str(row["date"])),
        compensation=float(compensation) if compensation is not None else None,
        notes=row.get("notes"),
        status=str(row["status"]),
        created_at=datetime.fromisoformat(created_at)
        if isinstance(created_at, str) and created_at
        else None,
    )
