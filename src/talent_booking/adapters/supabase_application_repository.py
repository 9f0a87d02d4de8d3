"""Supabase-backed application repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from talent_booking.domain.applications import ApplicationRecord, GigRecord
from talent_booking.services.applications import ApplicationRepository

_APPLICATION_COLUMNS = (
    "id, gig_id, talent_id, status, admin_notes, created_at, "
    "gigs!inner(id, client_id, title, location)"
)


@dataclass
class SupabaseApplicationRepository(ApplicationRepository):
    """Supabase implementation for applications."""

    client: Client

    def get_application(self, application_id: UUID) -> ApplicationRecord | None:
        """Return an application joined with its gig."""
        response = (
            self.client.table("applications")
            .select(_APPLICATION_COLUMNS)
            .eq("id", str(application_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        gig = row.get("gigs")
        if isinstance(gig, list):
            gig = gig[0] if gig else None
        if not gig:
            return None
        created_at = row.get("created_at")
        return ApplicationRecord(
            id=UUID(row["id"]),
            gig_id=UUID(row["gig_id"]),
            talent_id=UUID(row["talent_id"]),
            status=row["status"],
            gig=GigRecord(
                id=UUID(gig["id"]),
                client_id=UUID(gig["client_id"]),
                title=gig.get("title"),
                location=gig.get("location"),
            ),
            admin_notes=row.get("admin_notes"),
            created_at=datetime.fromisoformat(created_at)
            if isinstance(created_at, str) and created_at
            else None,
        )

    def update_status(
        self, application_id: UUID, status: str, expected_status: str
    ) -> bool:
        """Update the status if the row still holds ``expected_status``."""
        response = (
            self.client.table("applications")
            .update(
                {"status": status, "updated_at": datetime.now(tz=UTC).isoformat()}
            )
            .eq("id", str(application_id))
            .eq("status", expected_status)
            .execute()
        )
        return bool(response.data)
