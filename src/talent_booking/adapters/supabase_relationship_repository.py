"""Supabase existence checks for client/talent relationships."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from talent_booking.services.relationships import RelationshipRepository


@dataclass
class SupabaseRelationshipRepository(RelationshipRepository):
    """Bounded lookups against gigs, applications and bookings."""

    client: Client

    def list_gig_ids_for_client(self, client_id: UUID) -> list[UUID]:
        """Return ids of gigs owned by a client."""
        response = (
            self.client.table("gigs")
            .select("id")
            .eq("client_id", str(client_id))
            .execute()
        )
        return [UUID(row["id"]) for row in response.data or []]

    def application_exists(self, talent_id: UUID, gig_ids: list[UUID]) -> bool:
        """Return true if the talent applied to any of the gigs."""
        if not gig_ids:
            return False
        response = (
            self.client.table("applications")
            .select("id")
            .eq("talent_id", str(talent_id))
            .in_("gig_id", [str(gig_id) for gig_id in gig_ids])
            .limit(1)
            .execute()
        )
        return bool(response.data)

    def booking_exists(self, client_id: UUID, talent_id: UUID) -> bool:
        """Return true if a booking links the client and the talent."""
        response = (
            self.client.table("bookings")
            .select("id")
            .eq("client_id", str(client_id))
            .eq("talent_id", str(talent_id))
            .limit(1)
            .execute()
        )
        return bool(response.data)
