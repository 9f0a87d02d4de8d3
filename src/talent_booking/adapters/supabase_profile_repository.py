"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from talent_booking.domain.profiles import Profile
from talent_booking.services.identity import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile reads."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user id, if present."""
        response = (
            self.client.table("profiles")
            .select("id, role, account_type, is_suspended, display_name")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return Profile(
            id=UUID(row["id"]),
            role=row.get("role"),
            account_type=row.get("account_type"),
            is_suspended=bool(row.get("is_suspended")),
            display_name=row.get("display_name"),
        )
