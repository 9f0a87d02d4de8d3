"""Supabase-backed talent profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from talent_booking.domain.profiles import TalentProfile
from talent_booking.services.relationships import TalentProfileRepository

_DETAIL_COLUMNS = (
    "phone",
    "age",
    "weight",
    "measurements",
    "height",
    "hair_color",
    "eye_color",
    "shoe_size",
    "languages",
    "experience",
    "experience_years",
    "specialties",
    "portfolio_url",
)


@dataclass
class SupabaseTalentProfileRepository(TalentProfileRepository):
    """Supabase implementation for talent profiles."""

    client: Client

    def get_by_user_id(self, user_id: UUID) -> TalentProfile | None:
        """Return the talent profile for a user id."""
        columns = ", ".join(
            ("user_id", "first_name", "last_name", "location", *_DETAIL_COLUMNS)
        )
        response = (
            self.client.table("talent_profiles")
            .select(columns)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return TalentProfile(
            user_id=UUID(row["user_id"]),
            first_name=row.get("first_name"),
            last_name=row.get("last_name"),
            location=row.get("location"),
            fields={key: row.get(key) for key in _DETAIL_COLUMNS if key in row},
        )
