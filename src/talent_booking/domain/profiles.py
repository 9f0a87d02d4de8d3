"""Identity and profile domain models."""

from dataclasses import dataclass, field
from uuid import UUID

ROLE_TALENT = "talent"
ROLE_CLIENT = "client"
ROLE_ADMIN = "admin"

ACCOUNT_UNASSIGNED = "unassigned"
ACCOUNT_TALENT = "talent"
ACCOUNT_CLIENT = "client"

SENSITIVE_TALENT_FIELDS = frozenset({"phone", "age", "weight", "measurements"})


@dataclass(frozen=True)
class Principal:
    """The caller behind a request."""

    id: UUID | None
    is_authenticated: bool

    @classmethod
    def anonymous(cls) -> "Principal":
        """Return the unauthenticated principal."""
        return cls(id=None, is_authenticated=False)


@dataclass(frozen=True)
class Profile:
    """Role and account-type record for a user.

    ``role`` and ``account_type`` are updated independently and may drift;
    access checks treat either one as evidence.
    """

    id: UUID
    role: str | None
    account_type: str | None
    is_suspended: bool = False
    display_name: str | None = None


@dataclass(frozen=True)
class TalentProfile:
    """Public-facing talent profile with optional sensitive fields."""

    user_id: UUID
    first_name: str | None
    last_name: str | None
    location: str | None
    fields: dict[str, object] = field(default_factory=dict)

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
