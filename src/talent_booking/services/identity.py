"""Caller identity and profile lookup."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from talent_booking.domain.profiles import Principal, Profile


class IdentityResolver(Protocol):
    """Resolves opaque credentials into principals."""

    def resolve(self, credential: str | None) -> Principal:
        """Return the principal for a credential, anonymous when invalid."""

    def lookup_email(self, user_id: UUID) -> str | None:
        """Return the email address registered for a user, if any."""


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user id, if present."""


@dataclass
class ProfileService:
    """Loads the role/account-type record for the calling principal."""

    identity_resolver: IdentityResolver
    repository: ProfileRepository

    def authenticate(self, credential: str | None) -> Principal:
        """Resolve a credential into a principal."""
        return self.identity_resolver.resolve(credential)

    def current_profile(self, principal: Principal) -> Profile | None:
        """Return the principal's profile, or None when signed out."""
        if not principal.is_authenticated or principal.id is None:
            return None
        return self.repository.get_profile(principal.id)
