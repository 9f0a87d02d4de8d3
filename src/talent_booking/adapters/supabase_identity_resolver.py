"""Supabase Auth-backed identity resolver."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from talent_booking.domain.profiles import Principal
from talent_booking.services.identity import IdentityResolver

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityResolver(IdentityResolver):
    """Validates access tokens against Supabase Auth."""

    client: Client

    def resolve(self, credential: str | None) -> Principal:
        """Return the principal for an access token."""
        if not credential or not credential.strip():
            return Principal.anonymous()
        try:
            response = self.client.auth.get_user(credential.strip())
        except AuthError as exc:
            _logger.info("Rejected access token: %s", exc)
            return Principal.anonymous()
        user = response.user if response else None
        if user is None:
            return Principal.anonymous()
        return Principal(id=UUID(str(user.id)), is_authenticated=True)

    def lookup_email(self, user_id: UUID) -> str | None:
        """Return the auth email for a user."""
        response = self.client.auth.admin.get_user_by_id(str(user_id))
        user = response.user if response else None
        return user.email if user else None
