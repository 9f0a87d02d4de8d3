"""Relationship-based visibility of sensitive talent fields."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from talent_booking.domain.errors import BookingError, InternalError, NotFound
from talent_booking.domain.profiles import (
    SENSITIVE_TALENT_FIELDS,
    Principal,
    TalentProfile,
)
from talent_booking.services.access import is_admin
from talent_booking.services.identity import ProfileService

_logger = logging.getLogger(__name__)


class RelationshipRepository(Protocol):
    """Existence checks backing the relationship oracle."""

    def list_gig_ids_for_client(self, client_id: UUID) -> list[UUID]:
        """Return ids of gigs owned by a client."""

    def application_exists(self, talent_id: UUID, gig_ids: list[UUID]) -> bool:
        """Return true if the talent applied to any of the gigs."""

    def booking_exists(self, client_id: UUID, talent_id: UUID) -> bool:
        """Return true if a booking links the client and the talent."""


class TalentProfileRepository(Protocol):
    """Persistence interface for talent profiles."""

    def get_by_user_id(self, user_id: UUID) -> TalentProfile | None:
        """Return the talent profile for a user id, if present."""


@dataclass
class RelationshipService:
    """Decides whether a client may see a talent's sensitive fields.

    The relationship is recomputed on every call; nothing is cached.
    """

    repository: RelationshipRepository

    def can_client_see_talent_sensitive(
        self, client_id: UUID, talent_user_id: UUID
    ) -> bool:
        """Return true when the talent applied to the client's gigs or was booked."""
        gig_ids = self.repository.list_gig_ids_for_client(client_id)
        if gig_ids and self.repository.application_exists(talent_user_id, gig_ids):
            return True
        return self.repository.booking_exists(client_id, talent_user_id)


@dataclass
class TalentProfileService:
    """Serves talent profiles with sensitive fields gated per viewer."""

    repository: TalentProfileRepository
    relationship_service: RelationshipService
    profile_service: ProfileService

    def can_view_sensitive(self, principal: Principal, talent_user_id: UUID) -> bool:
        """Return true for the talent, admins, and related clients."""
        if not principal.is_authenticated or principal.id is None:
            return False
        if principal.id == talent_user_id:
            return True
        viewer = self.profile_service.current_profile(principal)
        if is_admin(viewer):
            return True
        return self.relationship_service.can_client_see_talent_sensitive(
            principal.id, talent_user_id
        )

    def get_talent_profile(
        self, principal: Principal, talent_user_id: UUID
    ) -> dict[str, object]:
        """Return a talent profile payload for the viewer."""
        try:
            talent = self.repository.get_by_user_id(talent_user_id)
            visible = talent is not None and self.can_view_sensitive(
                principal, talent_user_id
            )
        except BookingError:
            raise
        except Exception as exc:
            _logger.exception(
                "Talent profile lookup failed",
                extra={"talent_id": str(talent_user_id)},
            )
            raise InternalError() from exc
        if talent is None:
            raise NotFound("Talent not found")
        fields = dict(talent.fields)
        if not visible:
            fields = {
                key: value
                for key, value in fields.items()
                if key not in SENSITIVE_TALENT_FIELDS
            }
        _logger.debug(
            "Talent profile served",
            extra={"talent_id": str(talent_user_id), "sensitive": visible},
        )
        return {
            "userId": str(talent.user_id),
            "firstName": talent.first_name,
            "lastName": talent.last_name,
            "location": talent.location,
            **fields,
        }
