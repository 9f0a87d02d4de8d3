"""Application status state machine and admin status changes."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from talent_booking.domain.applications import (
    APPLICATION_STATUSES,
    STATUS_ACCEPTED,
    STATUS_REJECTED,
    TERMINAL_STATUSES,
    ApplicationRecord,
)
from talent_booking.domain.errors import (
    ApplicationNotFound,
    BookingError,
    Conflict,
    Forbidden,
    ValidationError,
)
from talent_booking.domain.profiles import Principal, Profile
from talent_booking.services.access import is_admin
from talent_booking.services.identity import ProfileService

_logger = logging.getLogger(__name__)

ACTOR_ADMIN = "admin"
ACTOR_OWNER = "owner"
ACTOR_APPLICANT = "applicant"
ACTOR_OTHER = "other"

REJECTED_ACCEPT_MESSAGE = "Cannot accept a rejected application"


class ApplicationRepository(Protocol):
    """Persistence interface for applications."""

    def get_application(self, application_id: UUID) -> ApplicationRecord | None:
        """Return an application joined with its gig, if present."""

    def update_status(
        self, application_id: UUID, status: str, expected_status: str
    ) -> bool:
        """Set the status only if it still equals ``expected_status``."""


def require_application_id(raw: UUID | str | None) -> str:
    """Reject a request that carries no application id."""
    if raw is None or not str(raw).strip():
        raise ValidationError("Missing applicationId")
    return str(raw).strip()


def parse_application_id(raw: str) -> UUID:
    """Parse an application id; malformed ids cannot match any application."""
    try:
        return UUID(raw)
    except ValueError as exc:
        raise ApplicationNotFound() from exc


def resolve_actor(
    principal: Principal, profile: Profile | None, application: ApplicationRecord
) -> str:
    """Classify the caller relative to an application."""
    if is_admin(profile):
        return ACTOR_ADMIN
    if principal.id is not None and principal.id == application.gig.client_id:
        return ACTOR_OWNER
    if principal.id is not None and principal.id == application.talent_id:
        return ACTOR_APPLICANT
    return ACTOR_OTHER


def check_transition(actor: str, current: str, target: str) -> bool:
    """Validate a status change, returning True when it is a no-op.

    Raises ``ValidationError`` for unknown statuses, ``Forbidden`` for actors
    without transition rights and ``Conflict`` for moves out of a terminal
    status.
    """
    if target not in APPLICATION_STATUSES:
        raise ValidationError(f"Invalid application status: {target}")
    if actor in {ACTOR_APPLICANT, ACTOR_OTHER}:
        raise Forbidden()
    if actor == ACTOR_OWNER and target != STATUS_ACCEPTED:
        raise Forbidden("Clients can only accept applications")
    if current == STATUS_REJECTED and target == STATUS_ACCEPTED:
        raise Conflict(REJECTED_ACCEPT_MESSAGE)
    if current == target:
        return True
    if current in TERMINAL_STATUSES:
        raise Conflict(f"Application is already {current}")
    return False


@dataclass(frozen=True)
class AdminActionResult:
    """Result object returned by admin actions."""

    ok: bool
    error: str | None = None
    status_code: int = 200

    def to_dict(self) -> dict[str, object]:
        if self.ok:
            return {"ok": True}
        return {"ok": False, "error": self.error}


@dataclass
class AdminApplicationService:
    """Admin override of application statuses."""

    repository: ApplicationRepository
    profile_service: ProfileService

    def set_status(
        self,
        principal: Principal,
        application_id: UUID | str | None,
        status: str | None,
    ) -> AdminActionResult:
        """Change an application's status on behalf of an admin.

        The caller is verified before the payload: authentication, then the
        admin role, then the application id and status.
        """
        if not principal.is_authenticated:
            return AdminActionResult(
                ok=False, error="Not authenticated", status_code=401
            )
        try:
            profile = self.profile_service.current_profile(principal)
        except Exception:
            _logger.exception("Failed to load profile for admin check")
            return AdminActionResult(
                ok=False, error="Failed to verify admin role", status_code=500
            )
        if not is_admin(profile):
            return AdminActionResult(ok=False, error="Forbidden", status_code=403)
        if application_id is None or not str(application_id).strip() or not status:
            return AdminActionResult(
                ok=False, error="Missing applicationId or status", status_code=400
            )

        try:
            parsed_id = parse_application_id(str(application_id).strip())
            application = self.repository.get_application(parsed_id)
            if application is None:
                raise ApplicationNotFound()
            if check_transition(ACTOR_ADMIN, application.status, status):
                return AdminActionResult(ok=True)
            updated = self.repository.update_status(
                parsed_id, status, expected_status=application.status
            )
        except BookingError as exc:
            return AdminActionResult(
                ok=False, error=exc.message, status_code=exc.status_code
            )
        except Exception as exc:
            _logger.exception(
                "Admin status update failed",
                extra={"application_id": str(application_id)},
            )
            return AdminActionResult(
                ok=False, error=_store_error_message(exc), status_code=500
            )
        if not updated:
            return AdminActionResult(
                ok=False,
                error="Application status changed concurrently",
                status_code=409,
            )
        _logger.info(
            "Application status changed by admin",
            extra={
                "application_id": str(application_id),
                "from_status": application.status,
                "to_status": status,
            },
        )
        return AdminActionResult(ok=True)


def _store_error_message(exc: Exception) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or type(exc).__name__
