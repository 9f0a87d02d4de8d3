"""Accept-application transaction and booking follow-up actions."""

import logging
import math
import re
from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from talent_booking.domain import routes
from talent_booking.domain.applications import STATUS_ACCEPTED, ApplicationRecord
from talent_booking.domain.bookings import (
    ACCEPT_ALREADY_ACCEPTED,
    ACCEPT_CREATED,
    ACCEPT_NOT_FOUND,
    ACCEPT_REJECTED,
    BOOKING_CANCELLED,
    BOOKING_STATUSES,
    AcceptApplicationRequest,
    AcceptOutcome,
    BookingDraft,
    BookingRecord,
)
from talent_booking.domain.errors import (
    ApplicationNotFound,
    BookingError,
    BookingNotFound,
    Conflict,
    Forbidden,
    InternalError,
    Unauthorized,
    ValidationError,
)
from talent_booking.domain.profiles import Principal
from talent_booking.services.access import is_admin
from talent_booking.services.applications import (
    ACTOR_ADMIN,
    REJECTED_ACCEPT_MESSAGE,
    ApplicationRepository,
    check_transition,
    parse_application_id,
    require_application_id,
    resolve_actor,
)
from talent_booking.services.identity import ProfileService
from talent_booking.services.notifications import (
    APPLICATION_ACCEPTED,
    BOOKING_CONFIRMED,
    Notification,
    NotificationService,
)
from talent_booking.services.relationships import TalentProfileRepository

_logger = logging.getLogger(__name__)

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


class BookingRepository(Protocol):
    """Persistence interface for bookings."""

    def accept(self, application_id: UUID, draft: BookingDraft) -> AcceptOutcome:
        """Atomically create the booking and mark the application accepted."""

    def get_booking(self, booking_id: UUID) -> BookingRecord | None:
        """Return a booking by id, if present."""

    def find_by_application(self, application_id: UUID) -> BookingRecord | None:
        """Return the booking created for an application, if any."""

    def update_booking(
        self, booking_id: UUID, status: str, notes: str | None, expected_status: str
    ) -> bool:
        """Update status and notes if the status still equals ``expected_status``."""


@dataclass(frozen=True)
class AcceptResult:
    """Outcome of a successful accept call."""

    booking_id: UUID
    created: bool
    notifications_failed: int = 0


def normalize_compensation(raw: str | float | None) -> float | None:
    """Turn a loosely formatted amount into a finite float, or None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        value = float(raw)
    else:
        cleaned = _NON_NUMERIC.sub("", str(raw))
        if not cleaned:
            return None
        try:
            value = float(cleaned)
        except ValueError:
            return None
    return value if math.isfinite(value) else None


def parse_booking_date(
    raw: str | None, lead_days: int, now: datetime | None = None
) -> datetime:
    """Parse an ISO date, defaulting to ``lead_days`` from now."""
    if not raw or not raw.strip():
        return (now or datetime.now(tz=UTC)) + timedelta(days=lead_days)
    try:
        parsed = datetime.fromisoformat(raw.strip())
    except ValueError as exc:
        raise ValidationError("Invalid booking date") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


@dataclass
class AcceptApplicationService:
    """Turns an application into exactly one booking."""

    application_repository: ApplicationRepository
    booking_repository: BookingRepository
    talent_profile_repository: TalentProfileRepository
    profile_service: ProfileService
    notification_service: NotificationService
    site_url: str
    booking_lead_days: int = 7
    admin_accept_enabled: bool = False

    async def accept(
        self, principal: Principal, request: AcceptApplicationRequest
    ) -> AcceptResult:
        """Accept an application as the client who owns its gig."""
        raw_id = require_application_id(request.application_id)
        if not principal.is_authenticated or principal.id is None:
            raise Unauthorized()
        application_id = parse_application_id(raw_id)
        try:
            application = self._load(application_id)
            # Admin rights only apply through accept_as_admin.
            actor = resolve_actor(principal, None, application)
            return await self._accept(application, request, actor=actor)
        except BookingError:
            raise
        except Exception as exc:
            _logger.exception(
                "Accept application failed",
                extra={"application_id": str(application_id)},
            )
            raise InternalError() from exc

    async def accept_as_admin(
        self, principal: Principal, request: AcceptApplicationRequest
    ) -> AcceptResult:
        """Accept an application on behalf of the gig owner."""
        raw_id = require_application_id(request.application_id)
        if not principal.is_authenticated or principal.id is None:
            raise Unauthorized()
        try:
            profile = self.profile_service.current_profile(principal)
            if not self.admin_accept_enabled or not is_admin(profile):
                raise Forbidden()
            application_id = parse_application_id(raw_id)
            application = self._load(application_id)
            _logger.info(
                "Admin accepting application",
                extra={
                    "application_id": str(application_id),
                    "admin_id": str(principal.id),
                },
            )
            return await self._accept(application, request, actor=ACTOR_ADMIN)
        except BookingError:
            raise
        except Exception as exc:
            _logger.exception(
                "Admin accept failed",
                extra={"application_id": raw_id},
            )
            raise InternalError() from exc

    def _load(self, application_id: UUID) -> ApplicationRecord:
        application = self.application_repository.get_application(application_id)
        if application is None:
            raise ApplicationNotFound()
        return application

    async def _accept(
        self,
        application: ApplicationRecord,
        request: AcceptApplicationRequest,
        actor: str,
    ) -> AcceptResult:
        if check_transition(actor, application.status, STATUS_ACCEPTED):
            return AcceptResult(
                booking_id=self._existing_booking_id(application.id, None),
                created=False,
            )

        draft = BookingDraft(
            date=parse_booking_date(request.date, self.booking_lead_days),
            compensation=normalize_compensation(request.compensation),
            notes=request.notes or None,
        )
        outcome = self.booking_repository.accept(application.id, draft)
        if outcome.result == ACCEPT_ALREADY_ACCEPTED:
            # Lost a race with another accept; the first booking stands.
            return AcceptResult(
                booking_id=self._existing_booking_id(
                    application.id, outcome.booking_id
                ),
                created=False,
            )
        if outcome.result == ACCEPT_REJECTED:
            raise Conflict(REJECTED_ACCEPT_MESSAGE)
        if outcome.result == ACCEPT_NOT_FOUND:
            raise ApplicationNotFound()
        if outcome.result != ACCEPT_CREATED or outcome.booking_id is None:
            raise InternalError(f"Unexpected accept outcome: {outcome.result}")

        _logger.info(
            "Application accepted",
            extra={
                "application_id": str(application.id),
                "booking_id": str(outcome.booking_id),
            },
        )
        failed = await self._notify_talent(application, draft, request)
        return AcceptResult(
            booking_id=outcome.booking_id, created=True, notifications_failed=failed
        )

    def _existing_booking_id(
        self, application_id: UUID, booking_id: UUID | None
    ) -> UUID:
        if booking_id is not None:
            return booking_id
        booking = self.booking_repository.find_by_application(application_id)
        if booking is None:
            raise Conflict("Application already accepted")
        return booking.id

    async def _notify_talent(
        self,
        application: ApplicationRecord,
        draft: BookingDraft,
        request: AcceptApplicationRequest,
    ) -> int:
        try:
            notifications = self._build_notifications(application, draft, request)
        except Exception:
            _logger.exception(
                "Failed to prepare acceptance notifications",
                extra={"application_id": str(application.id)},
            )
            return 1
        if not notifications:
            return 0
        failed = await self.notification_service.notify_all(notifications)
        if failed:
            _logger.warning(
                "Acceptance notifications failed",
                extra={"application_id": str(application.id), "failed": failed},
            )
        return failed

    def _build_notifications(
        self,
        application: ApplicationRecord,
        draft: BookingDraft,
        request: AcceptApplicationRequest,
    ) -> list[Notification]:
        email = self.profile_service.identity_resolver.lookup_email(
            application.talent_id
        )
        if not email:
            _logger.info(
                "Talent has no email, skipping notifications",
                extra={"talent_id": str(application.talent_id)},
            )
            return []
        talent = self.talent_profile_repository.get_by_user_id(application.talent_id)
        client = self.profile_service.repository.get_profile(
            application.gig.client_id
        )
        dashboard_url = f"{self.site_url}{routes.TALENT_DASHBOARD}"
        talent_name = (talent.full_name if talent else "") or "Talent"
        gig_title = application.gig.title or "your gig"
        return [
            Notification(
                type=APPLICATION_ACCEPTED,
                recipient=email,
                template_data={
                    "talentName": talent_name,
                    "gigTitle": gig_title,
                    "clientName": (client.display_name if client else None)
                    or "Client",
                    "dashboardUrl": dashboard_url,
                },
            ),
            Notification(
                type=BOOKING_CONFIRMED,
                recipient=email,
                template_data={
                    "talentName": talent_name,
                    "gigTitle": gig_title,
                    "bookingDate": draft.date.date().isoformat(),
                    "bookingLocation": application.gig.location or "TBD",
                    "compensation": request.compensation or "TBD",
                    "dashboardUrl": dashboard_url,
                },
            ),
        ]


@dataclass
class BookingService:
    """Follow-up actions on bookings owned by a client."""

    repository: BookingRepository

    def cancel(
        self, principal: Principal, booking_id: UUID, reason: str | None = None
    ) -> BookingRecord:
        """Cancel a booking owned by the caller."""
        try:
            booking = self._load_owned(principal, booking_id)
            if booking.status == BOOKING_CANCELLED:
                raise Conflict("Booking already cancelled")
            notes = f"Cancellation reason: {reason}" if reason else booking.notes
            self._write(booking, BOOKING_CANCELLED, notes)
        except BookingError:
            raise
        except Exception as exc:
            _logger.exception(
                "Booking cancellation failed", extra={"booking_id": str(booking_id)}
            )
            raise InternalError() from exc
        _logger.info("Booking cancelled", extra={"booking_id": str(booking_id)})
        return replace(booking, status=BOOKING_CANCELLED, notes=notes)

    def update_status(
        self,
        principal: Principal,
        booking_id: UUID,
        status: str,
        notes: str | None = None,
    ) -> BookingRecord:
        """Change the status of a booking owned by the caller."""
        if status not in BOOKING_STATUSES:
            raise ValidationError(f"Invalid booking status: {status}")
        try:
            booking = self._load_owned(principal, booking_id)
            resolved_notes = notes or booking.notes
            self._write(booking, status, resolved_notes)
        except BookingError:
            raise
        except Exception as exc:
            _logger.exception(
                "Booking status update failed", extra={"booking_id": str(booking_id)}
            )
            raise InternalError() from exc
        return replace(booking, status=status, notes=resolved_notes)

    def _load_owned(self, principal: Principal, booking_id: UUID) -> BookingRecord:
        if not principal.is_authenticated or principal.id is None:
            raise Unauthorized()
        booking = self.repository.get_booking(booking_id)
        if booking is None:
            raise BookingNotFound()
        if booking.client_id != principal.id:
            raise Forbidden()
        return booking

    def _write(self, booking: BookingRecord, status: str, notes: str | None) -> None:
        updated = self.repository.update_booking(
            booking.id, status, notes, expected_status=booking.status
        )
        if not updated:
            raise Conflict("Booking status changed concurrently")
