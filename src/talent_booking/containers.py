"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from talent_booking.adapters.notification_client import HttpxNotificationSink
from talent_booking.adapters.supabase_application_repository import (
    SupabaseApplicationRepository,
)
from talent_booking.adapters.supabase_booking_repository import (
    SupabaseBookingRepository,
)
from talent_booking.adapters.supabase_identity_resolver import (
    SupabaseIdentityResolver,
)
from talent_booking.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from talent_booking.adapters.supabase_relationship_repository import (
    SupabaseRelationshipRepository,
)
from talent_booking.adapters.supabase_talent_profile_repository import (
    SupabaseTalentProfileRepository,
)
from talent_booking.config import Settings, parse_base_url
from talent_booking.services.applications import AdminApplicationService
from talent_booking.services.bookings import AcceptApplicationService, BookingService
from talent_booking.services.identity import ProfileService
from talent_booking.services.notifications import NotificationService
from talent_booking.services.relationships import (
    RelationshipService,
    TalentProfileService,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    relationship_service: RelationshipService
    talent_profile_service: TalentProfileService
    admin_application_service: AdminApplicationService
    accept_application_service: AcceptApplicationService
    booking_service: BookingService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    site_url = parse_base_url(resolved_settings.site_url)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    application_repository = SupabaseApplicationRepository(supabase_client)
    booking_repository = SupabaseBookingRepository(supabase_client)
    talent_profile_repository = SupabaseTalentProfileRepository(supabase_client)
    profile_service = ProfileService(
        identity_resolver=SupabaseIdentityResolver(supabase_client),
        repository=SupabaseProfileRepository(supabase_client),
    )
    relationship_service = RelationshipService(
        SupabaseRelationshipRepository(supabase_client)
    )
    notification_sink = HttpxNotificationSink.create(site_url)
    notification_service = NotificationService(
        sink=notification_sink,
        enabled=resolved_settings.notifications_enabled,
    )
    accept_application_service = AcceptApplicationService(
        application_repository=application_repository,
        booking_repository=booking_repository,
        talent_profile_repository=talent_profile_repository,
        profile_service=profile_service,
        notification_service=notification_service,
        site_url=site_url,
        booking_lead_days=resolved_settings.booking_lead_days,
        admin_accept_enabled=resolved_settings.admin_accept_enabled,
    )

    async def close_resources() -> None:
        await notification_sink.close()

    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        relationship_service=relationship_service,
        talent_profile_service=TalentProfileService(
            repository=talent_profile_repository,
            relationship_service=relationship_service,
            profile_service=profile_service,
        ),
        admin_application_service=AdminApplicationService(
            repository=application_repository,
            profile_service=profile_service,
        ),
        accept_application_service=accept_application_service,
        booking_service=BookingService(booking_repository),
        close_resources=close_resources,
    )
