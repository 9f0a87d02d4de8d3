"""Tests for the HTTP surface."""

from uuid import uuid4

from fastapi.testclient import TestClient

from talent_booking.domain.profiles import Profile
from tests.fakes import (
    FakeIdentityResolver,
    InMemoryBookingRepository,
    InMemoryDatabase,
    auth_header,
)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_accept_creates_booking(
    client: TestClient,
    database: InMemoryDatabase,
    identity_resolver: FakeIdentityResolver,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    application = database.add_application(database.add_gig(gig_owner.id), talent.id)

    response = client.post(
        "/api/client/applications/accept",
        json={"applicationId": str(application.id), "compensation": "$450.00"},
        headers=auth_header(identity_resolver, gig_owner),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    booking = database.bookings[next(iter(database.bookings))]
    assert body["bookingId"] == str(booking.id)
    assert booking.compensation == 450


def test_accept_with_numeric_compensation(
    client: TestClient,
    database: InMemoryDatabase,
    identity_resolver: FakeIdentityResolver,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    application = database.add_application(database.add_gig(gig_owner.id), talent.id)

    response = client.post(
        "/api/client/applications/accept",
        json={"applicationId": str(application.id), "compensation": 300},
        headers=auth_header(identity_resolver, gig_owner),
    )

    assert response.status_code == 200
    assert database.bookings_for(application.id)[0].compensation == 300


def test_accept_requires_authentication(
    client: TestClient,
    database: InMemoryDatabase,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    application = database.add_application(database.add_gig(gig_owner.id), talent.id)

    response = client.post(
        "/api/client/applications/accept",
        json={"applicationId": str(application.id)},
        headers={"Authorization": "Bearer expired-token"},
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_accept_by_other_client_is_forbidden(
    client: TestClient,
    database: InMemoryDatabase,
    identity_resolver: FakeIdentityResolver,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    application = database.add_application(database.add_gig(gig_owner.id), talent.id)
    other_client = database.add_profile("client", "client")

    response = client.post(
        "/api/client/applications/accept",
        json={"applicationId": str(application.id)},
        headers=auth_header(identity_resolver, other_client),
    )

    assert response.status_code == 403
    assert database.bookings == {}


def test_accept_rejected_application_conflicts(
    client: TestClient,
    database: InMemoryDatabase,
    identity_resolver: FakeIdentityResolver,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    application = database.add_application(
        database.add_gig(gig_owner.id), talent.id, status="rejected"
    )

    response = client.post(
        "/api/client/applications/accept",
        json={"applicationId": str(application.id)},
        headers=auth_header(identity_resolver, gig_owner),
    )

    assert response.status_code == 409
    assert response.json() == {"error": "Cannot accept a rejected application"}


def test_accept_validates_application_id(
    client: TestClient,
    identity_resolver: FakeIdentityResolver,
    gig_owner: Profile,
) -> None:
    headers = auth_header(identity_resolver, gig_owner)

    missing = client.post(
        "/api/client/applications/accept", json={}, headers=headers
    )
    malformed = client.post(
        "/api/client/applications/accept",
        json={"applicationId": "abc"},
        headers=headers,
    )

    assert missing.status_code == 400
    assert missing.json() == {"error": "Missing applicationId"}
    assert malformed.status_code == 404
    assert malformed.json() == {"error": "Application not found"}


def test_admin_sets_status(
    client: TestClient,
    database: InMemoryDatabase,
    identity_resolver: FakeIdentityResolver,
    admin: Profile,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    application = database.add_application(database.add_gig(gig_owner.id), talent.id)

    response = client.post(
        "/api/admin/applications/status",
        json={"applicationId": str(application.id), "status": "under_review"},
        headers=auth_header(identity_resolver, admin),
    )

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert database.applications[application.id].status == "under_review"


def test_admin_status_errors(
    client: TestClient,
    database: InMemoryDatabase,
    identity_resolver: FakeIdentityResolver,
    admin: Profile,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    application = database.add_application(database.add_gig(gig_owner.id), talent.id)
    payload = {"applicationId": str(application.id), "status": "rejected"}

    anonymous = client.post("/api/admin/applications/status", json=payload)
    forbidden = client.post(
        "/api/admin/applications/status",
        json=payload,
        headers=auth_header(identity_resolver, gig_owner),
    )
    missing = client.post(
        "/api/admin/applications/status",
        json={"status": "rejected"},
        headers=auth_header(identity_resolver, admin),
    )
    malformed = client.post(
        "/api/admin/applications/status",
        json={"applicationId": "abc", "status": "rejected"},
        headers=auth_header(identity_resolver, admin),
    )

    assert anonymous.status_code == 401
    assert anonymous.json() == {"ok": False, "error": "Not authenticated"}
    assert forbidden.status_code == 403
    assert missing.status_code == 400
    assert missing.json()["error"] == "Missing applicationId or status"
    assert malformed.status_code == 404
    assert database.applications[application.id].status == "new"


def test_admin_accept_disabled_by_default(
    client: TestClient,
    database: InMemoryDatabase,
    identity_resolver: FakeIdentityResolver,
    admin: Profile,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    application = database.add_application(database.add_gig(gig_owner.id), talent.id)

    response = client.post(
        "/api/admin/applications/accept",
        json={"applicationId": str(application.id)},
        headers=auth_header(identity_resolver, admin),
    )

    assert response.status_code == 403
    assert database.bookings == {}


def test_cancel_booking(
    client: TestClient,
    database: InMemoryDatabase,
    identity_resolver: FakeIdentityResolver,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    booking = database.add_booking(
        gig_owner.id, talent.id, database.add_gig(gig_owner.id)
    )

    response = client.post(
        "/api/client/bookings/cancel",
        json={"bookingId": str(booking.id), "reason": "Budget cut"},
        headers=auth_header(identity_resolver, gig_owner),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["booking"]["status"] == "cancelled"
    assert body["booking"]["notes"] == "Cancellation reason: Budget cut"


def test_booking_status_endpoint(
    client: TestClient,
    database: InMemoryDatabase,
    identity_resolver: FakeIdentityResolver,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    booking = database.add_booking(
        gig_owner.id, talent.id, database.add_gig(gig_owner.id)
    )
    headers = auth_header(identity_resolver, gig_owner)

    updated = client.post(
        "/api/client/bookings/status",
        json={"bookingId": str(booking.id), "status": "completed"},
        headers=headers,
    )
    unknown = client.post(
        "/api/client/bookings/status",
        json={"bookingId": "abc", "status": "completed"},
        headers=headers,
    )

    assert updated.status_code == 200
    assert updated.json()["booking"]["status"] == "completed"
    assert unknown.status_code == 404
    assert unknown.json() == {"error": "Booking not found"}


def test_access_endpoint(
    client: TestClient,
    identity_resolver: FakeIdentityResolver,
    talent: Profile,
) -> None:
    anonymous = client.get("/api/access", params={"path": "/client/dashboard"})
    wrong_account = client.get(
        "/api/access",
        params={"path": "/client/dashboard"},
        headers=auth_header(identity_resolver, talent),
    )
    allowed = client.get(
        "/api/access",
        params={"path": "/talent/dashboard"},
        headers=auth_header(identity_resolver, talent),
    )

    assert anonymous.json() == {
        "allowed": False,
        "redirectTo": "/login?returnUrl=%2Fclient%2Fdashboard",
    }
    assert wrong_account.json() == {
        "allowed": False,
        "redirectTo": "/talent/dashboard",
    }
    assert allowed.json() == {"allowed": True, "redirectTo": None}


def test_destination_endpoint(
    client: TestClient,
    identity_resolver: FakeIdentityResolver,
    gig_owner: Profile,
) -> None:
    response = client.get(
        "/api/destination",
        params={"pathname": "/login", "returnUrl": "/client/gigs/new"},
        headers=auth_header(identity_resolver, gig_owner),
    )
    external = client.get(
        "/api/destination",
        params={"pathname": "/login", "returnUrl": "https://evil.example.com"},
        headers=auth_header(identity_resolver, gig_owner),
    )

    assert response.json() == {"allowed": False, "redirectTo": "/client/gigs/new"}
    assert external.json()["redirectTo"] == "/client/dashboard"


def test_talent_profile_endpoint_redacts(
    client: TestClient,
    database: InMemoryDatabase,
    identity_resolver: FakeIdentityResolver,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    url = f"/api/talent/{talent.id}"
    headers = auth_header(identity_resolver, gig_owner)

    before = client.get(url, headers=headers).json()
    database.add_application(database.add_gig(gig_owner.id), talent.id)
    after = client.get(url, headers=headers).json()

    assert "phone" not in before
    assert after["phone"] == "555-0100"


def test_talent_profile_endpoint_not_found(client: TestClient) -> None:
    assert client.get("/api/talent/abc").status_code == 404
    missing = client.get(f"/api/talent/{uuid4()}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Talent not found"}


def test_anonymous_malformed_accept_is_unauthorized(client: TestClient) -> None:
    response = client.post(
        "/api/client/applications/accept", json={"applicationId": "x"}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_admin_status_authenticates_before_validating(
    client: TestClient,
    identity_resolver: FakeIdentityResolver,
    gig_owner: Profile,
) -> None:
    payload = {"applicationId": "x", "status": "rejected"}

    anonymous = client.post("/api/admin/applications/status", json=payload)
    anonymous_missing = client.post("/api/admin/applications/status", json={})
    non_admin = client.post(
        "/api/admin/applications/status",
        json=payload,
        headers=auth_header(identity_resolver, gig_owner),
    )

    assert anonymous.status_code == 401
    assert anonymous.json() == {"ok": False, "error": "Not authenticated"}
    assert anonymous_missing.status_code == 401
    assert non_admin.status_code == 403


def test_store_failures_render_error_body(
    client: TestClient,
    database: InMemoryDatabase,
    identity_resolver: FakeIdentityResolver,
    booking_repository: InMemoryBookingRepository,
    gig_owner: Profile,
    talent: Profile,
) -> None:
    booking = database.add_booking(
        gig_owner.id, talent.id, database.add_gig(gig_owner.id)
    )
    booking_repository.fail_updates = True

    response = client.post(
        "/api/client/bookings/cancel",
        json={"bookingId": str(booking.id)},
        headers=auth_header(identity_resolver, gig_owner),
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Unexpected error"}
