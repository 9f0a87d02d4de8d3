"""Post-authentication routing decisions."""

from urllib.parse import quote

from talent_booking.domain import routes
from talent_booking.domain.profiles import ACCOUNT_CLIENT, ACCOUNT_TALENT, Profile
from talent_booking.services.access import (
    AccessDecision,
    can_access_path,
    has_client_access,
    has_talent_access,
    is_admin,
    is_auth_route,
    is_public_path,
)


def determine_destination(
    profile: Profile | None, fallback: str = routes.TALENT_DASHBOARD
) -> str:
    """Return the dashboard a profile lands on after signing in."""
    if profile is None:
        return fallback
    # Admin first: admins may still carry a stale talent/client account_type.
    if is_admin(profile):
        return routes.ADMIN_DASHBOARD
    if has_client_access(profile):
        return routes.CLIENT_DASHBOARD
    if has_talent_access(profile):
        return routes.TALENT_DASHBOARD
    return fallback


def safe_return_url(value: str | None) -> str | None:
    """Keep only same-site absolute paths."""
    if not value:
        return None
    if "://" in value or value.startswith("//"):
        return None
    if not value.startswith("/"):
        return None
    return value


def _is_routable(profile: Profile | None) -> bool:
    if profile is None:
        return False
    if is_admin(profile):
        return True
    return profile.account_type in {ACCOUNT_TALENT, ACCOUNT_CLIENT}


def decide_post_auth_redirect(
    pathname: str,
    profile: Profile | None,
    fallback: str = routes.TALENT_DASHBOARD,
    return_url_raw: str | None = None,
    signed_out: bool = False,
) -> AccessDecision:
    """Decide where a freshly signed-in caller should go."""
    if signed_out and pathname in {routes.LOGIN, routes.CHOOSE_ROLE}:
        return AccessDecision.allow()

    if fallback not in routes.POST_AUTH_FALLBACKS:
        fallback = routes.TALENT_DASHBOARD
    destination = determine_destination(profile, fallback)
    if is_auth_route(pathname):
        return_url = safe_return_url(return_url_raw)
        # Return URLs are honored only once account_type has settled.
        if (
            return_url
            and _is_routable(profile)
            and can_access_path(return_url, profile).allowed
        ):
            return AccessDecision.redirect(return_url)
        return AccessDecision.redirect(destination)

    if pathname == routes.HOME:
        return AccessDecision.redirect(destination)
    return AccessDecision.allow()


def decide_route(
    path: str, profile: Profile | None, is_authenticated: bool
) -> AccessDecision:
    """Gate a page request, choosing a redirect when access is denied."""
    if profile is not None and profile.is_suspended:
        if path == routes.SUSPENDED:
            return AccessDecision.allow()
        return AccessDecision.redirect(routes.SUSPENDED)
    if is_public_path(path) or is_auth_route(path):
        return AccessDecision.allow()
    if not is_authenticated:
        login = f"{routes.LOGIN}?returnUrl={quote(path, safe='')}"
        return AccessDecision.redirect(login)
    if profile is None:
        return AccessDecision.redirect(routes.CHOOSE_ROLE)
    if can_access_path(path, profile).allowed:
        return AccessDecision.allow()
    destination = determine_destination(profile, fallback=routes.CHOOSE_ROLE)
    return AccessDecision.redirect(destination)
