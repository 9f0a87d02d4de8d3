"""Role and account-type access policy.

Every check here is a pure function of a path and a (nullable) profile. A
missing profile never satisfies a predicate. Role drift between ``role`` and
``account_type`` is handled only in ``has_talent_access`` and
``has_client_access``; callers must not repeat the OR-check.

Data corruption can make both ``has_talent_access`` and ``has_client_access``
true (for example ``role="talent"`` with ``account_type="client"``). The
policy reports both capabilities in that case and leaves resolution to the
destination resolver, which prefers the client dashboard.
"""

from dataclasses import dataclass

from talent_booking.domain import routes
from talent_booking.domain.profiles import (
    ACCOUNT_CLIENT,
    ACCOUNT_TALENT,
    ROLE_ADMIN,
    ROLE_CLIENT,
    ROLE_TALENT,
    Profile,
)


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of an access check; ``redirect_to`` is filled by the caller."""

    allowed: bool
    redirect_to: str | None = None

    @classmethod
    def allow(cls) -> "AccessDecision":
        return cls(allowed=True)

    @classmethod
    def redirect(cls, to: str) -> "AccessDecision":
        return cls(allowed=False, redirect_to=to)


def has_talent_access(profile: Profile | None) -> bool:
    """Return true when either field marks the profile as talent."""
    if profile is None:
        return False
    return profile.account_type == ACCOUNT_TALENT or profile.role == ROLE_TALENT


def has_client_access(profile: Profile | None) -> bool:
    """Return true when either field marks the profile as client."""
    if profile is None:
        return False
    return profile.account_type == ACCOUNT_CLIENT or profile.role == ROLE_CLIENT


def is_admin(profile: Profile | None) -> bool:
    """Return true for admin profiles."""
    return profile is not None and profile.role == ROLE_ADMIN


def is_path_or_child(path: str, root: str) -> bool:
    return path == root or path.startswith(f"{root}/")


def needs_client_access(path: str) -> bool:
    """Client subtree, minus the public onboarding pages."""
    return (
        path.startswith(routes.PREFIX_CLIENT)
        and path not in routes.CLIENT_ONBOARDING_PATHS
    )


def needs_talent_access(path: str) -> bool:
    """Private talent pages only; the landing page and public profiles stay open."""
    if path == routes.TALENT_LANDING:
        return False
    return any(is_path_or_child(path, root) for root in routes.PRIVATE_TALENT_ROOTS)


def needs_admin_access(path: str) -> bool:
    return path.startswith(routes.PREFIX_ADMIN)


def can_access_path(path: str, profile: Profile | None) -> AccessDecision:
    """Decide whether the profile may open the path."""
    if needs_admin_access(path):
        return AccessDecision(allowed=is_admin(profile))
    if needs_client_access(path):
        return AccessDecision(allowed=has_client_access(profile))
    if needs_talent_access(path):
        return AccessDecision(allowed=has_talent_access(profile))
    return AccessDecision.allow()


def is_public_path(path: str) -> bool:
    """Return true for pages that are safe to view while signed out."""
    if path in routes.PUBLIC_ROUTES:
        return True
    if not any(path.startswith(prefix) for prefix in routes.PUBLIC_ROUTE_PREFIXES):
        return False
    if path.startswith(routes.PREFIX_TALENT):
        return not needs_talent_access(path)
    return True


def is_auth_route(path: str) -> bool:
    return path in routes.AUTH_ROUTES
