"""Route table shared by the access policy and the destination resolver."""

HOME = "/"
ABOUT = "/about"
GIGS = "/gigs"
TALENT_LANDING = "/talent"
SUSPENDED = "/suspended"

CLIENT_SIGNUP = "/client/signup"
CLIENT_APPLY = "/client/apply"
CLIENT_APPLY_SUCCESS = "/client/apply/success"
CLIENT_APPLICATION_STATUS = "/client/application-status"

LOGIN = "/login"
RESET_PASSWORD = "/reset-password"
UPDATE_PASSWORD = "/update-password"
VERIFICATION_PENDING = "/verification-pending"
CHOOSE_ROLE = "/choose-role"

TALENT_DASHBOARD = "/talent/dashboard"
CLIENT_DASHBOARD = "/client/dashboard"
ADMIN_DASHBOARD = "/admin/dashboard"

TALENT_PROFILE = "/talent/profile"
TALENT_SUBSCRIBE = "/talent/subscribe"

PREFIX_TALENT = "/talent/"
PREFIX_GIGS = "/gigs/"
PREFIX_CLIENT = "/client/"
PREFIX_ADMIN = "/admin/"
PREFIX_TALENT_SETTINGS = "/talent/settings"

# Reachable before a client account is approved.
CLIENT_ONBOARDING_PATHS = frozenset(
    {CLIENT_APPLY, CLIENT_APPLY_SUCCESS, CLIENT_APPLICATION_STATUS, CLIENT_SIGNUP}
)

PRIVATE_TALENT_ROOTS = (
    TALENT_DASHBOARD,
    TALENT_PROFILE,
    PREFIX_TALENT_SETTINGS,
    TALENT_SUBSCRIBE,
)

PUBLIC_ROUTES = frozenset(
    {
        HOME,
        ABOUT,
        GIGS,
        TALENT_LANDING,
        SUSPENDED,
        CLIENT_SIGNUP,
        CLIENT_APPLY,
        CLIENT_APPLY_SUCCESS,
        CLIENT_APPLICATION_STATUS,
    }
)
PUBLIC_ROUTE_PREFIXES = (PREFIX_TALENT, PREFIX_GIGS)

AUTH_ROUTES = frozenset(
    {LOGIN, RESET_PASSWORD, UPDATE_PASSWORD, VERIFICATION_PENDING, CHOOSE_ROLE}
)

POST_AUTH_FALLBACKS = frozenset({TALENT_DASHBOARD, CHOOSE_ROLE})
