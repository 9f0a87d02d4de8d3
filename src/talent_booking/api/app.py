"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from talent_booking.api.admin import router as admin_router
from talent_booking.api.client import router as client_router
from talent_booking.api.dependencies import get_principal
from talent_booking.app_logging import configure_logging
from talent_booking.containers import AppContainer
from talent_booking.domain import routes
from talent_booking.domain.errors import BookingError, NotFound
from talent_booking.domain.profiles import Principal
from talent_booking.services.access import AccessDecision
from talent_booking.services.destinations import (
    decide_post_auth_redirect,
    decide_route,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(client_router)
    app.include_router(admin_router)

    @app.exception_handler(BookingError)
    async def booking_error_handler(
        request: Request, exc: BookingError
    ) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Request failed: %s %s", request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/access")
    async def check_access(
        request: Request,
        path: str,
        principal: Principal = Depends(get_principal),
    ) -> dict[str, object]:
        """Gate a page path for the calling principal."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.current_profile(principal)
        decision = decide_route(path, profile, principal.is_authenticated)
        return _serialize_decision(decision)

    @app.get("/api/destination")
    async def destination(  # noqa: PLR0913
        request: Request,
        pathname: str = routes.LOGIN,
        return_url: str | None = Query(default=None, alias="returnUrl"),
        fallback: str = routes.TALENT_DASHBOARD,
        signed_out: bool = Query(default=False, alias="signedOut"),
        principal: Principal = Depends(get_principal),
    ) -> dict[str, object]:
        """Return the post-authentication redirect for the caller."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.current_profile(principal)
        decision = decide_post_auth_redirect(
            pathname,
            profile,
            fallback=fallback,
            return_url_raw=return_url,
            signed_out=signed_out,
        )
        return _serialize_decision(decision)

    @app.get("/api/talent/{talent_user_id}")
    async def talent_profile(
        talent_user_id: str,
        request: Request,
        principal: Principal = Depends(get_principal),
    ) -> dict[str, object]:
        """Return a talent profile, hiding sensitive fields when not permitted."""
        try:
            talent_id = UUID(talent_user_id)
        except ValueError as exc:
            raise NotFound("Talent not found") from exc
        state_container: AppContainer = request.app.state.container
        return state_container.talent_profile_service.get_talent_profile(
            principal, talent_id
        )

    return app


def _serialize_decision(decision: AccessDecision) -> dict[str, object]:
    return {"allowed": decision.allowed, "redirectTo": decision.redirect_to}
