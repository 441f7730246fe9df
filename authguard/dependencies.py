import logging

from fastapi import HTTPException, Request

from authguard.guards import (
    AuthContext,
    Guard,
    Rejection,
    bearer_token_guard,
    role_guard,
    run_guards,
)

logger = logging.getLogger("authguard.dependencies")


def require(*guards: Guard):
    """
    Turn a guard chain into a FastAPI dependency.
    The handler receives the resulting AuthContext; a rejection becomes an HTTPException.
    """

    async def dependency(request: Request) -> AuthContext:
        outcome = await run_guards(request, guards)

        if isinstance(outcome, Rejection):
            logger.warning(
                "Request rejected: %s (%s) path=%s client=%s",
                outcome.detail,
                outcome.status_code,
                request.url.path,
                request.client.host if request.client else None,
            )
            raise HTTPException(
                status_code=outcome.status_code,
                detail=outcome.detail,
            )

        return outcome

    return dependency


def require_roles(*roles: str):
    """Authenticated user holding at least one of `roles`."""
    return require(bearer_token_guard, role_guard(*roles))


# MAIN DEPENDENCIES

get_current_user = require(bearer_token_guard)

get_current_admin = require_roles("admin")
