import logging
from typing import Awaitable, Callable, Sequence

from fastapi import Request, status
from pydantic import BaseModel

from authguard import registry
from authguard.errors import AuthError
from authguard.models.user import UserProfile
from authguard.settings import settings

logger = logging.getLogger("authguard.guards")


class AuthContext(BaseModel):
    """Authenticated identity threaded through the guard chain into the handler."""
    user: UserProfile


class Rejection(BaseModel):
    status_code: int
    detail: str


Guard = Callable[[Request, AuthContext | None], Awaitable[AuthContext | Rejection]]


def _extract_token(request: Request) -> str | None:
    """
    Access token from the header:
    Authorization: Bearer <token>
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None

    scheme, _, token = auth_header.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


async def bearer_token_guard(
    request: Request,
    context: AuthContext | None = None,
) -> AuthContext | Rejection:
    """
    Authenticate the request by its bearer token:
    • token must be present and not oversized
    • the registered verifier resolves it to a user id
    • the registered user store supplies the profile
    """
    token = _extract_token(request)

    if not token:
        return Rejection(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    if len(token) > settings.MAX_TOKEN_LEN:
        return Rejection(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )

    try:
        user_id = await registry.get_token_verifier().verify(token)
    except AuthError as e:
        return Rejection(status_code=e.status_code, detail=e.message)

    if not user_id:
        return Rejection(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )

    user = await registry.get_user_store().find_user_by_id(user_id)
    if user is None:
        return Rejection(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    return AuthContext(user=user)


def role_guard(*roles: str) -> Guard:
    """
    Build a guard admitting users that hold at least one of `roles`.
    Misconfigured roles fail at declaration time, not per request.
    """
    if any(not isinstance(role, str) or not role.strip() for role in roles):
        raise ValueError(
            f"role_guard configured with invalid role(s) {roles!r}. "
            f"Each role must be a non-empty string."
        )

    required = frozenset(roles)

    if not required:
        logger.warning(
            "role_guard used with no required roles; every authenticated user is allowed"
        )

    async def guard(request: Request, context: AuthContext | None) -> AuthContext | Rejection:
        if context is None:
            return Rejection(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Authentication required",
            )

        if not required:
            return context

        user = context.user
        if not user.roles:
            logger.warning(
                "RBAC: user %s has no roles assigned, path=%s",
                user.id,
                request.url.path,
            )
            return Rejection(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden: Insufficient permissions (user roles not available or not assigned).",
            )

        if user.has_any_role(required):
            return context

        logger.warning(
            "RBAC: user %s with roles %s lacks any of %s, path=%s",
            user.id,
            user.roles,
            sorted(required),
            request.url.path,
        )
        return Rejection(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: You do not have the required permissions.",
        )

    return guard


check_roles = role_guard


async def run_guards(request: Request, guards: Sequence[Guard]) -> AuthContext | Rejection:
    """
    Run guards in order, passing each the context produced so far.
    Stops at the first rejection.
    """
    context = None
    for guard in guards:
        outcome = await guard(request, context)
        if isinstance(outcome, Rejection):
            return outcome
        context = outcome

    if context is None:
        return Rejection(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return context
