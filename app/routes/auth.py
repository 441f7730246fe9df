import logging

from fastapi import APIRouter, Depends, HTTPException, status

from authguard.dependencies import get_current_user
from authguard.errors import AuthError
from authguard.guards import AuthContext
from authguard.models.user import TwoFactorSetup
from authguard.protocols import SessionBackend
from authguard.registry import get_session_backend
from authguard.validation import body_openapi, validated_body

from app.schemas.auth import (
    LogoutRequest,
    MessageResponse,
    RefreshTokenRequest,
    TokenRefreshResponse,
    TwoFactorVerifyRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/refresh",
    response_model=TokenRefreshResponse,
    openapi_extra=body_openapi(RefreshTokenRequest),
)
async def refresh(
    data: RefreshTokenRequest = Depends(validated_body(RefreshTokenRequest)),
    backend: SessionBackend = Depends(get_session_backend),
):
    """
    Exchange a refresh token for a new token pair.
    Rotation and revocation of the old token belong to the session backend.
    """
    try:
        tokens = await backend.refresh_tokens(data.refresh_token)
    except AuthError as e:
        logger.warning("Token refresh rejected: %s", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return TokenRefreshResponse(
        message="Tokens refreshed successfully.",
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
    )


@router.post(
    "/logout",
    response_model=MessageResponse,
    openapi_extra=body_openapi(LogoutRequest),
)
async def logout(
    data: LogoutRequest = Depends(validated_body(LogoutRequest)),
    backend: SessionBackend = Depends(get_session_backend),
):
    """
    Invalidate a refresh token. Succeeds even if the token was already gone.
    """
    try:
        removed = await backend.logout(data.refresh_token)
    except AuthError as e:
        logger.warning("Logout rejected: %s", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)

    if removed:
        return MessageResponse(message="Logout successful. Refresh token invalidated.")
    return MessageResponse(message="Logout successful or token already invalidated.")


@router.post("/2fa/setup", response_model=TwoFactorSetup)
async def setup_two_factor(
    context: AuthContext = Depends(get_current_user),
    backend: SessionBackend = Depends(get_session_backend),
):
    """
    Start 2FA enrolment: returns the otpauth:// URL and the base32 secret
    for manual entry. 2FA becomes active after the first successful verify.
    """
    try:
        setup = await backend.setup_two_factor(context.user)
    except AuthError as e:
        logger.warning("2FA setup rejected for user %s: %s", context.user.id, e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)

    logger.info("2FA setup started for user %s", context.user.id)
    return setup


@router.post(
    "/2fa/verify",
    response_model=MessageResponse,
    openapi_extra=body_openapi(TwoFactorVerifyRequest),
)
async def verify_two_factor(
    context: AuthContext = Depends(get_current_user),
    data: TwoFactorVerifyRequest = Depends(validated_body(TwoFactorVerifyRequest)),
    backend: SessionBackend = Depends(get_session_backend),
):
    try:
        valid = await backend.verify_two_factor(context.user, data.token)
    except AuthError as e:
        logger.warning("2FA verification rejected for user %s: %s", context.user.id, e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)

    if not valid:
        logger.warning("Invalid 2FA token for user %s", context.user.id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid 2FA token.",
        )

    return MessageResponse(message="2FA token verified successfully.")


@router.post("/2fa/disable", response_model=MessageResponse)
async def disable_two_factor(
    context: AuthContext = Depends(get_current_user),
    backend: SessionBackend = Depends(get_session_backend),
):
    try:
        await backend.disable_two_factor(context.user)
    except AuthError as e:
        logger.warning("2FA disable rejected for user %s: %s", context.user.id, e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)

    logger.info("2FA disabled for user %s", context.user.id)
    return MessageResponse(message="2FA disabled successfully.")
