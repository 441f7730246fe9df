from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from authguard.validation import RequestSchema

REFRESH_TOKEN_MESSAGES = {
    "string_type": "Refresh token must be a string",
    "string_empty": "Refresh token is not allowed to be empty",
    "required": "Refresh token is required",
}


class RefreshTokenRequest(RequestSchema):
    """Request body for POST /auth/refresh. Unknown fields are kept, not validated."""
    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    violation_messages: ClassVar[dict[str, str]] = REFRESH_TOKEN_MESSAGES

    refresh_token: str = Field(
        ...,
        alias="refreshToken",
        min_length=1,
        description="Valid refresh token obtained from login or previous refresh",
    )


class LogoutRequest(RequestSchema):
    """Request body for POST /auth/logout."""
    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    violation_messages: ClassVar[dict[str, str]] = REFRESH_TOKEN_MESSAGES

    refresh_token: str = Field(
        ...,
        alias="refreshToken",
        min_length=1,
        description="Refresh token to invalidate",
    )


class TwoFactorVerifyRequest(RequestSchema):
    """Request body for POST /auth/2fa/verify."""
    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    violation_messages: ClassVar[dict[str, str]] = {
        "string_type": "2FA token must be a string",
        "string_empty": "2FA token is not allowed to be empty",
        "length": "2FA token must be 6 digits long",
        "pattern": "2FA token must only contain digits",
        "required": "2FA token is required",
    }

    token: str = Field(
        ...,
        min_length=6,
        max_length=6,
        pattern=r"^[0-9]+$",
        description="Six-digit code from the authenticator app",
    )


class MessageResponse(BaseModel):
    message: str


class TokenRefreshResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    access_token: str = Field(..., alias="accessToken")
    refresh_token: str = Field(..., alias="refreshToken")
