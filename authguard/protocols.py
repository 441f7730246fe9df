from typing import Protocol

from authguard.models.user import TokenPair, TwoFactorSetup, UserProfile


class TokenVerifier(Protocol):
    async def verify(self, token: str) -> str | None:
        """Return the subject (user id) of a valid access token, None otherwise."""
        ...


class UserStore(Protocol):
    async def find_user_by_id(self, user_id: str) -> UserProfile | None:
        ...


class SessionBackend(Protocol):
    async def refresh_tokens(self, refresh_token: str) -> TokenPair:
        ...

    async def logout(self, refresh_token: str) -> bool:
        ...

    async def setup_two_factor(self, user: UserProfile) -> TwoFactorSetup:
        """Create a pending TOTP secret for `user`; enabled on first successful verify."""
        ...

    async def verify_two_factor(self, user: UserProfile, code: str) -> bool:
        ...

    async def disable_two_factor(self, user: UserProfile) -> None:
        ...
