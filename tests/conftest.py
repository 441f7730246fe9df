"""
Test fixtures for authguard and the demo app.

Token verification and session handling are external collaborators;
tests register in-process fakes for them and an InMemoryUserStore
holding a regular user and an admin.
"""
import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings BEFORE importing modules that read them
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["AUTH_MAX_TOKEN_LEN"] = "2048"

from authguard import registry
from authguard.errors import AuthError
from authguard.models.user import TokenPair, TwoFactorSetup, UserProfile
from authguard.stores.memory import InMemoryUserStore

USER_TOKEN = "user-access-token"
ADMIN_TOKEN = "admin-access-token"
ORPHAN_TOKEN = "token-for-deleted-user"
EXPIRED_TOKEN = "expired-access-token"

VALID_REFRESH = "valid-refresh-token"
STALE_REFRESH = "already-revoked-refresh-token"
REVOKED_REFRESH = "revoked-refresh-token"


class FakeTokenVerifier:
    """Maps fixed token strings to user ids, standing in for a JWT verifier."""

    def __init__(self):
        self.subjects = {
            USER_TOKEN: "user-1",
            ADMIN_TOKEN: "admin-1",
            ORPHAN_TOKEN: "ghost-1",
        }
        self.calls = []

    async def verify(self, token: str) -> str | None:
        self.calls.append(token)
        if token == EXPIRED_TOKEN:
            raise AuthError("Token expired. Please log in again.", status_code=401)
        return self.subjects.get(token)


class FakeSessionBackend:

    def __init__(self):
        self.refreshed = []
        self.logged_out = []
        self.two_factor_checks = []
        self.two_factor_setups = []
        self.two_factor_disabled = []

    async def refresh_tokens(self, refresh_token: str) -> TokenPair:
        self.refreshed.append(refresh_token)
        if refresh_token != VALID_REFRESH:
            raise AuthError("Refresh token not recognized or has been invalidated.", status_code=401)
        return TokenPair(access_token="new-access", refresh_token="new-refresh")

    async def logout(self, refresh_token: str) -> bool:
        self.logged_out.append(refresh_token)
        if refresh_token == REVOKED_REFRESH:
            raise AuthError("Invalid token type. Expected refresh token for logout.", status_code=401)
        return refresh_token == VALID_REFRESH

    async def setup_two_factor(self, user: UserProfile) -> TwoFactorSetup:
        self.two_factor_setups.append(user.id)
        if user.is_two_factor_enabled:
            raise AuthError("2FA is already enabled.", status_code=409)
        return TwoFactorSetup(
            otp_auth_url=f"otpauth://totp/AuthApp:{user.email}?secret=JBSWY3DPEHPK3PXP&issuer=AuthApp",
            base32_secret="JBSWY3DPEHPK3PXP",
        )

    async def verify_two_factor(self, user: UserProfile, code: str) -> bool:
        self.two_factor_checks.append((user.id, code))
        return code == "123456"

    async def disable_two_factor(self, user: UserProfile) -> None:
        self.two_factor_disabled.append(user.id)


@pytest.fixture
def regular_user():
    return UserProfile(
        id="user-1",
        email="user@test.com",
        display_name="Regular User",
        provider="google",
        roles=["user"],
    )


@pytest.fixture
def admin_user():
    return UserProfile(
        id="admin-1",
        email="admin@test.com",
        display_name="Admin User",
        provider="github",
        roles=["user", "admin"],
    )


@pytest_asyncio.fixture
async def user_store(regular_user, admin_user):
    store = InMemoryUserStore()
    await store.add_user(regular_user)
    await store.add_user(admin_user)
    return store


@pytest.fixture
def token_verifier():
    return FakeTokenVerifier()


@pytest.fixture
def session_backend():
    return FakeSessionBackend()


@pytest.fixture
def registered(user_store, token_verifier, session_backend):
    """Register the fakes for the duration of a test."""
    registry.register_user_store(user_store)
    registry.register_token_verifier(token_verifier)
    registry.register_session_backend(session_backend)
    yield
    registry.reset_registry()


@pytest.fixture(autouse=True)
def clear_registry():
    """Start and end every test with nothing registered."""
    registry.reset_registry()
    yield
    registry.reset_registry()


@pytest_asyncio.fixture
async def client():
    from app.main import app

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
