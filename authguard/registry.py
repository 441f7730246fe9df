from typing import Optional

from authguard.protocols import SessionBackend, TokenVerifier, UserStore

token_verifier: Optional[TokenVerifier] = None
user_store: Optional[UserStore] = None
session_backend: Optional[SessionBackend] = None


def register_token_verifier(verifier: TokenVerifier) -> None:
    """
    Register the application's token verifier with authguard.
    authguard does not decode tokens itself; it asks the verifier for the subject.
    """
    global token_verifier
    token_verifier = verifier


def register_user_store(store: UserStore) -> None:
    """Register the store used to load the authenticated user's profile."""
    global user_store
    user_store = store


def register_session_backend(backend: SessionBackend) -> None:
    """Register the backend handling refresh, logout and 2FA verification."""
    global session_backend
    session_backend = backend


def reset_registry() -> None:
    global token_verifier, user_store, session_backend
    token_verifier = None
    user_store = None
    session_backend = None


def get_token_verifier() -> TokenVerifier:
    if token_verifier is None:
        raise RuntimeError(
            "authguard: token verifier is not registered. "
            "Call register_token_verifier(verifier) at startup or set AUTH_TOKEN_VERIFIER."
        )
    return token_verifier


def get_user_store() -> UserStore:
    if user_store is None:
        raise RuntimeError(
            "authguard: user store is not registered. "
            "Call register_user_store(store) at startup or set AUTH_USER_STORE."
        )
    return user_store


def get_session_backend() -> SessionBackend:
    """
    FastAPI dependency: returns the registered session backend.
    """
    if session_backend is None:
        raise RuntimeError(
            "authguard: session backend is not registered. "
            "Call register_session_backend(backend) at startup or set AUTH_SESSION_BACKEND."
        )
    return session_backend
