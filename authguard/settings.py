import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """
    authguard settings loaded from environment variables.
    Independent of application settings.
    """

    # Guard against oversized bearer tokens
    MAX_TOKEN_LEN: int = int(os.getenv("AUTH_MAX_TOKEN_LEN", "2048"))

    # Dotted paths to the external collaborators, e.g.: "myproject.tokens.JWTVerifier"
    AUTH_TOKEN_VERIFIER: str | None = os.getenv("AUTH_TOKEN_VERIFIER")
    AUTH_USER_STORE: str | None = os.getenv(
        "AUTH_USER_STORE", "authguard.stores.memory.InMemoryUserStore"
    )
    AUTH_SESSION_BACKEND: str | None = os.getenv("AUTH_SESSION_BACKEND")


settings = Settings()
