import os

from dotenv import load_dotenv

load_dotenv()


class Settings:

    APP_NAME: str = os.getenv("APP_NAME", "Modular Authentication API")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma-separated list; empty disables CORS
    CORS_ALLOWED_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]


settings = Settings()
