import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.logging_config import configure_logging
from app.routes.auth import router as auth_router
from app.routes.health import router as health_router
from app.routes.profile import router as profile_router
from app.settings import settings as app_settings
from authguard.utils.loader import configure_from_settings

logger = logging.getLogger(__name__)


def register_collaborators():
    """
    Register the token verifier, user store and session backend named in settings.
    Missing ones are reported; routes depending on them answer 500 until registered.
    """
    missing = configure_from_settings()
    for name in missing:
        logger.warning(f"{name} is not set; register it before serving authenticated routes")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(app_settings.LOG_LEVEL)
    logger.info(f"App running in {app_settings.ENVIRONMENT} mode. Log level: {app_settings.LOG_LEVEL}")
    register_collaborators()
    yield


app = FastAPI(title=app_settings.APP_NAME, lifespan=lifespan)

if app_settings.CORS_ALLOWED_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content = {"detail": "An unexpected error occurred."}
    if app_settings.ENVIRONMENT == "development":
        content["traceback"] = "".join(traceback.format_exception(exc))
    return JSONResponse(status_code=500, content=content)


@app.get("/")
async def welcome():
    return {"message": "Welcome to the Modular Authentication API!"}


app.include_router(health_router)
app.include_router(auth_router)
app.include_router(profile_router)
