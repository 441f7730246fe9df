import time

from fastapi import APIRouter

from app.schemas.health import HealthCheckResponse

router = APIRouter(tags=["health"])

_started_at = time.monotonic()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """
    Liveness probe: uptime in seconds, "OK" and the current epoch millis.
    """
    return HealthCheckResponse(
        uptime=max(time.monotonic() - _started_at, 0.0),
        message="OK",
        timestamp=int(time.time() * 1000),
    )
