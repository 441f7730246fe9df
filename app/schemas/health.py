from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    uptime: float = Field(..., ge=0, description="Seconds since the service started")
    message: str
    timestamp: int = Field(..., description="Current time in epoch milliseconds")
