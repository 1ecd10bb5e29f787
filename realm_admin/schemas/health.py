"""Health check API schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness only: the process is up and serving requests."""

    status: str = "ok"
    version: str
