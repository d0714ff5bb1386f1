"""Common DTOs shared by gateway services."""
from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response for /healthz and /readyz."""

    status: Literal["ok", "unhealthy"]
    service: str = ""
