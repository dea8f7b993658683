"""Health and readiness response models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ReadinessStatus(str, Enum):
    """Overall readiness verdict."""

    READY = "ready"
    NOT_READY = "not_ready"


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str = "ok"
    version: str


class ReadinessResponse(BaseModel):
    """Readiness response listing each local prerequisite.

    weatherapi.com itself is not contacted, so `checks` only covers what
    the process owns: the shared HTTP client and the API key.
    """

    status: ReadinessStatus
    version: str
    timestamp: datetime
    checks: dict[str, bool] = Field(..., description="Prerequisite name to pass/fail")
    weather_loaded: bool = Field(..., description="Whether a lookup has been displayed yet")

    @classmethod
    def from_checks(cls, version: str, checks: dict[str, bool], weather_loaded: bool) -> "ReadinessResponse":
        """Build a response whose status is READY only if every check passed."""
        return cls(
            status=ReadinessStatus.READY if all(checks.values()) else ReadinessStatus.NOT_READY,
            version=version,
            timestamp=datetime.now().astimezone(),
            checks=checks,
            weather_loaded=weather_loaded,
        )
