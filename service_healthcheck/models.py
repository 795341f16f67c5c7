# service_healthcheck/models.py
from typing import Literal
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field


class ServiceTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    url: str
    port: int = Field(ge=1, le=65535)

    @property
    def access_url(self) -> str:
        """Origin of the service (scheme://host:port), without the probe path."""
        parts = urlsplit(self.url)
        scheme = parts.scheme or "http"
        host = parts.hostname or "localhost"
        return f"{scheme}://{host}:{parts.port or self.port}"


class Running(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["running"] = "running"
    target: ServiceTarget
    status: str | None = None


class NotRunning(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["not_running"] = "not_running"
    target: ServiceTarget
    error: str


class TimedOut(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["timed_out"] = "timed_out"
    target: ServiceTarget


CheckOutcome = Running | NotRunning | TimedOut


def is_running(outcome: CheckOutcome) -> bool:
    return isinstance(outcome, Running)
