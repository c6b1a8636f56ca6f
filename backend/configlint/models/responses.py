"""API response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from configlint.linter import Issue


class LintResponse(BaseModel):
    """Lint result for one config document."""

    model_config = ConfigDict(populate_by_name=True)

    issues: list[Issue] = []
    strict: bool
    fatal: bool
    generated_at: datetime = Field(alias="generatedAt")


class HealthResponse(BaseModel):
    """Service health check response."""

    status: str = "ok"
    version: str
    uptime_seconds: float


class ErrorResponse(BaseModel):
    """Error body returned for every non-2xx response."""

    error: str
