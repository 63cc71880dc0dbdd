"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for GET /health."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="APP_ENV the process was started with")
    database: Literal["connected", "disconnected"] = Field(
        description="Result of a trivial query against DATABASE_URL",
    )
