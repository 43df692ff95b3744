"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status, build version and database reachability."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    version: str = Field(description="Catalog API version")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    database: Literal["connected", "disconnected"] = Field(
        description="Result of a SELECT 1 against the store",
    )
