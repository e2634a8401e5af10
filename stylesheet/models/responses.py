"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str
    transforms_registered: int
    dev: bool


class PrecomputeResponse(BaseModel):
    style: dict[str, Any] | None = None
