"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class PrecomputeRequest(BaseModel):
    style: dict[str, Any] | None = Field(
        default=None,
        description="Flattened style record, optionally with a `transform` list",
    )
