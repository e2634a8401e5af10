"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from stylesheet.engine.precompute import get_compiler
from stylesheet.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    compiler = get_compiler()
    return HealthResponse(
        status="ok",
        version="0.1.0",
        transforms_registered=compiler.registry.count,
        dev=compiler.dev,
    )
