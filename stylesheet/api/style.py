"""POST /api/style/precompute -- resolve a style's transform list to a matrix."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from stylesheet.engine.precompute import StyleCompiler, get_compiler
from stylesheet.models.requests import PrecomputeRequest
from stylesheet.models.responses import PrecomputeResponse
from stylesheet.utils.invariant import InvariantViolation

router = APIRouter(prefix="/style")
logger = logging.getLogger(__name__)


@router.post("/precompute", response_model=PrecomputeResponse)
async def precompute(
    request: PrecomputeRequest,
    compiler: StyleCompiler = Depends(get_compiler),
) -> PrecomputeResponse:
    try:
        style = compiler.precompute(request.style)
    except (InvariantViolation, ValueError) as e:
        logger.warning("Rejected style: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return PrecomputeResponse(style=dict(style) if style is not None else None)
