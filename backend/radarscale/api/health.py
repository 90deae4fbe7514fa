"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from radarscale.dependencies import get_registry
from radarscale.engine.registry import CoordinateSystemRegistry
from radarscale.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(registry: CoordinateSystemRegistry = Depends(get_registry)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        coordinate_systems_registered=registry.count,
    )
