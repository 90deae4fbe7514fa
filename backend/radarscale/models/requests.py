"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from radarscale.models.options import ChartOption, Viewport


class LayoutRequest(BaseModel):
    option: ChartOption = Field(..., description="Radar components and the series bound to them")
    viewport: Viewport | None = Field(
        default=None,
        description="Canvas size in pixels; the configured default when omitted",
    )


class HitRequest(LayoutRequest):
    x: float = Field(..., description="Pointer x coordinate")
    y: float = Field(..., description="Pointer y coordinate")
    radar_index: int = Field(default=0, ge=0, description="Radar component to hit-test")
