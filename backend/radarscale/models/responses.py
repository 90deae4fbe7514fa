"""API response models. Non-finite floats serialize as null."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    coordinate_systems_registered: int = 0


class AxisLayout(BaseModel):
    dim: str
    name: str
    angle: float
    extent: list[float]
    interval: float | None = None
    ticks: list[float] = Field(default_factory=list)


class RadarLayout(BaseModel):
    index: int
    cx: float
    cy: float
    r0: float
    r: float
    start_angle: float
    dimensions: list[str] = Field(default_factory=list)
    axes: list[AxisLayout] = Field(default_factory=list)


class SeriesLayout(BaseModel):
    name: str = ""
    radar_index: int | None = None
    points: list[list[tuple[float, float]]] = Field(default_factory=list)


class LayoutResponse(BaseModel):
    radars: list[RadarLayout] = Field(default_factory=list)
    series: list[SeriesLayout] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class HitResponse(BaseModel):
    axis_index: int = -1
    dim: str | None = None
    name: str | None = None
    value: float | None = None
