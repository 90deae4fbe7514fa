"""Chart option models: the declarative radar configuration."""

from __future__ import annotations

from typing import Any, Callable, Literal

from pydantic import BaseModel, Field
from pydantic.json_schema import SkipJsonSchema

# Absolute pixels, or a percentage / position keyword string.
Length = float | str

# Callable bounds receive {"min": data_min, "max": data_max}.
BoundCallable = Callable[[dict[str, float]], float]


class IndicatorOption(BaseModel):
    name: str | None = Field(default=None, description="Display name of the indicator")
    text: str | None = Field(default=None, description="Legacy alias of name")
    min: float | Literal["dataMin"] | SkipJsonSchema[BoundCallable] | None = None
    max: float | Literal["dataMax"] | SkipJsonSchema[BoundCallable] | None = None
    interval: float | None = Field(default=None, gt=0)
    min_interval: float | None = Field(default=None, gt=0)
    max_interval: float | None = Field(default=None, gt=0)


class RadarOption(BaseModel):
    center: tuple[Length, Length] = ("50%", "50%")
    radius: Length | tuple[Length, Length] = "75%"
    start_angle: float = Field(default=90, description="Angle of the first indicator, in degrees")
    split_number: int = Field(default=5, ge=1)
    scale: bool = Field(default=False, description="False forces the extent to include zero")
    boundary_gap: tuple[Length, Length] = (0, 0)
    name_formatter: str | SkipJsonSchema[Callable[[str, Any], str]] | None = None
    indicator: list[IndicatorOption] = Field(default_factory=list)


class RadarDataItem(BaseModel):
    name: str = ""
    value: list[float | None] = Field(default_factory=list)


class RadarSeriesOption(BaseModel):
    type: Literal["radar"] = "radar"
    name: str = ""
    coordinate_system: str = "radar"
    radar_index: int | None = 0
    data: list[RadarDataItem] = Field(default_factory=list)


class ChartOption(BaseModel):
    radar: list[RadarOption] = Field(default_factory=list)
    series: list[RadarSeriesOption] = Field(default_factory=list)


class Viewport(BaseModel):
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
