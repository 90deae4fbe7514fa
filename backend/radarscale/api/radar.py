"""POST /api/radar/*: radar layout and hit-testing."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from radarscale.config import Settings
from radarscale.dependencies import get_registry, get_settings
from radarscale.engine.chart_model import ChartModel
from radarscale.engine.manager import build_chart
from radarscale.engine.radar import Radar
from radarscale.engine.radar_layout import layout_series
from radarscale.engine.registry import CoordinateSystemRegistry
from radarscale.models.options import Viewport
from radarscale.models.requests import HitRequest, LayoutRequest
from radarscale.models.responses import AxisLayout, HitResponse, LayoutResponse, RadarLayout, SeriesLayout

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/radar")


def _viewport(req: LayoutRequest, settings: Settings) -> Viewport:
    if req.viewport is not None:
        return req.viewport
    return Viewport(width=settings.default_viewport_width, height=settings.default_viewport_height)


def _radar_layout(index: int, radar: Radar) -> RadarLayout:
    axes = [
        AxisLayout(
            dim=axis.dim,
            name=axis.name,
            angle=axis.angle,
            extent=axis.scale.get_extent(),
            interval=axis.scale.get_interval(),
            ticks=axis.scale.get_ticks(),
        )
        for axis in radar.get_indicator_axes()
    ]
    return RadarLayout(
        index=index,
        cx=radar.cx,
        cy=radar.cy,
        r0=radar.r0,
        r=radar.r,
        start_angle=radar.start_angle,
        dimensions=list(radar.dimensions),
        axes=axes,
    )


@router.post("/layout", response_model=LayoutResponse)
async def layout(
    req: LayoutRequest,
    settings: Settings = Depends(get_settings),
    registry: CoordinateSystemRegistry = Depends(get_registry),
) -> LayoutResponse:
    start = time.perf_counter()

    chart_model = ChartModel(req.option)
    manager = build_chart(chart_model, _viewport(req, settings), registry)

    radars = [
        _radar_layout(i, cs)
        for i, cs in enumerate(cs for cs in manager.get_coordinate_systems() if cs.type == Radar.type)
    ]
    series = [
        SeriesLayout(
            name=s.name,
            radar_index=s.get("radar_index") if s.coordinate_system is not None else None,
            points=layout_series(s),
        )
        for s in chart_model.each_series_by_type("radar")
    ]

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Laid out %d radar(s), %d series in %.1fms", len(radars), len(series), elapsed)

    return LayoutResponse(radars=radars, series=series, processing_time_ms=round(elapsed, 1))


@router.post("/hit", response_model=HitResponse)
async def hit(
    req: HitRequest,
    settings: Settings = Depends(get_settings),
    registry: CoordinateSystemRegistry = Depends(get_registry),
) -> HitResponse:
    chart_model = ChartModel(req.option)
    build_chart(chart_model, _viewport(req, settings), registry)

    radar_model = chart_model.get_component("radar", req.radar_index)
    if radar_model is None or radar_model.coordinate_system is None:
        raise HTTPException(status_code=404, detail=f"No radar at index {req.radar_index}")

    radar = radar_model.coordinate_system
    axis_index, value = radar.point_to_data((req.x, req.y))
    if axis_index < 0:
        return HitResponse()

    axis = radar.get_indicator_axes()[axis_index]
    return HitResponse(axis_index=axis_index, dim=axis.dim, name=axis.name, value=value)
