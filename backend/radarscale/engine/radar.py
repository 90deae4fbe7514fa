"""Radar: polar coordinate system over N indicator axes.

Lifecycle, driven by CoordinateSystemManager:
    Radar(radar_model, chart_model, viewport)   builds axes, then resize()
    radar.resize(radar_model, viewport)         geometry: center, radii, angles
    radar.update(chart_model, viewport)         data-driven extent fitting
    radar.data_to_point() / point_to_data()     queries from layout and hit-testing

Every axis ends ``update`` with exactly ``split_number`` equal divisions, so the
concentric grid rings line up across axes of very different magnitude.
"""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from radarscale.engine.axis_helper import get_scale_extent, nice_scale_extent, parse_axis_model_min_max
from radarscale.engine.chart_model import ChartModel, RadarModel
from radarscale.engine.indicator_axis import IndicatorAxis
from radarscale.engine.result import UnsupportedOperation
from radarscale.engine.scale import IntervalScale
from radarscale.models.options import Viewport
from radarscale.utils.geometry import closest_angle_index, evenly_spaced_angles, polar_to_screen, screen_to_polar
from radarscale.utils.number import is_finite, parse_percent, round_number

logger = logging.getLogger(__name__)


def increase_interval(interval: float) -> float:
    """Advance an interval one rung along 1, 2, 5, 10, 20, 50, ...

    Non-positive or non-finite input yields nan or inf rather than raising.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        exp10 = float(np.power(10.0, np.floor(np.log10(np.float64(interval)))))
        f = float(np.float64(interval) / exp10)
    f = round_number(f)
    if f == 2:
        f = 5
    else:
        f *= 2
    return f * exp10


def _ceil_multiple(value: float, interval: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.ceil(np.float64(value) / interval) * interval)


class Radar:
    type = "radar"

    def __init__(self, radar_model: RadarModel, chart_model: ChartModel, viewport: Viewport) -> None:
        self.model = radar_model
        self.dimensions: list[str] = []
        self.cx = 0.0
        self.cy = 0.0
        self.r0 = 0.0
        self.r = 0.0
        self.start_angle = 0.0

        self._indicator_axes: list[IndicatorAxis] = []
        self._axis_by_indicator: dict[int, IndicatorAxis] = {}
        for idx, indicator_model in enumerate(radar_model.get_indicator_models()):
            dim = f"indicator_{idx}"
            axis = IndicatorAxis(dim, IntervalScale(), indicator_model)
            self._indicator_axes.append(axis)
            self._axis_by_indicator[indicator_model.index] = axis
            self.dimensions.append(dim)

        self.resize(radar_model, viewport)

    def get_indicator_axes(self) -> list[IndicatorAxis]:
        return self._indicator_axes

    def get_axis_for_indicator(self, indicator_index: int) -> IndicatorAxis | None:
        return self._axis_by_indicator.get(indicator_index)

    # --- Geometry ---

    def resize(self, radar_model: RadarModel, viewport: Viewport) -> None:
        """Recompute center, radii and axis angles from options and viewport size."""
        center = radar_model.get("center")
        view_width = viewport.width
        view_height = viewport.height
        view_size = min(view_width, view_height) / 2
        self.cx = parse_percent(center[0], view_width)
        self.cy = parse_percent(center[1], view_height)

        self.start_angle = radar_model.get("start_angle") * math.pi / 180

        # Radius may be `20`, `"80%"`, or a pair like `(10, "80%")`.
        radius = radar_model.get("radius")
        if isinstance(radius, (str, int, float)):
            radius = (0, radius)
        self.r0 = parse_percent(radius[0], view_size)
        self.r = parse_percent(radius[1], view_size)

        angles = evenly_spaced_angles(self.start_angle, len(self._indicator_axes))
        for axis, angle in zip(self._indicator_axes, angles):
            axis.set_extent(self.r0, self.r)
            axis.angle = float(angle)

        logger.debug(
            "Radar %d resized: center=(%.1f, %.1f) r0=%.1f r=%.1f axes=%d",
            radar_model.component_index,
            self.cx,
            self.cy,
            self.r0,
            self.r,
            len(self._indicator_axes),
        )

    def data_to_point(self, value: float, indicator_index: int) -> tuple[float, float]:
        axis = self._indicator_axes[indicator_index]
        return self.coord_to_point(axis.data_to_coord(value), indicator_index)

    def coord_to_point(self, coord: float, indicator_index: int) -> tuple[float, float]:
        axis = self._indicator_axes[indicator_index]
        return polar_to_screen(self.cx, self.cy, coord, axis.angle)

    def point_to_data(self, point: tuple[float, float]) -> tuple[int, float]:
        """Nearest axis to a screen point and the value under it.

        Returns (-1, nan) when there are no axes or the point is the center.
        """
        radius, radian = screen_to_polar(self.cx, self.cy, point[0], point[1])
        angles = np.array([axis.angle for axis in self._indicator_axes], dtype=np.float64)
        closest_idx = closest_angle_index(radian, angles)
        if closest_idx < 0:
            return (-1, math.nan)
        return (closest_idx, float(self._indicator_axes[closest_idx].coord_to_data(radius)))

    # --- Extent fitting ---

    def union_series_extents(self, chart_model: ChartModel) -> None:
        """Reset every axis to the empty [inf, -inf] extent, then fold in bound series data."""
        for axis in self._indicator_axes:
            axis.scale.set_extent(math.inf, -math.inf)

        for series in chart_model.each_series_by_type("radar"):
            if (
                series.get("coordinate_system") != "radar"
                or chart_model.get_component("radar", series.get("radar_index")) is not self.model
            ):
                continue
            data = series.get_data()
            for axis in self._indicator_axes:
                axis.scale.union_extent_from_data(data, data.map_dimension(axis.dim))

    def update(self, chart_model: ChartModel, viewport: Viewport | None = None) -> None:
        """Fit every axis's extent and interval to the series bound to this radar."""
        indicator_axes = self._indicator_axes
        radar_model = self.model

        self.union_series_extents(chart_model)

        split_number = radar_model.get("split_number")

        # Force every axis onto the same split number.
        for axis in indicator_axes:
            scale = axis.scale
            extent_info = get_scale_extent(scale, axis.model)
            raw_extent = extent_info.extent
            nice_scale_extent(scale, axis.model)

            fixed_min = parse_axis_model_min_max(scale, raw_extent[0] if extent_info.fix_min else None)
            fixed_max = parse_axis_model_min_max(scale, raw_extent[1] if extent_info.fix_max else None)
            interval = scale.get_interval()

            if fixed_min is not None and fixed_max is not None:
                scale.set_extent(fixed_min, fixed_max)
                scale.set_interval((fixed_max - fixed_min) / split_number)
            elif fixed_min is not None:
                # Grow the interval until the window reaches the data max.
                while True:
                    hi = fixed_min + interval * split_number
                    scale.set_extent(fixed_min, hi)
                    scale.set_interval(interval)
                    interval = increase_interval(interval)
                    if not (hi < raw_extent[1] and is_finite(hi, raw_extent[1])):
                        break
            elif fixed_max is not None:
                while True:
                    lo = fixed_max - interval * split_number
                    scale.set_extent(lo, fixed_max)
                    scale.set_interval(interval)
                    interval = increase_interval(interval)
                    if not (lo > raw_extent[0] and is_finite(lo, raw_extent[0])):
                        break
            else:
                niced_split_number = len(scale.get_ticks()) - 1
                if niced_split_number > split_number:
                    interval = increase_interval(interval)
                hi = _ceil_multiple(raw_extent[1], interval)
                lo = round_number(hi - interval * split_number)
                scale.set_extent(lo, hi)
                scale.set_interval(interval)

            logger.debug(
                "Axis %s fitted: raw=%s extent=%s interval=%s",
                axis.dim,
                raw_extent,
                scale.get_extent(),
                scale.get_interval(),
            )

    # --- Unsupported ---

    def convert_to_pixel(self, chart_model: ChartModel, finder: Any, value: Any) -> UnsupportedOperation:
        logger.warning("Not implemented.")
        return UnsupportedOperation("convert_to_pixel", self.type)

    def convert_from_pixel(self, chart_model: ChartModel, finder: Any, pixel: Any) -> UnsupportedOperation:
        logger.warning("Not implemented.")
        return UnsupportedOperation("convert_from_pixel", self.type)

    def contain_point(self, point: Any) -> UnsupportedOperation:
        logger.warning("Not implemented.")
        return UnsupportedOperation("contain_point", self.type)

    # --- Factory ---

    @classmethod
    def create(cls, chart_model: ChartModel, viewport: Viewport) -> list[Radar]:
        """Build one Radar per radar component and bind each radar series to its instance."""
        radar_list: list[Radar] = []
        for radar_model in chart_model.each_component("radar"):
            radar = cls(radar_model, chart_model, viewport)
            radar_list.append(radar)
            radar_model.coordinate_system = radar

        for series in chart_model.each_series_by_type("radar"):
            if series.get("coordinate_system") == "radar":
                idx = series.get("radar_index") or 0
                series.coordinate_system = radar_list[idx] if 0 <= idx < len(radar_list) else None
        return radar_list
