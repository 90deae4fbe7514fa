"""Radar series layout: screen points of each data item's polygon."""

from __future__ import annotations

import math

from radarscale.engine.chart_model import SeriesModel


def layout_series(series: SeriesModel) -> list[list[tuple[float, float]]]:
    """One point per indicator axis for every data item of ``series``.

    A missing value sits at the radar center. The polygon is left open; the
    renderer closes it. Returns [] for a series with no radar bound.
    """
    radar = series.coordinate_system
    if radar is None:
        return []

    data = series.get_data()
    axes = radar.get_indicator_axes()
    polygons: list[list[tuple[float, float]]] = []
    for row in range(data.count()):
        points = []
        for i, axis in enumerate(axes):
            value = data.get(data.map_dimension(axis.dim), row)
            if math.isnan(value):
                points.append((radar.cx, radar.cy))
            else:
                points.append(radar.data_to_point(value, i))
        polygons.append(points)
    return polygons
