"""RadarScale polar coordinate engine."""

from radarscale.engine.chart_model import ChartModel, IndicatorModel, RadarModel, SeriesModel
from radarscale.engine.indicator_axis import IndicatorAxis
from radarscale.engine.manager import CoordinateSystemManager, build_chart
from radarscale.engine.radar import Radar, increase_interval
from radarscale.engine.registry import CoordinateSystemRegistry, CoordinateSystemSpec, build_default_registry
from radarscale.engine.result import UnsupportedOperation
from radarscale.engine.scale import IntervalScale

__all__ = [
    "ChartModel",
    "IndicatorModel",
    "RadarModel",
    "SeriesModel",
    "IndicatorAxis",
    "CoordinateSystemManager",
    "build_chart",
    "Radar",
    "increase_interval",
    "CoordinateSystemRegistry",
    "CoordinateSystemSpec",
    "build_default_registry",
    "UnsupportedOperation",
    "IntervalScale",
]
