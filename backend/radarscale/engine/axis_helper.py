"""Axis extent helpers: raw extent resolution and the nice-extent primitive."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from radarscale.engine.chart_model import IndicatorModel
from radarscale.engine.scale import IntervalScale
from radarscale.utils.number import parse_percent


@dataclass
class ScaleExtentInfo:
    extent: list[float]
    fix_min: bool
    fix_max: bool


def get_scale_extent(scale: IntervalScale, model: IndicatorModel) -> ScaleExtentInfo:
    """Resolve the extent an axis should cover before niceing.

    Starts from the data extent already unioned into ``scale`` and applies
    the model's min/max (numbers, ``"dataMin"``/``"dataMax"`` or callables),
    boundary gap and cross-zero rule.
    """
    original = scale.get_extent()
    lo: Any = model.get_min()
    hi: Any = model.get_max()

    gap = [parse_percent(g, 1) for g in model.boundary_gap]
    span = (original[1] - original[0]) or abs(original[0])

    if lo == "dataMin":
        lo = original[0]
    elif callable(lo):
        lo = lo({"min": original[0], "max": original[1]})

    if hi == "dataMax":
        hi = original[1]
    elif callable(hi):
        hi = hi({"min": original[0], "max": original[1]})

    fix_min = lo is not None
    fix_max = hi is not None

    if lo is None:
        lo = original[0] - gap[0] * span
    if hi is None:
        hi = original[1] + gap[1] * span

    lo = float(lo) if _finite(lo) else math.nan
    hi = float(hi) if _finite(hi) else math.nan

    scale.set_blank(math.isnan(lo) or math.isnan(hi))

    if model.get_need_cross_zero():
        if lo > 0 and hi > 0 and not fix_min:
            lo = 0.0
        if lo < 0 and hi < 0 and not fix_max:
            hi = 0.0

    return ScaleExtentInfo(extent=[lo, hi], fix_min=fix_min, fix_max=fix_max)


def nice_scale_extent(scale: IntervalScale, model: IndicatorModel) -> None:
    """Set the scale to a pleasant extent and interval for ``model``."""
    info = get_scale_extent(scale, model)
    scale.set_extent(info.extent[0], info.extent[1])
    scale.nice_extent(
        split_number=model.split_number,
        fix_min=info.fix_min,
        fix_max=info.fix_max,
        min_interval=model.min_interval,
        max_interval=model.max_interval,
    )
    if model.interval is not None:
        scale.set_interval(model.interval)


def parse_axis_model_min_max(scale: IntervalScale, value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return math.nan
    return scale.parse(value)


def _finite(value: Any) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False
