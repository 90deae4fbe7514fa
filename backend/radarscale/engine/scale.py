"""IntervalScale: one-dimensional linear scale with a tick interval.

Holds the data extent ``[min, max]`` and the tick step. Extent and interval
are mutated in place by the axis-fitting code; the interval must always be
set after the extent because ``set_interval`` snapshots the current extent
as the nice tick extent.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from radarscale.utils.number import get_precision, nice, round_number

if TYPE_CHECKING:
    from radarscale.engine.series_data import SeriesData

logger = logging.getLogger(__name__)

# Tick generation gives up beyond this many ticks.
_TICK_SAFE_LIMIT = 10000


def get_interval_precision(interval: float) -> int:
    return get_precision(interval) + 2


def _clamp_into(value: float, extent: Sequence[float]) -> float:
    return max(min(value, extent[1]), extent[0])


def _fix_nice_tick_extent(nice_tick_extent: list[float], extent: Sequence[float]) -> None:
    if not math.isfinite(nice_tick_extent[0]):
        nice_tick_extent[0] = extent[0]
    if not math.isfinite(nice_tick_extent[1]):
        nice_tick_extent[1] = extent[1]
    nice_tick_extent[0] = _clamp_into(nice_tick_extent[0], extent)
    nice_tick_extent[1] = _clamp_into(nice_tick_extent[1], extent)
    if nice_tick_extent[0] > nice_tick_extent[1]:
        nice_tick_extent[0] = nice_tick_extent[1]


class IntervalScale:
    """Linear scale over a numeric extent."""

    type = "interval"

    def __init__(self) -> None:
        self._extent: list[float] = [0.0, 0.0]
        self._interval: float | None = None
        self._interval_precision: int = 2
        self._nice_extent: list[float] = [0.0, 0.0]
        self._is_blank = False

    # --- Extent ---

    def get_extent(self) -> list[float]:
        return list(self._extent)

    def set_extent(self, start: float, end: float) -> None:
        """Set the extent. A nan end leaves that end unchanged."""
        if not math.isnan(start):
            self._extent[0] = float(start)
        if not math.isnan(end):
            self._extent[1] = float(end)

    def union_extent(self, other: Sequence[float]) -> None:
        if other[0] < self._extent[0]:
            self._extent[0] = float(other[0])
        if other[1] > self._extent[1]:
            self._extent[1] = float(other[1])

    def union_extent_from_data(self, data: SeriesData, column: int) -> None:
        self.union_extent(data.get_approximate_extent(column))

    def is_blank(self) -> bool:
        return self._is_blank

    def set_blank(self, is_blank: bool) -> None:
        self._is_blank = is_blank

    def parse(self, value: float | str) -> float:
        return float(value)

    # --- Linear mapping ---

    def normalize(self, value: float) -> float:
        """Position of ``value`` inside the extent as a 0..1 fraction."""
        e0, e1 = self._extent
        if e1 == e0:
            return 0.5
        return (value - e0) / (e1 - e0)

    def scale(self, fraction: float) -> float:
        """Inverse of normalize."""
        e0, e1 = self._extent
        return fraction * (e1 - e0) + e0

    # --- Interval / ticks ---

    def get_interval(self) -> float | None:
        return self._interval

    def set_interval(self, interval: float) -> None:
        self._interval = interval
        self._nice_extent = list(self._extent)
        self._interval_precision = get_interval_precision(interval)

    def get_ticks(self) -> list[float]:
        """Tick values from the extent start to its end, stepping by the interval."""
        interval = self._interval
        extent = self._extent
        nice_tick_extent = self._nice_extent
        precision = self._interval_precision

        ticks: list[float] = []
        if not interval:
            return ticks

        if extent[0] < nice_tick_extent[0]:
            ticks.append(extent[0])

        tick = nice_tick_extent[0]
        while tick <= nice_tick_extent[1]:
            ticks.append(tick)
            tick = round_number(tick + interval, precision)
            if tick == ticks[-1]:
                break
            if len(ticks) > _TICK_SAFE_LIMIT:
                logger.debug("Tick generation exceeded %d ticks, giving up", _TICK_SAFE_LIMIT)
                return []

        last_nice_tick = ticks[-1] if ticks else nice_tick_extent[1]
        if extent[1] > last_nice_tick:
            ticks.append(extent[1])

        return ticks

    def nice_ticks(
        self,
        split_number: int | None = None,
        min_interval: float | None = None,
        max_interval: float | None = None,
    ) -> None:
        """Pick a nice interval that splits the extent into about ``split_number`` parts."""
        split_number = split_number or 5
        extent = self._extent
        span = extent[1] - extent[0]
        if not math.isfinite(span):
            return
        if span < 0:
            span = -span
            extent.reverse()

        interval = nice(span / split_number, True)
        if min_interval is not None and interval < min_interval:
            interval = min_interval
        if max_interval is not None and interval > max_interval:
            interval = max_interval

        precision = get_interval_precision(interval)
        nice_tick_extent = [
            round_number(math.ceil(extent[0] / interval) * interval, precision),
            round_number(math.floor(extent[1] / interval) * interval, precision),
        ]
        _fix_nice_tick_extent(nice_tick_extent, extent)

        self._interval = interval
        self._interval_precision = precision
        self._nice_extent = nice_tick_extent

    def nice_extent(
        self,
        split_number: int | None = None,
        fix_min: bool = False,
        fix_max: bool = False,
        min_interval: float | None = None,
        max_interval: float | None = None,
    ) -> None:
        """Widen the extent outward onto the nice interval, leaving fixed ends alone."""
        extent = self._extent
        if extent[0] == extent[1]:
            if extent[0] != 0:
                expand_size = abs(extent[0])
                if not fix_max:
                    extent[1] += expand_size / 2
                extent[0] -= expand_size / 2
            else:
                extent[1] = 1.0

        span = extent[1] - extent[0]
        if not math.isfinite(span):
            extent[0] = 0.0
            extent[1] = 1.0

        self.nice_ticks(split_number, min_interval, max_interval)

        interval = self._interval
        if not fix_min:
            extent[0] = round_number(math.floor(extent[0] / interval) * interval)
        if not fix_max:
            extent[1] = round_number(math.ceil(extent[1] / interval) * interval)

    def __repr__(self) -> str:
        return f"IntervalScale(extent={self._extent}, interval={self._interval})"
