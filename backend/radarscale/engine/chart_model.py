"""Resolved option models the coordinate systems read from.

ChartModel wraps a validated ChartOption and hands out per-component models:
RadarModel (one per radar region), IndicatorModel (one per indicator, with
the radar-level axis options merged in) and SeriesModel (one per series).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from radarscale.engine.series_data import SeriesData
from radarscale.models.options import ChartOption, IndicatorOption, RadarOption, RadarSeriesOption

if TYPE_CHECKING:
    from radarscale.engine.radar import Radar


@dataclass
class IndicatorModel:
    """One indicator's effective axis options."""

    index: int
    name: str
    option: IndicatorOption
    min: Any = None
    max: Any = None
    boundary_gap: tuple[float | str, float | str] = (0, 0)
    split_number: int = 5
    scale: bool = False
    interval: float | None = None
    min_interval: float | None = None
    max_interval: float | None = None

    def get_min(self) -> Any:
        return self.min

    def get_max(self) -> Any:
        return self.max

    def get_need_cross_zero(self) -> bool:
        return not self.scale


class RadarModel:
    """One configured radar region."""

    main_type = "radar"

    def __init__(self, option: RadarOption, component_index: int = 0) -> None:
        self.option = option
        self.component_index = component_index
        self.coordinate_system: Radar | None = None
        self._indicator_models = self._build_indicator_models()

    def get(self, key: str) -> Any:
        return getattr(self.option, key)

    def get_indicator_models(self) -> list[IndicatorModel]:
        return self._indicator_models

    def _build_indicator_models(self) -> list[IndicatorModel]:
        opt = self.option
        models = []
        for idx, indicator in enumerate(opt.indicator):
            lo, hi = indicator.min, indicator.max
            # A positive max alone anchors the axis at zero, and so does a negative min alone.
            if _is_number(hi) and hi > 0 and not lo:
                lo = 0
            elif _is_number(lo) and lo < 0 and not hi:
                hi = 0

            models.append(
                IndicatorModel(
                    index=idx,
                    name=self._format_name(indicator),
                    option=indicator,
                    min=lo,
                    max=hi,
                    boundary_gap=opt.boundary_gap,
                    split_number=opt.split_number,
                    scale=opt.scale,
                    interval=indicator.interval,
                    min_interval=indicator.min_interval,
                    max_interval=indicator.max_interval,
                )
            )
        return models

    def _format_name(self, indicator: IndicatorOption) -> str:
        name = indicator.name if indicator.name is not None else (indicator.text or "")
        formatter = self.option.name_formatter
        if isinstance(formatter, str):
            return formatter.replace("{value}", name)
        if callable(formatter):
            return formatter(name, indicator)
        return name


class SeriesModel:
    """One radar series and its data store."""

    type = "radar"

    def __init__(self, option: RadarSeriesOption, series_index: int = 0) -> None:
        self.option = option
        self.series_index = series_index
        self.coordinate_system: Radar | None = None
        self._data = SeriesData.from_indicator_rows(
            [item.value for item in option.data],
            names=[item.name for item in option.data],
        )

    @property
    def name(self) -> str:
        return self.option.name

    def get(self, key: str) -> Any:
        return getattr(self.option, key)

    def get_data(self) -> SeriesData:
        return self._data


class ChartModel:
    """Global model over a whole chart option."""

    def __init__(self, option: ChartOption) -> None:
        self.option = option
        self._components = {
            "radar": [RadarModel(r, i) for i, r in enumerate(option.radar)],
        }
        self._series = [SeriesModel(s, i) for i, s in enumerate(option.series)]

    def get_component(self, main_type: str, index: int | None = 0) -> RadarModel | None:
        components = self._components.get(main_type, [])
        idx = index or 0
        if 0 <= idx < len(components):
            return components[idx]
        return None

    def each_component(self, main_type: str) -> Iterator[RadarModel]:
        yield from self._components.get(main_type, [])

    def each_series_by_type(self, series_type: str) -> Iterator[SeriesModel]:
        for series in self._series:
            if series.type == series_type:
                yield series

    def get_series(self) -> list[SeriesModel]:
        return list(self._series)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
