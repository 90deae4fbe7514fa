"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from radarscale.engine.chart_model import ChartModel
from radarscale.engine.radar import Radar
from radarscale.models.options import ChartOption, Viewport

VIEWPORT = Viewport(width=400, height=400)


# Four indicators on very different scales, one series.
SKILLS_OPTION: dict[str, Any] = {
    "radar": [
        {
            "indicator": [
                {"name": "Sales"},
                {"name": "Administration"},
                {"name": "Technology", "min": 0, "max": 100},
                {"name": "Support"},
            ],
        }
    ],
    "series": [
        {
            "name": "Budget vs spending",
            "data": [
                {"name": "Allocated", "value": [10, 1000, 30, 0.5]},
                {"name": "Actual", "value": [80, 6500, 90, 0.8]},
            ],
        }
    ],
}


def make_chart(
    indicators: list[dict[str, Any]],
    rows: list[list[float | None]] | None = None,
    **radar_options: Any,
) -> ChartModel:
    """Single radar with one series holding ``rows``."""
    series = []
    if rows is not None:
        series.append({"name": "s0", "data": [{"value": r} for r in rows]})
    option = ChartOption.model_validate(
        {"radar": [{"indicator": indicators, **radar_options}], "series": series}
    )
    return ChartModel(option)


def make_radar(chart: ChartModel, viewport: Viewport = VIEWPORT) -> Radar:
    return Radar.create(chart, viewport)[0]


@pytest.fixture
def viewport() -> Viewport:
    return VIEWPORT


@pytest.fixture
def skills_chart() -> ChartModel:
    return ChartModel(ChartOption.model_validate(SKILLS_OPTION))


@pytest.fixture
def skills_radar(skills_chart: ChartModel) -> Radar:
    radar = make_radar(skills_chart)
    radar.update(skills_chart, VIEWPORT)
    return radar
