"""Tests for the shared-split-number extent fitting in Radar.update."""

from __future__ import annotations

import math

import pytest

from radarscale.engine.chart_model import ChartModel
from radarscale.engine.radar import Radar, increase_interval
from radarscale.models.options import ChartOption
from tests.conftest import VIEWPORT, make_chart, make_radar


def _fit(indicators, rows, **radar_options):
    chart = make_chart(indicators, rows, **radar_options)
    radar = make_radar(chart)
    radar.update(chart, VIEWPORT)
    return radar


def _fitted(radar: Radar, idx: int = 0):
    scale = radar.get_indicator_axes()[idx].scale
    return scale.get_extent(), scale.get_interval()


class TestIncreaseInterval:
    @pytest.mark.parametrize(
        "interval,expected",
        [(1, 2), (2, 5), (5, 10), (10, 20), (20, 50), (50, 100), (0.1, 0.2), (0.2, 0.5), (0.5, 1)],
    )
    def test_rungs(self, interval, expected):
        assert increase_interval(interval) == pytest.approx(expected)

    def test_never_leaves_1_2_5(self):
        interval = 0.01
        for _ in range(12):
            interval = increase_interval(interval)
            leading = float(f"{interval:.6e}".split("e")[0])
            assert leading in (1.0, 2.0, 5.0)

    def test_degenerate_input_does_not_raise(self):
        assert math.isnan(increase_interval(0))
        assert math.isnan(increase_interval(math.inf))
        assert math.isnan(increase_interval(-1))


class TestBothFixed:
    def test_extent_and_interval(self):
        radar = _fit([{"name": "a", "min": 0, "max": 100}], [[37], [62]])
        extent, interval = _fitted(radar)
        assert extent == [0, 100]
        assert interval == 20

    def test_ignores_data_outside_bounds(self):
        radar = _fit([{"name": "a", "min": 0, "max": 100}], [[370]], split_number=4)
        extent, interval = _fitted(radar)
        assert extent == [0, 100]
        assert interval == 25

    def test_committed_without_data(self):
        radar = _fit([{"name": "a", "min": 0, "max": 100}], None)
        extent, interval = _fitted(radar)
        assert extent == [0, 100]
        assert interval == 20


class TestOnlyMinFixed:
    def test_grows_interval_until_data_max_covered(self):
        radar = _fit([{"name": "a", "min": 10}], [[12], [347]])
        extent, interval = _fitted(radar)
        assert extent == [10, 510]
        assert interval == 100

    @pytest.mark.parametrize("data_max", [11, 55, 99, 347, 1234, 98765])
    def test_coverage(self, data_max):
        radar = _fit([{"name": "a", "min": 10}], [[12], [data_max]])
        (lo, hi), interval = _fitted(radar)
        assert lo == 10
        assert hi >= data_max
        assert (hi - lo) / interval == pytest.approx(5)


class TestOnlyMaxFixed:
    def test_grows_interval_until_data_min_covered(self):
        radar = _fit([{"name": "a", "max": -10}], [[-347], [-12]])
        extent, interval = _fitted(radar)
        assert extent == [-510, -10]
        assert interval == 100

    @pytest.mark.parametrize("data_min", [-11, -55, -347, -98765])
    def test_coverage(self, data_min):
        radar = _fit([{"name": "a", "max": -10}], [[-12], [data_min]])
        (lo, hi), interval = _fitted(radar)
        assert hi == -10
        assert lo <= data_min
        assert (hi - lo) / interval == pytest.approx(5)


class TestNeitherFixed:
    def test_max_snaps_to_interval_and_min_follows(self):
        radar = _fit([{"name": "a"}], [[10], [80]])
        extent, interval = _fitted(radar)
        assert extent == [-20, 80]
        assert interval == 20

    def test_interval_grows_when_nice_split_is_finer(self):
        radar = _fit([{"name": "a"}], [[0], [70]])
        extent, interval = _fitted(radar)
        assert extent == [-20, 80]
        assert interval == 20

    def test_zero_based_data_keeps_zero_floor(self):
        radar = _fit([{"name": "a"}], [[0], [14]])
        extent, interval = _fitted(radar)
        assert extent == [0, 15]
        assert interval == 3

    def test_no_data_falls_back_to_unit_extent(self):
        radar = _fit([{"name": "a"}], None)
        extent, interval = _fitted(radar)
        assert extent == [0, 1]
        assert interval == pytest.approx(0.2)


def test_every_axis_gets_the_same_split_number(skills_radar):
    for axis in skills_radar.get_indicator_axes():
        lo, hi = axis.scale.get_extent()
        assert (hi - lo) / axis.scale.get_interval() == pytest.approx(5)
        assert math.isfinite(lo) and math.isfinite(hi)


def test_large_axis_fitting(skills_radar):
    extent, interval = _fitted(skills_radar, 1)
    assert extent == [-2000, 8000]
    assert interval == 2000


def test_update_is_idempotent(skills_chart):
    radar = make_radar(skills_chart)
    radar.update(skills_chart, VIEWPORT)
    first = [(a.scale.get_extent(), a.scale.get_interval()) for a in radar.get_indicator_axes()]
    radar.update(skills_chart, VIEWPORT)
    second = [(a.scale.get_extent(), a.scale.get_interval()) for a in radar.get_indicator_axes()]
    assert first == second


def test_union_step_leaves_sentinel_without_data():
    chart = make_chart([{"name": "a"}, {"name": "b"}], None)
    radar = make_radar(chart)
    radar.union_series_extents(chart)
    for axis in radar.get_indicator_axes():
        assert axis.scale.get_extent() == [math.inf, -math.inf]


def test_series_of_other_radar_is_skipped():
    chart = ChartModel(
        ChartOption.model_validate(
            {
                "radar": [{"indicator": [{"name": "a"}]}, {"indicator": [{"name": "b"}]}],
                "series": [
                    {"radar_index": 1, "data": [{"value": [500]}]},
                    {"coordinate_system": "polar", "data": [{"value": [900]}]},
                ],
            }
        )
    )
    first, second = Radar.create(chart, VIEWPORT)
    first.union_series_extents(chart)
    second.union_series_extents(chart)
    assert first.get_indicator_axes()[0].scale.get_extent() == [math.inf, -math.inf]
    assert second.get_indicator_axes()[0].scale.get_extent() == [500, 500]


def test_data_min_bound_pins_axis_start():
    radar = _fit([{"name": "a", "min": "dataMin"}], [[12], [347]])
    (lo, hi), _ = _fitted(radar)
    assert lo == 12
    assert hi >= 347
