"""Tests for IntervalScale."""

import math

import pytest

from radarscale.engine.scale import IntervalScale
from radarscale.engine.series_data import SeriesData


def _scale(lo: float, hi: float) -> IntervalScale:
    scale = IntervalScale()
    scale.set_extent(lo, hi)
    return scale


def test_set_extent_ignores_nan():
    scale = _scale(1, 5)
    scale.set_extent(math.nan, 9)
    assert scale.get_extent() == [1, 9]


def test_union_extent_from_empty_sentinel():
    scale = _scale(math.inf, -math.inf)
    scale.union_extent([3, 4])
    scale.union_extent([-1, 2])
    assert scale.get_extent() == [-1, 4]


def test_union_extent_from_data_skips_missing_values():
    data = SeriesData.from_indicator_rows([[1, None], [7, 3], [None, 9]])
    scale = _scale(math.inf, -math.inf)
    scale.union_extent_from_data(data, 0)
    assert scale.get_extent() == [1, 7]


def test_normalize_and_scale_are_inverse():
    scale = _scale(-20, 80)
    assert scale.normalize(30) == pytest.approx(0.5)
    assert scale.scale(0.5) == pytest.approx(30)
    assert scale.normalize(180) == pytest.approx(2.0)


def test_normalize_zero_width():
    assert _scale(4, 4).normalize(10) == 0.5


def test_nice_extent_widens_onto_interval():
    scale = _scale(0, 347)
    scale.nice_extent(split_number=5)
    assert scale.get_interval() == 50
    assert scale.get_extent() == [0, 350]


def test_nice_extent_keeps_fixed_end():
    scale = _scale(10, 347)
    scale.nice_extent(split_number=5, fix_min=True)
    assert scale.get_extent() == [10, 350]


def test_nice_extent_zero_width_at_zero():
    scale = _scale(0, 0)
    scale.nice_extent(split_number=5)
    assert scale.get_extent() == [0, 1]
    assert scale.get_interval() == pytest.approx(0.2)


def test_nice_extent_zero_width_nonzero_value():
    scale = _scale(10, 10)
    scale.nice_extent(split_number=5)
    lo, hi = scale.get_extent()
    assert lo <= 5 and hi >= 15


def test_nice_extent_non_finite_becomes_unit():
    scale = _scale(math.inf, -math.inf)
    scale.nice_extent(split_number=5)
    assert scale.get_extent() == [0, 1]


def test_nice_ticks_respects_interval_bounds():
    scale = _scale(0, 10)
    scale.nice_ticks(5, min_interval=5)
    assert scale.get_interval() == 5
    scale.nice_ticks(5, max_interval=1)
    assert scale.get_interval() == 1


def test_get_ticks_after_set_interval():
    scale = _scale(-20, 80)
    scale.set_interval(20)
    assert scale.get_ticks() == [-20, 0, 20, 40, 60, 80]


def test_get_ticks_includes_extent_edges():
    scale = _scale(0, 7000)
    scale.nice_ticks(5)
    ticks = scale.get_ticks()
    assert ticks[0] == 0
    assert ticks[-1] == 7000
    assert 6000 in ticks


def test_get_ticks_without_interval():
    assert _scale(0, 10).get_ticks() == []
