"""Tests for extent, tick generation, and the three chart scales."""

from __future__ import annotations

import datetime
import math

import pytest

from energy_chart.constants import CATEGORY10
from energy_chart.csv_parser import read_dataset
from energy_chart.scales import (
    LinearScale,
    OrdinalScale,
    TimeScale,
    build_scales,
    extent,
    tick_increment,
    tick_step,
    ticks,
)
from energy_chart.series import extract_series


def _year(y: int) -> datetime.date:
    return datetime.date(y, 1, 1)


def test_extent_ignores_none_and_nan() -> None:
    assert extent([3.0, math.nan, 1.0, None, 2.0]) == (1.0, 3.0)
    assert extent([_year(2010), _year(2000), _year(2005)]) == (_year(2000), _year(2010))
    assert extent([]) == (None, None)
    assert extent([math.nan, None]) == (None, None)


def test_extent_accepts_key_function() -> None:
    rows = [{"v": 4}, {"v": -1}, {"v": 9}]
    assert extent(rows, key=lambda r: r["v"]) == (-1, 9)


def test_ticks_follow_one_two_five_steps() -> None:
    """Tick steps are 1, 2 or 5 times a power of ten."""

    assert ticks(10, 60, 10) == [10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60]
    assert ticks(10, 60, 5) == [10, 20, 30, 40, 50, 60]
    assert ticks(0, 1, 5) == [0.0, 0.2, 0.4, 0.6, 0.8, 1.0]
    assert ticks(0, 1, 10) == [0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]
    assert ticks(60, 10, 5) == [60, 50, 40, 30, 20, 10]


def test_ticks_degenerate_inputs() -> None:
    assert ticks(5, 5, 10) == [5]
    assert ticks(0, 10, 0) == []
    assert ticks(math.nan, 10, 10) == []


def test_tick_increment_and_step() -> None:
    assert tick_increment(0, 10, 10) == 1
    assert tick_increment(0, 1, 10) == -10
    assert tick_step(0, 50, 10) == 5
    assert tick_step(50, 0, 10) == -5
    assert math.isnan(tick_step(1, 1, 10))


def test_linear_scale_maps_domain_onto_inverted_range() -> None:
    y = LinearScale((10, 60), (450, 0))

    assert y(10) == 450
    assert y(60) == 0
    assert y(35) == pytest.approx(225)
    assert math.isnan(y(math.nan))


def test_linear_scale_degenerate_and_missing_domains() -> None:
    flat = LinearScale((5, 5), (450, 0))
    assert flat(5) == 225
    assert flat(100) == 225

    empty = LinearScale((None, None), (450, 0))
    assert math.isnan(empty(5))
    assert empty.ticks() == []


def test_linear_scale_tick_format_uses_step_precision() -> None:
    assert LinearScale((10, 60), (0, 1)).tick_format()(15) == "15"
    assert LinearScale((0, 1), (0, 1)).tick_format()(0.5) == "0.5"
    assert LinearScale((0, 5000), (0, 1)).tick_format()(2500) == "2,500"


def test_time_scale_maps_years_and_ticks_on_whole_years() -> None:
    x = TimeScale((_year(2000), _year(2010)), (0, 830))

    assert x(_year(2000)) == 0
    assert x(_year(2010)) == 830
    assert 0 < x(_year(2005)) < 830

    assert x.ticks() == [_year(y) for y in range(2000, 2011)]
    assert x.ticks(5) == [_year(y) for y in range(2000, 2011, 2)]
    assert x.tick_format()(_year(2004)) == "2004"


def test_time_scale_single_year_domain() -> None:
    x = TimeScale((_year(2000), _year(2000)), (0, 830))

    assert x(_year(2000)) == 415
    assert x.ticks() == [_year(2000)]


def test_ordinal_scale_assigns_palette_in_first_seen_order_and_wraps() -> None:
    ids = [f"c{i}" for i in range(12)]
    color = OrdinalScale(ids, CATEGORY10)

    assert color("c0") == CATEGORY10[0]
    assert color("c1") == CATEGORY10[1]
    assert color("c10") == CATEGORY10[0]
    assert color("c11") == CATEGORY10[1]
    assert color("c0") == color("c0")


def test_ordinal_scale_appends_unknown_ids() -> None:
    color = OrdinalScale(["a"], ["red", "blue"])

    assert color("b") == "blue"
    assert color.domain == ["a", "b"]


def test_ordinal_scale_requires_a_palette() -> None:
    with pytest.raises(ValueError):
        OrdinalScale(["a"], [])


def test_build_scales_domains_come_from_the_data(write_csv) -> None:
    """x spans min..max year; y spans min..max energy ignoring NaN."""

    path = write_csv("year,China,India\n2000,50,\n2005,,12\n2010,60,15\n2003,abc,9\n")
    with pytest.warns(UserWarning):
        dataset = read_dataset(path)
    series = extract_series(dataset)
    scales = build_scales(dataset, series, 830, 450)

    assert scales.x.domain == (_year(2000), _year(2010))
    assert scales.y.domain == (9.0, 60.0)
    assert scales.x.range == (0.0, 830.0)
    assert scales.y.range == (450.0, 0.0)
    assert scales.color.domain == ["China", "India"]
    assert scales.color("China") == CATEGORY10[0]
