"""Tests for natural cubic spline path generation."""

from __future__ import annotations

import math

import numpy as np
import pytest
from matplotlib.path import Path

from energy_chart.curve import (
    CUBIC,
    LINE,
    format_number,
    natural_control_points,
    natural_curve,
)


def test_format_number_is_compact() -> None:
    assert format_number(830.0) == "830"
    assert format_number(12.34567) == "12.346"
    assert format_number(-0.0001) == "0"
    assert format_number(-2.5) == "-2.5"


def test_single_point_is_a_bare_move() -> None:
    curve = natural_curve([(10, 20)])

    assert curve.to_svg() == "M10,20"
    assert curve.length() == 0.0


def test_two_points_give_a_straight_segment() -> None:
    curve = natural_curve([(0, 0), (3, 4)])

    assert curve.to_svg() == "M0,0L3,4"
    assert curve.length() == pytest.approx(5.0)
    assert curve.subpaths[0].segments[0][0] == LINE


def test_three_or_more_points_give_cubic_segments_through_every_knot() -> None:
    points = [(0, 450), (415, 225), (830, 0), (900, 100)]
    curve = natural_curve(points)

    segments = curve.subpaths[0].segments
    assert len(segments) == len(points) - 1
    assert all(kind == CUBIC for kind, _ in segments)
    for (kind, pts), knot in zip(segments, points[1:]):
        assert tuple(pts[-1]) == knot
    assert curve.to_svg().startswith("M0,450C")


def test_collinear_points_stay_on_the_line() -> None:
    """A natural spline through collinear knots is the line itself."""

    curve = natural_curve([(0, 0), (1, 1), (2, 2), (3, 3)])
    sampled = curve.subpaths[0].sample(16)

    assert np.allclose(sampled[:, 0], sampled[:, 1])
    assert curve.length() == pytest.approx(3 * math.sqrt(2))


def test_natural_control_points_for_evenly_spaced_knots() -> None:
    a, b = natural_control_points([0, 1, 2])

    assert np.allclose(a, [1 / 3, 4 / 3])
    assert np.allclose(b, [2 / 3, 5 / 3])


def test_natural_control_points_needs_three_knots() -> None:
    with pytest.raises(ValueError):
        natural_control_points([0, 1])


def test_non_finite_points_split_the_curve() -> None:
    """NaN coordinates leave a gap between independent runs."""

    curve = natural_curve([(0, 0), (1, 1), (2, math.nan), (3, 3), (4, 4)])

    assert len(curve.subpaths) == 2
    assert curve.to_svg() == "M0,0L1,1M3,3L4,4"
    assert curve.length() == pytest.approx(2 * math.sqrt(2))


def test_all_non_finite_points_give_an_empty_curve() -> None:
    curve = natural_curve([(0, math.nan), (1, math.nan)])

    assert curve.is_empty
    assert curve.to_svg() == ""
    assert len(curve.to_mpl_path().vertices) == 0


def test_to_mpl_path_uses_move_line_and_curve_codes() -> None:
    path = natural_curve([(0, 0), (1, 2), (2, 0)]).to_mpl_path()

    assert path.codes[0] == Path.MOVETO
    assert list(path.codes[1:]) == [Path.CURVE4] * 6
    assert tuple(path.vertices[-1]) == (2.0, 0.0)


def test_partial_reveals_a_prefix_of_the_length() -> None:
    curve = natural_curve([(0, 0), (10, 0)])

    half = curve.partial(0.5)
    assert half.length() == pytest.approx(5.0)
    assert tuple(half.subpaths[0].start) == (0.0, 0.0)

    assert curve.partial(0.0).is_empty
    assert curve.partial(1.0).length() == pytest.approx(10.0)


def test_partial_spans_several_runs() -> None:
    curve = natural_curve([(0, 0), (4, 0), (math.nan, 0), (10, 0), (14, 0)])

    three_quarters = curve.partial(0.75)
    assert len(three_quarters.subpaths) == 2
    assert three_quarters.length() == pytest.approx(6.0)
