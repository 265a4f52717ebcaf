"""Tests for the line reveal timing."""

from __future__ import annotations

import pytest

from energy_chart.animation import RevealAnimation


def test_progress_is_linear_and_clamped() -> None:
    reveal = RevealAnimation()

    assert reveal.progress(-5) == 0.0
    assert reveal.progress(0) == 0.0
    assert reveal.progress(500) == pytest.approx(0.25)
    assert reveal.progress(1000) == pytest.approx(0.5)
    assert reveal.progress(2000) == 1.0
    assert reveal.progress(5000) == 1.0


def test_dash_offset_runs_from_length_to_zero() -> None:
    reveal = RevealAnimation()

    assert reveal.dash_offset(0, 400.0) == 400.0
    assert reveal.dash_offset(1000, 400.0) == pytest.approx(200.0)
    assert reveal.dash_offset(2000, 400.0) == 0.0


def test_dash_array_is_one_dash_and_one_gap() -> None:
    assert RevealAnimation.dash_array(123.4567) == "123.457 123.457"


def test_is_finished_after_duration() -> None:
    reveal = RevealAnimation(duration_ms=100)

    assert not reveal.is_finished(99)
    assert reveal.is_finished(100)


def test_only_linear_easing_is_supported() -> None:
    with pytest.raises(ValueError):
        RevealAnimation(easing="cubic")
