"""Tests for the matplotlib renderer."""

from __future__ import annotations

import numpy as np
import pytest
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.patches import PathPatch

from energy_chart.chart_multiline import make_figure, render_multiline, update_reveal


def test_make_figure_matches_canvas_size(three_row_layout) -> None:
    fig = make_figure(three_row_layout)

    width, height = fig.get_size_inches() * fig.dpi
    assert (round(width), round(height)) == (960, 510)


def test_render_multiline_draws_one_patch_and_label_per_series(three_row_layout) -> None:
    fig = make_figure(three_row_layout)
    patches = render_multiline(fig, three_row_layout)

    assert list(patches) == ["China", "India"]
    ax = fig.axes[0]
    drawn = [p for p in ax.patches if isinstance(p, PathPatch)]
    assert len(drawn) == 2
    assert patches["China"].get_fill() is False

    texts = [t.get_text() for t in ax.texts]
    assert "China" in texts
    assert "India" in texts
    assert "Year" in texts
    assert "Million BTUs Per Person" in texts


def test_render_multiline_axes_cover_the_drawable_area(three_row_layout) -> None:
    fig = make_figure(three_row_layout)
    render_multiline(fig, three_row_layout)
    ax = fig.axes[0]

    assert ax.get_xlim() == (0, 830)
    assert ax.get_ylim() == (450, 0)
    left, bottom, width, height = ax.get_position().bounds
    assert left == pytest.approx(50 / 960)
    assert bottom == pytest.approx(40 / 510)
    assert width == pytest.approx(830 / 960)
    assert height == pytest.approx(450 / 510)
    assert [t.get_text() for t in ax.get_xticklabels()][0] == "2000"


def test_render_multiline_line_colours_follow_the_layout(three_row_layout) -> None:
    fig = make_figure(three_row_layout)
    patches = render_multiline(fig, three_row_layout)

    for line in three_row_layout.lines:
        edge = patches[line.series_id].get_edgecolor()
        assert np.allclose(edge[:3], _rgb(line.color))


def test_render_multiline_partial_reveal_and_update(three_row_layout) -> None:
    fig = make_figure(three_row_layout)
    patches = render_multiline(fig, three_row_layout, reveal_fraction=0.5)

    full_end = three_row_layout.lines[0].curve.to_mpl_path().vertices[-1]
    half_end = patches["China"].get_path().vertices[-1]
    assert half_end[0] < full_end[0]

    update_reveal(patches, three_row_layout, 1.0)
    assert tuple(patches["China"].get_path().vertices[-1]) == tuple(full_end)


def test_reveal_from_zero_keeps_a_patch_per_series(three_row_layout) -> None:
    """Lines hidden at the first frame are still drawn once revealed."""

    fig = make_figure(three_row_layout)
    patches = render_multiline(fig, three_row_layout, reveal_fraction=0.0)

    assert set(patches) == {"China", "India"}
    assert len(patches["China"].get_path().vertices) == 0

    update_reveal(patches, three_row_layout, 1.0)
    for line in three_row_layout.lines:
        full_end = line.curve.to_mpl_path().vertices[-1]
        assert tuple(patches[line.series_id].get_path().vertices[-1]) == tuple(full_end)


def test_render_multiline_canvas_draws(three_row_layout) -> None:
    """The figure renders to pixels without errors."""

    fig = make_figure(three_row_layout)
    render_multiline(fig, three_row_layout)
    canvas = FigureCanvasAgg(fig)
    canvas.draw()

    assert canvas.buffer_rgba().shape[2] == 4


def _rgb(hex_color: str):
    hex_color = hex_color.lstrip("#")
    return [int(hex_color[i:i + 2], 16) / 255 for i in (0, 2, 4)]
