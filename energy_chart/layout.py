"""
Chart layout for the Energy Chart.

Turns a ``Dataset`` and a ``ChartConfig`` into a ``ChartLayout``: every
pixel position, tick, colour and path the renderers need, computed once
and with no rendering environment involved.

Coordinates are relative to the drawable area's top-left corner (the
canvas origin translated by the left and top margins), with y growing
downwards.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .animation import RevealAnimation
from .config import ChartConfig
from .constants import (
    TICK_SIZE, TICK_PADDING, LABEL_DX_PX, LABEL_DY_EM, TEXT_COLOR,
    DEFAULT_TICK_COUNT,
)
from .curve import CurvePath, natural_curve
from .data_model import Dataset, Series
from .scales import Scales, build_scales
from .series import extract_series


# ── Canvas ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Margin:
    top: int
    right: int
    bottom: int
    left: int


@dataclass(frozen=True)
class Canvas:
    """Outer canvas size and margins; the drawable area is derived."""
    width: int
    height: int
    margin: Margin

    @property
    def inner_width(self) -> int:
        return self.width - self.margin.left - self.margin.right

    @property
    def inner_height(self) -> int:
        return self.height - self.margin.top - self.margin.bottom

    @property
    def origin(self) -> Tuple[int, int]:
        return self.margin.left, self.margin.top


def make_canvas(config: ChartConfig) -> Canvas:
    return Canvas(
        width=config.canvas_width,
        height=config.canvas_height,
        margin=Margin(
            top=config.margin_top,
            right=config.margin_right,
            bottom=config.margin_bottom,
            left=config.margin_left,
        ),
    )


# ── Layout value objects ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Tick:
    position: float
    label: str


@dataclass(frozen=True)
class AxisTitle:
    """Axis title; ``x``/``y`` are in the title's rotated frame."""
    text: str
    x: float
    y: float
    rotation: float = 0.0
    bold: bool = True


@dataclass(frozen=True)
class AxisLayout:
    """One axis.

    ``orient`` is ``"bottom"`` or ``"left"``; ``offset`` translates the
    axis group; ``extent`` is the pixel range covered by the domain
    line.
    """
    orient: str
    offset: Tuple[float, float]
    extent: Tuple[float, float]
    ticks: List[Tick]
    title: AxisTitle
    tick_size: float = TICK_SIZE
    tick_padding: float = TICK_PADDING


@dataclass(frozen=True)
class GridLayout:
    """Label-less reference lines.

    ``length`` is the signed tick size along the axis' outward
    direction (down for ``"bottom"``, left for ``"left"``); negative
    values extend the lines into the plot, across the whole drawable
    area.
    """
    orient: str
    offset: Tuple[float, float]
    positions: List[float]
    length: float


@dataclass(frozen=True)
class LineLayout:
    series_id: str
    color: str
    curve: CurvePath
    length: float


@dataclass(frozen=True)
class LabelLayout:
    """End-of-line label, anchored at the series' last data point."""
    text: str
    x: float
    y: float
    dx: float = LABEL_DX_PX
    dy_em: float = LABEL_DY_EM
    color: str = TEXT_COLOR

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class ChartLayout:
    canvas: Canvas
    scales: Scales
    series: List[Series]
    x_axis: AxisLayout
    y_axis: AxisLayout
    x_grid: GridLayout
    y_grid: GridLayout
    lines: List[LineLayout]
    labels: List[LabelLayout]
    config: ChartConfig
    reveal: Optional[RevealAnimation] = field(default=None)


# ── Axes and gridlines ───────────────────────────────────────────────────

def layout_axes(scales: Scales, canvas: Canvas, config: ChartConfig) -> Tuple[AxisLayout, AxisLayout]:
    """Bottom time axis and left energy axis, each with a bold title."""
    width, height = canvas.inner_width, canvas.inner_height

    x_fmt = scales.x.tick_format()
    x_axis = AxisLayout(
        orient="bottom",
        offset=(0, height),
        extent=scales.x.range,
        ticks=[Tick(scales.x(t), x_fmt(t)) for t in scales.x.ticks()],
        title=AxisTitle(
            text=config.x_title,
            x=width / 2,
            y=canvas.margin.bottom,
        ),
    )

    y_fmt = scales.y.tick_format()
    y_axis = AxisLayout(
        orient="left",
        offset=(0, 0),
        extent=scales.y.range,
        ticks=[Tick(scales.y(t), y_fmt(t)) for t in scales.y.ticks()],
        title=AxisTitle(
            text=config.y_title,
            x=-height / 2,
            y=-canvas.margin.left * 4 / 5,
            rotation=270,
        ),
    )
    return x_axis, y_axis


def layout_gridlines(scales: Scales, canvas: Canvas) -> Tuple[GridLayout, GridLayout]:
    """Gridlines at half the default tick density (count floored)."""
    width, height = canvas.inner_width, canvas.inner_height

    x_count = len(scales.x.ticks(DEFAULT_TICK_COUNT)) // 2
    x_grid = GridLayout(
        orient="bottom",
        offset=(0, height),
        positions=[scales.x(t) for t in scales.x.ticks(x_count)],
        length=-height,
    )

    y_count = len(scales.y.ticks(DEFAULT_TICK_COUNT)) // 2
    y_grid = GridLayout(
        orient="left",
        offset=(0, 0),
        positions=[scales.y(t) for t in scales.y.ticks(y_count)],
        length=-width,
    )
    return x_grid, y_grid


# ── Lines and labels ─────────────────────────────────────────────────────

def layout_lines(series: List[Series], scales: Scales) -> List[LineLayout]:
    lines = []
    for s in series:
        curve = natural_curve(
            [(scales.x(p.year), scales.y(p.energy)) for p in s.values]
        )
        lines.append(LineLayout(
            series_id=s.id,
            color=scales.color(s.id),
            curve=curve,
            length=curve.length(),
        ))
    return lines


def layout_labels(series: List[Series], scales: Scales) -> List[LabelLayout]:
    # Labels keep the default text colour rather than the line colour.
    labels = []
    for s in series:
        last = s.last
        if last is None:
            continue
        labels.append(LabelLayout(
            text=s.id,
            x=scales.x(last.year),
            y=scales.y(last.energy),
        ))
    return labels


# ── Assembly ─────────────────────────────────────────────────────────────

def build_layout(dataset: Dataset, config: ChartConfig) -> ChartLayout:
    """Run canvas setup, scales, series extraction and element layout."""
    canvas = make_canvas(config)
    series = extract_series(dataset)
    scales = build_scales(
        dataset, series, canvas.inner_width, canvas.inner_height,
        palette=config.palette,
    )
    x_axis, y_axis = layout_axes(scales, canvas, config)
    x_grid, y_grid = layout_gridlines(scales, canvas)
    reveal = None
    if config.animate:
        reveal = RevealAnimation(duration_ms=config.reveal_duration_ms)
    return ChartLayout(
        canvas=canvas,
        scales=scales,
        series=series,
        x_axis=x_axis,
        y_axis=y_axis,
        x_grid=x_grid,
        y_grid=y_grid,
        lines=layout_lines(series, scales),
        labels=layout_labels(series, scales),
        config=config,
        reveal=reveal,
    )
