"""
Multi-series line chart for the Energy Chart (matplotlib renderer).

Draws a ``ChartLayout`` on a matplotlib ``Figure`` using the layout's
own pixel coordinates: the axes occupy exactly the drawable area, with
x running ``0 → inner_width`` and y running ``inner_height → 0`` (top
down), so every tick, gridline, curve and label lands where the SVG
renderer puts it.
"""

import math
from typing import Dict

from matplotlib.figure import Figure
from matplotlib.patches import PathPatch

from .constants import (
    AXIS_FONT_SIZE_PX, GRID_COLOR, GRID_OPACITY, PX_TO_PT, SCREEN_DPI,
    TEXT_COLOR,
)
from .layout import AxisTitle, ChartLayout


def make_figure(layout: ChartLayout, dpi: int = SCREEN_DPI) -> Figure:
    """New figure sized to the layout's canvas at *dpi*."""
    canvas = layout.canvas
    return Figure(
        figsize=(canvas.width / SCREEN_DPI, canvas.height / SCREEN_DPI),
        dpi=dpi,
    )


def _title_position(title: AxisTitle):
    """Screen position and matplotlib rotation of a rotated SVG title."""
    theta = math.radians(title.rotation)
    x = title.x * math.cos(theta) - title.y * math.sin(theta)
    y = title.x * math.sin(theta) + title.y * math.cos(theta)
    return x, y, (-title.rotation) % 360


def render_multiline(
    fig: Figure,
    layout: ChartLayout,
    *,
    reveal_fraction: float = 1.0,
) -> Dict[str, PathPatch]:
    """Render the energy chart on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    layout : ChartLayout
        Precomputed chart geometry.
    reveal_fraction : float
        Share of each line's length to draw, ``1.0`` for the full chart.

    Returns
    -------
    dict
        ``{series_id: PathPatch}`` for every series with a drawable line,
        including lines not yet revealed at *reveal_fraction*.
    """
    fig.clf()
    canvas = layout.canvas
    cfg = layout.config
    width, height = canvas.inner_width, canvas.inner_height
    m = canvas.margin

    ax = fig.add_axes([
        m.left / canvas.width,
        m.bottom / canvas.height,
        width / canvas.width,
        height / canvas.height,
    ])
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_facecolor('none')

    # ── Axes ─────────────────────────────────────────────────────────
    for side in ('top', 'right'):
        ax.spines[side].set_visible(False)
    for side in ('bottom', 'left'):
        ax.spines[side].set_color(TEXT_COLOR)
        ax.spines[side].set_linewidth(PX_TO_PT)

    x_axis, y_axis = layout.x_axis, layout.y_axis
    ax.set_xticks([t.position for t in x_axis.ticks])
    ax.set_xticklabels([t.label for t in x_axis.ticks])
    ax.set_yticks([t.position for t in y_axis.ticks])
    ax.set_yticklabels([t.label for t in y_axis.ticks])
    ax.tick_params(
        axis='both',
        length=x_axis.tick_size * PX_TO_PT,
        width=PX_TO_PT,
        pad=x_axis.tick_padding * PX_TO_PT,
        labelsize=AXIS_FONT_SIZE_PX * PX_TO_PT,
        colors=TEXT_COLOR,
    )

    for axis in (x_axis, y_axis):
        ox, oy = axis.offset
        tx, ty, rotation = _title_position(axis.title)
        ax.text(
            ox + tx, oy + ty, axis.title.text,
            ha='center', va='baseline',
            rotation=rotation, rotation_mode='anchor',
            fontsize=AXIS_FONT_SIZE_PX * PX_TO_PT,
            fontweight='bold' if axis.title.bold else 'normal',
            color=TEXT_COLOR, clip_on=False,
        )

    # ── Gridlines ────────────────────────────────────────────────────
    x_grid, y_grid = layout.x_grid, layout.y_grid
    if x_grid.positions:
        oy = x_grid.offset[1]
        ax.vlines(
            x_grid.positions, oy + x_grid.length, oy,
            colors=GRID_COLOR, alpha=GRID_OPACITY, linewidth=PX_TO_PT,
            zorder=0,
        )
    if y_grid.positions:
        ox = y_grid.offset[0]
        ax.hlines(
            y_grid.positions, ox, ox - y_grid.length,
            colors=GRID_COLOR, alpha=GRID_OPACITY, linewidth=PX_TO_PT,
            zorder=0,
        )

    # ── Lines ────────────────────────────────────────────────────────
    patches = {}
    for line in layout.lines:
        if line.curve.is_empty:
            continue
        curve = line.curve
        if reveal_fraction < 1.0:
            curve = curve.partial(reveal_fraction)
        patch = PathPatch(
            curve.to_mpl_path(),
            fill=False,
            edgecolor=line.color,
            linewidth=cfg.line_width * PX_TO_PT,
            zorder=3,
        )
        ax.add_patch(patch)
        patches[line.series_id] = patch

    # ── Labels ───────────────────────────────────────────────────────
    for label in layout.labels:
        if not label.is_finite:
            continue
        ax.text(
            label.x + label.dx, label.y, label.text,
            ha='left', va='center',
            fontsize=cfg.label_font_size * PX_TO_PT,
            color=label.color, clip_on=False, zorder=4,
        )

    return patches


def update_reveal(patches: Dict[str, PathPatch], layout: ChartLayout,
                  reveal_fraction: float) -> None:
    """Replace each patch's path with the revealed prefix of its curve."""
    for line in layout.lines:
        patch = patches.get(line.series_id)
        if patch is None:
            continue
        curve = line.curve
        if reveal_fraction < 1.0:
            curve = curve.partial(reveal_fraction)
        patch.set_path(curve.to_mpl_path())
