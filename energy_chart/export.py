"""
Export utilities for the Energy Chart.

Writes the HTML document, the standalone SVG, and matplotlib exports
(PNG, PDF, SVG, anything ``savefig`` understands from the suffix).
Figures are built under the light plot style, which is restored
afterwards.
"""

import os

from .chart_multiline import make_figure, render_multiline
from .chart_svg import render_html_document, render_svg
from .constants import EXPORT_DPI
from .layout import ChartLayout
from .theme import plot_style


def _ensure_parent(filepath: str) -> None:
    parent = os.path.dirname(os.path.abspath(filepath))
    os.makedirs(parent, exist_ok=True)


def write_html_document(layout: ChartLayout, filepath: str) -> None:
    """Write the chart as an HTML page with the canvas centred."""
    _ensure_parent(filepath)
    with open(filepath, 'w', encoding='utf-8') as fh:
        fh.write(render_html_document(layout))


def write_svg(layout: ChartLayout, filepath: str) -> None:
    """Write the chart as a standalone ``.svg`` file."""
    _ensure_parent(filepath)
    with open(filepath, 'w', encoding='utf-8') as fh:
        fh.write(render_svg(layout, standalone=True))


def export_figure(
    layout: ChartLayout,
    filepath: str,
    *,
    dpi: int = EXPORT_DPI,
) -> None:
    """Render *layout* with matplotlib and save it to *filepath*.

    The output format follows the file suffix.  The canvas keeps its
    960x510 proportions; *dpi* only scales raster resolution.

    Parameters
    ----------
    layout : ChartLayout
    filepath : str
        Output path, e.g. ``chart.png`` or ``chart.pdf``.
    dpi : int
        Raster resolution (default 300).
    """
    _ensure_parent(filepath)
    with plot_style():
        fig = make_figure(layout)
        render_multiline(fig, layout)
        fig.savefig(
            filepath,
            dpi=dpi,
            facecolor=fig.get_facecolor(),
            edgecolor='none',
        )
