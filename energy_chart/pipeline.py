"""
Single-pass chart pipeline for the Energy Chart.

Load → scales → series → axes and gridlines → lines → labels, top to
bottom, once.  A failed load stops the pipeline before any element is
laid out or written.
"""

from dataclasses import dataclass
from typing import List, Optional

from .config import ChartConfig
from .csv_parser import load_dataset
from .data_model import LoadFailure
from .export import export_figure, write_html_document, write_svg
from .layout import ChartLayout, build_layout


class ChartRenderError(RuntimeError):
    """The chart cannot be rendered because its data failed to load."""

    def __init__(self, failure: LoadFailure):
        super().__init__(failure.reason)
        self.failure = failure


def build_chart(config: ChartConfig, csv_path: Optional[str] = None) -> ChartLayout:
    """Load the CSV and lay out the whole chart.

    Parameters
    ----------
    config : ChartConfig
    csv_path : str, optional
        Overrides ``config.csv_path``.

    Raises
    ------
    ChartRenderError
        If the load fails (missing file, malformed header, bad year).
    """
    result = load_dataset(csv_path or config.csv_path)
    if not result.ok:
        raise ChartRenderError(result)
    return build_layout(result.dataset, config)


@dataclass(frozen=True)
class ChartOutputs:
    """The laid-out chart and the paths that were written."""
    layout: ChartLayout
    html: Optional[str] = None
    svg: Optional[str] = None
    figure: Optional[str] = None

    @property
    def written(self) -> List[str]:
        return [p for p in (self.html, self.svg, self.figure) if p]


def render_chart(
    config: ChartConfig,
    *,
    csv_path: Optional[str] = None,
    html_path: Optional[str] = None,
    svg_path: Optional[str] = None,
    figure_path: Optional[str] = None,
) -> ChartOutputs:
    """Build the chart and write every requested output.

    Nothing is written when the load fails.
    """
    layout = build_chart(config, csv_path)
    if html_path:
        write_html_document(layout, html_path)
    if svg_path:
        write_svg(layout, svg_path)
    if figure_path:
        export_figure(layout, figure_path, dpi=config.dpi)
    return ChartOutputs(layout=layout, html=html_path, svg=svg_path, figure=figure_path)
