"""
Chart configuration for the Energy Chart.

``ChartConfig`` gathers every tunable value with defaults taken from
``constants``.  Configurations can be read from and written to JSON
files; the command line overrides individual values on top.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping, Tuple

from .constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT,
    MARGIN_TOP, MARGIN_RIGHT, MARGIN_BOTTOM, MARGIN_LEFT,
    DEFAULT_CSV, X_AXIS_TITLE, Y_AXIS_TITLE, CATEGORY10,
    LABEL_FONT_SIZE_PX, LINE_WIDTH_PX, REVEAL_DURATION_MS, EXPORT_DPI,
)


@dataclass(frozen=True)
class ChartConfig:
    """All chart settings.

    Parameters
    ----------
    csv_path : str
        Input CSV file.
    canvas_width, canvas_height : int
        Outer canvas size in pixels.
    margin_top, margin_right, margin_bottom, margin_left : int
        Space between the canvas edge and the drawable area.
    x_title, y_title : str
        Axis titles.
    palette : tuple of str
        Line colours, assigned to countries in header order.
    label_font_size : float
        End-of-line label size in pixels.
    line_width : float
        Stroke width of the series lines in pixels.
    animate : bool
        Enable the left-to-right reveal of each line.
    reveal_duration_ms : int
        Reveal duration; the easing is always linear.
    dpi : int
        Resolution for matplotlib raster exports.
    """
    csv_path: str = DEFAULT_CSV
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    margin_top: int = MARGIN_TOP
    margin_right: int = MARGIN_RIGHT
    margin_bottom: int = MARGIN_BOTTOM
    margin_left: int = MARGIN_LEFT
    x_title: str = X_AXIS_TITLE
    y_title: str = Y_AXIS_TITLE
    palette: Tuple[str, ...] = tuple(CATEGORY10)
    label_font_size: float = LABEL_FONT_SIZE_PX
    line_width: float = LINE_WIDTH_PX
    animate: bool = True
    reveal_duration_ms: int = REVEAL_DURATION_MS
    dpi: int = EXPORT_DPI

    def __post_init__(self):
        if self.canvas_width <= self.margin_left + self.margin_right:
            raise ValueError(
                f"canvas_width {self.canvas_width} leaves no drawable area "
                f"between margins {self.margin_left} and {self.margin_right}"
            )
        if self.canvas_height <= self.margin_top + self.margin_bottom:
            raise ValueError(
                f"canvas_height {self.canvas_height} leaves no drawable area "
                f"between margins {self.margin_top} and {self.margin_bottom}"
            )
        if not self.palette:
            raise ValueError("palette must contain at least one colour")
        if self.reveal_duration_ms <= 0:
            raise ValueError(
                f"reveal_duration_ms must be positive, got {self.reveal_duration_ms}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChartConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown configuration key(s): {', '.join(unknown)}"
            )
        values = dict(data)
        if 'palette' in values:
            values['palette'] = tuple(values['palette'])
        return cls(**values)

    def to_dict(self) -> dict:
        data = asdict(self)
        data['palette'] = list(self.palette)
        return data

    def with_overrides(self, **overrides) -> "ChartConfig":
        """Copy with the non-``None`` *overrides* applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def load_config(filepath: str) -> ChartConfig:
    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration file '{filepath}' must hold a JSON object."
        )
    return ChartConfig.from_dict(data)


def save_config(config: ChartConfig, filepath: str) -> None:
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
