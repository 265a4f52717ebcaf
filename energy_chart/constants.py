"""
Constants for the Energy Chart.

Centralises canvas geometry, column names, axis titles, the Category10
palette, animation timing, and matplotlib export settings.
"""

# ── Canvas geometry (pixels) ─────────────────────────────────────────────
CANVAS_WIDTH = 960
CANVAS_HEIGHT = 510
MARGIN_TOP = 20
MARGIN_RIGHT = 80
MARGIN_BOTTOM = 40
MARGIN_LEFT = 50

# ── Input file ───────────────────────────────────────────────────────────
DEFAULT_CSV = "BRICSdata.csv"
COL_YEAR = 0
YEAR_FIELD = "year"

# ── Axis titles ──────────────────────────────────────────────────────────
X_AXIS_TITLE = "Year"
Y_AXIS_TITLE = "Million BTUs Per Person"

# Default tick count requested from a scale when none is given
DEFAULT_TICK_COUNT = 10

# Axis tick geometry (pixels)
TICK_SIZE = 6
TICK_PADDING = 3

# ── Category10 qualitative palette (10 colours, wraps around) ───────────
CATEGORY10 = [
    '#1f77b4', '#ff7f0e', '#2ca02c', '#d62728', '#9467bd',
    '#8c564b', '#e377c2', '#7f7f7f', '#bcbd22', '#17becf',
]

# ── Text and stroke styling ──────────────────────────────────────────────
FONT_FAMILIES = [
    "DejaVu Sans", "Liberation Sans", "Helvetica", "Arial",
]
LABEL_FONT_SIZE_PX = 10
LABEL_DX_PX = 3
LABEL_DY_EM = 0.35
AXIS_FONT_SIZE_PX = 10
TEXT_COLOR = '#000000'
LINE_WIDTH_PX = 1.5
GRID_COLOR = '#d3d3d3'
GRID_OPACITY = 0.7

# ── Reveal animation ─────────────────────────────────────────────────────
REVEAL_DURATION_MS = 2000
REVEAL_EASING = "linear"
# Viewer frame interval (ms) for the QTimer-driven reveal
REVEAL_FRAME_MS = 16

# Samples per cubic segment when measuring or truncating a curve
CURVE_SAMPLES_PER_SEGMENT = 64

# ── Export settings ──────────────────────────────────────────────────────
SCREEN_DPI = 100
EXPORT_DPI = 300
# Pixel sizes are converted to points for matplotlib text and strokes
PX_TO_PT = 72.0 / SCREEN_DPI

# ── Matplotlib light-theme style dict (export / viewer) ─────────────────
PLOT_STYLE_LIGHT = {
    'figure.facecolor':  '#ffffff',
    'axes.facecolor':    '#ffffff',
    'axes.edgecolor':    TEXT_COLOR,
    'axes.labelcolor':   TEXT_COLOR,
    'text.color':        TEXT_COLOR,
    'xtick.color':       TEXT_COLOR,
    'ytick.color':       TEXT_COLOR,
    'font.family':       'sans-serif',
    'font.sans-serif':   FONT_FAMILIES,
    'svg.fonttype':      'none',
}

# ── Viewer window colours ────────────────────────────────────────────────
VIEWER_COLORS = {
    'bg':      '#f4f4f6',
    'fg':      '#1a1a2e',
    'border':  '#cccccc',
}
