"""
Theme helpers for the Energy Chart.

Provides the matplotlib style used for every rendered figure and the
Qt stylesheet of the viewer window.
"""

import contextlib

from .constants import PLOT_STYLE_LIGHT, VIEWER_COLORS


def get_viewer_stylesheet() -> str:
    """Stylesheet for the viewer window: flat light background."""
    c = VIEWER_COLORS
    return f"""
    QMainWindow, QWidget {{
        background-color: {c['bg']};
        color: {c['fg']};
        font-size: 13px;
    }}
    QStatusBar {{
        border-top: 1px solid {c['border']};
    }}
    """


def apply_plot_style(style_dict: dict = PLOT_STYLE_LIGHT) -> None:
    """Apply a style dictionary to matplotlib rcParams."""
    import matplotlib as mpl
    for key, value in style_dict.items():
        mpl.rcParams[key] = value


@contextlib.contextmanager
def plot_style(style_dict: dict = PLOT_STYLE_LIGHT):
    """Temporarily apply *style_dict*; rcParams are restored on exit."""
    import matplotlib as mpl
    with mpl.rc_context(style_dict):
        yield
