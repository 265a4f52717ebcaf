"""
Viewer window for the Energy Chart.

Shows the rendered chart on a fixed-size matplotlib canvas centred in
the window.  When the layout carries a ``RevealAnimation`` the lines
are drawn in from left to right, driven by a ``QTimer``.  There is no
toolbar and no interaction.
"""

import sys
import time

from PySide6.QtWidgets import QApplication, QMainWindow, QWidget, QGridLayout
from PySide6.QtCore import Qt, QTimer

import matplotlib
matplotlib.use('QtAgg')
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas

from . import APP_NAME, APP_VERSION
from .chart_multiline import make_figure, render_multiline, update_reveal
from .constants import REVEAL_FRAME_MS
from .layout import ChartLayout
from .theme import apply_plot_style, get_viewer_stylesheet


class ChartWindow(QMainWindow):
    """Main window hosting one chart canvas."""

    def __init__(self, layout: ChartLayout, parent=None):
        super().__init__(parent)
        self._layout = layout
        self._started = None

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setStyleSheet(get_viewer_stylesheet())
        canvas = layout.canvas
        self.setMinimumSize(canvas.width + 40, canvas.height + 60)

        apply_plot_style()
        self._fig = make_figure(layout)
        self._canvas = FigureCanvas(self._fig)
        self._canvas.setFixedSize(canvas.width, canvas.height)
        self._patches = render_multiline(self._fig, layout)

        central = QWidget()
        grid = QGridLayout(central)
        grid.addWidget(self._canvas, 0, 0, Qt.AlignmentFlag.AlignCenter)
        self.setCentralWidget(central)

        self._timer = QTimer(self)
        self._timer.setInterval(REVEAL_FRAME_MS)
        self._timer.timeout.connect(self._on_frame)

        x = layout.scales.x
        start, stop = x.domain
        fmt = x.tick_format()
        self.statusBar().showMessage(
            f"{len(layout.series)} series, {fmt(start)} to {fmt(stop)}"
        )

    @property
    def fig(self):
        return self._fig

    def showEvent(self, event):
        super().showEvent(event)
        if self._layout.reveal is not None and self._started is None:
            self._started = time.monotonic()
            update_reveal(self._patches, self._layout, 0.0)
            self._canvas.draw_idle()
            self._timer.start()

    def _on_frame(self):
        reveal = self._layout.reveal
        elapsed_ms = (time.monotonic() - self._started) * 1000.0
        update_reveal(self._patches, self._layout, reveal.progress(elapsed_ms))
        self._canvas.draw_idle()
        if reveal.is_finished(elapsed_ms):
            self._timer.stop()


def show_chart(layout: ChartLayout) -> int:
    """Open the viewer window and run the Qt event loop."""
    app = QApplication.instance() or QApplication(sys.argv)
    window = ChartWindow(layout)
    window.show()
    return app.exec()
