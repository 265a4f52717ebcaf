"""
Energy Chart v1.0.0

Multi-series line chart of per-capita energy consumption by country.
Reads one CSV file (``year`` plus one column per country) and renders
axes, gridlines, smoothed lines with a left-to-right reveal, and an
end-of-line label for each country.

Output is an HTML document with a centred SVG canvas, a standalone
SVG, or any format matplotlib can save.
"""

APP_NAME = "Energy Chart"
APP_VERSION = "1.0.0"
__version__ = APP_VERSION
