"""
Entry point for the Energy Chart.

Usage:
    python -m energy_chart [BRICSdata.csv] [-o chart.html] [--svg chart.svg]
                           [--png chart.png] [--config chart.json]
                           [--no-animate] [--example DIR] [--show]
"""

import argparse
import sys
import traceback

from . import APP_NAME, APP_VERSION


def _check_dependencies(show: bool = False):
    """Verify required packages are installed."""
    missing = []
    try:
        import matplotlib  # noqa: F401
    except ImportError:
        missing.append("matplotlib")
    try:
        import numpy  # noqa: F401
    except ImportError:
        missing.append("numpy")
    if show:
        try:
            import PySide6  # noqa: F401
        except ImportError:
            missing.append("PySide6")

    if missing:
        print(
            f"Missing required packages: {', '.join(missing)}\n"
            f"Install with: pip install {' '.join(missing)}",
            file=sys.stderr,
        )
        sys.exit(1)


def _exception_hook(exc_type, exc_value, exc_tb):
    """Global exception handler to prevent silent crashes."""
    msg = ''.join(traceback.format_exception(exc_type, exc_value, exc_tb))
    print(f"Unhandled exception:\n{msg}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="energy_chart",
        description=f"{APP_NAME} v{APP_VERSION}: per-country energy "
                    f"consumption as a multi-series line chart.",
    )
    parser.add_argument(
        "csv", nargs="?", default=None,
        help="input CSV with a 'year' column and one column per country "
             "(default: BRICSdata.csv, or the config file's csv_path)",
    )
    parser.add_argument(
        "-o", "--output", default="chart.html",
        help="HTML document to write (default: chart.html)",
    )
    parser.add_argument("--svg", help="also write a standalone SVG file")
    parser.add_argument(
        "--png", metavar="PATH",
        help="also export with matplotlib (.png, .pdf, .svg, ...)",
    )
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument(
        "--no-animate", action="store_true",
        help="disable the left-to-right line reveal",
    )
    parser.add_argument(
        "--example", metavar="DIR",
        help="write an example BRICSdata.csv into DIR and chart it",
    )
    parser.add_argument(
        "--show", action="store_true",
        help="open the chart in a viewer window (requires PySide6)",
    )
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {APP_VERSION}",
    )
    return parser


def main(argv=None) -> int:
    """Render the chart; return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.csv and args.example:
        parser.error("--example generates its own CSV; drop the CSV argument")
    _check_dependencies(show=args.show)

    # Set exception hook before anything else
    sys.excepthook = _exception_hook

    from .config import ChartConfig, load_config
    from .pipeline import ChartRenderError, render_chart

    try:
        config = load_config(args.config) if args.config else ChartConfig()
    except (OSError, ValueError, TypeError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    csv_path = args.csv
    if args.example:
        from .example_data import generate_example_csv
        csv_path = generate_example_csv(args.example)
        print(f"Example data written to {csv_path}", file=sys.stderr)

    config = config.with_overrides(
        csv_path=csv_path,
        animate=False if args.no_animate else None,
    )

    try:
        outputs = render_chart(
            config,
            html_path=args.output,
            svg_path=args.svg,
            figure_path=args.png,
        )
    except ChartRenderError as exc:
        print(f"Failed to load '{config.csv_path}': {exc}", file=sys.stderr)
        return 1

    print(
        f"{len(outputs.layout.series)} series charted; "
        f"wrote {', '.join(outputs.written)}",
        file=sys.stderr,
    )

    if args.show:
        from .gui_main import show_chart
        return show_chart(outputs.layout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
