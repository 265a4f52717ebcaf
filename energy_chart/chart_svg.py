"""
SVG document renderer for the Energy Chart.

Writes a ``ChartLayout`` as an ``<svg>`` canvas: a group translated by
the margins holding the two axes with titles, the two gridline groups,
and one ``country`` group per series with its line path and end label.
When the layout carries a ``RevealAnimation`` each path gets a dash
pattern as long as itself and a linear SMIL animation of its dash
offset down to zero.

``render_html_document`` wraps the canvas in an HTML page that centres
it with block display and automatic margins.
"""

from html import escape as _html_esc
from typing import List

from . import APP_NAME
from .constants import AXIS_FONT_SIZE_PX, GRID_COLOR, GRID_OPACITY, TEXT_COLOR
from .curve import format_number as _num
from .layout import AxisLayout, ChartLayout, GridLayout, LabelLayout, LineLayout


_SVG_NS = "http://www.w3.org/2000/svg"


def _stylesheet(layout: ChartLayout) -> str:
    cfg = layout.config
    return (
        f".line {{ fill: none; stroke-width: {_num(cfg.line_width)}px; }}\n"
        f".grid line {{ stroke: {GRID_COLOR}; stroke-opacity: {GRID_OPACITY}; "
        f"shape-rendering: crispEdges; }}\n"
        f".grid path {{ stroke-width: 0; }}"
    )


# ── Axes ─────────────────────────────────────────────────────────────────

def _render_axis(axis: AxisLayout, css_class: str) -> List[str]:
    ox, oy = axis.offset
    r0, r1 = (v + 0.5 for v in axis.extent)
    size = axis.tick_size
    spacing = max(size, 0) + axis.tick_padding
    bottom = axis.orient == "bottom"

    anchor = "middle" if bottom else "end"
    out = [
        f'<g class="{css_class}" transform="translate({_num(ox)},{_num(oy)})" '
        f'fill="none" font-size="{AXIS_FONT_SIZE_PX}" font-family="sans-serif" '
        f'text-anchor="{anchor}">'
    ]
    if bottom:
        domain = f"M{_num(r0)},{_num(size)}V0.5H{_num(r1)}V{_num(size)}"
    else:
        domain = f"M{_num(-size)},{_num(r0)}H0.5V{_num(r1)}H{_num(-size)}"
    out.append(f'<path class="domain" stroke="{TEXT_COLOR}" d="{domain}"></path>')

    for tick in axis.ticks:
        pos = _num(tick.position + 0.5)
        label = _html_esc(tick.label)
        if bottom:
            out.append(
                f'<g class="tick" opacity="1" transform="translate({pos},0)">'
                f'<line stroke="{TEXT_COLOR}" y2="{_num(size)}"></line>'
                f'<text fill="{TEXT_COLOR}" y="{_num(spacing)}" dy="0.71em">{label}</text></g>'
            )
        else:
            out.append(
                f'<g class="tick" opacity="1" transform="translate(0,{pos})">'
                f'<line stroke="{TEXT_COLOR}" x2="{_num(-size)}"></line>'
                f'<text fill="{TEXT_COLOR}" x="{_num(-spacing)}" dy="0.32em">{label}</text></g>'
            )

    title = axis.title
    rotate = f' transform="rotate({_num(title.rotation)})"' if title.rotation else ""
    weight = ' font-weight="bold"' if title.bold else ""
    out.append(
        f'<text text-anchor="middle" x="{_num(title.x)}" y="{_num(title.y)}"'
        f'{rotate} fill="{TEXT_COLOR}"{weight}>{_html_esc(title.text)}</text>'
    )
    out.append('</g>')
    return out


def _render_grid(grid: GridLayout) -> List[str]:
    ox, oy = grid.offset
    out = [f'<g class="grid" transform="translate({_num(ox)},{_num(oy)})">']
    for position in grid.positions:
        pos = _num(position + 0.5)
        # Bottom ticks point down (+y), left ticks point left (-x)
        if grid.orient == "bottom":
            out.append(
                f'<g class="tick" opacity="1" transform="translate({pos},0)">'
                f'<line y2="{_num(grid.length)}"></line></g>'
            )
        else:
            out.append(
                f'<g class="tick" opacity="1" transform="translate(0,{pos})">'
                f'<line x2="{_num(-grid.length)}"></line></g>'
            )
    out.append('</g>')
    return out


# ── Series ───────────────────────────────────────────────────────────────

def _render_line(line: LineLayout, layout: ChartLayout) -> str:
    attrs = (
        f'class="line" d="{line.curve.to_svg()}" '
        f'style="stroke: {_html_esc(line.color)}"'
    )
    reveal = layout.reveal
    if reveal is None:
        return f'<path {attrs}></path>'

    offset = f"{reveal.dash_offset(0, line.length):.3f}"
    return (
        f'<path {attrs} stroke-dasharray="{reveal.dash_array(line.length)}" '
        f'stroke-dashoffset="{offset}">'
        f'<animate attributeName="stroke-dashoffset" from="{offset}" to="0" '
        f'dur="{reveal.duration_ms}ms" calcMode="linear" fill="freeze"></animate>'
        f'</path>'
    )


def _render_label(label: LabelLayout, font_size: float) -> str:
    return (
        f'<text transform="translate({_num(label.x)},{_num(label.y)})" '
        f'x="{_num(label.dx)}" dy="{_num(label.dy_em)}em" '
        f'style="font: {_num(font_size)}px sans-serif">{_html_esc(label.text)}</text>'
    )


# ── Public API ───────────────────────────────────────────────────────────

def render_svg(layout: ChartLayout, *, standalone: bool = False) -> str:
    """Render *layout* as one ``<svg>`` element.

    Parameters
    ----------
    layout : ChartLayout
    standalone : bool
        If ``True``, prefix an XML declaration and embed the stylesheet
        so the output is a complete ``.svg`` file.
    """
    canvas = layout.canvas
    ox, oy = canvas.origin

    out = []
    if standalone:
        out.append('<?xml version="1.0" encoding="UTF-8"?>')
    out.append(
        f'<svg xmlns="{_SVG_NS}" class="canvas" '
        f'width="{canvas.width}" height="{canvas.height}">'
    )
    if standalone:
        out.append(f'<style>\n{_stylesheet(layout)}\n</style>')
    out.append(f'<g transform="translate({ox},{oy})">')

    out.extend(_render_axis(layout.x_axis, "axis axis--x"))
    out.extend(_render_axis(layout.y_axis, "axis axis--y"))
    out.extend(_render_grid(layout.x_grid))
    out.extend(_render_grid(layout.y_grid))

    labels = {label.text: label for label in layout.labels}
    font_size = layout.config.label_font_size
    for line in layout.lines:
        out.append('<g class="country">')
        out.append(_render_line(line, layout))
        label = labels.get(line.series_id)
        if label is not None and label.is_finite:
            out.append(_render_label(label, font_size))
        out.append('</g>')

    out.append('</g>')
    out.append('</svg>')
    return "\n".join(out) + "\n"


def render_html_document(layout: ChartLayout, *, title: str = APP_NAME) -> str:
    """Render *layout* as an HTML page with the canvas centred in the body."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{_html_esc(title)}</title>\n"
        "<style>\n"
        "svg.canvas { display: block; margin: auto; }\n"
        f"{_stylesheet(layout)}\n"
        "</style>\n"
        "</head>\n"
        "<body>\n"
        f"{render_svg(layout)}"
        "</body>\n"
        "</html>\n"
    )
