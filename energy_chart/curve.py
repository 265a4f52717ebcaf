"""
Natural cubic spline curves for the Energy Chart.

``natural_curve`` turns a sequence of pixel points into a ``CurvePath``:
a move to the first point, then one cubic Bézier segment per interval
whose control points come from a natural cubic spline (zero second
derivative at both ends).  Two points give a straight segment; one
point gives a bare move.

Points with a non-finite coordinate split the path into separate
sub-paths, leaving a visible gap.

A ``CurvePath`` can be written as SVG path data, converted to a
matplotlib ``Path``, measured, and truncated to a prefix of its length
for frame-by-frame reveal.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np
from matplotlib.path import Path

from .constants import CURVE_SAMPLES_PER_SEGMENT


# Segment kinds
LINE = 'L'
CUBIC = 'C'


def format_number(value: float) -> str:
    """Compact number for path data: at most three decimals, no ``-0``."""
    text = f"{value:.3f}".rstrip('0').rstrip('.')
    return '0' if text in ('-0', '') else text


@dataclass
class SubPath:
    """One continuous run: a start point and the segments that follow.

    Each segment is ``(kind, points)`` where *points* is a ``(k, 2)``
    array: one end point for ``LINE``, two controls plus the end point
    for ``CUBIC``.
    """
    start: np.ndarray
    segments: List[Tuple[str, np.ndarray]] = field(default_factory=list)

    def sample(self, per_segment: int = CURVE_SAMPLES_PER_SEGMENT) -> np.ndarray:
        """Polyline approximation, start point included, shape ``(n, 2)``."""
        pieces = [self.start.reshape(1, 2)]
        current = self.start
        t = np.linspace(0.0, 1.0, per_segment + 1)[1:, None]
        for kind, pts in self.segments:
            if kind == LINE:
                pieces.append(pts.reshape(1, 2))
            else:
                c1, c2, end = pts
                mt = 1.0 - t
                pieces.append(
                    mt ** 3 * current
                    + 3 * mt ** 2 * t * c1
                    + 3 * mt * t ** 2 * c2
                    + t ** 3 * end
                )
            current = pts[-1]
        return np.vstack(pieces)


@dataclass
class CurvePath:
    subpaths: List[SubPath] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.subpaths

    def to_svg(self) -> str:
        """SVG path data, e.g. ``"M0,450C...``."""
        parts = []
        for sub in self.subpaths:
            parts.append(f"M{format_number(sub.start[0])},{format_number(sub.start[1])}")
            for kind, pts in sub.segments:
                coords = ",".join(format_number(v) for v in pts.ravel())
                parts.append(f"{kind}{coords}")
        return "".join(parts)

    def to_mpl_path(self) -> Path:
        vertices = []
        codes = []
        for sub in self.subpaths:
            vertices.append(sub.start)
            codes.append(Path.MOVETO)
            for kind, pts in sub.segments:
                if kind == LINE:
                    vertices.append(pts[0])
                    codes.append(Path.LINETO)
                else:
                    vertices.extend(pts)
                    codes.extend([Path.CURVE4] * 3)
        if not vertices:
            return Path(np.empty((0, 2)))
        return Path(np.array(vertices, dtype=float), codes)

    def length(self, per_segment: int = CURVE_SAMPLES_PER_SEGMENT) -> float:
        """Total rendered length in pixels."""
        total = 0.0
        for sub in self.subpaths:
            pts = sub.sample(per_segment)
            total += float(np.sum(np.hypot(*np.diff(pts, axis=0).T)))
        return total

    def partial(self, fraction: float,
                per_segment: int = CURVE_SAMPLES_PER_SEGMENT) -> "CurvePath":
        """Polyline prefix covering *fraction* of the total length.

        Used for the reveal animation where dashing is unavailable.
        """
        fraction = min(max(fraction, 0.0), 1.0)
        remaining = self.length(per_segment) * fraction
        result = CurvePath()
        for sub in self.subpaths:
            pts = sub.sample(per_segment)
            seg_len = np.hypot(*np.diff(pts, axis=0).T)
            cum = np.concatenate([[0.0], np.cumsum(seg_len)])
            if remaining >= cum[-1]:
                kept = pts
            elif remaining <= 0:
                break
            else:
                idx = int(np.searchsorted(cum, remaining, side='right'))
                t = (remaining - cum[idx - 1]) / seg_len[idx - 1]
                tip = pts[idx - 1] + t * (pts[idx] - pts[idx - 1])
                kept = np.vstack([pts[:idx], tip])
            result.subpaths.append(SubPath(
                start=kept[0],
                segments=[(LINE, p.reshape(1, 2)) for p in kept[1:]],
            ))
            remaining -= cum[-1]
            if remaining <= 0:
                break
        return result


def natural_control_points(values: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """First and second Bézier control points for a natural spline.

    *values* holds one coordinate of ``n + 1`` knots (``n >= 2``).
    Returns arrays ``(a, b)`` of length ``n``: ``a[i]`` and ``b[i]``
    are the controls of the segment from knot ``i`` to knot ``i + 1``.
    Solved with the Thomas algorithm on the tridiagonal system.
    """
    x = np.asarray(values, dtype=float)
    n = len(x) - 1
    if n < 2:
        raise ValueError("natural_control_points needs at least three knots")
    a = np.empty(n)
    b = np.empty(n)
    r = np.empty(n)

    a[0], b[0], r[0] = 0.0, 2.0, x[0] + 2 * x[1]
    for i in range(1, n - 1):
        a[i], b[i], r[i] = 1.0, 4.0, 4 * x[i] + 2 * x[i + 1]
    a[n - 1], b[n - 1], r[n - 1] = 2.0, 7.0, 8 * x[n - 1] + x[n]

    for i in range(1, n):
        m = a[i] / b[i - 1]
        b[i] -= m
        r[i] -= m * r[i - 1]

    a[n - 1] = r[n - 1] / b[n - 1]
    for i in range(n - 2, -1, -1):
        a[i] = (r[i] - a[i + 1]) / b[i]

    b[n - 1] = (x[n] + a[n - 1]) / 2
    for i in range(n - 1):
        b[i] = 2 * x[i + 1] - a[i + 1]
    return a, b


def _natural_run(points: np.ndarray) -> SubPath:
    sub = SubPath(start=points[0].copy())
    if len(points) == 2:
        sub.segments.append((LINE, points[1].reshape(1, 2).copy()))
    elif len(points) > 2:
        ax, bx = natural_control_points(points[:, 0])
        ay, by = natural_control_points(points[:, 1])
        for i in range(len(points) - 1):
            sub.segments.append((CUBIC, np.array([
                [ax[i], ay[i]],
                [bx[i], by[i]],
                points[i + 1],
            ])))
    return sub


def natural_curve(points: Sequence[Tuple[float, float]]) -> CurvePath:
    """Build a natural cubic spline path through *points* in order.

    Points with a non-finite coordinate are dropped and split the
    curve into independent runs.
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    finite = np.all(np.isfinite(pts), axis=1)

    path = CurvePath()
    run_start = None
    for i, ok in enumerate(finite):
        if ok and run_start is None:
            run_start = i
        elif not ok and run_start is not None:
            path.subpaths.append(_natural_run(pts[run_start:i]))
            run_start = None
    if run_start is not None:
        path.subpaths.append(_natural_run(pts[run_start:]))
    return path
