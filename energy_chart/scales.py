"""
Scales for the Energy Chart.

Pure mappings from data values to pixel coordinates and colours:

- ``extent`` computes the ``(min, max)`` of a sequence, ignoring
  ``None`` and ``NaN``.
- ``ticks`` / ``tick_step`` / ``tick_increment`` pick "nice" tick
  values (steps of 1, 2 or 5 times a power of ten).
- ``LinearScale`` interpolates a numeric domain onto a pixel range.
- ``TimeScale`` does the same for calendar dates and ticks on whole
  years.
- ``OrdinalScale`` assigns palette colours to ids in first-seen order,
  wrapping around when there are more ids than colours.

``build_scales`` derives the three chart scales from a dataset.
"""

import datetime
import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .constants import CATEGORY10, DEFAULT_TICK_COUNT
from .csv_parser import format_year
from .data_model import Dataset, Series


_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


# ── Extent ───────────────────────────────────────────────────────────────

def extent(values: Iterable, key: Optional[Callable] = None) -> Tuple:
    """Return ``(min, max)`` of *values*, skipping ``None`` and ``NaN``.

    Works for any mutually comparable values (floats, dates).  Returns
    ``(None, None)`` if nothing comparable remains.

    Examples
    --------
    >>> extent([3.0, float('nan'), 1.0, None, 2.0])
    (1.0, 3.0)
    """
    lo = hi = None
    for value in values:
        if key is not None:
            value = key(value)
        if value is None:
            continue
        if isinstance(value, float) and math.isnan(value):
            continue
        if lo is None:
            lo = hi = value
        elif value < lo:
            lo = value
        elif value > hi:
            hi = value
    return lo, hi


# ── Tick generation ──────────────────────────────────────────────────────

def tick_increment(start: float, stop: float, count: int) -> float:
    """Tick step for ``start <= stop``.

    Positive results are the step itself; negative results ``-k`` mean
    a step of ``1 / k``, which keeps fractional ticks free of float
    error when they are generated as ``i / k``.
    """
    if count <= 0:
        return math.nan
    step = (stop - start) / count
    if step <= 0 or not math.isfinite(step):
        return math.nan
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return factor * 10 ** power
    return -(10 ** -power) / factor


def tick_step(start: float, stop: float, count: int) -> float:
    """Signed tick step between *start* and *stop* for ~*count* ticks."""
    if count <= 0:
        return math.nan
    step0 = abs(stop - start) / count
    if step0 <= 0 or not math.isfinite(step0):
        return math.nan
    step1 = 10 ** math.floor(math.log10(step0))
    error = step0 / step1
    if error >= _E10:
        step1 *= 10
    elif error >= _E5:
        step1 *= 5
    elif error >= _E2:
        step1 *= 2
    return -step1 if stop < start else step1


def ticks(start: float, stop: float, count: int = DEFAULT_TICK_COUNT) -> List[float]:
    """Return about *count* nice tick values covering ``[start, stop]``.

    Examples
    --------
    >>> ticks(10, 60, 10)
    [10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60]
    """
    if not (math.isfinite(start) and math.isfinite(stop)) or count <= 0:
        return []
    if start == stop:
        return [start]
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    step = tick_increment(start, stop, count)
    if not math.isfinite(step) or step == 0:
        return []
    if step > 0:
        lo = math.ceil(start / step)
        hi = math.floor(stop / step)
        values = [(lo + i) * step for i in range(int(hi - lo) + 1)]
    else:
        inv = -step
        lo = math.ceil(start * inv)
        hi = math.floor(stop * inv)
        values = [(lo + i) / inv for i in range(int(hi - lo) + 1)]
    if reverse:
        values.reverse()
    return values


def _precision_fixed(step: float) -> int:
    return max(0, -math.floor(math.log10(abs(step))))


# ── Linear scale ─────────────────────────────────────────────────────────

def _as_float(value) -> float:
    return math.nan if value is None else float(value)


class LinearScale:
    """Map a numeric domain linearly onto a pixel range.

    A degenerate domain (``d0 == d1``) maps every value to the middle
    of the range.  ``NaN`` in, ``NaN`` out.
    """

    def __init__(self, domain: Sequence, range: Sequence[float]):
        self.domain = (_as_float(domain[0]), _as_float(domain[1]))
        self.range = (float(range[0]), float(range[1]))

    def _normalize(self, value: float) -> float:
        d0, d1 = self.domain
        span = d1 - d0
        if math.isnan(span):
            return math.nan
        if span == 0:
            return 0.5
        return (value - d0) / span

    def __call__(self, value: float) -> float:
        r0, r1 = self.range
        return r0 + self._normalize(_as_float(value)) * (r1 - r0)

    def ticks(self, count: int = DEFAULT_TICK_COUNT) -> List[float]:
        return ticks(self.domain[0], self.domain[1], count)

    def tick_format(self, count: int = DEFAULT_TICK_COUNT) -> Callable[[float], str]:
        """Formatter with the fixed precision implied by the tick step."""
        step = tick_step(self.domain[0], self.domain[1], count)
        precision = _precision_fixed(step) if math.isfinite(step) and step else 0

        def fmt(value: float) -> str:
            text = f"{value:,.{precision}f}"
            # Avoid "-0" for tiny negatives rounded to zero
            if text.lstrip('-').strip('0.,') == '':
                text = text.lstrip('-')
            return text
        return fmt

    def __repr__(self):
        return f"LinearScale(domain={self.domain}, range={self.range})"


# ── Time scale ───────────────────────────────────────────────────────────

_DAYS_PER_YEAR = 365.2425


class TimeScale:
    """Map calendar dates linearly onto a pixel range.

    Interpolation is over ordinal day numbers.  Ticks fall on January
    1st, stepped by a nice whole number of years.
    """

    def __init__(self, domain: Sequence[Optional[datetime.date]], range: Sequence[float]):
        self.domain = (domain[0], domain[1])
        d0 = math.nan if domain[0] is None else domain[0].toordinal()
        d1 = math.nan if domain[1] is None else domain[1].toordinal()
        self._linear = LinearScale((d0, d1), range)
        self.range = self._linear.range

    def __call__(self, value: Optional[datetime.date]) -> float:
        if value is None:
            return math.nan
        return self._linear(value.toordinal())

    def ticks(self, count: int = DEFAULT_TICK_COUNT) -> List[datetime.date]:
        start, stop = self.domain
        if start is None or stop is None or count <= 0:
            return []
        if stop < start:
            start, stop = stop, start
        if start == stop:
            return [start] if (start.month, start.day) == (1, 1) else []

        y0 = start.year + (start.timetuple().tm_yday - 1) / _DAYS_PER_YEAR
        y1 = stop.year + (stop.timetuple().tm_yday - 1) / _DAYS_PER_YEAR
        step = tick_step(y0, y1, count)
        step = max(1, int(round(step))) if math.isfinite(step) else 1

        first = start.year if (start.month, start.day) == (1, 1) else start.year + 1
        return [
            datetime.date(year, 1, 1)
            for year in range(first, stop.year + 1)
            if year % step == 0
        ]

    def tick_format(self, count: int = DEFAULT_TICK_COUNT) -> Callable[[datetime.date], str]:
        return format_year

    def __repr__(self):
        return f"TimeScale(domain={self.domain}, range={self.range})"


# ── Ordinal scale ────────────────────────────────────────────────────────

class OrdinalScale:
    """Assign range values to ids in first-seen order, wrapping around.

    Looking up an id that is not in the domain appends it, so the
    assignment stays stable for the lifetime of the scale.
    """

    def __init__(self, domain: Iterable[str] = (), range: Sequence[str] = CATEGORY10):
        if not range:
            raise ValueError("OrdinalScale requires a non-empty range")
        self.range = list(range)
        self.domain: List[str] = []
        self._index = {}
        for key in domain:
            self._add(key)

    def _add(self, key: str) -> int:
        if key not in self._index:
            self._index[key] = len(self.domain)
            self.domain.append(key)
        return self._index[key]

    def __call__(self, key: str) -> str:
        return self.range[self._add(key) % len(self.range)]

    def __repr__(self):
        return f"OrdinalScale(domain={self.domain}, range={self.range})"


# ── Chart scales ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Scales:
    x: TimeScale
    y: LinearScale
    color: OrdinalScale


def build_scales(
    dataset: Dataset,
    series: Sequence[Series],
    inner_width: float,
    inner_height: float,
    *,
    palette: Sequence[str] = CATEGORY10,
) -> Scales:
    """Derive the x, y and colour scales for one chart.

    Parameters
    ----------
    dataset : Dataset
        Typed rows; the x domain is the year extent over all rows.
    series : list of Series
        Per-country series; the y domain is the energy extent over
        every point of every series, ignoring ``NaN``.
    inner_width, inner_height : float
        Size of the drawable area in pixels.  The y range is inverted
        so larger energies sit higher on screen.
    palette : list of str
        Colour range for the ordinal scale.
    """
    x = TimeScale(extent(row.year for row in dataset.rows), (0, inner_width))

    lows, highs = [], []
    for s in series:
        lo, hi = extent(p.energy for p in s.values)
        lows.append(lo)
        highs.append(hi)
    y = LinearScale(
        (extent(lows)[0], extent(highs)[1]),
        (inner_height, 0),
    )

    color = OrdinalScale((s.id for s in series), palette)
    return Scales(x=x, y=y, color=color)
