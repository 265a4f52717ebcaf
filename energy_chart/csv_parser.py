"""
CSV parser for the Energy Chart.

Loads one comma-separated file with a ``year`` column followed by one
column per country and assembles it into a ``Dataset``.  Handles:

- UTF-8 BOM markers
- Blank lines (skipped)
- Strict four-digit year parsing (fatal on failure)
- Unary-plus numeric coercion for energy cells (``NaN`` on failure)
- Short rows (padded with empty cells) and long rows (extras ignored)
"""

import csv
import datetime
import math
import os
import re
import warnings
from typing import Dict, List, Sequence

from .constants import COL_YEAR, YEAR_FIELD
from .data_model import Dataset, LoadFailure, LoadSuccess, LoadResult, TypedRow


class DataLoadError(ValueError):
    """The CSV file cannot be turned into a dataset."""


class YearParseError(DataLoadError):
    """A ``year`` cell is not a four-digit year."""


class MissingValueWarning(UserWarning):
    """Non-numeric energy cells were read as ``NaN``."""


_YEAR_RE = re.compile(r'^\d{4}$')
_NUMBER_RE = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')
_INFINITY_RE = re.compile(r'^[+-]?Infinity$')


# ── Field typing ─────────────────────────────────────────────────────────

def parse_year(text: str) -> datetime.date:
    """Parse a four-digit year into January 1st of that year.

    Raises ``YearParseError`` for anything but exactly four digits,
    and for year ``0000``.
    """
    if text is None or not _YEAR_RE.match(text):
        raise YearParseError(f"invalid year {text!r}: expected four digits")
    year = int(text)
    if year < datetime.MINYEAR:
        raise YearParseError(f"invalid year {text!r}: no such calendar year")
    return datetime.date(year, 1, 1)


def format_year(value: datetime.date) -> str:
    """Inverse of ``parse_year``: ``date(2005, 1, 1)`` → ``"2005"``."""
    return f"{value.year:04d}"


def coerce_number(text: str) -> float:
    """Coerce a cell to a float the way unary plus does.

    Empty or non-numeric text yields ``NaN``; nothing is raised.

    Examples
    --------
    >>> coerce_number(" 12.5 ")
    12.5
    >>> math.isnan(coerce_number(""))
    True
    """
    if text is None:
        return math.nan
    s = text.strip()
    if _NUMBER_RE.match(s):
        return float(s)
    if _INFINITY_RE.match(s):
        return -math.inf if s.startswith('-') else math.inf
    return math.nan


def type_row(raw: Dict[str, str], columns: Sequence[str]) -> TypedRow:
    """Type one raw CSV row.

    The first column is parsed as a year, every other column is
    coerced to a number.  *raw* is not modified.
    """
    year_field = columns[COL_YEAR]
    values = {}
    for name in columns[COL_YEAR + 1:]:
        values[name] = coerce_number(raw.get(name))
    return TypedRow(
        year=parse_year(raw.get(year_field)),
        values=values,
        year_field=year_field,
    )


# ── File reader ──────────────────────────────────────────────────────────

def _validate_header(header: List[str], filename: str) -> List[str]:
    columns = [name.strip() for name in header]
    if not columns or columns[COL_YEAR] != YEAR_FIELD:
        raise DataLoadError(
            f"CSV header in '{filename}' must start with a "
            f"'{YEAR_FIELD}' column, got {columns[:1]}."
        )
    if len(columns) < 2:
        raise DataLoadError(
            f"CSV header in '{filename}' has no country columns."
        )
    seen = set()
    for name in columns:
        if name in seen:
            raise DataLoadError(
                f"Duplicate column '{name}' in CSV header of '{filename}'."
            )
        seen.add(name)
    return columns


def read_dataset(filepath: str) -> Dataset:
    """Read *filepath* into a ``Dataset``.

    Raises
    ------
    FileNotFoundError
        If *filepath* does not exist.
    DataLoadError
        If the file is empty, the header is malformed, there are no
        data rows, or any ``year`` cell fails to parse
        (``YearParseError``).
    """
    filename = os.path.basename(filepath)
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    try:
        with open(filepath, 'r', encoding='utf-8-sig', newline='') as fh:
            reader = csv.reader(fh)
            records = [
                (reader.line_num, rec) for rec in reader
                if any(c.strip() for c in rec)
            ]
    except (UnicodeDecodeError, csv.Error) as exc:
        raise DataLoadError(f"Cannot read CSV file '{filename}': {exc}") from exc

    if not records:
        raise DataLoadError(f"CSV file '{filename}' is empty.")

    columns = _validate_header(records[0][1], filename)
    n_columns = len(columns)

    rows: List[TypedRow] = []
    bad_tokens: List[str] = []
    ragged_lines: List[int] = []

    for line_idx, record in records[1:]:
        if len(record) < n_columns:
            ragged_lines.append(line_idx)
            record = record + [''] * (n_columns - len(record))
        raw = dict(zip(columns, record))

        try:
            row = type_row(raw, columns)
        except YearParseError as exc:
            raise YearParseError(f"{filename}, line {line_idx}: {exc}") from exc

        for name, value in row.values.items():
            cell = raw[name].strip()
            if cell and math.isnan(value):
                bad_tokens.append(f"line {line_idx} '{name}': '{cell}'")
        rows.append(row)

    if not rows:
        raise DataLoadError(f"No data rows found in '{filename}'.")

    if ragged_lines:
        warnings.warn(
            f"{len(ragged_lines)} short row(s) in '{filename}' "
            f"(lines {ragged_lines[:5]}) were padded with empty cells.",
            MissingValueWarning,
            stacklevel=2,
        )
    if bad_tokens:
        detail = "; ".join(bad_tokens[:10])
        if len(bad_tokens) > 10:
            detail += f" ... and {len(bad_tokens) - 10} more"
        warnings.warn(
            f"Non-numeric values in '{filename}': {detail}. "
            f"These cells were read as NaN.",
            MissingValueWarning,
            stacklevel=2,
        )

    return Dataset(rows=rows, columns=columns, source_file=filepath)


def load_dataset(filepath: str) -> LoadResult:
    """Load *filepath*, returning a ``LoadSuccess`` or ``LoadFailure``.

    Every load-time error is fatal for the chart; the caller must not
    draw anything when ``result.ok`` is ``False``.
    """
    try:
        dataset = read_dataset(filepath)
    except (OSError, DataLoadError) as exc:
        return LoadFailure(reason=str(exc), error=exc)
    return LoadSuccess(dataset=dataset)
