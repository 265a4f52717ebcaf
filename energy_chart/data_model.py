"""
Data model for the Energy Chart.

Immutable dataclasses representing the typed CSV table and the
per-country series derived from it.  The dataset is constructed once
by ``csv_parser`` and never mutated; the layout and renderers receive
it read-only.

Missing or non-numeric energy values are modelled as ``NaN`` (not
``None``) so they flow through numeric extent and curve computations
unchanged.
"""

import datetime
from dataclasses import dataclass
from typing import Dict, List, Optional, Union


@dataclass(frozen=True)
class TypedRow:
    """One CSV record after typing.

    Parameters
    ----------
    year : datetime.date
        January 1st of the parsed ``year`` field.
    values : dict
        ``{country: energy}`` in header column order.  Energies are
        floats, ``NaN`` where the cell was empty or non-numeric.
    year_field : str
        Name of the year column in the source header.
    """
    year: datetime.date
    values: Dict[str, float]
    year_field: str = "year"

    def __getitem__(self, field_name: str):
        if field_name == self.year_field:
            return self.year
        return self.values[field_name]


@dataclass(frozen=True)
class Dataset:
    """Typed rows plus the source header.

    Parameters
    ----------
    rows : list of TypedRow
        One entry per data line, in file order.
    columns : list of str
        Header column names in file order.  ``columns[0]`` is the year
        column; the rest are country ids.
    source_file : str
        Path the dataset was read from.
    """
    rows: List[TypedRow]
    columns: List[str]
    source_file: str = ""

    @property
    def series_ids(self) -> List[str]:
        return self.columns[1:]


@dataclass(frozen=True)
class SeriesPoint:
    year: datetime.date
    energy: float


@dataclass(frozen=True)
class Series:
    """One country's energy values over time.

    ``values`` holds one point per dataset row in row order, including
    points whose energy is ``NaN``.
    """
    id: str
    values: List[SeriesPoint]

    @property
    def last(self) -> Optional[SeriesPoint]:
        return self.values[-1] if self.values else None


# ── Load result ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LoadSuccess:
    dataset: Dataset
    ok: bool = True


@dataclass(frozen=True)
class LoadFailure:
    """A fatal load-time failure.  No chart element may be drawn.

    Parameters
    ----------
    reason : str
        Human-readable description, suitable for stderr.
    error : Exception
        The exception that aborted the load.
    """
    reason: str
    error: Exception
    ok: bool = False


LoadResult = Union[LoadSuccess, LoadFailure]
