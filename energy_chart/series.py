"""
Series extraction for the Energy Chart.

Reshapes the row-oriented dataset into one series per country.
"""

from typing import List

from .data_model import Dataset, Series, SeriesPoint


def extract_series(dataset: Dataset) -> List[Series]:
    """Build one ``Series`` per country column, in header order.

    Each series holds exactly one point per dataset row, in row order.
    ``NaN`` energies are kept.
    """
    return [
        Series(
            id=country,
            values=[
                SeriesPoint(year=row.year, energy=row[country])
                for row in dataset.rows
            ],
        )
        for country in dataset.series_ids
    ]
