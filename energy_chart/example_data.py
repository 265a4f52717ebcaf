"""
Example data generator for the Energy Chart.

Creates a synthetic ``BRICSdata.csv`` with per-capita energy
consumption (million BTUs per person) for the BRICS countries and the
United States, 2000-2014.  A few cells are intentionally blank to
exercise the ``NaN`` gap handling; the final year is always complete so
every line gets an end label.
"""

import os
import random

from .constants import DEFAULT_CSV, YEAR_FIELD


# (start value in 2000, yearly trend, noise std-dev)
_COUNTRIES = [
    ('Brazil',        50.0,  1.0, 0.8),
    ('Russia',       190.0,  1.5, 3.0),
    ('India',         14.0,  0.7, 0.3),
    ('China',         33.0,  4.0, 1.0),
    ('South Africa', 115.0, -0.3, 2.0),
    ('United States', 350.0, -3.0, 4.0),
]

FIRST_YEAR = 2000
LAST_YEAR = 2014
BLANK_PROBABILITY = 0.04


def generate_example_csv(output_dir: str, filename: str = DEFAULT_CSV) -> str:
    """Write the example CSV into *output_dir* and return its path."""
    os.makedirs(output_dir, exist_ok=True)

    # Reproducible randomness
    rng = random.Random(42)

    filepath = os.path.join(output_dir, filename)
    with open(filepath, 'w', encoding='utf-8', newline='') as fh:
        header = [YEAR_FIELD] + [name for name, *_ in _COUNTRIES]
        fh.write(','.join(header) + '\n')

        for year in range(FIRST_YEAR, LAST_YEAR + 1):
            row = [str(year)]
            for _, start, trend, noise in _COUNTRIES:
                if year != LAST_YEAR and rng.random() < BLANK_PROBABILITY:
                    row.append('')
                    continue
                value = start + trend * (year - FIRST_YEAR) + rng.gauss(0.0, noise)
                row.append(f"{value:.2f}")
            fh.write(','.join(row) + '\n')

    return filepath


if __name__ == '__main__':
    # Quick test: generate to a temporary directory and print summary
    import tempfile
    out_dir = os.path.join(tempfile.gettempdir(), 'energy_chart_example')
    path = generate_example_csv(out_dir)
    print(f"  {path} ({os.path.getsize(path):,} bytes)")
