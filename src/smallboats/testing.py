"""
Code to support our tests

This is here, rather than in our `tests` directory
because of the issues that come
when you turn your tests into a package using `__init__.py` files
(for details, see https://docs.pytest.org/en/7.1.x/explanation/goodpractices.html#choosing-an-import-mode).
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import pandas as pd

from smallboats.constants import DATE_COLUMN, get_count_column


def create_daily_source(
    records: Iterable[tuple[str, int | None, int | None]],
) -> pd.DataFrame:
    """
    Create daily records like the ones we get from the source file

    Parameters
    ----------
    records
        Records as `(date, migrants_arrived, boats_arrived)`.
        Dates are ISO-formatted strings, counts can be `None` (missing).

    Returns
    -------
    :
        Daily records
    """
    records_l = list(records)

    return pd.DataFrame(
        {
            DATE_COLUMN: pd.to_datetime([r[0] for r in records_l]),
            get_count_column("migrants"): pd.array(
                [r[1] for r in records_l], dtype="Int64"
            ),
            get_count_column("boats"): pd.array(
                [r[2] for r in records_l], dtype="Int64"
            ),
        }
    )


def create_random_daily_source(
    start: str,
    end: str,
    seed: int = 20180101,
    fraction_no_crossings: float = 0.4,
    fraction_missing: float = 0.05,
) -> pd.DataFrame:
    """
    Create random daily records covering a range of dates

    Parameters
    ----------
    start
        First date (inclusive)

    end
        Last date (inclusive)

    seed
        Seed for the random number generator

    fraction_no_crossings
        Fraction of days on which there are no crossings (zero counts)

    fraction_missing
        Fraction of days on which the counts are missing

    Returns
    -------
    :
        Daily records, one per day
    """
    rng = np.random.default_rng(seed)
    dates = pd.date_range(start, end, freq="D")

    boats = rng.integers(1, 20, size=dates.size)
    migrants = boats * rng.integers(10, 70, size=dates.size)

    no_crossings = rng.random(dates.size) < fraction_no_crossings
    boats[no_crossings] = 0
    migrants[no_crossings] = 0

    res = pd.DataFrame(
        {
            DATE_COLUMN: dates,
            get_count_column("migrants"): pd.array(migrants, dtype="Int64"),
            get_count_column("boats"): pd.array(boats, dtype="Int64"),
        }
    )
    missing = rng.random(dates.size) < fraction_missing
    res.loc[missing, [get_count_column("migrants"), get_count_column("boats")]] = pd.NA

    return res
