"""
Cumulative arrivals within each year
"""

from __future__ import annotations

from collections.abc import Collection

import pandas as pd

from smallboats.constants import (
    METRICS,
    YEAR_COLUMN,
    get_count_column,
    get_cumulative_column,
)


def add_within_year_cumulative(
    indf: pd.DataFrame,
    metrics: Collection[str] = METRICS,
    year_column: str = YEAR_COLUMN,
) -> pd.DataFrame:
    """
    Add the cumulative arrivals within each year

    Missing counts are treated as zero,
    so the cumulative arrivals are never missing.
    They simply carry forward the total so far.

    Parameters
    ----------
    indf
        Data to which to add the cumulative columns.
        This must already be sorted in time.

    metrics
        Metrics for which to add cumulative columns

    year_column
        Column which holds the year.
        The running sum restarts for each year.

    Returns
    -------
    :
        Copy of `indf` with a `cumulative_{metric}_arrived` column for each metric
    """
    cumulative = {
        get_cumulative_column(metric): (
            indf[get_count_column(metric)]
            .astype("Int64")
            .fillna(0)
            .groupby(indf[year_column], sort=False)
            .cumsum()
        )
        for metric in metrics
    }

    return indf.assign(**cumulative)
