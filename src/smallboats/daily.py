"""
Daily arrivals of migrants and small boats
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from smallboats.assertions import (
    assert_counts_are_valid,
    assert_dates_are_valid,
    assert_has_columns,
)
from smallboats.constants import (
    COUNT_COLUMNS,
    DAILY_COLUMNS_ORDER,
    DATE_COLUMN,
    DAY_COLUMN,
    LABEL_COLUMN,
    MONTH_COLUMN,
    YEAR_COLUMN,
)
from smallboats.cumulative import add_within_year_cumulative
from smallboats.exceptions import InvalidRecordError
from smallboats.labels import get_day_label
from smallboats.null_policy import apply_null_ratio_policy
from smallboats.typing import DailyDataFrame


def get_daily_dates(indf: pd.DataFrame, date_column: str = DATE_COLUMN) -> pd.Series:
    """
    Get the dates of daily records, at day precision

    Parameters
    ----------
    indf
        Daily records

    date_column
        Column which holds the dates

    Returns
    -------
    :
        Dates, with any time of day removed

    Raises
    ------
    InvalidRecordError
        The dates could not be interpreted as dates
    """
    try:
        dates = pd.to_datetime(indf[date_column])
    except (ValueError, TypeError) as exc:
        msg = f"Could not interpret {date_column} as dates"
        raise InvalidRecordError(msg) from exc

    return dates.dt.normalize()


def normalise_daily(indf: pd.DataFrame) -> DailyDataFrame:
    """
    Normalise the daily records

    The steps are:

    1. check the dates and counts
    1. calculate the cumulative arrivals within each year,
       using the counts as reported (missing counts count as zero)
    1. make zero counts missing and calculate the migrants per boat
       (see [smallboats.null_policy][])
    1. add the date components and a label

    Parameters
    ----------
    indf
        Daily records.
        These must have a `full_date` column
        and an `{metric}_arrived` column for each metric.
        The dates must be unique and sorted in ascending order.
        Any other columns are dropped.

    Returns
    -------
    :
        Normalised daily records, one row per input row
        (in the same order)

    Raises
    ------
    InvalidRecordError
        The dates are missing, duplicated or not sorted

    InvalidCountError
        A count is negative or not a whole number
    """
    assert_has_columns(indf, [DATE_COLUMN, *COUNT_COLUMNS])

    dates = get_daily_dates(indf)
    assert_dates_are_valid(dates.to_frame(DATE_COLUMN), date_column=DATE_COLUMN)
    assert_counts_are_valid(indf, COUNT_COLUMNS)

    res = pd.DataFrame(
        {
            DATE_COLUMN: dates.to_numpy(),
            YEAR_COLUMN: dates.dt.year.to_numpy(dtype=np.int64),
            MONTH_COLUMN: dates.dt.month.to_numpy(dtype=np.int64),
            DAY_COLUMN: dates.dt.day.to_numpy(dtype=np.int64),
            **{
                c: pd.to_numeric(indf[c]).astype("Int64").array
                for c in COUNT_COLUMNS
            },
        }
    )
    res[LABEL_COLUMN] = get_day_label(res[DATE_COLUMN])

    res = add_within_year_cumulative(res)
    res = apply_null_ratio_policy(res)

    return res[list(DAILY_COLUMNS_ORDER)]
