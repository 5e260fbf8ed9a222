"""
Reshaping of aggregated data from long to wide format
"""

from __future__ import annotations

import pandas as pd

from smallboats.constants import (
    MONTH_COLUMN,
    WEEK_COLUMN,
    YEAR_COLUMN,
    get_cumulative_column,
)
from smallboats.labels import get_month_names
from smallboats.typing import PeriodDataFrame


def pivot_cumulative_wide(
    long: PeriodDataFrame,
    period_column: str,
    value_column: str = get_cumulative_column("migrants"),
    year_column: str = YEAR_COLUMN,
) -> pd.DataFrame:
    """
    Pivot long format data so that there is one column per year

    Parameters
    ----------
    long
        Long format data

    period_column
        Column which identifies the period within the year (e.g. week).
        Each unique value becomes a row in the output.

    value_column
        Column which holds the values to put in the output

    year_column
        Column which holds the year.
        Each unique value becomes a column in the output.

    Returns
    -------
    :
        Wide format data.
        The first column is `period_column`, sorted in ascending order,
        followed by one column per year (named by the year as a string),
        sorted in ascending order.
        Combinations of period and year that aren't in `long` are missing.
    """
    if long.empty:
        return pd.DataFrame({period_column: pd.Series([], dtype="int64")})

    res = long.pivot(index=period_column, columns=year_column, values=value_column)
    res = res.sort_index(axis="index").sort_index(axis="columns")
    res.columns = [str(c) for c in res.columns]

    return res.reset_index()


def widen_weekly_cumulative(weekly: PeriodDataFrame) -> pd.DataFrame:
    """
    Get the cumulative migrant arrivals for each week, one column per year

    Parameters
    ----------
    weekly
        Weekly data, see [smallboats.aggregation.aggregate_weekly][]

    Returns
    -------
    :
        Weekly cumulative migrant arrivals in wide format
    """
    return pivot_cumulative_wide(weekly, period_column=WEEK_COLUMN)


def widen_monthly_cumulative(monthly: PeriodDataFrame) -> pd.DataFrame:
    """
    Get the cumulative migrant arrivals for each month, one column per year

    The short ("Jan") and long ("January") name of each month
    are included after the month number, before the year columns.

    Parameters
    ----------
    monthly
        Monthly data, see [smallboats.aggregation.aggregate_monthly][]

    Returns
    -------
    :
        Monthly cumulative migrant arrivals in wide format
    """
    res = pivot_cumulative_wide(monthly, period_column=MONTH_COLUMN)
    res.insert(1, "month_short", get_month_names(res[MONTH_COLUMN], abbreviate=True))
    res.insert(2, "month_long", get_month_names(res[MONTH_COLUMN]))

    return res
