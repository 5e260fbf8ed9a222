"""
Aggregation of the daily arrivals to weeks, months and years

Counts are summed within each period, treating missing counts as zero.
For weeks and months, the cumulative arrivals are then recalculated
from the period totals (restarting each year)
and the missing data policy from [smallboats.null_policy][] is reapplied.
"""

from __future__ import annotations

from collections.abc import Collection

import numpy as np
import pandas as pd
from pandas_openscm.grouping import groupby_except

from smallboats.assertions import assert_has_columns
from smallboats.constants import (
    COUNT_COLUMNS,
    DATE_COLUMN,
    LABEL_COLUMN,
    MONTH_COLUMN,
    MONTH_START_COLUMN,
    MONTHLY_COLUMNS_ORDER,
    RATIO_COLUMN,
    RATIO_ROUND_COLUMN,
    WEEK_COLUMN,
    WEEKLY_COLUMNS_ORDER,
    YEAR_COLUMN,
    YEARLY_COLUMNS_ORDER,
    get_count_column,
)
from smallboats.cumulative import add_within_year_cumulative
from smallboats.labels import get_month_label
from smallboats.null_policy import apply_null_ratio_policy
from smallboats.typing import DailyDataFrame, Period, PeriodDataFrame
from smallboats.weeks import get_corrected_week


def sum_counts_by_period(
    indf: pd.DataFrame,
    period_columns: Collection[str],
    count_columns: Collection[str] = COUNT_COLUMNS,
    date_column: str = DATE_COLUMN,
) -> pd.DataFrame:
    """
    Sum counts within each period

    Parameters
    ----------
    indf
        Data to sum. Missing counts are treated as zero.

    period_columns
        Columns which identify the period to which each row belongs

    count_columns
        Columns to sum

    date_column
        Column which identifies each row within a period

    Returns
    -------
    :
        Sum of `count_columns` for each unique combination of `period_columns`,
        sorted by `period_columns`
    """
    counts = indf.set_index([*period_columns, date_column])[list(count_columns)]
    counts = counts.astype("Int64")

    return groupby_except(counts, date_column).sum().reset_index()


def get_period_keys(daily: DailyDataFrame) -> pd.DataFrame:
    """
    Get the keys needed to group daily data into periods

    Parameters
    ----------
    daily
        Daily data

    Returns
    -------
    :
        Copy of `daily` with the year, month, first day of the month
        and corrected week (see [smallboats.weeks][]) of each date
    """
    assert_has_columns(daily, [DATE_COLUMN, *COUNT_COLUMNS])

    dates = pd.to_datetime(daily[DATE_COLUMN])

    return daily.assign(
        **{
            YEAR_COLUMN: dates.dt.year.astype(np.int64),
            MONTH_COLUMN: dates.dt.month.astype(np.int64),
            MONTH_START_COLUMN: dates.dt.to_period("M").dt.start_time,
            WEEK_COLUMN: get_corrected_week(dates),
        }
    )


def aggregate_weekly(daily: DailyDataFrame) -> PeriodDataFrame:
    """
    Aggregate daily data to weeks

    The week numbers are corrected so that weeks
    don't span the year boundary, see [smallboats.weeks][].

    Parameters
    ----------
    daily
        Daily data. Only the date and count columns are used,
        everything else is recalculated.

    Returns
    -------
    :
        Weekly data
    """
    res = sum_counts_by_period(get_period_keys(daily), [YEAR_COLUMN, WEEK_COLUMN])
    res = add_within_year_cumulative(res)
    res = apply_null_ratio_policy(res)

    return res[list(WEEKLY_COLUMNS_ORDER)]


def aggregate_monthly(daily: DailyDataFrame) -> PeriodDataFrame:
    """
    Aggregate daily data to calendar months

    Parameters
    ----------
    daily
        Daily data. Only the date and count columns are used,
        everything else is recalculated.

    Returns
    -------
    :
        Monthly data
    """
    res = sum_counts_by_period(
        get_period_keys(daily), [YEAR_COLUMN, MONTH_COLUMN, MONTH_START_COLUMN]
    )
    res[LABEL_COLUMN] = get_month_label(res[MONTH_START_COLUMN])
    res = add_within_year_cumulative(res)
    res = apply_null_ratio_policy(res)

    return res[list(MONTHLY_COLUMNS_ORDER)]


def aggregate_yearly(daily: DailyDataFrame) -> PeriodDataFrame:
    """
    Aggregate daily data to calendar years

    Unlike the weekly and monthly data,
    there are no cumulative columns (each row is already the year's total)
    and the missing data policy is not applied.
    The totals are never missing and the ratio is a plain division,
    so a year with no boats has an undefined ratio
    (`NaN` for 0 / 0, `inf` otherwise) rather than a missing one.

    Parameters
    ----------
    daily
        Daily data. Only the date and count columns are used,
        everything else is recalculated.

    Returns
    -------
    :
        Yearly data
    """
    res = sum_counts_by_period(get_period_keys(daily), [YEAR_COLUMN])

    migrants = res[get_count_column("migrants")].to_numpy(dtype=np.float64)
    boats = res[get_count_column("boats")].to_numpy(dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = migrants / boats

    res[RATIO_COLUMN] = ratio
    res[RATIO_ROUND_COLUMN] = np.round(ratio)

    return res[list(YEARLY_COLUMNS_ORDER)]


def aggregate_period(period: Period, daily: DailyDataFrame) -> PeriodDataFrame:
    """
    Aggregate daily data to a given period

    Parameters
    ----------
    period
        Period to aggregate to

    daily
        Daily data

    Returns
    -------
    :
        Aggregated data

    Raises
    ------
    ValueError
        `period` is not supported
    """
    if period == "week":
        return aggregate_weekly(daily)

    if period == "month":
        return aggregate_monthly(daily)

    if period == "year":
        return aggregate_yearly(daily)

    raise ValueError(period)
