"""
Week numbering

The weekly figures published by the Home Office cut off at the end of each week.
Using ISO-8601 weeks directly causes two problems:
week 53 exists in some years
and the first/last week of the year can span the year boundary,
so the same week shows up in both years.
This makes the end-of-year totals inconsistent with the other tables.

To avoid this we correct the ISO week as follows:

- the first days of January are labelled week 1 if they fall in week 52 or 53
- the last days of December are labelled week 52 if they fall in week 1 or 53

As a result, every year's weeks run from 1 to 52
and every date stays in its calendar year.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from smallboats.exceptions import InvalidGroupingError

FIRST_WEEK: int = 1
LAST_WEEK: int = 52


def get_iso_week(dates: pd.Series[pd.Timestamp]) -> pd.Series[int]:  # type: ignore # pandas-stubs confused
    """
    Get the ISO-8601 week number of each date

    Parameters
    ----------
    dates
        Dates

    Returns
    -------
    :
        ISO-8601 week numbers (1 to 53)
    """
    return dates.dt.isocalendar().week.astype(np.int64)


def correct_week(iso_week: pd.Series[int], month: pd.Series[int]) -> pd.Series[int]:  # type: ignore # pandas-stubs confused
    """
    Correct ISO week numbers so that weeks don't span the year boundary

    Parameters
    ----------
    iso_week
        ISO-8601 week numbers

    month
        Month of each date (1 to 12)

    Returns
    -------
    :
        Corrected week numbers (1 to 52)

    Raises
    ------
    InvalidGroupingError
        The corrected week numbers are not all between 1 and 52

    Examples
    --------
    >>> correct_week(pd.Series([53, 52, 1, 53, 1, 27]), pd.Series([1, 1, 12, 12, 1, 7]))
    0     1
    1     1
    2    52
    3    52
    4     1
    5    27
    dtype: int64
    """
    iso_week_arr = iso_week.to_numpy(dtype=np.int64)
    month_arr = month.to_numpy(dtype=np.int64)

    corrected = np.select(
        [
            np.isin(iso_week_arr, [52, 53]) & (month_arr == 1),
            np.isin(iso_week_arr, [1, 53]) & (month_arr == 12),
        ],
        [FIRST_WEEK, LAST_WEEK],
        default=iso_week_arr,
    )

    out_of_range = (corrected < FIRST_WEEK) | (corrected > LAST_WEEK)
    if out_of_range.any():
        invalid = list(
            zip(
                iso_week_arr[out_of_range].tolist(),
                month_arr[out_of_range].tolist(),
                corrected[out_of_range].tolist(),
            )
        )
        msg = (
            f"Corrected week numbers must be between {FIRST_WEEK} and {LAST_WEEK}. "
            f"Received (iso_week, month, corrected): "
            f"{invalid}"
        )
        raise InvalidGroupingError(msg)

    return pd.Series(corrected, index=iso_week.index, name=iso_week.name)


def get_corrected_week(dates: pd.Series[pd.Timestamp]) -> pd.Series[int]:  # type: ignore # pandas-stubs confused
    """
    Get the corrected week number of each date

    See the module docstring for the correction rules.

    Parameters
    ----------
    dates
        Dates

    Returns
    -------
    :
        Corrected week numbers (1 to 52)

    Examples
    --------
    >>> dates = pd.Series(pd.to_datetime(["2025-12-31", "2026-01-01", "2021-01-02"]))
    >>> get_corrected_week(dates)
    0    52
    1     1
    2     1
    Name: week, dtype: int64
    """
    return correct_week(get_iso_week(dates), dates.dt.month)
