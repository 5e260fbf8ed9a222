"""
Human-readable labels for dates and months

The month names are fixed (English) rather than taken from the locale.
"""

from __future__ import annotations

import pandas as pd

from smallboats.constants import MONTH_NAMES_LONG, MONTH_NAMES_SHORT


def get_month_names(months: pd.Series[int], abbreviate: bool = False) -> pd.Series[str]:  # type: ignore # pandas-stubs confused
    """
    Get the name of each month

    Parameters
    ----------
    months
        Month numbers (1 for January to 12 for December)

    abbreviate
        Return the short ("Jan") rather than long ("January") names

    Returns
    -------
    :
        Month names

    Examples
    --------
    >>> get_month_names(pd.Series([1, 12])).tolist()
    ['January', 'December']
    >>> get_month_names(pd.Series([1, 12]), abbreviate=True).tolist()
    ['Jan', 'Dec']
    """
    names = MONTH_NAMES_SHORT if abbreviate else MONTH_NAMES_LONG

    return months.map(lambda m: names[int(m) - 1]).astype(object)


def get_day_label(dates: pd.Series[pd.Timestamp]) -> pd.Series[str]:  # type: ignore # pandas-stubs confused
    """
    Get labels like "January 1, 2026" for each date

    Examples
    --------
    >>> dates = pd.Series(pd.to_datetime(["2026-01-01", "2025-12-31"]))
    >>> get_day_label(dates).tolist()
    ['January 1, 2026', 'December 31, 2025']
    """
    return (
        get_month_names(dates.dt.month)
        + " "
        + dates.dt.day.astype(str)
        + ", "
        + dates.dt.year.astype(str)
    )


def get_month_label(dates: pd.Series[pd.Timestamp]) -> pd.Series[str]:  # type: ignore # pandas-stubs confused
    """
    Get labels like "January 2026" for each date

    Examples
    --------
    >>> get_month_label(pd.Series(pd.to_datetime(["2026-01-01"]))).tolist()
    ['January 2026']
    """
    return get_month_names(dates.dt.month) + " " + dates.dt.year.astype(str)
