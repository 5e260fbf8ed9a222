"""
Constants used throughout

The metrics we track are given explicitly,
all column names are derived from them.
"""

from __future__ import annotations

METRICS: tuple[str, ...] = ("migrants", "boats")
"""
Metrics for which arrivals are tracked
"""

DATE_COLUMN: str = "full_date"
"""
Column that holds the date of each daily record
"""

YEAR_COLUMN: str = "n_year"
MONTH_COLUMN: str = "n_month"
DAY_COLUMN: str = "n_day"
WEEK_COLUMN: str = "n_week"
MONTH_START_COLUMN: str = "date_month"
LABEL_COLUMN: str = "date_label"

RATIO_COLUMN: str = "migrants_per_boat"
RATIO_ROUND_COLUMN: str = "migrants_per_boat_round"

MONTH_NAMES_LONG: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
"""
Full month names, January first

We don't use the locale-dependent names from the standard library
so the output doesn't depend on where it is run.
"""

MONTH_NAMES_SHORT: tuple[str, ...] = tuple(v[:3] for v in MONTH_NAMES_LONG)
"""
Abbreviated month names, January first
"""


def get_count_column(metric: str) -> str:
    """
    Get the name of the column that holds the arrivals of a metric

    Parameters
    ----------
    metric
        Metric (e.g. "migrants")

    Returns
    -------
    :
        Column name

    Examples
    --------
    >>> get_count_column("boats")
    'boats_arrived'
    """
    return f"{metric}_arrived"


def get_cumulative_column(metric: str) -> str:
    """
    Get the name of the column that holds the cumulative arrivals of a metric

    Parameters
    ----------
    metric
        Metric (e.g. "migrants")

    Returns
    -------
    :
        Column name

    Examples
    --------
    >>> get_cumulative_column("migrants")
    'cumulative_migrants_arrived'
    """
    return f"cumulative_{get_count_column(metric)}"


COUNT_COLUMNS: tuple[str, ...] = tuple(get_count_column(m) for m in METRICS)
CUMULATIVE_COLUMNS: tuple[str, ...] = tuple(get_cumulative_column(m) for m in METRICS)

VALUE_COLUMNS_ORDER: tuple[str, ...] = (
    *COUNT_COLUMNS,
    RATIO_COLUMN,
    *CUMULATIVE_COLUMNS,
    RATIO_ROUND_COLUMN,
)
"""
Order of the value columns in the daily, weekly and monthly tables
"""

DAILY_COLUMNS_ORDER: tuple[str, ...] = (
    DATE_COLUMN,
    LABEL_COLUMN,
    YEAR_COLUMN,
    MONTH_COLUMN,
    DAY_COLUMN,
    *VALUE_COLUMNS_ORDER,
)

WEEKLY_COLUMNS_ORDER: tuple[str, ...] = (
    YEAR_COLUMN,
    WEEK_COLUMN,
    *VALUE_COLUMNS_ORDER,
)

MONTHLY_COLUMNS_ORDER: tuple[str, ...] = (
    MONTH_START_COLUMN,
    LABEL_COLUMN,
    YEAR_COLUMN,
    MONTH_COLUMN,
    *VALUE_COLUMNS_ORDER,
)

YEARLY_COLUMNS_ORDER: tuple[str, ...] = (
    YEAR_COLUMN,
    *COUNT_COLUMNS,
    RATIO_COLUMN,
    RATIO_ROUND_COLUMN,
)
