"""
Useful assertions

The `assert_*_valid`/`assert_has_*` functions check the input
and raise the errors from [smallboats.exceptions][].
The remaining functions check the consistency of outputs
and raise `AssertionError`, because a failure indicates a bug.
"""

from __future__ import annotations

from collections.abc import Collection

import pandas as pd

from smallboats.constants import (
    COUNT_COLUMNS,
    CUMULATIVE_COLUMNS,
    YEAR_COLUMN,
    get_count_column,
    get_cumulative_column,
)
from smallboats.exceptions import InvalidCountError, InvalidRecordError


def assert_has_columns(indf: pd.DataFrame, columns: Collection[str]) -> None:
    """
    Assert that a [pd.DataFrame][pandas.DataFrame] has the given columns

    Parameters
    ----------
    indf
        Data to check

    columns
        Columns that must be in `indf`

    Raises
    ------
    InvalidRecordError
        `indf` is missing at least one of `columns`
    """
    missing = [c for c in columns if c not in indf.columns]
    if missing:
        msg = (
            f"Missing required columns: {missing}. "
            f"Available columns: {list(indf.columns)}"
        )
        raise InvalidRecordError(msg)


def assert_dates_are_valid(indf: pd.DataFrame, date_column: str) -> None:
    """
    Assert that the dates can be used as the key of a daily time series

    In other words, there are no missing dates,
    no date appears more than once
    and the dates are sorted in ascending order.

    Parameters
    ----------
    indf
        Data to check

    date_column
        Column which holds the dates

    Raises
    ------
    InvalidRecordError
        The dates are missing, duplicated or not sorted
    """
    dates = indf[date_column]
    if dates.isnull().any():
        missing_rows = dates.index[dates.isnull()].tolist()
        msg = f"{date_column} contains missing dates at rows {missing_rows}"
        raise InvalidRecordError(msg)

    duplicated = dates[dates.duplicated()]
    if not duplicated.empty:
        duplicates = duplicated.astype(str).unique().tolist()
        msg = f"{date_column} contains duplicate dates: {duplicates}"
        raise InvalidRecordError(msg)

    if not dates.is_monotonic_increasing:
        msg = f"{date_column} is not sorted in ascending order"
        raise InvalidRecordError(msg)


def assert_counts_are_valid(
    indf: pd.DataFrame, columns: Collection[str] = COUNT_COLUMNS
) -> None:
    """
    Assert that the arrival counts are non-negative integers

    Missing counts are fine, they are treated as 'no data'.

    Parameters
    ----------
    indf
        Data to check

    columns
        Columns which hold counts

    Raises
    ------
    InvalidCountError
        A count is negative, not a whole number or not a number at all
    """
    for column in columns:
        present = indf[column].dropna()
        numeric = pd.to_numeric(present, errors="coerce")
        invalid_locator = (
            numeric.isnull().to_numpy(dtype=bool)
            | (numeric.fillna(0) < 0).to_numpy(dtype=bool)
            | (numeric.fillna(0) % 1 != 0).to_numpy(dtype=bool)
        )
        if invalid_locator.any():
            raise InvalidCountError(
                column=column, invalid=present[invalid_locator].unique().tolist()
            )


def assert_cumulative_is_non_decreasing(
    indf: pd.DataFrame,
    cumulative_columns: Collection[str] = CUMULATIVE_COLUMNS,
    year_column: str = YEAR_COLUMN,
) -> None:
    """
    Assert that cumulative columns never decrease within a year

    Parameters
    ----------
    indf
        Data to check, assumed to be sorted in time

    cumulative_columns
        Cumulative columns to check

    year_column
        Column which holds the year

    Raises
    ------
    AssertionError
        A cumulative column decreases within a year
    """
    for column in cumulative_columns:
        diffs = indf.groupby(year_column)[column].diff().fillna(0)
        if (diffs < 0).any():
            decreasing = indf.loc[(diffs < 0).to_numpy(dtype=bool)]
            msg = f"{column} decreases within a year. Decreasing rows:\n{decreasing}"
            raise AssertionError(msg)


def assert_totals_match_yearly(
    indf: pd.DataFrame,
    yearly: pd.DataFrame,
    metrics: Collection[str],
    year_column: str = YEAR_COLUMN,
) -> None:
    """
    Assert that totals over a year match the yearly table

    Both the sum of the (null-as-zero) counts
    and the last cumulative value in each year are checked.

    Parameters
    ----------
    indf
        Daily, weekly or monthly data to check

    yearly
        Yearly totals

    metrics
        Metrics to check

    year_column
        Column which holds the year

    Raises
    ------
    AssertionError
        The totals over a year don't match the yearly table
    """
    yearly_indexed = yearly.set_index(year_column)
    grouped = indf.groupby(year_column)
    for metric in metrics:
        count_column = get_count_column(metric)
        exp = yearly_indexed[count_column].astype("Int64")

        summed = grouped[count_column].sum().astype("Int64")
        last_cumulative = (
            grouped[get_cumulative_column(metric)].last().astype("Int64")
        )
        for name, res in (("sum", summed), ("last cumulative", last_cumulative)):
            comparison = res.compare(exp, result_names=("calculated", "yearly"))
            if not comparison.empty:
                msg = (
                    f"The {name} of {count_column} over each year "
                    f"doesn't match the yearly table. comparison=\n{comparison}"
                )
                raise AssertionError(msg)


def assert_pivot_is_complete(
    long: pd.DataFrame,
    wide: pd.DataFrame,
    period_column: str,
    value_column: str,
    year_column: str = YEAR_COLUMN,
) -> None:
    """
    Assert that a wide table holds exactly the values of the long table

    Parameters
    ----------
    long
        Long format data

    wide
        Wide format data created from `long`

    period_column
        Column which holds the period (e.g. week)

    value_column
        Column in `long` whose values are in `wide`

    year_column
        Column in `long` which holds the year

    Raises
    ------
    AssertionError
        A value in `long` is missing from `wide` or `wide` has extra values
    """
    year_columns = [c for c in wide.columns if c in {str(y) for y in long[year_column]}]
    if len(year_columns) != long[year_column].nunique():
        years = sorted(long[year_column].unique().tolist())
        msg = (
            f"Expected one column per year in {years}. "
            f"Received columns: {list(wide.columns)}"
        )
        raise AssertionError(msg)

    sort_cols = [year_column, period_column]
    from_wide = (
        wide.melt(
            id_vars=[period_column],
            value_vars=year_columns,
            var_name=year_column,
            value_name=value_column,
        )
        .dropna(subset=[value_column])
        .sort_values(sort_cols)
        .reset_index(drop=True)
    )
    exp = (
        long[[period_column, year_column, value_column]]
        .assign(**{year_column: long[year_column].astype(str)})
        .sort_values(sort_cols)
        .reset_index(drop=True)
    )

    pd.testing.assert_frame_equal(
        from_wide[exp.columns], exp, check_dtype=False, check_column_type=False
    )
