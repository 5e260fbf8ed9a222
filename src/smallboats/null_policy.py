"""
Handling of missing data and the ratio of migrants per boat

The published data records days without crossings as zero.
We treat a count of zero as 'no observation' rather than 'zero observed',
so zero counts are shown as missing in all non-cumulative outputs.
Cumulative counts are never made missing.

The same rules apply to the daily, weekly and monthly tables.
The yearly table divides its totals directly,
see [smallboats.aggregation.aggregate_yearly][].
"""

from __future__ import annotations

from collections.abc import Collection

import pandas as pd

from smallboats.constants import (
    COUNT_COLUMNS,
    RATIO_COLUMN,
    RATIO_ROUND_COLUMN,
    get_count_column,
)


def coerce_zero_to_missing(counts: pd.Series[int]) -> pd.Series[int]:  # type: ignore # pandas-stubs confused
    """
    Convert zero (and missing) counts to missing

    Parameters
    ----------
    counts
        Counts to convert

    Returns
    -------
    :
        `counts` as nullable integers, with zeros replaced by `pd.NA`

    Examples
    --------
    >>> coerce_zero_to_missing(pd.Series([3, 0, None, 1]))
    0       3
    1    <NA>
    2    <NA>
    3       1
    dtype: Int64
    """
    counts_int = counts.astype("Int64")
    observed = counts_int.fillna(0).gt(0).to_numpy(dtype=bool)

    return counts_int.where(observed)


def calculate_ratio(
    numerator: pd.Series[int], denominator: pd.Series[int]  # type: ignore # pandas-stubs confused
) -> pd.Series[float]:  # type: ignore # pandas-stubs confused
    """
    Calculate a ratio, only where both operands are present

    Parameters
    ----------
    numerator
        Numerator of the ratio

    denominator
        Denominator of the ratio.
        This should already have had its zeros removed
        with [coerce_zero_to_missing][(m).].

    Returns
    -------
    :
        `numerator / denominator` where both are present, otherwise `pd.NA`
    """
    both_present = (numerator.notnull() & denominator.notnull()).to_numpy(dtype=bool)
    ratio = numerator.astype("Float64") / denominator.astype("Float64")

    return ratio.where(both_present)


def round_ratio(ratio: pd.Series[float]) -> pd.Series[int]:  # type: ignore # pandas-stubs confused
    """
    Round a ratio to the nearest integer

    Halves are rounded to the nearest even integer
    (pandas' and numpy's default, also what R's `round` does).

    Parameters
    ----------
    ratio
        Ratio to round

    Returns
    -------
    :
        Rounded ratio as nullable integers,
        missing wherever `ratio` is missing

    Examples
    --------
    >>> round_ratio(pd.Series([0.5, 1.5, 2.5, 2.6, None], dtype="Float64"))
    0       0
    1       2
    2       2
    3       3
    4    <NA>
    dtype: Int64
    """
    return ratio.astype("Float64").round(0).astype("Int64")


def apply_null_ratio_policy(
    indf: pd.DataFrame,
    numerator_metric: str = "migrants",
    denominator_metric: str = "boats",
    count_columns: Collection[str] = COUNT_COLUMNS,
) -> pd.DataFrame:
    """
    Apply the missing data policy and add the migrants per boat ratio

    Parameters
    ----------
    indf
        Data to which to apply the policy

    numerator_metric
        Metric to use as the numerator of the ratio

    denominator_metric
        Metric to use as the denominator of the ratio

    count_columns
        Columns to which to apply [coerce_zero_to_missing][(m).]

    Returns
    -------
    :
        Copy of `indf` with zero counts made missing
        and the ratio columns added
    """
    res = indf.assign(**{c: coerce_zero_to_missing(indf[c]) for c in count_columns})
    res[RATIO_COLUMN] = calculate_ratio(
        res[get_count_column(numerator_metric)],
        res[get_count_column(denominator_metric)],
    )
    res[RATIO_ROUND_COLUMN] = round_ratio(res[RATIO_COLUMN])

    return res
