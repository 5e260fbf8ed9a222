"""
Tests of `smallboats.aggregation`
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from smallboats.aggregation import (
    aggregate_monthly,
    aggregate_period,
    aggregate_weekly,
    aggregate_yearly,
)
from smallboats.constants import (
    MONTHLY_COLUMNS_ORDER,
    WEEKLY_COLUMNS_ORDER,
    YEARLY_COLUMNS_ORDER,
)
from smallboats.daily import normalise_daily
from smallboats.testing import create_daily_source


def test_aggregate_weekly_year_end(year_end_source):
    res = aggregate_weekly(normalise_daily(year_end_source))

    exp = pd.DataFrame(
        {
            "n_year": np.array([2025, 2026], dtype=np.int64),
            # 2025-12-30 and 2025-12-31 are in ISO week 1 of 2026,
            # but are put in week 52 of 2025
            "n_week": np.array([52, 1], dtype=np.int64),
            "migrants_arrived": pd.array([5, 10], dtype="Int64"),
            "boats_arrived": pd.array([1, 1], dtype="Int64"),
            "migrants_per_boat": pd.array([5.0, 10.0], dtype="Float64"),
            "cumulative_migrants_arrived": pd.array([5, 10], dtype="Int64"),
            "cumulative_boats_arrived": pd.array([1, 1], dtype="Int64"),
            "migrants_per_boat_round": pd.array([5, 10], dtype="Int64"),
        }
    )

    pd.testing.assert_frame_equal(res, exp)


def test_aggregate_weekly_folds_week_53():
    # 2020-12-28 to 2021-01-03 is ISO week 53 of 2020
    start = create_daily_source(
        [(str(d.date()), 1, 1) for d in pd.date_range("2020-12-28", "2021-01-10")]
    )

    res = aggregate_weekly(start)

    assert res["n_year"].tolist() == [2020, 2021]
    assert res["n_week"].tolist() == [52, 1]
    assert res["migrants_arrived"].tolist() == [4, 10]
    assert res["cumulative_boats_arrived"].tolist() == [4, 10]


def test_aggregate_weekly_raw_input_same_as_normalised(multi_year_source):
    # Only the counts are used, so it shouldn't matter
    # whether the zeros have already been made missing
    pd.testing.assert_frame_equal(
        aggregate_weekly(multi_year_source),
        aggregate_weekly(normalise_daily(multi_year_source)),
    )


def test_aggregate_weekly_week_without_arrivals():
    start = create_daily_source(
        [
            ("2024-01-01", 10, 1),
            ("2024-01-08", 0, 0),
            ("2024-01-09", None, None),
            ("2024-01-15", 6, 2),
        ]
    )

    res = aggregate_weekly(start)

    assert res["n_week"].tolist() == [1, 2, 3]
    assert res["migrants_arrived"].isna().tolist() == [False, True, False]
    assert res["migrants_per_boat"].isna().tolist() == [False, True, False]
    assert res["migrants_per_boat_round"].isna().tolist() == [False, True, False]
    assert res["cumulative_migrants_arrived"].tolist() == [10, 10, 16]


def test_aggregate_monthly_year_end(year_end_source):
    res = aggregate_monthly(normalise_daily(year_end_source))

    assert res.columns.tolist() == list(MONTHLY_COLUMNS_ORDER)
    assert res["date_month"].tolist() == [
        pd.Timestamp("2025-12-01"),
        pd.Timestamp("2026-01-01"),
    ]
    assert res["date_label"].tolist() == ["December 2025", "January 2026"]

    exp = pd.DataFrame(
        {
            "n_year": np.array([2025, 2026], dtype=np.int64),
            "n_month": np.array([12, 1], dtype=np.int64),
            "migrants_arrived": pd.array([5, 10], dtype="Int64"),
            "boats_arrived": pd.array([1, 1], dtype="Int64"),
            "migrants_per_boat": pd.array([5.0, 10.0], dtype="Float64"),
            "cumulative_migrants_arrived": pd.array([5, 10], dtype="Int64"),
            "cumulative_boats_arrived": pd.array([1, 1], dtype="Int64"),
            "migrants_per_boat_round": pd.array([5, 10], dtype="Int64"),
        }
    )

    pd.testing.assert_frame_equal(res.drop(columns=["date_month", "date_label"]), exp)


def test_aggregate_monthly_cumulative():
    start = create_daily_source(
        [
            ("2022-01-15", 100, 4),
            ("2022-01-20", 50, 1),
            ("2022-02-03", 0, 0),
            ("2022-03-01", 30, 2),
            ("2023-01-01", 7, 1),
        ]
    )

    res = aggregate_monthly(start)

    assert res["n_month"].tolist() == [1, 2, 3, 1]
    assert res["migrants_arrived"].tolist()[:1] == [150]
    assert res["migrants_arrived"].isna().tolist() == [False, True, False, False]
    assert res["cumulative_migrants_arrived"].tolist() == [150, 150, 180, 7]
    assert res["cumulative_boats_arrived"].tolist() == [5, 5, 7, 1]
    assert res["migrants_per_boat"].tolist()[0] == 30.0


def test_aggregate_yearly_year_end(year_end_source):
    res = aggregate_yearly(normalise_daily(year_end_source))

    exp = pd.DataFrame(
        {
            "n_year": np.array([2025, 2026], dtype=np.int64),
            "migrants_arrived": pd.array([5, 10], dtype="Int64"),
            "boats_arrived": pd.array([1, 1], dtype="Int64"),
            "migrants_per_boat": np.array([5.0, 10.0]),
            "migrants_per_boat_round": np.array([5.0, 10.0]),
        }
    )

    pd.testing.assert_frame_equal(res, exp)


def test_aggregate_yearly_no_boats_is_undefined_not_missing():
    start = create_daily_source(
        [
            ("2019-06-01", 0, 0),
            ("2019-06-02", None, None),
            ("2020-06-01", 5, 0),
            ("2021-06-01", 9, 2),
        ]
    )

    res = aggregate_yearly(start)

    assert res["migrants_arrived"].tolist() == [0, 5, 9]
    assert res["boats_arrived"].tolist() == [0, 0, 2]
    assert res["migrants_per_boat"].dtype == np.float64

    ratio = res["migrants_per_boat"].to_numpy()
    assert np.isnan(ratio[0])
    assert np.isposinf(ratio[1])
    assert ratio[2] == 4.5
    # Half to even
    assert res["migrants_per_boat_round"].tolist()[2] == 4.0

    # The other tables treat the same data as missing
    weekly = aggregate_weekly(start)
    assert weekly["migrants_per_boat"].isna().tolist() == [True, True, False]


@pytest.mark.parametrize(
    "period, aggregator",
    (
        ("week", aggregate_weekly),
        ("month", aggregate_monthly),
        ("year", aggregate_yearly),
    ),
)
def test_aggregate_period(period, aggregator, year_end_source):
    pd.testing.assert_frame_equal(
        aggregate_period(period, year_end_source), aggregator(year_end_source)
    )


def test_aggregate_period_unknown():
    with pytest.raises(ValueError, match="fortnight"):
        aggregate_period("fortnight", create_daily_source([("2024-01-01", 1, 1)]))


@pytest.mark.parametrize(
    "aggregator, exp_columns",
    (
        (aggregate_weekly, WEEKLY_COLUMNS_ORDER),
        (aggregate_monthly, MONTHLY_COLUMNS_ORDER),
        (aggregate_yearly, YEARLY_COLUMNS_ORDER),
    ),
)
def test_column_order(aggregator, exp_columns, multi_year_source):
    assert aggregator(multi_year_source).columns.tolist() == list(exp_columns)


@pytest.mark.parametrize("aggregator", (aggregate_weekly, aggregate_monthly))
@pytest.mark.parametrize("metric", ("migrants", "boats"))
def test_totals_reconcile_with_yearly(aggregator, metric, multi_year_source):
    daily = normalise_daily(multi_year_source)
    yearly = aggregate_yearly(daily).set_index("n_year")
    res = aggregator(daily)

    summed = res.groupby("n_year")[f"{metric}_arrived"].sum()
    last_cumulative = res.groupby("n_year")[f"cumulative_{metric}_arrived"].last()
    daily_last_cumulative = daily.groupby("n_year")[
        f"cumulative_{metric}_arrived"
    ].last()

    exp = yearly[f"{metric}_arrived"]
    assert summed.tolist() == exp.tolist()
    assert last_cumulative.tolist() == exp.tolist()
    assert daily_last_cumulative.tolist() == exp.tolist()


@pytest.mark.parametrize("aggregator", (aggregate_weekly, aggregate_monthly))
def test_cumulative_non_decreasing(aggregator, multi_year_source):
    res = aggregator(multi_year_source)

    for column in ("cumulative_migrants_arrived", "cumulative_boats_arrived"):
        diffs = res.groupby("n_year")[column].diff().dropna()
        assert (diffs >= 0).all()


def test_weekly_weeks_in_range(multi_year_source):
    res = aggregate_weekly(multi_year_source)

    assert res["n_week"].between(1, 52).all()
    assert not res.duplicated(["n_year", "n_week"]).any()


@pytest.mark.parametrize("aggregator", (aggregate_weekly, aggregate_monthly))
def test_ratio_missing_iff_a_count_is_missing(aggregator, multi_year_source):
    res = aggregator(multi_year_source)

    either_missing = (
        res["migrants_arrived"].isna() | res["boats_arrived"].isna()
    ).to_numpy(dtype=bool)

    np.testing.assert_array_equal(
        res["migrants_per_boat"].isna().to_numpy(dtype=bool), either_missing
    )
    np.testing.assert_array_equal(
        res["migrants_per_boat_round"].isna().to_numpy(dtype=bool), either_missing
    )
