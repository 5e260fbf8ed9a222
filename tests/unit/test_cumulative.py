"""
Tests of `smallboats.cumulative`
"""

from __future__ import annotations

import pandas as pd

from smallboats.cumulative import add_within_year_cumulative


def test_add_within_year_cumulative():
    start = pd.DataFrame(
        {
            "n_year": [2024, 2024, 2024, 2025, 2025],
            "migrants_arrived": pd.array([3, None, 4, None, 7], dtype="Int64"),
            "boats_arrived": pd.array([1, None, 0, 2, 1], dtype="Int64"),
        }
    )

    res = add_within_year_cumulative(start)

    exp = start.assign(
        cumulative_migrants_arrived=pd.array([3, 3, 7, 0, 7], dtype="Int64"),
        cumulative_boats_arrived=pd.array([1, 1, 1, 2, 3], dtype="Int64"),
    )
    pd.testing.assert_frame_equal(res, exp)


def test_add_within_year_cumulative_single_metric():
    start = pd.DataFrame(
        {
            "year": [2024, 2025],
            "boats_arrived": pd.array([2, 5], dtype="Int64"),
        }
    )

    res = add_within_year_cumulative(start, metrics=["boats"], year_column="year")

    assert res.columns.tolist() == ["year", "boats_arrived", "cumulative_boats_arrived"]
    assert res["cumulative_boats_arrived"].tolist() == [2, 5]
