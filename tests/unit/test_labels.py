"""
Tests of `smallboats.labels`
"""

from __future__ import annotations

import pandas as pd
import pytest

from smallboats.labels import get_day_label, get_month_label, get_month_names


@pytest.mark.parametrize(
    "abbreviate, exp",
    (
        pytest.param(False, ["January", "May", "September", "December"], id="long"),
        pytest.param(True, ["Jan", "May", "Sep", "Dec"], id="short"),
    ),
)
def test_get_month_names(abbreviate, exp):
    res = get_month_names(pd.Series([1, 5, 9, 12]), abbreviate=abbreviate)

    assert res.tolist() == exp


def test_get_day_label():
    dates = pd.Series(pd.to_datetime(["2018-01-01", "2024-02-29", "2025-12-31"]))

    res = get_day_label(dates)

    assert res.tolist() == ["January 1, 2018", "February 29, 2024", "December 31, 2025"]


def test_get_month_label():
    dates = pd.Series(pd.to_datetime(["2018-01-01", "2025-12-01"]))

    res = get_month_label(dates)

    assert res.tolist() == ["January 2018", "December 2025"]
