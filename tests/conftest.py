"""
Re-useable fixtures etc. for tests

See https://docs.pytest.org/en/7.1.x/reference/fixtures.html#conftest-py-sharing-fixtures-across-multiple-files
"""

import pandas as pd
import pytest

from smallboats.testing import create_daily_source, create_random_daily_source


@pytest.fixture(scope="session", autouse=True)
def pandas_terminal_width():
    # Set pandas terminal width so that doctests don't depend on terminal width.

    # We set the display width to 120 because examples should be short,
    # anything more than this is too wide to read in the source.
    pd.set_option("display.width", 120)

    # Display as many columns as you want (i.e. let the display width do the
    # truncation)
    pd.set_option("display.max_columns", 1000)


@pytest.fixture
def year_end_source():
    return create_daily_source(
        [
            ("2025-12-30", 5, 1),
            ("2025-12-31", 0, 0),
            ("2026-01-01", 10, 1),
        ]
    )


@pytest.fixture(scope="session")
def multi_year_source():
    return create_random_daily_source("2018-01-01", "2026-03-31")
