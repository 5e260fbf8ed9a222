# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.16.6
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

# %% [markdown]
# # How to process the small boats data
#
# Here we demonstrate how to go from the daily records
# to the weekly, monthly and yearly tables.
# Here we use random data so the guide runs without the source spreadsheet.
# To use the real data, load it with `smallboats.io.load_daily_source`
# (or just use the `smallboats` command line tool).

# %% [markdown]
# ## Imports

# %%
import tempfile
from pathlib import Path

from smallboats.io import write_results
from smallboats.processor import SmallBoatsProcessor
from smallboats.testing import create_random_daily_source

# %% [markdown]
# ## Starting point
#
# The starting point is the daily records.
# These must be a pandas `DataFrame` with a `full_date` column
# and a `migrants_arrived` and `boats_arrived` column.
# The counts can be missing.

# %%
daily_source = create_random_daily_source("2023-01-01", "2025-02-28")
daily_source

# %% [markdown]
# ## Processing

# %%
processor = SmallBoatsProcessor()
result = processor(daily_source)

# %% [markdown]
# Days with no arrivals are shown as missing,
# but the cumulative arrivals carry on through them.

# %%
result.daily.head(10)

# %% [markdown]
# Weeks never span two years.
# Days at the start of January that belong to the previous year's last ISO week
# are put in week 1, days at the end of December
# that belong to the next year's first ISO week are put in week 52.

# %%
result.weekly.loc[result.weekly["n_week"].isin([1, 52])]

# %%
result.monthly

# %%
result.yearly

# %% [markdown]
# ## Comparing years
#
# The wide tables make it easy to compare the same point in different years.

# %%
result.monthly_cumulative_wide

# %%
result.weekly_cumulative_wide.tail()

# %% [markdown]
# ## Writing the results
#
# `smallboats.io.write_results` writes each table to CSV.
# Missing values are written as empty fields.

# %%
with tempfile.TemporaryDirectory() as tmp_dir:
    written = write_results(result, Path(tmp_dir))
    print(Path(written["yearly"]).read_text())
