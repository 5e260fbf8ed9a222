"""
Type hints that are used throughout
"""

from __future__ import annotations

from typing import Literal

import pandas as pd
from typing_extensions import TypeAlias

Period: TypeAlias = Literal["week", "month", "year"]
"""
Periods to which the daily data can be aggregated
"""

DailyDataFrame: TypeAlias = pd.DataFrame
"""
Type alias for the daily [pandas.DataFrame][pd.DataFrame] shape

For typing purposes, this is just a direct alias of [pandas.DataFrame][pd.DataFrame].
However, the point of defining this
is to provide greater clarity of the kind of data we expect.

We expect one row per date.
The date is in the `full_date` column
and the counts for each metric are in `{metric}_arrived` columns.
Any other columns are ignored.

```python
   full_date  migrants_arrived  boats_arrived
0 2025-12-30                 5              1
1 2025-12-31                 0              0
2 2026-01-01                10              1
```
"""

PeriodDataFrame: TypeAlias = pd.DataFrame
"""
Type alias for the aggregated (long format) [pandas.DataFrame][pd.DataFrame] shape

One row per period (e.g. year and week),
sorted by year and then by period.

```python
   n_year  n_week  migrants_arrived  boats_arrived  ...
0    2025      52                 5              1  ...
1    2026       1                10              1  ...
```
"""
