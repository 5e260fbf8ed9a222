"""
Definition of the processor class

This runs the whole pipeline:
the daily data is normalised,
aggregated to weeks, months and years
and the weekly and monthly cumulative arrivals are reshaped to wide format.
"""

from __future__ import annotations

import logging

import pandas as pd
from attrs import define
from pandas_openscm.parallelisation import ParallelOpConfig, apply_op_parallel_progress

from smallboats.aggregation import aggregate_period
from smallboats.assertions import (
    assert_cumulative_is_non_decreasing,
    assert_pivot_is_complete,
    assert_totals_match_yearly,
)
from smallboats.constants import (
    METRICS,
    MONTH_COLUMN,
    WEEK_COLUMN,
    get_cumulative_column,
)
from smallboats.daily import normalise_daily
from smallboats.reshaping import widen_monthly_cumulative, widen_weekly_cumulative
from smallboats.typing import Period

logger = logging.getLogger(__name__)

PERIODS: tuple[Period, ...] = ("week", "month", "year")


@define
class SmallBoatsProcessingResult:
    """
    Result of processing with [SmallBoatsProcessor][(m).]
    """

    daily: pd.DataFrame
    """
    Daily arrivals
    """

    weekly: pd.DataFrame
    """
    Weekly arrivals
    """

    monthly: pd.DataFrame
    """
    Monthly arrivals
    """

    yearly: pd.DataFrame
    """
    Yearly arrivals
    """

    weekly_cumulative_wide: pd.DataFrame
    """
    Weekly cumulative migrant arrivals, one column per year
    """

    monthly_cumulative_wide: pd.DataFrame
    """
    Monthly cumulative migrant arrivals, one column per year
    """


@define
class SmallBoatsProcessor:
    """
    Processor of the daily small boat arrivals

    For details of the logic, see
    [smallboats.daily][], [smallboats.aggregation][] and [smallboats.reshaping][].
    """

    run_checks: bool = True
    """
    If `True`, run consistency checks on the output data

    These check that the cumulative arrivals never decrease within a year,
    that every table adds up to the yearly totals
    and that the wide tables hold exactly the long tables' values.
    """

    progress: bool = False
    """
    Should progress bars be shown?
    """

    n_processes: int | None = None
    """
    Number of processes to use for the aggregations

    Set to `None` to process in serial.
    The data is small, so serial is normally fastest.
    """

    def __call__(self, in_daily: pd.DataFrame) -> SmallBoatsProcessingResult:
        """
        Process

        Parameters
        ----------
        in_daily
            Daily records to process, see [smallboats.daily.normalise_daily][]

        Returns
        -------
        :
            Processed data
        """
        logger.info("Processing %d daily records", in_daily.shape[0])
        daily = normalise_daily(in_daily)

        weekly, monthly, yearly = apply_op_parallel_progress(
            func_to_call=aggregate_period,
            iterable_input=PERIODS,
            parallel_op_config=ParallelOpConfig.from_user_facing(
                progress=self.progress,
                max_workers=self.n_processes,
                progress_results_kwargs=dict(desc="Periods to aggregate"),
            ),
            daily=daily,
        )
        for name, df in (("weekly", weekly), ("monthly", monthly), ("yearly", yearly)):
            logger.debug("Aggregated to %d %s rows", df.shape[0], name)

        weekly_cumulative_wide = widen_weekly_cumulative(weekly)
        monthly_cumulative_wide = widen_monthly_cumulative(monthly)

        if self.run_checks:
            for df in (daily, weekly, monthly):
                assert_cumulative_is_non_decreasing(df)
                assert_totals_match_yearly(df, yearly, metrics=METRICS)

            cumulative_migrants = get_cumulative_column("migrants")
            assert_pivot_is_complete(
                weekly,
                weekly_cumulative_wide,
                period_column=WEEK_COLUMN,
                value_column=cumulative_migrants,
            )
            assert_pivot_is_complete(
                monthly,
                monthly_cumulative_wide,
                period_column=MONTH_COLUMN,
                value_column=cumulative_migrants,
            )

        res = SmallBoatsProcessingResult(
            daily=daily,
            weekly=weekly,
            monthly=monthly,
            yearly=yearly,
            weekly_cumulative_wide=weekly_cumulative_wide,
            monthly_cumulative_wide=monthly_cumulative_wide,
        )

        return res
