"""
Aggregate statistics over stored metric records.
"""

import logging
from typing import Any, Dict

import polars as pl

logger = logging.getLogger(__name__)


def summarize(df: pl.DataFrame) -> Dict[str, Any]:
    """
    Summarise a DataFrame of metric records (see storage.METRIC_SCHEMA).

    Missing values are skipped by every aggregate. With no rows, `runs` is 0
    and every other entry is None.

    Args:
        df: Records as returned by MetricStore.to_dataframe()

    Returns:
        Dictionary with run count, wall and CPU time totals, peak resident
        set size, and page fault and context switch totals.
    """
    if df.is_empty():
        return {
            "runs": 0,
            "total_wall_time": None,
            "mean_wall_time": None,
            "total_cpu_time": None,
            "peak_maxrss_kb": None,
            "total_page_faults": None,
            "total_context_switches": None,
        }

    row = df.select(
        pl.len().alias("runs"),
        pl.col("wall_time").sum().alias("total_wall_time"),
        pl.col("wall_time").mean().alias("mean_wall_time"),
        (pl.col("utime") + pl.col("stime")).sum().alias("total_cpu_time"),
        pl.col("maxrss").max().alias("peak_maxrss_kb"),
        (pl.col("minflt").sum() + pl.col("majflt").sum()).alias("total_page_faults"),
        (pl.col("nvcsw").sum() + pl.col("nivcsw").sum()).alias("total_context_switches"),
    ).to_dicts()[0]

    logger.debug(f"Summarised {row['runs']} metric records")
    return row
