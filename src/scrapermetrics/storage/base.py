"""
Abstract base class for metric stores.

A store is the durable home of committed MetricRecords. Committing a record
assigns it the next integer identifier; records are never updated or
deleted afterwards.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

import polars as pl

from ..models.metric import METRIC_FIELDS, MetricRecord

# Column types shared by every store when records are viewed as a DataFrame.
METRIC_SCHEMA = {
    "id": pl.Int64,
    "wall_time": pl.Float64,
    "utime": pl.Float64,
    "stime": pl.Float64,
    **{name: pl.Int64 for name in METRIC_FIELDS if name not in ("wall_time", "utime", "stime")},
}


class MetricStore(ABC):
    """Interface implemented by every storage backend."""

    @abstractmethod
    def save(self, record: MetricRecord) -> MetricRecord:
        """
        Commit a record.

        Args:
            record: Record to commit; its own `id` is ignored

        Returns:
            A copy of the record carrying its newly assigned identifier
        """
        pass

    @abstractmethod
    def get(self, record_id: int) -> Optional[MetricRecord]:
        """
        Look up a committed record.

        Returns:
            The record, or None if no record has this identifier
        """
        pass

    @abstractmethod
    def all(self) -> List[MetricRecord]:
        """Return every committed record in commit order."""
        pass

    def count(self) -> int:
        return len(self.all())

    def to_dataframe(self) -> pl.DataFrame:
        """All committed records as a DataFrame with METRIC_SCHEMA columns."""
        return pl.from_dicts(
            [record.to_dict() for record in self.all()], schema=METRIC_SCHEMA
        )
