"""
Parquet metric store using Polars.
"""

import logging
from pathlib import Path
from typing import List, Literal, Optional

import polars as pl

from ..models.metric import MetricRecord
from .base import METRIC_SCHEMA, MetricStore

logger = logging.getLogger(__name__)


class ParquetMetricStore(MetricStore):
    """
    Stores records as rows of a single compressed Parquet file.

    Each commit loads the file, appends one row and rewrites it; the file
    is created on first commit.
    """

    def __init__(
        self,
        path: Path,
        compression: Literal["snappy", "gzip", "brotli", "lz4", "zstd"] = "snappy",
    ):
        """
        Args:
            path: Parquet file holding the records
            compression: Compression algorithm to use
        """
        self.path = Path(path)
        self.compression = compression
        logger.debug(f"Initialized ParquetMetricStore at {self.path} ({compression})")

    def _load(self) -> pl.DataFrame:
        if not self.path.exists():
            return pl.DataFrame(schema=METRIC_SCHEMA)
        try:
            return pl.read_parquet(self.path)
        except Exception as e:
            logger.error(f"Failed to load metrics from {self.path}: {e}")
            raise

    def save(self, record: MetricRecord) -> MetricRecord:
        existing = self._load()
        next_id = 1 if existing.is_empty() else int(existing["id"].max()) + 1
        committed = record.with_id(next_id)

        row = pl.from_dicts([committed.to_dict()], schema=METRIC_SCHEMA)
        combined = pl.concat([existing, row])
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            combined.write_parquet(self.path, compression=self.compression)
        except Exception as e:
            logger.error(f"Failed to save metric record to {self.path}: {e}")
            raise

        logger.debug(f"Committed metric record {next_id} to {self.path}")
        return committed

    def get(self, record_id: int) -> Optional[MetricRecord]:
        rows = self._load().filter(pl.col("id") == record_id).to_dicts()
        return MetricRecord.from_dict(rows[0]) if rows else None

    def all(self) -> List[MetricRecord]:
        return [MetricRecord.from_dict(row) for row in self._load().to_dicts()]

    def count(self) -> int:
        return len(self._load())

    def to_dataframe(self) -> pl.DataFrame:
        return self._load()
