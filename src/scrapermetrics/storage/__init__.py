"""
Durable storage for committed metric records.

Two backends share the MetricStore interface:
- Parquet, written with Polars (default)
- JSON, for small stores that are read by hand
"""

from .base import METRIC_SCHEMA, MetricStore
from .json_storage import JsonMetricStore
from .parquet_storage import ParquetMetricStore
from .factory import create_store, get_default_store

__all__ = [
    "METRIC_SCHEMA",
    "MetricStore",
    "JsonMetricStore",
    "ParquetMetricStore",
    "create_store",
    "get_default_store",
]
