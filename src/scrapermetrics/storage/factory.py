"""
Factory for creating metric stores.
"""

import logging
from pathlib import Path
from typing import Literal

from ..config import get_config
from .base import MetricStore
from .json_storage import JsonMetricStore
from .parquet_storage import ParquetMetricStore

logger = logging.getLogger(__name__)


def create_store(
    format_type: Literal["parquet", "json"],
    path: Path,
    compression: Literal["snappy", "gzip", "brotli", "lz4", "zstd"] = "snappy",
) -> MetricStore:
    """
    Create a store based on the specified format type.

    Args:
        format_type: Storage format type ('parquet' or 'json')
        path: File the store reads and writes
        compression: Compression algorithm (for Parquet only)

    Returns:
        MetricStore instance

    Raises:
        ValueError: If an unsupported format type is specified
    """
    if format_type == "parquet":
        logger.debug(f"Creating ParquetMetricStore with compression: {compression}")
        return ParquetMetricStore(path, compression=compression)
    elif format_type == "json":
        logger.debug("Creating JsonMetricStore")
        return JsonMetricStore(path)
    else:
        raise ValueError(f"Unsupported storage format: {format_type}")


def get_default_store() -> MetricStore:
    """Create the store described by the loaded configuration."""
    metrics_config = get_config().metrics
    return create_store(
        metrics_config.storage.format,
        metrics_config.store_path,
        metrics_config.storage.compression,
    )
