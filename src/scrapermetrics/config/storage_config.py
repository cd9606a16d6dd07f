"""
Storage configuration model and validation.

StorageConfig selects how committed metric records are persisted: a
compressed Parquet file (the default) or a human-readable JSON file.
"""

from typing import Literal, Dict, Any
from dataclasses import dataclass

SUPPORTED_FORMATS = ("parquet", "json")
SUPPORTED_COMPRESSIONS = ("snappy", "gzip", "brotli", "lz4", "zstd")


@dataclass
class StorageConfig:
    """
    Configuration model for the metrics store.

    Attributes:
        format: Store format type
            - 'parquet': columnar file written with Polars
            - 'json': list of record objects, readable by hand
        compression: Compression algorithm for the Parquet format

    Note:
        Compression only applies to the Parquet format.
    """

    format: Literal["parquet", "json"] = "parquet"
    compression: Literal["snappy", "gzip", "brotli", "lz4", "zstd"] = "snappy"

    @property
    def filename(self) -> str:
        return f"metrics.{self.format}"

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "StorageConfig":
        """
        Create a StorageConfig instance from a dictionary.

        Args:
            config_dict: Dictionary containing storage configuration

        Returns:
            StorageConfig instance

        Raises:
            ValueError: If invalid configuration values are provided
        """
        format_type = config_dict.get("format", "parquet")
        compression = config_dict.get("compression", "snappy")

        if format_type not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported storage format: {format_type}")

        if format_type == "parquet" and compression not in SUPPORTED_COMPRESSIONS:
            raise ValueError(f"Unsupported compression algorithm: {compression}")

        return cls(format=format_type, compression=compression)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "format": self.format,
            "compression": self.compression,
        }
