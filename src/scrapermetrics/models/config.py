"""
Configuration data models.
"""

from dataclasses import dataclass, field
from pathlib import Path

from ..config.storage_config import StorageConfig


@dataclass
class MetricsConfig:
    """
    Settings for measuring and storing scraper runs, loaded from `config.toml`.
    """

    # [metrics.general]
    log_level: str = "INFO"
    # File name GNU time writes its report to when the CLI launches a run.
    output_filename: str = "time.output"

    # [metrics.storage]
    storage: StorageConfig = field(default_factory=StorageConfig)
    # Directory holding the metrics store, resolved against the config file.
    data_dir: Path = Path("data")

    @property
    def store_path(self) -> Path:
        return self.data_dir / self.storage.filename


@dataclass
class AppConfig:
    """
    Root of the application configuration.
    """

    metrics: MetricsConfig
