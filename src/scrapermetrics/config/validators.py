"""
Configuration validation.

Turns the raw `[metrics]` table of config.toml into a MetricsConfig.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from ..models.config import MetricsConfig
from ..validation import (
    ValidationError,
    validate_directory_path,
    validate_filename,
    validate_log_level,
)
from .storage_config import StorageConfig

logger = logging.getLogger(__name__)


def validate_metrics_config(metrics_data: Dict[str, Any], config_dir: Path) -> MetricsConfig:
    """
    Validate and create a MetricsConfig from raw configuration data.

    Args:
        metrics_data: Raw `[metrics]` table from TOML
        config_dir: Directory of the config file, used for relative paths

    Returns:
        Validated MetricsConfig instance

    Raises:
        ValidationError: If validation fails
    """
    general_settings = metrics_data.get("general", {})
    storage_settings = metrics_data.get("storage", {})

    log_level = validate_log_level(
        general_settings.get("log_level", "INFO"),
        field_name="metrics.general.log_level",
    )
    output_filename = validate_filename(
        general_settings.get("output_filename", "time.output"),
        field_name="metrics.general.output_filename",
    )
    data_dir = validate_directory_path(
        storage_settings.get("data_dir", "data"),
        base_dir=config_dir,
        field_name="metrics.storage.data_dir",
    )

    try:
        storage = StorageConfig.from_dict(storage_settings)
    except ValueError as e:
        raise ValidationError(
            str(e), field_name="metrics.storage", value=storage_settings
        ) from e

    logger.debug(
        f"Validated metrics config: level={log_level}, store={data_dir / storage.filename}"
    )
    return MetricsConfig(
        log_level=log_level,
        output_filename=output_filename,
        storage=storage,
        data_dir=data_dir,
    )
