"""
Configuration management for the scrapermetrics package.

Configuration is read from a TOML file, validated into dataclasses and
cached as a singleton.
"""

from .manager import (
    clear_config_cache,
    get_config,
    get_config_info,
    is_config_loaded,
    set_config_path,
)
from .loader import load_main_config, load_toml_file
from .storage_config import StorageConfig
from .validators import validate_metrics_config

__all__ = [
    "get_config",
    "set_config_path",
    "clear_config_cache",
    "is_config_loaded",
    "get_config_info",
    "load_toml_file",
    "load_main_config",
    "StorageConfig",
    "validate_metrics_config",
]
