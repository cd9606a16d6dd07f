"""
scrapermetrics: resource usage measurement for scraper runs.

A scraper is launched under GNU time (`/usr/bin/time -v -o <file>`); the
verbose report GNU time writes is parsed into a MetricRecord and committed
to a Parquet or JSON store.

The package is organized into:
- config: TOML configuration loading and validation
- models: MetricRecord and configuration dataclasses
- validation: error handling and value validation
- system: building and running measured commands
- parsing: line parser and record assembly for GNU time reports
- storage: durable metric stores
- recorder: parse-and-commit entry points
- reporting: aggregate statistics
- cli: command-line interface

Usage:
    From command line:
        scrapermetrics run -- ruby ./scraper.rb

    Programmatically:
        from scrapermetrics import command, read_from_file
        cmd = command("ruby ./scraper.rb", "time.output")
        ...  # launch cmd
        record = read_from_file("time.output")
"""

# Configuration is imported first; the models package depends on it.
from .config import get_config, clear_config_cache, set_config_path
from .models import AppConfig, MetricsConfig, MetricRecord
from .parsing import parse_line, parse_text
from .recorder import read_from_file, read_from_string
from .storage import MetricStore, create_store
from .system import command
from .validation import ValidationError

__version__ = "1.0.0"

__all__ = [
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "AppConfig",
    "MetricsConfig",
    "MetricRecord",
    "parse_line",
    "parse_text",
    "read_from_file",
    "read_from_string",
    "MetricStore",
    "create_store",
    "command",
    "ValidationError",
]
