"""
Data models for the scrapermetrics package.

- MetricRecord: resource usage of one measured process invocation
- AppConfig / MetricsConfig: application configuration
"""

from .config import AppConfig, MetricsConfig
from .metric import METRIC_FIELDS, MetricRecord

__all__ = [
    "AppConfig",
    "MetricsConfig",
    "METRIC_FIELDS",
    "MetricRecord",
]
