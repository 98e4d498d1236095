"""procmetrics - per-process resource usage metrics from procfs."""

from procmetrics.collector import ProcessCollector
from procmetrics.config import CollectorConfig
from procmetrics.errors import ConfigurationError, DataSourceError, ProcMetricsError
from procmetrics.log import configure_logging
from procmetrics.resolver import MetricResolver

__all__ = [
    "CollectorConfig",
    "ConfigurationError",
    "DataSourceError",
    "MetricResolver",
    "ProcMetricsError",
    "ProcessCollector",
    "configure_logging",
]
