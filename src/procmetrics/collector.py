"""Host-facing process metrics collector."""

from collections.abc import Mapping, Sequence
from typing import Any

from procmetrics.config import CollectorConfig
from procmetrics.log import get_logger
from procmetrics.models import ConcreteMetric, NamespacePattern
from procmetrics.monitor import ProcessDataSource
from procmetrics.namespace import produce
from procmetrics.resolver import MetricResolver

logger = get_logger(__name__)


class ProcessCollector:
    """
    Discovery and collection entry points for a monitoring host.

    Args:
        config: Collector settings. Defaults to ``CollectorConfig.from_env()``.
        source: Process data source. Defaults to the procfs reader.
    """

    def __init__(
        self,
        config: CollectorConfig | None = None,
        source: ProcessDataSource | None = None,
    ) -> None:
        self._config = config or CollectorConfig.from_env()
        self._resolver = MetricResolver(source)

    @property
    def config(self) -> CollectorConfig:
        """Get the collector configuration."""
        return self._config

    def metric_types(self) -> list[NamespacePattern]:
        """Get every namespace pattern this collector can resolve."""
        return produce()

    def collect_metrics(
        self,
        patterns: Sequence[NamespacePattern],
        config: Mapping[str, Any] | None = None,
    ) -> list[ConcreteMetric]:
        """
        Run one collection cycle.

        Args:
            patterns: Requested namespace patterns.
            config: Optional per-call settings overriding the collector's.
        """
        settings = self._config if config is None else CollectorConfig.from_mapping(config)
        metrics = self._resolver.resolve(patterns, settings.proc_path)
        logger.info(
            "metrics_collected",
            proc_path=settings.proc_path,
            patterns=len(patterns),
            metrics=len(metrics),
        )
        return metrics
