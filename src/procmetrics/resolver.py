"""Resolution of requested namespace patterns into concrete metrics."""

from collections.abc import Mapping, Sequence
from dataclasses import replace
from datetime import datetime, timezone
from enum import Enum

from procmetrics.catalog import METRICS, STATE_NAMES
from procmetrics.errors import ConfigurationError
from procmetrics.extractor import extract
from procmetrics.log import get_logger
from procmetrics.models import ConcreteMetric, NamespacePattern, ProcessRecord
from procmetrics.monitor import ProcessDataSource, ProcfsSource
from procmetrics.namespace import (
    METRIC_INDEX,
    MIN_DYNAMIC_LENGTH,
    MIN_LENGTH,
    NAME_INDEX,
    PID_INDEX,
    STATE_INDEX,
    describe,
    is_dynamic,
    namespace_key,
)
from procmetrics.states import aggregate

logger = get_logger(__name__)


class PatternKind(Enum):
    """Which elements of a pattern are wildcards."""

    FULLY_DYNAMIC = "fully_dynamic"
    PID_ONLY_DYNAMIC = "pid_only_dynamic"
    NAME_ONLY_DYNAMIC = "name_only_dynamic"
    # Wildcards only outside the pid and process name positions
    OTHER_DYNAMIC = "other_dynamic"
    STATIC = "static"


def classify(pattern: NamespacePattern) -> PatternKind:
    """
    Classify a requested pattern.

    Raises:
        ConfigurationError: If the pattern is too short to be resolved.
    """
    if len(pattern) < MIN_LENGTH:
        raise ConfigurationError(
            f"Unknown namespace length. Expecting at least {MIN_LENGTH}, is {len(pattern)}",
            pattern=pattern,
        )
    if not is_dynamic(pattern):
        return PatternKind.STATIC
    if len(pattern) < MIN_DYNAMIC_LENGTH:
        raise ConfigurationError(
            f"Dynamic namespace {namespace_key(pattern)!r} too short. "
            f"Expecting at least {MIN_DYNAMIC_LENGTH}, is {len(pattern)}",
            pattern=pattern,
        )

    pid_dynamic = pattern[PID_INDEX].dynamic
    name_dynamic = pattern[NAME_INDEX].dynamic
    if pid_dynamic and name_dynamic:
        return PatternKind.FULLY_DYNAMIC
    if pid_dynamic:
        return PatternKind.PID_ONLY_DYNAMIC
    if name_dynamic:
        return PatternKind.NAME_ONLY_DYNAMIC
    return PatternKind.OTHER_DYNAMIC


def process_name(cmd_line: str) -> str:
    """Executable name: last path segment of the first command line argument."""
    return cmd_line.split("\x00", 1)[0].rsplit("/", 1)[-1]


class MetricResolver:
    """
    Turns requested namespace patterns into concrete metric values.

    Each call to :meth:`resolve` is one collection cycle: a fresh snapshot
    is fetched, state counts are computed once, and every pattern is
    resolved against that snapshot.
    """

    def __init__(self, source: ProcessDataSource | None = None) -> None:
        self._source = source if source is not None else ProcfsSource()
        self._handlers = {
            PatternKind.FULLY_DYNAMIC: self._resolve_fully_dynamic,
            PatternKind.PID_ONLY_DYNAMIC: self._resolve_partial,
            PatternKind.NAME_ONLY_DYNAMIC: self._resolve_partial,
            PatternKind.OTHER_DYNAMIC: self._resolve_partial,
            PatternKind.STATIC: self._resolve_static,
        }

    def resolve(
        self, patterns: Sequence[NamespacePattern], root_path: str
    ) -> list[ConcreteMetric]:
        """
        Resolve ``patterns`` against the process table at ``root_path``.

        Raises:
            ConfigurationError: If any pattern is malformed.
            DataSourceError: If the process table cannot be read.
        """
        kinds = [classify(pattern) for pattern in patterns]

        snapshot = self._source.get_stats(root_path)
        state_counts = aggregate(snapshot)
        now = datetime.now(timezone.utc)

        metrics: list[ConcreteMetric] = []
        for pattern, kind in zip(patterns, kinds):
            metrics.extend(self._handlers[kind](pattern, snapshot, state_counts, now))
        return metrics

    def _resolve_fully_dynamic(
        self,
        pattern: NamespacePattern,
        snapshot: Sequence[ProcessRecord],
        state_counts: Mapping[str, int],
        now: datetime,
    ) -> list[ConcreteMetric]:
        metric_name = pattern[METRIC_INDEX].value
        if metric_name not in METRICS:
            return []
        description, unit = describe(pattern)

        metrics = []
        for record in snapshot:
            values = extract(record)
            namespace = list(pattern)
            namespace[PID_INDEX] = replace(
                pattern[PID_INDEX], value=str(record.pid), dynamic=False
            )
            namespace[NAME_INDEX] = replace(
                pattern[NAME_INDEX], value=process_name(record.cmd_line), dynamic=False
            )
            metrics.append(
                ConcreteMetric(
                    namespace=tuple(namespace),
                    value=values[metric_name],
                    timestamp=now,
                    unit=unit,
                    description=description,
                )
            )
        return metrics

    def _resolve_partial(
        self,
        pattern: NamespacePattern,
        snapshot: Sequence[ProcessRecord],
        state_counts: Mapping[str, int],
        now: datetime,
    ) -> list[ConcreteMetric]:
        # Filtering by a single pid or process name is not supported;
        # wildcards elsewhere in the namespace are never expanded
        logger.debug("partial_dynamic_pattern_skipped", namespace=namespace_key(pattern))
        return []

    def _resolve_static(
        self,
        pattern: NamespacePattern,
        snapshot: Sequence[ProcessRecord],
        state_counts: Mapping[str, int],
        now: datetime,
    ) -> list[ConcreteMetric]:
        state = pattern[STATE_INDEX].value
        if state not in STATE_NAMES or state not in state_counts:
            return []
        description, unit = describe(pattern)
        return [
            ConcreteMetric(
                namespace=pattern,
                value=state_counts[state],
                timestamp=now,
                unit=unit,
                description=description,
            )
        ]
