"""Data models for procmetrics."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True, frozen=True)
class ProcessRecord:
    """Immutable snapshot of one process as read from the process table."""

    pid: int
    state: str  # 'R', 'S', 'Z', 'D', etc.
    stat: tuple[str, ...]  # Raw /proc/<pid>/stat fields, zero-based
    vm_data: int  # Bytes
    vm_code: int  # Bytes
    cmd: str
    cmd_line: str  # Arguments separated by NUL bytes
    io: Mapping[str, int] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class MetricDefinition:
    """A derivable per-process metric."""

    name: str
    description: str
    unit: str


@dataclass(slots=True, frozen=True)
class NamespaceElement:
    """One element of a metric namespace; dynamic elements hold a wildcard."""

    value: str
    name: str = ""
    description: str = ""
    dynamic: bool = False


NamespacePattern = tuple[NamespaceElement, ...]


@dataclass(slots=True, frozen=True)
class ConcreteMetric:
    """A resolved metric value bound to a filled-in namespace."""

    namespace: NamespacePattern
    value: int | str
    timestamp: datetime
    unit: str = ""
    description: str = ""
