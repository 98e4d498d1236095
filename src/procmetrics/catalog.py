"""Static catalog of per-process metrics and scheduler states."""

from types import MappingProxyType

from procmetrics.models import MetricDefinition


def _build_metrics(*definitions: MetricDefinition) -> MappingProxyType:
    return MappingProxyType({d.name: d for d in definitions})


METRICS = _build_metrics(
    MetricDefinition("ps_vm", "Virtual memory size in bytes", "B"),
    MetricDefinition(
        "ps_rss", "Resident Set Size: number of pages the process has in real memory", ""
    ),
    MetricDefinition("ps_data", "Size of data segments", "B"),
    MetricDefinition("ps_code", "Size of text segment", "B"),
    MetricDefinition("ps_stacksize", "Stack size", "B"),
    MetricDefinition(
        "ps_cputime_user",
        "Amount of time that this process has been scheduled in user mode",
        "Jiff",
    ),
    MetricDefinition(
        "ps_cputime_system",
        "Amount of time that this process has been scheduled in kernel mode",
        "Jiff",
    ),
    MetricDefinition("ps_pagefaults_min", "The number of minor faults the process has made", ""),
    MetricDefinition("ps_pagefaults_maj", "The number of major faults the process has made", ""),
    MetricDefinition("ps_disk_ops_syscr", "Attempt to count the number of read I/O operations", ""),
    MetricDefinition("ps_disk_ops_syscw", "Attempt to count the number of write I/O operations", ""),
    MetricDefinition(
        "ps_disk_octets_rchar",
        "The number of bytes which this task has caused to be read from storage",
        "B",
    ),
    MetricDefinition(
        "ps_disk_octets_wchar",
        "The number of bytes which this task has caused, or shall cause to be written to disk",
        "B",
    ),
    MetricDefinition("ps_cmd_line", "Process command line with full path and args", ""),
    MetricDefinition("ps_cmd", "Process command line with full path", ""),
)

# Scheduler state letters as reported in /proc/<pid>/stat
STATES = MappingProxyType(
    {
        "R": "running",
        "S": "sleeping",
        "D": "waiting",
        "Z": "zombie",
        "T": "stopped",
        "t": "tracing",
        "X": "dead",
        "x": "dead",
        "K": "wakekill",
        "W": "waking",
        "P": "parked",
        "I": "idle",
    }
)

STATE_NAMES: tuple[str, ...] = tuple(dict.fromkeys(STATES.values()))


def state_description(state: str) -> str:
    """Description used for per-state process counts."""
    return f"Number of processes in {state} state"
