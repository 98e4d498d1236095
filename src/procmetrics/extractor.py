"""Per-process metric derivation from raw process records."""

from procmetrics.catalog import METRICS
from procmetrics.models import ProcessRecord

UINT64_MAX = 2**64 - 1

# Zero-based positions in /proc/<pid>/stat, see proc(5)
MINFLT = 9
MAJFLT = 11
UTIME = 13
STIME = 14
VSIZE = 22
RSS = 23
STARTSTACK = 27
KSTKESP = 28


def parse_uint64(text: str) -> int:
    """Parse an unsigned 64-bit decimal, returning 0 on any failure."""
    if not text or not (text.isascii() and text.isdigit()):
        return 0
    value = int(text)
    return value if value <= UINT64_MAX else 0


def _stat_field(record: ProcessRecord, position: int) -> int:
    if position >= len(record.stat):
        return 0
    return parse_uint64(record.stat[position])


def extract(record: ProcessRecord) -> dict[str, int | str]:
    """
    Compute every catalog metric for one process.

    Malformed or missing fields yield 0; this never raises for bad data.
    """
    metrics: dict[str, int | str] = dict.fromkeys(METRICS, 0)

    metrics["ps_vm"] = _stat_field(record, VSIZE)
    metrics["ps_rss"] = _stat_field(record, RSS)

    metrics["ps_data"] = record.vm_data
    metrics["ps_code"] = record.vm_code

    # Stack grows down on most architectures; order is not fixed
    stack1 = _stat_field(record, STARTSTACK)
    stack2 = _stat_field(record, KSTKESP)
    metrics["ps_stacksize"] = max(stack1, stack2) - min(stack1, stack2)

    metrics["ps_cputime_user"] = _stat_field(record, UTIME)
    metrics["ps_cputime_system"] = _stat_field(record, STIME)

    metrics["ps_pagefaults_min"] = _stat_field(record, MINFLT)
    metrics["ps_pagefaults_maj"] = _stat_field(record, MAJFLT)

    metrics["ps_disk_octets_rchar"] = record.io.get("rchar", 0)
    metrics["ps_disk_octets_wchar"] = record.io.get("wchar", 0)
    metrics["ps_disk_ops_syscr"] = record.io.get("syscr", 0)
    metrics["ps_disk_ops_syscw"] = record.io.get("syscw", 0)

    metrics["ps_cmd_line"] = record.cmd_line
    metrics["ps_cmd"] = record.cmd

    return metrics
