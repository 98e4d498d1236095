"""Shared fixtures for procmetrics tests."""

import pytest

from procmetrics.models import ProcessRecord


def make_stat(pid: int = 1, state: str = "S", **fields: str) -> tuple[str, ...]:
    """Build a 52-field stat tuple with selected positions overridden."""
    stat = [str(pid), "(test)", state] + ["0"] * 49
    for key, value in fields.items():
        stat[int(key.lstrip("f"))] = value
    return tuple(stat)


def make_record(
    pid: int = 1,
    state: str = "S",
    cmd_line: str = "/usr/bin/test",
    stat: tuple[str, ...] | None = None,
    **kwargs,
) -> ProcessRecord:
    """Build a ProcessRecord with sensible defaults."""
    return ProcessRecord(
        pid=pid,
        state=state,
        stat=stat if stat is not None else make_stat(pid, state),
        vm_data=kwargs.get("vm_data", 0),
        vm_code=kwargs.get("vm_code", 0),
        cmd=kwargs.get("cmd", cmd_line.split("\x00")[0]),
        cmd_line=cmd_line,
        io=kwargs.get("io", {"rchar": 0, "wchar": 0, "syscr": 0, "syscw": 0}),
    )


class FakeSource:
    """Process data source returning a fixed snapshot."""

    def __init__(self, records=None, error: Exception | None = None) -> None:
        self.records = list(records or [])
        self.error = error
        self.calls: list[str] = []

    def get_stats(self, root_path: str) -> list[ProcessRecord]:
        self.calls.append(root_path)
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def two_processes() -> list[ProcessRecord]:
    """Two processes with known virtual memory sizes."""
    return [
        make_record(pid=100, state="R", cmd_line="/usr/bin/foo\x00-x", stat=make_stat(100, "R", f22="4096")),
        make_record(pid=200, state="S", cmd_line="/bin/bar", stat=make_stat(200, "S", f22="8192")),
    ]
