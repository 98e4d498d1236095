"""Process table reader for procmetrics."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Protocol

import psutil

from procmetrics.config import DEFAULT_PROC_PATH
from procmetrics.errors import DataSourceError
from procmetrics.log import get_logger
from procmetrics.models import ProcessRecord

logger = get_logger(__name__)

# Zero-based position of the state letter in /proc/<pid>/stat
STATE_FIELD = 2


class ProcessDataSource(Protocol):
    """Anything able to produce a fresh process snapshot."""

    def get_stats(self, root_path: str) -> list[ProcessRecord]: ...


def split_stat(text: str) -> tuple[str, ...]:
    """
    Split the contents of a stat file into its fields.

    The command name is wrapped in parentheses and may itself contain
    spaces or parentheses, so everything up to the last ')' is one field.
    """
    head, sep, tail = text.strip().rpartition(")")
    if not sep:
        return tuple(text.split())
    pid, _, comm = head.partition("(")
    return (pid.strip(), f"({comm})", *tail.split())


@contextmanager
def procfs_root(root_path: str) -> Iterator[None]:
    """Point psutil at another procfs mount for the duration of the block."""
    previous = psutil.PROCFS_PATH
    psutil.PROCFS_PATH = root_path
    try:
        yield
    finally:
        psutil.PROCFS_PATH = previous


class ProcfsSource:
    """
    Process data source backed by psutil and the raw procfs stat files.

    Handles processes that exit mid-scan and per-attribute AccessDenied
    errors gracefully; only an unreadable process table is an error.
    """

    # Attributes to fetch per process
    attrs = ["pid", "cmdline", "memory_info", "io_counters"]

    def get_stats(self, root_path: str = DEFAULT_PROC_PATH) -> list[ProcessRecord]:
        """
        Collect a record for every process under ``root_path``.

        Raises:
            DataSourceError: If the process table cannot be listed.
        """
        try:
            with procfs_root(root_path):
                procs = list(psutil.process_iter(attrs=self.attrs, ad_value=None))
        except (OSError, psutil.Error) as exc:
            raise DataSourceError(
                f"Cannot read process table at {root_path}: {exc}", root_path=root_path
            ) from exc

        records: list[ProcessRecord] = []
        for proc in procs:
            record = self._build_record(Path(root_path), proc.info)
            if record is not None:
                records.append(record)

        logger.debug("snapshot_fetched", root_path=root_path, processes=len(records))
        return records

    def _build_record(self, root: Path, info: dict) -> ProcessRecord | None:
        pid = info["pid"]
        try:
            stat = split_stat((root / str(pid) / "stat").read_text())
        except OSError:
            # Process exited between listing and reading
            logger.debug("process_vanished", pid=pid)
            return None

        cmdline = info.get("cmdline") or []
        if cmdline:
            cmd = cmdline[0]
        else:
            # Kernel threads have no command line
            cmd = stat[1].strip("()") if len(stat) > 1 else ""

        mem_info = info.get("memory_info")
        io = info.get("io_counters")

        return ProcessRecord(
            pid=pid,
            state=stat[STATE_FIELD] if len(stat) > STATE_FIELD else "",
            stat=stat,
            vm_data=mem_info.data if mem_info else 0,
            vm_code=mem_info.text if mem_info else 0,
            cmd=cmd,
            cmd_line="\x00".join(cmdline),
            io={
                "rchar": io.read_chars if io else 0,
                "wchar": io.write_chars if io else 0,
                "syscr": io.read_count if io else 0,
                "syscw": io.write_count if io else 0,
            },
        )
