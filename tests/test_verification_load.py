"""Verification Test: Load Test - Collect metrics with many dummy processes.

Spawns a batch of dummy processes (using multiprocessing) and checks that a
single collection cycle reports every one of them, within a reasonable time.

Note: In CI environments, spawning many processes is often limited by
system resources, so the process count is scaled down there.
"""

import multiprocessing
import os
import sys
import time

import pytest

from procmetrics.collector import ProcessCollector
from procmetrics.namespace import NAME_INDEX, PID_INDEX, metric_namespace, state_namespace

pytestmark = pytest.mark.skipif(not sys.platform.startswith("linux"), reason="requires procfs")


def dummy_worker(duration: float = 30.0) -> None:
    """A dummy worker process that sleeps for a given duration."""
    try:
        time.sleep(duration)
    except (KeyboardInterrupt, SystemExit):
        pass


@pytest.fixture
def dummy_processes():
    """Fixture to spawn dummy processes for testing."""
    is_ci = os.environ.get("CI", "false").lower() == "true"
    num_processes = 50 if is_ci else 200

    processes = []
    try:
        for _ in range(num_processes):
            p = multiprocessing.Process(target=dummy_worker, args=(30.0,))
            p.start()
            processes.append(p)
        yield processes
    finally:
        # Clean up all processes
        for p in processes:
            if p.is_alive():
                p.terminate()
        for p in processes:
            p.join(timeout=1.0)


class TestLoadTest:
    """Load test verification suite tests."""

    def test_collects_every_dummy_process(self, dummy_processes):
        """Test that one cycle reports a metric for every dummy process."""
        collector = ProcessCollector()

        metrics = collector.collect_metrics([metric_namespace("ps_vm")])

        reported = {int(m.namespace[PID_INDEX].value) for m in metrics}
        missing = {p.pid for p in dummy_processes} - reported
        assert not missing, f"{len(missing)} dummy processes missing from collection"

        for metric in metrics[:10]:
            assert isinstance(metric.namespace[NAME_INDEX].value, str)
            assert isinstance(metric.value, int)

    def test_collection_time_under_threshold(self, dummy_processes):
        """Test that a full collection cycle completes within acceptable time."""
        collector = ProcessCollector()
        patterns = collector.metric_types()

        start_time = time.perf_counter()
        metrics = collector.collect_metrics(patterns)
        collection_time = time.perf_counter() - start_time

        # 2 seconds is generous to account for CI variability
        assert collection_time < 2.0, f"Collection took {collection_time:.2f}s, expected < 2.0s"
        assert len(metrics) >= len(dummy_processes) * 15

    def test_state_counts_cover_dummy_processes(self, dummy_processes):
        """Test sleeping dummy processes are reflected in the sleeping count."""
        collector = ProcessCollector()

        metrics = collector.collect_metrics([state_namespace("sleeping")])

        assert len(metrics) == 1
        # Allow for some workers still starting up
        assert metrics[0].value >= len(dummy_processes) // 2
