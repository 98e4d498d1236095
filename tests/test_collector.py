"""Tests for the ProcessCollector facade."""

import pytest

from conftest import FakeSource, make_record
from procmetrics.collector import ProcessCollector
from procmetrics.config import ENV_PROC_PATH, CollectorConfig
from procmetrics.errors import ConfigurationError
from procmetrics.namespace import metric_namespace, produce, state_namespace


def test_metric_types():
    """Test discovery returns the full namespace catalog."""
    assert ProcessCollector(source=FakeSource()).metric_types() == produce()


def test_uses_configured_path():
    """Test collection reads from the configured process table root."""
    source = FakeSource([make_record(state="R")])
    collector = ProcessCollector(CollectorConfig(proc_path="/host/proc"), source)

    metrics = collector.collect_metrics([state_namespace("running")])

    assert source.calls == ["/host/proc"]
    assert [m.value for m in metrics] == [1]


def test_per_call_config(monkeypatch):
    """Test per-call settings override the collector's."""
    monkeypatch.delenv(ENV_PROC_PATH, raising=False)
    source = FakeSource([make_record()])
    collector = ProcessCollector(source=source)

    collector.collect_metrics([metric_namespace("ps_cmd")], {"proc_path": "/mnt/proc"})

    assert source.calls == ["/mnt/proc"]
    assert collector.config.proc_path == "/proc"


def test_invalid_per_call_config():
    """Test a blank proc_path is a configuration error."""
    source = FakeSource([make_record()])
    with pytest.raises(ConfigurationError):
        ProcessCollector(source=source).collect_metrics([], {"proc_path": ""})
    assert source.calls == []


def test_default_config_from_env(monkeypatch):
    """Test the collector reads its default settings from the environment."""
    monkeypatch.setenv(ENV_PROC_PATH, "/rootfs/proc")
    source = FakeSource([make_record()])
    collector = ProcessCollector(source=source)

    collector.collect_metrics([state_namespace("sleeping")])

    assert collector.config.proc_path == "/rootfs/proc"
    assert source.calls == ["/rootfs/proc"]
