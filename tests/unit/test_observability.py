"""Tests for analysis events and StatsD metrics."""

from __future__ import annotations

import json
import logging

import pytest

from leadernet.observability import (
    NETWORK_ANALYZED,
    NO_DATA_METRIC,
    Observability,
    StatsdClient,
    get_observability,
    reset_observability_cache,
)
from leadernet.settings import Settings


class _RecordingStatsd(StatsdClient):
    def __init__(self, prefix: str = "") -> None:
        super().__init__("127.0.0.1", 8125, prefix)
        self.payloads: list[str] = []

    def send(self, metric, value, *, metric_type, tags=None):
        self.payloads.append(self.format_payload(metric, value, metric_type=metric_type, tags=tags))


@pytest.fixture(autouse=True)
def _reset_statsd_clients():
    reset_observability_cache()
    yield
    reset_observability_cache()


def test_statsd_payload_includes_prefix_and_sorted_tags():
    client = StatsdClient("127.0.0.1", 8125, "leadernet")

    payload = client.format_payload(NO_DATA_METRIC, 1.0, metric_type="c", tags={"path": "news", "env": "dev"})

    assert payload == "leadernet.network.no_data:1|c|#env:dev,path:news"


def test_statsd_payload_without_prefix_formats_timings():
    client = StatsdClient("127.0.0.1", 8125)

    assert client.format_payload("scenario.analyze", 12.5, metric_type="ms", tags=None) == "scenario.analyze:12.5|ms"


def test_metrics_carry_component_tag_and_skip_none_values():
    statsd = _RecordingStatsd(prefix="leadernet")
    obs = Observability(settings=Settings(), component="network", statsd=statsd)

    obs.increment(NO_DATA_METRIC, tags={"path": "news", "leader": None})
    obs.record_timing("network.analyze_leader", 42.0)

    assert statsd.payloads == [
        "leadernet.network.no_data:1|c|#component:network,path:news",
        "leadernet.network.analyze_leader:42|ms|#component:network",
    ]


def test_emit_event_writes_json_when_structured(caplog):
    settings = Settings(observability={"structured_logging": True})
    logger = logging.getLogger("leadernet.tests.observability")
    obs = Observability(settings=settings, component="network", logger=logger)

    with caplog.at_level(logging.INFO, logger="leadernet.tests.observability"):
        obs.emit_event(NETWORK_ANALYZED, leader="Xi Jinping", entities=3)

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "network.analyzed"
    assert payload["component"] == "network"
    assert payload["leader"] == "Xi Jinping"
    assert payload["entities"] == 3


def test_metrics_are_noops_without_statsd_host():
    settings = Settings(observability={"statsd_host": None})

    obs = get_observability(component="scenario", settings=settings)
    obs.increment("scenario.count")
    obs.record_timing("scenario.analyze", 5.0)

    assert obs.component == "scenario"
    assert obs.statsd is None


def test_statsd_client_is_shared_until_reset():
    settings = Settings(observability={"statsd_host": "127.0.0.1", "statsd_port": 8125})

    first = get_observability(component="network", settings=settings).statsd
    second = get_observability(component="scenario", settings=settings).statsd
    assert first is not None
    assert first is second

    reset_observability_cache()
    assert get_observability(settings=settings).statsd is not first
