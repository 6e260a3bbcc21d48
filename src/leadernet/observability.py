"""Structured analysis events and StatsD metrics for leadernet services.

Services report one event per finished analysis (``network.analyzed``,
``scenario.analyzed``) plus counters and timings under the names below. Events
go to the ``leadernet.observability`` logger, as JSON when
``observability.structured_logging`` is on. Metrics go to StatsD only when
``observability.statsd_host`` is configured.
"""

from __future__ import annotations

import json
import logging
import socket
import threading
from datetime import datetime, timezone
from typing import Any, Mapping

from leadernet.settings import Settings, get_settings

_LOGGER = logging.getLogger("leadernet.observability")

NETWORK_ANALYZED = "network.analyzed"
SCENARIO_ANALYZED = "scenario.analyzed"
NO_DATA_METRIC = "network.no_data"
ANALYZE_LEADER_TIMING = "network.analyze_leader"
TOP_CONNECTIONS_TIMING = "network.top_connections"
SCENARIO_TIMING = "scenario.analyze"

_STATSD_LOCK = threading.Lock()
_STATSD_CLIENTS: dict[tuple[str, int, str], "StatsdClient"] = {}


class StatsdClient:
    """Fire-and-forget StatsD sender over UDP with DogStatsD-style tags."""

    def __init__(self, host: str, port: int, prefix: str = "") -> None:
        self.address = (host, port)
        self.prefix = prefix
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def format_payload(self, metric: str, value: float, *, metric_type: str, tags: Mapping[str, str] | None) -> str:
        name = f"{self.prefix}.{metric}" if self.prefix else metric
        payload = f"{name}:{_format_number(value)}|{metric_type}"
        if tags:
            payload += "|#" + ",".join(f"{key}:{val}" for key, val in sorted(tags.items()))
        return payload

    def send(self, metric: str, value: float, *, metric_type: str, tags: Mapping[str, str] | None = None) -> None:
        payload = self.format_payload(metric, value, metric_type=metric_type, tags=tags)
        try:
            self._socket.sendto(payload.encode("utf-8"), self.address)
        except OSError:
            _LOGGER.debug("StatsD send failed for metric %s", metric, exc_info=True)


class Observability:
    """Report analysis events and metrics for one service component."""

    def __init__(
        self,
        *,
        settings: Settings,
        component: str | None = None,
        statsd: StatsdClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.settings = settings
        self.component = component or "core"
        self.statsd = statsd
        self._logger = logger or _LOGGER
        self._structured = bool(settings.observability.structured_logging)

    def emit_event(self, event: str, **fields: Any) -> None:
        """Log ``event`` with its fields, stamped with component and UTC time."""

        payload = {
            "event": event,
            "component": self.component,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **fields,
        }
        if self._structured:
            self._logger.info(json.dumps(payload, default=str, ensure_ascii=False))
        else:
            self._logger.info("%s | %s", event, payload)

    def increment(self, metric: str, *, value: float = 1.0, tags: Mapping[str, Any] | None = None) -> None:
        if self.statsd is not None:
            self.statsd.send(metric, value, metric_type="c", tags=self._tags(tags))

    def record_timing(self, metric: str, value_ms: float, *, tags: Mapping[str, Any] | None = None) -> None:
        if self.statsd is not None:
            self.statsd.send(metric, value_ms, metric_type="ms", tags=self._tags(tags))

    def _tags(self, tags: Mapping[str, Any] | None) -> dict[str, str]:
        merged = {"component": self.component}
        for key, value in (tags or {}).items():
            if value is not None:
                merged[str(key)] = str(value)
        return merged


def get_observability(*, component: str | None = None, settings: Settings | None = None) -> Observability:
    """Return an :class:`Observability` sharing one StatsD client per target."""

    resolved = settings or get_settings()
    return Observability(settings=resolved, component=component, statsd=_shared_statsd(resolved))


def reset_observability_cache() -> None:
    """Forget shared StatsD clients (used in tests)."""

    with _STATSD_LOCK:
        _STATSD_CLIENTS.clear()


def _shared_statsd(settings: Settings) -> StatsdClient | None:
    config = settings.observability
    if not config.statsd_host:
        return None
    key = (config.statsd_host, config.statsd_port, config.statsd_prefix)
    with _STATSD_LOCK:
        client = _STATSD_CLIENTS.get(key)
        if client is None:
            client = _STATSD_CLIENTS[key] = StatsdClient(*key)
        return client


def _format_number(value: float) -> str:
    return f"{value:.6f}".rstrip("0").rstrip(".") or "0"


__all__ = [
    "ANALYZE_LEADER_TIMING",
    "NETWORK_ANALYZED",
    "NO_DATA_METRIC",
    "Observability",
    "SCENARIO_ANALYZED",
    "SCENARIO_TIMING",
    "StatsdClient",
    "TOP_CONNECTIONS_TIMING",
    "get_observability",
    "reset_observability_cache",
]
