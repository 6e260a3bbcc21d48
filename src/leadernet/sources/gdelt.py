"""GDELT DOC 2.0 API client for leader news coverage."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

import httpx

from leadernet.network.models import NewsArticle
from leadernet.settings import Settings, get_settings

LOGGER = logging.getLogger(__name__)

MINUTES_PER_DAY = 1440


def _nested(record: Mapping[str, Any], *path: str) -> Any:
    value: Any = record
    for key in path:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def _to_article(record: Mapping[str, Any]) -> NewsArticle:
    tone = record.get("tone")
    try:
        tone_value = float(tone) if tone is not None else 0.0
    except (TypeError, ValueError):
        tone_value = 0.0
    return NewsArticle(
        title=str(record.get("title") or ""),
        url=record.get("url"),
        source=_nested(record, "seenin", "source", "name") or record.get("domain"),
        published=_nested(record, "seenin", "sourcepublishedatetime") or record.get("seendate"),
        tone=tone_value,
        locations=list(record.get("locations") or []),
        persons=list(record.get("persons") or []),
        organizations=list(record.get("organizations") or []),
    )


class GdeltNewsClient:
    """Fetch article lists mentioning a leader from the GDELT DOC API."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.base_url = self.settings.news.gdelt_base_url
        self.timeout = self.settings.news.timeout_seconds
        self._transport = transport

    @staticmethod
    def build_params(leader_name: str, days_back: int, max_records: int) -> Dict[str, Any]:
        return {
            "query": f'"{leader_name}"',
            "mode": "artlist",
            "format": "json",
            "timespan": str(days_back * MINUTES_PER_DAY),
            "maxrecords": max_records,
        }

    def fetch_articles(self, leader_name: str, days_back: int = 30, max_records: int = 250) -> List[NewsArticle]:
        """Return recent articles quoting ``leader_name``.

        Transport failures, non-2xx responses and undecodable bodies are
        logged and produce an empty list.
        """

        params = self.build_params(leader_name, days_back, max_records)
        LOGGER.info(
            "Fetching GDELT articles for %s (days_back=%d, max_records=%d)", leader_name, days_back, max_records
        )
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(self.base_url, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            LOGGER.warning("GDELT request failed for %s: %s", leader_name, exc)
            return []
        except ValueError:
            LOGGER.warning("GDELT returned a non-JSON body for %s", leader_name)
            return []

        records = payload.get("articles") if isinstance(payload, Mapping) else None
        if not isinstance(records, list):
            return []
        articles = [_to_article(record) for record in records if isinstance(record, Mapping)]
        LOGGER.info("GDELT returned %d articles for %s", len(articles), leader_name)
        return articles


__all__ = ["GdeltNewsClient", "MINUTES_PER_DAY"]
