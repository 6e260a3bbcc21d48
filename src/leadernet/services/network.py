"""High-level orchestration for leader network analysis."""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List

from leadernet.extraction.llm_client import NetworkLLMClient
from leadernet.network.layering import select_connection_layers
from leadernet.network.models import (
    ConnectionsRequest,
    ConnectionsResult,
    LeaderNetworkRequest,
    LeaderNetworkResult,
    NetworkGraph,
    NewsArticle,
)
from leadernet.network.palette import build_display_hints
from leadernet.normalization.normalizer import normalize_network_data
from leadernet.observability import (
    ANALYZE_LEADER_TIMING,
    NETWORK_ANALYZED,
    NO_DATA_METRIC,
    TOP_CONNECTIONS_TIMING,
    Observability,
    get_observability,
)
from leadernet.settings import Settings, get_settings
from leadernet.sources.gdelt import GdeltNewsClient
from leadernet.sources.search import ConnectionSearcher

from .errors import NoNetworkDataError

LOGGER = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


class LeaderNetworkService:
    """Coordinates source retrieval, extraction, normalization and insights."""

    def __init__(
        self,
        *,
        news_client: GdeltNewsClient | None = None,
        llm_client: NetworkLLMClient | None = None,
        searcher: ConnectionSearcher | None = None,
        settings: Settings | None = None,
        observability: Observability | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.news_client = news_client or GdeltNewsClient(settings=self.settings)
        self.llm_client = llm_client or NetworkLLMClient(settings=self.settings)
        self.searcher = searcher or ConnectionSearcher(llm_client=self.llm_client)
        self.observability = observability or get_observability(component="network", settings=self.settings)

    def analyze_leader(self, leader_name: str, request: LeaderNetworkRequest | None = None) -> LeaderNetworkResult:
        """Build a leader's network from recent news headlines.

        Raises:
            NoNetworkDataError: GDELT returned no articles for the leader, or
                nothing usable survived extraction and normalization.
        """

        request = request or LeaderNetworkRequest(
            days_back=self.settings.news.default_days_back,
            max_records=self.settings.news.default_max_records,
        )
        started = time.perf_counter()
        articles = self.news_client.fetch_articles(leader_name, request.days_back, request.max_records)
        if not articles:
            self.observability.increment(NO_DATA_METRIC, tags={"path": "news"})
            raise NoNetworkDataError(f"No data found for leader: {leader_name}", leader_name=leader_name)

        entities, relationships = self._extract_from_articles(articles)
        english_only = request.english_only
        if english_only is None:
            english_only = self.settings.network.news_english_only
        normalized = normalize_network_data(entities, relationships, english_only)
        if not normalized["entities"] or not normalized["relationships"]:
            self.observability.increment(NO_DATA_METRIC, tags={"path": "news"})
            raise NoNetworkDataError(f"No data found for leader: {leader_name}", leader_name=leader_name)
        graph = NetworkGraph.from_normalized(normalized)
        insights = self.llm_client.generate_insights(graph)

        result = LeaderNetworkResult(
            leader_name=leader_name,
            entities=graph.entities,
            relationships=graph.relationships,
            insights=insights,
            display=build_display_hints(graph),
            collection_timestamp=datetime.now(tz=timezone.utc),
            data_points_analyzed=len(articles),
        )
        duration = _elapsed_ms(started)
        self.observability.record_timing(ANALYZE_LEADER_TIMING, duration, tags={"path": "news"})
        self.observability.emit_event(
            NETWORK_ANALYZED,
            leader=leader_name,
            path="news",
            articles=len(articles),
            entities=len(result.entities),
            relationships=len(result.relationships),
            english_only=english_only,
            duration_ms=round(duration, 2),
        )
        return result

    def _extract_from_articles(self, articles: List[NewsArticle]) -> tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
        relationships: List[Dict[str, Any]] = []
        unique_entities: Dict[str, Dict[str, Any]] = {}
        for article in articles:
            if not article.title.strip():
                continue
            analysis = self.llm_client.extract_network(article.title)
            for rel in analysis.get("relationships", []):
                tagged = dict(rel)
                tagged["source_url"] = article.url
                tagged["source_date"] = article.published
                relationships.append(tagged)
            for entity in analysis.get("entities", []):
                key = json.dumps(entity, sort_keys=True, ensure_ascii=False, default=str)
                unique_entities.setdefault(key, entity)
        LOGGER.info(
            "Extracted %d unique entities and %d relationships from %d articles",
            len(unique_entities),
            len(relationships),
            len(articles),
        )
        return list(unique_entities.values()), relationships

    def top_connections(self, request: ConnectionsRequest) -> ConnectionsResult:
        """Build a leader's top-N connection network from search excerpts.

        The graph is always normalized with English-only filtering so the
        rendered network stays readable and connected, whatever
        ``request.english_only`` says.

        Raises:
            NoNetworkDataError: The search produced no excerpts, or no
                relationship survived normalization.
        """

        leader_name = request.leader_name
        requested = request.num_connections or self.settings.network.default_num_connections
        limit = min(requested, self.settings.network.max_num_connections)
        started = time.perf_counter()
        excerpts = self.searcher.search(leader_name)
        if not excerpts:
            self.observability.increment(NO_DATA_METRIC, tags={"path": "connections"})
            raise NoNetworkDataError(f"No connection data found for leader: {leader_name}", leader_name=leader_name)

        extraction = self.llm_client.extract_connections("\n\n".join(excerpts), leader_name, limit)
        layered = select_connection_layers(extraction, leader_name, limit)
        normalized = normalize_network_data(layered["entities"], layered["relationships"], True)
        if not normalized["relationships"]:
            self.observability.increment(NO_DATA_METRIC, tags={"path": "connections"})
            raise NoNetworkDataError(f"No valid connections found for leader: {leader_name}", leader_name=leader_name)

        graph = NetworkGraph.from_normalized(normalized)
        insights = self.llm_client.generate_insights(graph, leader_name=leader_name)
        result = ConnectionsResult(
            leader_name=leader_name,
            entities=graph.entities,
            relationships=graph.relationships,
            insights=insights,
            display=build_display_hints(graph),
            collection_timestamp=datetime.now(tz=timezone.utc),
            top_connections=limit,
            search_sources=layered["sources"],
            layers=layered["meta"],
            data_points_analyzed=len(excerpts),
        )
        duration = _elapsed_ms(started)
        self.observability.record_timing(TOP_CONNECTIONS_TIMING, duration, tags={"path": "connections"})
        self.observability.emit_event(
            NETWORK_ANALYZED,
            leader=leader_name,
            path="connections",
            excerpts=len(excerpts),
            entities=len(result.entities),
            relationships=len(result.relationships),
            duration_ms=round(duration, 2),
        )
        return result


__all__ = ["LeaderNetworkService"]
