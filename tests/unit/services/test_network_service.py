"""Tests for the LeaderNetworkService orchestration logic."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from leadernet.network.models import ConnectionsRequest, LeaderNetworkRequest, NewsArticle
from leadernet.services.errors import NoNetworkDataError
from leadernet.services.network import LeaderNetworkService
from leadernet.settings import Settings


class _StubNewsClient:
    def __init__(self, articles: List[NewsArticle]) -> None:
        self.articles = articles
        self.calls: list[tuple[str, int, int]] = []

    def fetch_articles(self, leader_name: str, days_back: int = 30, max_records: int = 250) -> List[NewsArticle]:
        self.calls.append((leader_name, days_back, max_records))
        return self.articles


class _StubLLM:
    def __init__(self, extraction: Dict[str, Any] | None = None, connections: Dict[str, Any] | None = None) -> None:
        self.extraction = extraction or {"entities": [], "relationships": []}
        self.connections = connections or {"entities": [], "relationships": [], "sources": []}
        self.insight_calls: list[str | None] = []
        self.connection_calls: list[tuple[str, str, int]] = []

    def extract_network(self, text: str) -> Dict[str, Any]:
        return self.extraction

    def extract_connections(self, text: str, leader_name: str, num_connections: int) -> Dict[str, Any]:
        self.connection_calls.append((text, leader_name, num_connections))
        return self.connections

    def generate_insights(self, graph, leader_name: str | None = None) -> Dict[str, Any]:
        self.insight_calls.append(leader_name)
        return {"insights": ["stub"]}


class _StubSearcher:
    def __init__(self, excerpts: List[str]) -> None:
        self.excerpts = excerpts

    def search(self, leader_name: str) -> List[str]:
        return self.excerpts


class _RecordingObservability:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []
        self.counters: list[str] = []

    def emit_event(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))

    def increment(self, metric: str, **_: Any) -> None:
        self.counters.append(metric)

    def record_timing(self, metric: str, value_ms: float, **_: Any) -> None:
        pass


_EXTRACTION = {
    "entities": [
        {"name": "Владимир Путин", "type": "politician"},
        {"name": "Владимир Путин", "type": "politician"},
        {"name": "Сергей Шойгу", "type": "military"},
        {"name": "Kremlin", "type": "government"},
    ],
    "relationships": [
        {"source": "Владимир Путин", "target": "Сергей Шойгу", "type": "professional", "strength": 4},
        {"source": "Putin", "target": "Kremlin", "type": "political", "strength": 5},
    ],
}


def _service(**overrides: Any) -> tuple[LeaderNetworkService, _RecordingObservability]:
    observability = _RecordingObservability()
    kwargs: Dict[str, Any] = {
        "news_client": _StubNewsClient([NewsArticle(title="Putin visits troops", url="https://x/1", published="d1")]),
        "llm_client": _StubLLM(extraction=_EXTRACTION),
        "searcher": _StubSearcher([]),
        "settings": Settings(),
        "observability": observability,
    }
    kwargs.update(overrides)
    return LeaderNetworkService(**kwargs), observability


def test_analyze_leader_normalizes_and_tags_relationships():
    service, observability = _service()

    result = service.analyze_leader("Vladimir Putin", LeaderNetworkRequest(days_back=7, max_records=10))

    assert service.news_client.calls == [("Vladimir Putin", 7, 10)]
    names = [entity.name for entity in result.entities]
    assert names == ["vladimir putin", "сергей шойгу", "kremlin"]
    assert all(rel.source_url == "https://x/1" for rel in result.relationships)
    assert all(rel.source_date == "d1" for rel in result.relationships)
    assert result.data_points_analyzed == 1
    assert result.insights == {"insights": ["stub"]}
    assert [node.name for node in result.display.nodes] == names
    assert observability.events[0][0] == "network.analyzed"
    assert observability.events[0][1]["english_only"] is False


def test_analyze_leader_honors_english_only():
    service, _ = _service()

    result = service.analyze_leader("Vladimir Putin", LeaderNetworkRequest(english_only=True))

    assert [entity.name for entity in result.entities] == ["vladimir putin", "kremlin"]
    assert [(rel.source, rel.target) for rel in result.relationships] == [("vladimir putin", "kremlin")]


def test_analyze_leader_without_articles_raises():
    service, observability = _service(news_client=_StubNewsClient([]))

    with pytest.raises(NoNetworkDataError, match="No data found for leader: Nobody"):
        service.analyze_leader("Nobody")
    assert observability.counters == ["network.no_data"]


_CONNECTIONS = {
    "entities": [{"name": "Xi Jinping", "type": "politician"}],
    "relationships": [
        {"source": "Xi Jinping", "target": "Li Qiang", "type": "professional", "strength": 5},
        {"source": "Xi Jinping", "target": "Ван И", "type": "professional", "strength": 4},
        {"source": "Xi Jinping", "target": "Cai Qi", "type": "political", "strength": 3},
    ],
    "sources": ["Reuters"],
}


def test_top_connections_forces_english_only():
    llm = _StubLLM(connections=_CONNECTIONS)
    service, _ = _service(llm_client=llm, searcher=_StubSearcher(["excerpt one", "excerpt two"]))

    result = service.top_connections(ConnectionsRequest(leader_name="Xi Jinping", num_connections=3, english_only=False))

    assert llm.connection_calls == [("excerpt one\n\nexcerpt two", "Xi Jinping", 3)]
    assert [entity.name for entity in result.entities] == ["xi jinping", "li qiang", "cai qi"]
    assert result.search_sources == ["Reuters"]
    assert result.layers["primary_connections"] == 3
    assert result.top_connections == 3
    assert result.data_points_analyzed == 2
    assert llm.insight_calls == ["Xi Jinping"]


def test_top_connections_without_search_results_raises():
    service, _ = _service(searcher=_StubSearcher([]))

    with pytest.raises(NoNetworkDataError, match="No connection data found"):
        service.top_connections(ConnectionsRequest(leader_name="Xi Jinping"))


def test_top_connections_without_surviving_relationships_raises():
    llm = _StubLLM(connections={"entities": [], "relationships": [], "sources": []})
    service, _ = _service(llm_client=llm, searcher=_StubSearcher(["excerpt"]))

    with pytest.raises(NoNetworkDataError, match="No valid connections found"):
        service.top_connections(ConnectionsRequest(leader_name="Xi Jinping"))


def test_analyze_leader_with_empty_extraction_raises():
    service, observability = _service(llm_client=_StubLLM(extraction={"entities": [], "relationships": []}))

    with pytest.raises(NoNetworkDataError, match="No data found for leader: Vladimir Putin"):
        service.analyze_leader("Vladimir Putin")
    assert observability.counters == ["network.no_data"]
    assert observability.events == []


def test_analyze_leader_tolerates_malformed_llm_fields():
    extraction = {
        "entities": [{"name": "Putin", "role": ["President", "Leader"]}],
        "relationships": [{"source": "Putin", "target": "Xi Jinping", "description": 5}],
    }
    service, _ = _service(llm_client=_StubLLM(extraction=extraction))

    result = service.analyze_leader("Putin")

    assert result.entities[0].role == "Unknown"
    assert result.relationships[0].description == ""
    assert result.relationships[0].target == "xi jinping"


def test_top_connections_defaults_to_configured_count():
    llm = _StubLLM(connections=_CONNECTIONS)
    settings = Settings(network={"default_num_connections": 2})
    service, _ = _service(llm_client=llm, searcher=_StubSearcher(["excerpt"]), settings=settings)

    result = service.top_connections(ConnectionsRequest(leader_name="Xi Jinping"))

    assert llm.connection_calls[0][2] == 2
    assert result.top_connections == 2
