"""LLM-backed extraction of political networks, insights and free-text answers."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Mapping

from langchain_core.messages import HumanMessage, SystemMessage

from leadernet.settings import Settings, get_settings

from .prompts import (
    CONNECTION_EXTRACTION,
    CONNECTION_INSIGHTS,
    NETWORK_EXTRACTION,
    NETWORK_INSIGHTS,
)

LOGGER = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)
_CAPITALISED_NAME = re.compile(r"\b[A-Z][a-z]+(?:[ \-][A-Z][a-z]+)+\b")

NETWORK_INSIGHT_SECTIONS = ("key_players", "relationship_patterns", "vulnerabilities", "evolution_suggestions")


def empty_network() -> Dict[str, List[Any]]:
    return {"entities": [], "relationships": []}


def default_insights(leader_name: str | None = None) -> Dict[str, List[Any]]:
    """Insight payload returned when generation fails."""

    if leader_name:
        return {"insights": []}
    return {section: [] for section in NETWORK_INSIGHT_SECTIONS}


def _strip_code_fence(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith("```") and stripped.endswith("```"):
        lines = stripped.splitlines()
        if len(lines) >= 2:
            return "\n".join(lines[1:-1]).strip()
    return stripped


def parse_json_object(content: str | None) -> Dict[str, Any] | None:
    """Decode the JSON object in an LLM reply, tolerating fences and chatter."""

    if not content:
        return None
    payload = _strip_code_fence(content)
    try:
        data = json.loads(payload)
    except json.JSONDecodeError:
        match = _JSON_OBJECT.search(payload)
        if not match:
            return None
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError:
            return None
    return data if isinstance(data, dict) else None


def parse_network_payload(content: str | None) -> Dict[str, Any]:
    """Coerce an extraction reply into ``{"entities": [...], "relationships": [...]}``."""

    data = parse_json_object(content)
    if data is None:
        if content:
            LOGGER.warning("Extractor returned unparseable network payload")
        return empty_network()
    result: Dict[str, Any] = {}
    for key in ("entities", "relationships"):
        items = data.get(key)
        result[key] = [item for item in items if isinstance(item, dict)] if isinstance(items, list) else []
    sources = data.get("sources")
    if isinstance(sources, list):
        result["sources"] = [str(source) for source in sources if source]
    return result


def _graph_payload(graph: Any) -> Mapping[str, Any]:
    if hasattr(graph, "model_dump"):
        return graph.model_dump(mode="json")
    return graph


class NetworkLLMClient:
    """Run network prompts against the configured chat model.

    Providers: ``ollama`` (``langchain_ollama.ChatOllama``), ``openai``
    (``langchain_openai.ChatOpenAI``) and ``mock``, an offline provider that
    pairs capitalised names found in the text and echoes free-text prompts.
    Invocation failures are logged and degrade to empty results.
    """

    def __init__(self, *, settings: Settings | None = None, chat_model: Any | None = None) -> None:
        self.settings = settings or get_settings()
        self.max_chars = self.settings.llm.max_input_chars
        self.provider = (self.settings.llm.provider or "ollama").lower()
        self._client = chat_model if chat_model is not None else self._build_client()

    def _build_client(self):
        llm = self.settings.llm
        if self.provider == "mock":
            return None

        if self.provider == "ollama":
            from langchain_ollama import ChatOllama

            return ChatOllama(
                model=llm.chat_model,
                base_url=llm.ollama_base_url,
                temperature=llm.temperature,
            )
        if self.provider == "openai":
            from langchain_openai import ChatOpenAI

            return ChatOpenAI(
                model=llm.openai_model,
                api_key=llm.openai_api_key,
                temperature=llm.temperature,
            )
        raise RuntimeError(f"Unsupported LLM provider '{self.provider}'. Use 'ollama', 'openai' or 'mock'.")

    @property
    def is_mock(self) -> bool:
        return self._client is None

    def _truncate(self, text: str) -> str:
        if len(text) <= self.max_chars:
            return text
        return text[: self.max_chars]

    def complete(self, system: str, prompt: str) -> str:
        """Return the model's reply to ``prompt``; empty string on failure."""

        if self.is_mock:
            return prompt
        try:
            response = self._client.invoke(
                [
                    SystemMessage(content=system),
                    HumanMessage(content=self._truncate(prompt)),
                ]
            )
        except Exception:  # pragma: no cover - LLM availability
            LOGGER.exception("LLM invocation failed (provider=%s)", self.provider)
            return ""
        content = getattr(response, "content", "")
        return content if isinstance(content, str) else ""

    def extract_network(self, text: str) -> Dict[str, Any]:
        """Extract entities and relationships from one piece of text."""

        if not text or not text.strip():
            return empty_network()
        if self.is_mock:
            return self._mock_network(text)
        reply = self.complete(NETWORK_EXTRACTION.system_message, NETWORK_EXTRACTION.render(text=text))
        return parse_network_payload(reply)

    def extract_connections(self, text: str, leader_name: str, num_connections: int) -> Dict[str, Any]:
        """Extract a leader's top connections from concatenated search excerpts."""

        if not text or not text.strip():
            return {**empty_network(), "sources": []}
        if self.is_mock:
            network = self._mock_network(text, anchor=leader_name)
            network["sources"] = ["mock search"]
            return network
        prompt = CONNECTION_EXTRACTION.render(
            text=self._truncate(text),
            leader_name=leader_name,
            num_connections=num_connections,
        )
        network = parse_network_payload(self.complete(CONNECTION_EXTRACTION.system_message, prompt))
        network.setdefault("sources", [])
        return network

    def generate_insights(self, graph: Any, leader_name: str | None = None) -> Dict[str, Any]:
        """Summarize a normalized graph; falls back to empty insight sections."""

        payload = _graph_payload(graph)
        if self.is_mock:
            return self._mock_insights(payload, leader_name)
        network = json.dumps(payload, ensure_ascii=False, indent=2, default=str)
        template = CONNECTION_INSIGHTS if leader_name else NETWORK_INSIGHTS
        reply = self.complete(template.system_message, template.render(network=network, leader_name=leader_name))
        data = parse_json_object(reply)
        if data is None:
            LOGGER.warning("Insight generation returned no usable JSON")
            return default_insights(leader_name)
        return data

    def _mock_network(self, text: str, *, anchor: str | None = None) -> Dict[str, Any]:
        names: List[str] = []
        if anchor:
            names.append(anchor)
        for name in _CAPITALISED_NAME.findall(text):
            if name.lower() not in {existing.lower() for existing in names}:
                names.append(name)
        entities = [{"name": name, "type": "person", "role": "Unknown"} for name in names]
        hub = names[0] if names else None
        relationships = [
            {
                "source": hub,
                "target": name,
                "type": "mentioned_with",
                "sentiment": "neutral",
                "strength": 1,
                "description": "Mentioned together",
            }
            for name in names[1:]
        ]
        return {"entities": entities, "relationships": relationships}

    def _mock_insights(self, payload: Mapping[str, Any], leader_name: str | None) -> Dict[str, Any]:
        degree: Dict[str, int] = {}
        for rel in payload.get("relationships") or []:
            for endpoint in (rel.get("source"), rel.get("target")):
                if endpoint:
                    degree[endpoint] = degree.get(endpoint, 0) + 1
        ranked = sorted(degree, key=lambda name: degree[name], reverse=True)[:3]
        insights = default_insights(leader_name)
        if leader_name:
            insights["insights"] = [
                {"title": f"Central connection: {name}", "description": f"{degree[name]} relationships"}
                for name in ranked
            ]
        else:
            insights["key_players"] = ranked
        return insights


__all__ = [
    "NetworkLLMClient",
    "default_insights",
    "empty_network",
    "parse_json_object",
    "parse_network_payload",
]
