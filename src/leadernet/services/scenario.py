"""Scenario planning over an existing leader network."""

from __future__ import annotations

import logging
import time
from typing import List

from leadernet.extraction.llm_client import NetworkLLMClient
from leadernet.extraction.prompts import SCENARIO_ANALYSIS
from leadernet.network.models import NetworkEntity, NetworkGraph, NetworkRelationship
from leadernet.observability import SCENARIO_ANALYZED, SCENARIO_TIMING, Observability, get_observability
from leadernet.scenario.models import ScenarioAnalysis, ScenarioRequest
from leadernet.scenario.parser import build_scenario_analysis
from leadernet.settings import Settings, get_settings

from .errors import ScenarioRequestError

LOGGER = logging.getLogger(__name__)


def _strength_value(relationship: NetworkRelationship) -> float:
    try:
        return float(relationship.strength or 0)
    except (TypeError, ValueError):
        return 0.0


def summarize_entities(entities: List[NetworkEntity], limit: int) -> List[str]:
    return [f"{entity.name} ({entity.type or 'unknown'}) - {entity.role or 'unknown'}" for entity in entities[:limit]]


def summarize_relationships(relationships: List[NetworkRelationship], limit: int) -> List[str]:
    """Describe the ``limit`` strongest relationships, one per line."""

    ranked = sorted(relationships, key=_strength_value, reverse=True)[:limit]
    return [
        f"{rel.source} → {rel.target}: {rel.type} "
        f"(strength: {rel.strength or 'unknown'}, sentiment: {rel.sentiment or 'neutral'})"
        for rel in ranked
    ]


class ScenarioService:
    """Ask the LLM a what-if question about a leader's network and parse the answer."""

    def __init__(
        self,
        *,
        llm_client: NetworkLLMClient | None = None,
        settings: Settings | None = None,
        observability: Observability | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.llm_client = llm_client or NetworkLLMClient(settings=self.settings)
        self.observability = observability or get_observability(component="scenario", settings=self.settings)

    def build_prompt(self, request: ScenarioRequest) -> str:
        limit = self.settings.network.scenario_summary_limit
        graph: NetworkGraph = request.network_data
        return SCENARIO_ANALYSIS.render(
            leader_name=request.leader_name,
            question=request.question,
            entity_summary="\n".join(summarize_entities(graph.entities, limit)),
            relationship_summary="\n".join(summarize_relationships(graph.relationships, limit)),
        )

    def analyze(self, request: ScenarioRequest) -> ScenarioAnalysis:
        """Run the scenario prompt and return the sectioned analysis.

        Raises:
            ScenarioRequestError: The supplied network has no entities.
        """

        graph = request.network_data
        if not graph.entities:
            raise ScenarioRequestError("Network data is incomplete")
        LOGGER.info(
            "Analyzing scenario for %s over %d entities and %d relationships",
            request.leader_name,
            len(graph.entities),
            len(graph.relationships),
        )
        started = time.perf_counter()
        reply = self.llm_client.complete(SCENARIO_ANALYSIS.system_message, self.build_prompt(request))
        analysis = build_scenario_analysis(reply, leader_name=request.leader_name, question=request.question)
        duration = (time.perf_counter() - started) * 1000.0
        self.observability.record_timing(SCENARIO_TIMING, duration)
        self.observability.emit_event(
            SCENARIO_ANALYZED,
            leader=request.leader_name,
            key_entities=len(analysis.key_entities),
            key_relationships=len(analysis.key_relationships),
            empty_reply=not reply,
            duration_ms=round(duration, 2),
        )
        return analysis


__all__ = ["ScenarioService", "summarize_entities", "summarize_relationships"]
