"""Scenario planning: request models and response parsing."""

from .models import KeyEntity, KeyRelationship, ScenarioAnalysis, ScenarioRequest
from .parser import build_scenario_analysis, parse_key_entities, parse_key_relationships, parse_scenario_response

__all__ = [
    "KeyEntity",
    "KeyRelationship",
    "ScenarioAnalysis",
    "ScenarioRequest",
    "build_scenario_analysis",
    "parse_key_entities",
    "parse_key_relationships",
    "parse_scenario_response",
]
