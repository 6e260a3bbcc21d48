"""Pydantic models for scenario planning requests and responses."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

from leadernet.network.models import NetworkGraph

SECTION_PLACEHOLDERS = {
    "summary": "No summary available",
    "network_vulnerabilities": "No vulnerabilities analysis available",
    "network_impact": "No network impact analysis available",
    "political_outcomes": "No political outcomes analysis available",
    "geopolitical_strategy": "No geopolitical strategy analysis available",
}


class ScenarioRequest(BaseModel):
    """Hypothetical question about a leader's network."""

    leader_name: str = Field(min_length=1)
    question: str = Field(min_length=1)
    network_data: NetworkGraph

    @field_validator("leader_name", "question", mode="after")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped


class KeyEntity(BaseModel):
    name: str
    impact: str


class KeyRelationship(BaseModel):
    source: str
    target: str
    change: str


class ScenarioAnalysis(BaseModel):
    """Sectioned scenario analysis returned to API callers."""

    leader_name: str = ""
    question: str = ""
    summary: str = SECTION_PLACEHOLDERS["summary"]
    network_vulnerabilities: str = SECTION_PLACEHOLDERS["network_vulnerabilities"]
    network_impact: str = SECTION_PLACEHOLDERS["network_impact"]
    political_outcomes: str = SECTION_PLACEHOLDERS["political_outcomes"]
    geopolitical_strategy: str = SECTION_PLACEHOLDERS["geopolitical_strategy"]
    key_entities: List[KeyEntity] = Field(default_factory=list)
    key_relationships: List[KeyRelationship] = Field(default_factory=list)
    full_analysis: str = ""
