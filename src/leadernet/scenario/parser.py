"""Parse free-text scenario analyses into labeled sections.

The LLM is asked to answer with seven headed sections. Answers drift in
formatting (bullets, markdown emphasis, headings on their own line), so the
parser walks the text line by line: a line that starts with a known header
switches the current section, and every following line is appended to it
until the next header. Text before the first header is discarded.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import List, Optional, Pattern, Tuple

from leadernet.scenario.models import SECTION_PLACEHOLDERS, KeyEntity, KeyRelationship, ScenarioAnalysis

LOGGER = logging.getLogger(__name__)

SECTION_HEADERS: Tuple[Tuple[str, str], ...] = (
    ("Summary", "summary"),
    ("Network Vulnerabilities", "network_vulnerabilities"),
    ("Network Impact", "network_impact"),
    ("Political Outcomes", "political_outcomes"),
    ("Geopolitical Strategy Implications", "geopolitical_strategy"),
    ("Key Entities Affected", "key_entities"),
    ("Key Relationships Affected", "key_relationships"),
)

_HEADER_KEYS = {title.lower(): key for title, key in SECTION_HEADERS}
_HEADER_PATTERN = re.compile(
    r"^[\s\-*•#>]*(" + "|".join(re.escape(title) for title, _ in SECTION_HEADERS) + r")\s*\**\s*:",
    re.IGNORECASE,
)
_BULLET_PREFIX = re.compile(r"^\s*(?:[•*]+|-(?=\s)|\d+[.)])?\s*")
_ENTITY_LINE = re.compile(r"([^:]+):(.+)")
_RELATIONSHIP_LINES: Tuple[Pattern[str], ...] = (
    re.compile(r"(.+?)\s*(?:→|->)\s*([^:]+):(.+)"),
    re.compile(r"(.+?)\s+[-–]\s+([^:]+):(.+)"),
    re.compile(r"(.+?)\s+and\s+([^:]+):(.+)"),
)


@dataclass
class ScenarioSections:
    """Raw section bodies; missing sections are empty strings."""

    summary: str = ""
    network_vulnerabilities: str = ""
    network_impact: str = ""
    political_outcomes: str = ""
    geopolitical_strategy: str = ""
    key_entities: str = ""
    key_relationships: str = ""


def _clean(value: str) -> str:
    return value.strip().strip("*").strip()


def parse_scenario_response(text: str | None) -> ScenarioSections:
    """Split an LLM scenario answer into its headed sections."""

    buckets: dict[str, List[str]] = {}
    current: Optional[str] = None
    for line in (text or "").splitlines():
        match = _HEADER_PATTERN.match(line)
        if match:
            current = _HEADER_KEYS[match.group(1).lower()]
            rest = line[match.end():].lstrip(" \t*:")
            buckets.setdefault(current, [])
            if rest:
                buckets[current].append(rest)
            continue
        if current is not None:
            buckets[current].append(line)

    sections = ScenarioSections()
    for field in fields(ScenarioSections):
        lines = buckets.get(field.name)
        if lines:
            setattr(sections, field.name, "\n".join(lines).strip())
    return sections


def parse_key_entities(section: str | None) -> List[KeyEntity]:
    """Parse ``name: impact`` lines, each optionally bulleted."""

    entities: List[KeyEntity] = []
    for line in (section or "").splitlines():
        body = _BULLET_PREFIX.sub("", line, count=1)
        match = _ENTITY_LINE.match(body)
        if not match:
            continue
        name, impact = _clean(match.group(1)), _clean(match.group(2))
        if name and impact:
            entities.append(KeyEntity(name=name, impact=impact))
    return entities


def parse_key_relationships(section: str | None) -> List[KeyRelationship]:
    """Parse ``source → target: change`` style lines.

    Arrow, spaced dash and ``and`` separators are tried in that order; lines
    matching none of them are skipped.
    """

    relationships: List[KeyRelationship] = []
    for line in (section or "").splitlines():
        body = _BULLET_PREFIX.sub("", line, count=1)
        if not body.strip():
            continue
        for pattern in _RELATIONSHIP_LINES:
            match = pattern.match(body)
            if match:
                source, target, change = (_clean(group) for group in match.groups())
                if source and target and change:
                    relationships.append(KeyRelationship(source=source, target=target, change=change))
                break
    return relationships


def build_scenario_analysis(text: str | None, *, leader_name: str = "", question: str = "") -> ScenarioAnalysis:
    """Turn a raw scenario answer into a :class:`ScenarioAnalysis`."""

    sections = parse_scenario_response(text)
    narrative = {
        key: getattr(sections, key) or placeholder for key, placeholder in SECTION_PLACEHOLDERS.items()
    }
    analysis = ScenarioAnalysis(
        leader_name=leader_name,
        question=question,
        key_entities=parse_key_entities(sections.key_entities),
        key_relationships=parse_key_relationships(sections.key_relationships),
        full_analysis=text or "",
        **narrative,
    )
    LOGGER.debug(
        "Parsed scenario analysis: %d key entities, %d key relationships",
        len(analysis.key_entities),
        len(analysis.key_relationships),
    )
    return analysis


__all__ = [
    "SECTION_HEADERS",
    "ScenarioSections",
    "build_scenario_analysis",
    "parse_key_entities",
    "parse_key_relationships",
    "parse_scenario_response",
]
