"""Select a leader's top connections from a raw extraction, layer by layer.

Layer 1 holds the strongest direct edge to each of the leader's top N
counterparts. Layer 2 adds edges between layer-1 entities and layer 3 adds
any remaining edge touching a layer-1 entity. Everything else is dropped.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Set

LOGGER = logging.getLogger(__name__)

LEADER_ENTITY_TYPE = "politician"
LEADER_ROLE = "Main subject of network analysis"
CONNECTION_ENTITY_TYPE = "person"
CONNECTION_ROLE = "Connection"


def _key(value: str) -> str:
    return value.lower().strip()


def _strength(relationship: Mapping[str, Any]) -> float:
    try:
        return float(relationship.get("strength") or 0)
    except (TypeError, ValueError):
        return 0.0


def _has_endpoints(relationship: Any) -> bool:
    return (
        isinstance(relationship, Mapping)
        and isinstance(relationship.get("source"), str)
        and isinstance(relationship.get("target"), str)
        and bool(relationship["source"].strip())
        and bool(relationship["target"].strip())
    )


def select_connection_layers(
    extraction: Mapping[str, Any],
    leader_name: str,
    num_connections: int,
) -> Dict[str, Any]:
    """Return a copy of ``extraction`` reduced to the leader's layered neighbourhood.

    Args:
        extraction: LLM output with ``entities``, ``relationships`` and
            optionally ``sources``.
        leader_name: Subject of the analysis; added as an entity when missing.
        num_connections: Maximum number of direct (layer 1) counterparts.

    Returns:
        Dict with ``entities``, ``relationships``, ``sources`` and a ``meta``
        block counting each layer.
    """

    leader_key = _key(leader_name)
    entities: List[Dict[str, Any]] = [
        dict(entity)
        for entity in extraction.get("entities") or []
        if isinstance(entity, Mapping) and isinstance(entity.get("name"), str)
    ]
    relationships = [dict(rel) for rel in extraction.get("relationships") or [] if _has_endpoints(rel)]

    if not any(_key(entity["name"]) == leader_key for entity in entities):
        entities.append({"name": leader_name, "type": LEADER_ENTITY_TYPE, "role": LEADER_ROLE})

    primary_entities: Set[str] = {leader_key}
    primary: List[Dict[str, Any]] = []
    for rel in sorted(relationships, key=_strength, reverse=True):
        if len(primary) >= num_connections:
            break
        source, target = _key(rel["source"]), _key(rel["target"])
        if leader_key not in (source, target):
            continue
        counterpart = target if source == leader_key else source
        if counterpart in primary_entities:
            continue
        primary_entities.add(counterpart)
        primary.append(rel)

    chosen = {id(rel) for rel in primary}
    secondary: List[Dict[str, Any]] = []
    for rel in relationships:
        if id(rel) in chosen:
            continue
        if _key(rel["source"]) in primary_entities and _key(rel["target"]) in primary_entities:
            secondary.append(rel)
    chosen.update(id(rel) for rel in secondary)

    tertiary: List[Dict[str, Any]] = []
    for rel in relationships:
        if id(rel) in chosen:
            continue
        if _key(rel["source"]) in primary_entities or _key(rel["target"]) in primary_entities:
            tertiary.append(rel)

    combined = primary + secondary + tertiary
    known = {_key(entity["name"]) for entity in entities}
    added = 0
    for rel in combined:
        for endpoint in (rel["source"], rel["target"]):
            if _key(endpoint) in known:
                continue
            known.add(_key(endpoint))
            entities.append({"name": endpoint, "type": CONNECTION_ENTITY_TYPE, "role": CONNECTION_ROLE})
            added += 1

    LOGGER.info(
        "Layered connections for %s: %d primary, %d secondary, %d tertiary (%d entities added)",
        leader_name,
        len(primary),
        len(secondary),
        len(tertiary),
        added,
    )
    return {
        "entities": entities,
        "relationships": combined,
        "sources": list(extraction.get("sources") or []),
        "meta": {
            "primary_connections": len(primary),
            "secondary_connections": len(secondary),
            "tertiary_connections": len(tertiary),
            "total_entities": len(entities),
            "total_relationships": len(combined),
        },
    }


__all__ = ["LEADER_ROLE", "select_connection_layers"]
