"""Entity/relationship graph normalization for leadernet.

Merges raw entity and relationship records extracted by the LLM from many
documents (and many languages) into one graph keyed by canonical entity
names. The pass is pure: inputs are never mutated and every emitted record is
a new dict.

Guarantees on the returned graph:

* canonical entity names are unique;
* every relationship endpoint names an emitted entity;
* with ``english_only`` no untranslated non-English surface form survives;
* every entity other than the hub is an endpoint of at least one edge,
  using synthetic ``is_fallback`` edges from the hub where needed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Set

from leadernet.normalization.aliases import DEFAULT_RESOLVER, AliasResolver, clean_surface_form
from leadernet.normalization.language import is_likely_english

LOGGER = logging.getLogger(__name__)

DEFAULT_ENTITY_TYPE = "person"
UNKNOWN_ROLE = "Unknown"

RELATIONSHIP_DEFAULTS = {
    "type": "unknown",
    "sentiment": "neutral",
    "strength": 1,
    "description": "",
}

FALLBACK_RELATIONSHIP = {
    "type": "connection",
    "sentiment": "neutral",
    "strength": 1,
    "description": "Connected entities",
    "is_fallback": True,
}

NetworkRecord = Dict[str, Any]


def _records(items: Iterable[Any] | None) -> List[Mapping[str, Any]]:
    if not items:
        return []
    return [item for item in items if isinstance(item, Mapping)]


def _text_field(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default


def _strength_field(value: Any) -> int | float | str:
    if isinstance(value, (int, float, str)):
        return value
    return RELATIONSHIP_DEFAULTS["strength"]


def _new_entity(canonical: str, surface_form: str | None, fields: Mapping[str, Any] | None = None) -> NetworkRecord:
    entity: NetworkRecord = dict(fields or {})
    entity["name"] = canonical
    entity["type"] = _text_field(entity.get("type"), DEFAULT_ENTITY_TYPE)
    entity["role"] = _text_field(entity.get("role"), UNKNOWN_ROLE)
    entity["original_names"] = [surface_form or canonical]
    return entity


def _relationship_record(rel: Mapping[str, Any]) -> NetworkRecord:
    record: NetworkRecord = dict(rel)
    for key in ("type", "sentiment"):
        record[key] = _text_field(record.get(key), RELATIONSHIP_DEFAULTS[key])
    description = record.get("description")
    record["description"] = description if isinstance(description, str) else RELATIONSHIP_DEFAULTS["description"]
    record["strength"] = _strength_field(record.get("strength"))
    if "is_fallback" in record:
        record["is_fallback"] = record["is_fallback"] is True
    return record


class _NameIndex:
    """Surface form bookkeeping shared by every step of one normalization pass."""

    def __init__(self, resolver: AliasResolver, english_only: bool) -> None:
        self.resolver = resolver
        self.english_only = english_only
        self.canonical: Dict[str, str] = {}
        self.non_english: Set[str] = set()
        self.untranslated: Set[str] = set()
        self._seen: Set[str] = set()

    def register(self, surface_form: str) -> None:
        if not surface_form or surface_form in self._seen:
            return
        self._seen.add(surface_form)
        canonical = self.resolver.resolve(surface_form)
        self.canonical[surface_form] = canonical
        self.canonical.setdefault(canonical, canonical)
        if not is_likely_english(surface_form):
            self.non_english.add(surface_form)
            if not is_likely_english(canonical):
                self.untranslated.add(surface_form)
                LOGGER.debug("Untranslated non-English entity name: %r", surface_form)

    def lookup(self, surface_form: str) -> str:
        return self.canonical.get(surface_form) or self.resolver.resolve(surface_form)

    def excluded(self, surface_form: str) -> bool:
        """True when ``english_only`` filtering drops this surface form."""

        return self.english_only and surface_form in self.untranslated

    def recorded_form(self, surface_form: str) -> str | None:
        """Surface form to keep in ``original_names`` (None when redacted)."""

        if self.english_only and surface_form in self.non_english:
            return None
        return surface_form


def _endpoints(relationship: Mapping[str, Any]) -> tuple[str, str]:
    return clean_surface_form(relationship.get("source")), clean_surface_form(relationship.get("target"))


def select_hub(entities: Mapping[str, NetworkRecord], relationships: Iterable[Mapping[str, Any]]) -> str | None:
    """Pick the entity with the highest relationship degree.

    Ties go to the entity inserted first. Without relationships the first
    entity is the hub; with no entities there is none.
    """

    degree: Dict[str, int] = {}
    for rel in relationships:
        degree[rel["source"]] = degree.get(rel["source"], 0) + 1
        degree[rel["target"]] = degree.get(rel["target"], 0) + 1

    hub: str | None = None
    best = -1
    for name in entities:
        score = degree.get(name, 0)
        if score > best:
            hub, best = name, score
    return hub


def repair_connectivity(
    entities: Mapping[str, NetworkRecord],
    relationships: List[NetworkRecord],
) -> List[NetworkRecord]:
    """Return fallback edges linking every unconnected entity to the hub."""

    hub = select_hub(entities, relationships)
    if hub is None:
        return []
    connected: Set[str] = set()
    for rel in relationships:
        connected.add(rel["source"])
        connected.add(rel["target"])

    fallbacks: List[NetworkRecord] = []
    for name in entities:
        if name == hub or name in connected:
            continue
        fallbacks.append({"source": hub, "target": name, **FALLBACK_RELATIONSHIP})
    if fallbacks:
        LOGGER.info("Added %d fallback relationships anchored on hub '%s'", len(fallbacks), hub)
    return fallbacks


def normalize_network_data(
    entities: Iterable[Mapping[str, Any]] | None,
    relationships: Iterable[Mapping[str, Any]] | None,
    english_only: bool = False,
    *,
    resolver: AliasResolver | None = None,
) -> Dict[str, List[NetworkRecord]]:
    """Deduplicate, filter and connect a raw entity/relationship graph.

    Args:
        entities: Raw entity dicts (``name`` plus optional ``type``/``role``).
            Records without a usable name are dropped.
        relationships: Raw relationship dicts (``source``/``target`` plus
            optional ``type``, ``sentiment``, ``strength``, ``description``).
            Records missing either endpoint are dropped. Non-string text
            fields and non-scalar strengths fall back to the defaults.
        english_only: Drop surface forms classified as non-English that the
            alias table cannot translate into an English canonical name.
        resolver: Alias resolver override; defaults to the shared table.

    Returns:
        ``{"entities": [...], "relationships": [...]}`` with canonical entity
        records in first-seen order, then normalized relationships followed
        by fallback relationships.
    """

    raw_entities = _records(entities)
    raw_relationships = _records(relationships)
    LOGGER.debug(
        "Normalizing %d entities and %d relationships (english_only=%s)",
        len(raw_entities),
        len(raw_relationships),
        english_only,
    )

    valid_relationships: List[tuple[Mapping[str, Any], str, str]] = []
    for rel in raw_relationships:
        source, target = _endpoints(rel)
        if not source or not target:
            LOGGER.debug("Dropping relationship with missing source/target: %r", rel)
            continue
        valid_relationships.append((rel, source, target))

    index = _NameIndex(resolver or DEFAULT_RESOLVER, english_only)
    for entity in raw_entities:
        index.register(clean_surface_form(entity.get("name")))
    for _, source, target in valid_relationships:
        index.register(source)
        index.register(target)

    materialized: Dict[str, NetworkRecord] = {}
    for entity in raw_entities:
        original = clean_surface_form(entity.get("name"))
        if not original:
            LOGGER.debug("Dropping entity without name: %r", entity)
            continue
        if index.excluded(original):
            continue
        canonical = index.lookup(original)
        recorded = index.recorded_form(original)
        existing = materialized.get(canonical)
        if existing is None:
            materialized[canonical] = _new_entity(canonical, recorded, entity)
        elif recorded and recorded not in existing["original_names"]:
            existing["original_names"].append(recorded)

    kept_relationships: List[tuple[Mapping[str, Any], str, str]] = []
    for rel, source, target in valid_relationships:
        if index.excluded(source) or index.excluded(target):
            continue
        kept_relationships.append((rel, source, target))
        for original in (source, target):
            canonical = index.lookup(original)
            if canonical not in materialized:
                materialized[canonical] = _new_entity(canonical, index.recorded_form(original))

    normalized: List[NetworkRecord] = []
    for rel, source, target in kept_relationships:
        source_canonical = index.lookup(source)
        target_canonical = index.lookup(target)
        if source_canonical not in materialized or target_canonical not in materialized:
            continue
        record = _relationship_record(rel)
        record["source"] = source_canonical
        record["target"] = target_canonical
        record["source_original"] = source
        record["target_original"] = target
        normalized.append(record)

    fallbacks = repair_connectivity(materialized, normalized)
    result = {
        "entities": list(materialized.values()),
        "relationships": normalized + fallbacks,
    }
    LOGGER.info(
        "Normalized network: %d entities, %d relationships (%d fallback)",
        len(result["entities"]),
        len(result["relationships"]),
        len(fallbacks),
    )
    return result


__all__ = [
    "DEFAULT_ENTITY_TYPE",
    "FALLBACK_RELATIONSHIP",
    "RELATIONSHIP_DEFAULTS",
    "UNKNOWN_ROLE",
    "normalize_network_data",
    "repair_connectivity",
    "select_hub",
]
