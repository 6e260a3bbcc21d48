"""Display hints (node colors, edge colors and widths) for leader networks."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping

from leadernet.network.models import DisplayHints, EdgeStyle, NetworkGraph, NodeStyle

DEFAULT_COLOR = "#A0AEC0"
NEGATIVE_COLOR = "#F56565"
MIN_EDGE_WIDTH = 1.0
MAX_EDGE_WIDTH = 3.0


class EntityCategory(str, Enum):
    POLITICIAN = "politician"
    GOVERNMENT = "government"
    ORGANIZATION = "organization"
    BUSINESS = "business"
    MILITARY = "military"
    MEDIA = "media"
    ACADEMIC = "academic"
    RELIGIOUS = "religious"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: Any) -> "EntityCategory":
        """Map a free-form type string onto a known category (``OTHER`` otherwise)."""

        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.OTHER


class RelationshipCategory(str, Enum):
    ALLIANCE = "alliance"
    FAMILY = "family"
    PROFESSIONAL = "professional"
    POLITICAL = "political"
    ECONOMIC = "economic"
    RIVAL = "rival"
    CONFLICT = "conflict"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: Any) -> "RelationshipCategory":
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.OTHER


_ENTITY_COLORS = {
    EntityCategory.POLITICIAN: "#4299E1",
    EntityCategory.GOVERNMENT: "#48BB78",
    EntityCategory.ORGANIZATION: "#ED8936",
    EntityCategory.BUSINESS: "#9F7AEA",
    EntityCategory.MILITARY: "#F56565",
    EntityCategory.MEDIA: "#ECC94B",
    EntityCategory.ACADEMIC: "#38B2AC",
    EntityCategory.RELIGIOUS: "#667EEA",
}

_RELATIONSHIP_COLORS = {
    RelationshipCategory.ALLIANCE: "#48BB78",
    RelationshipCategory.FAMILY: "#4299E1",
    RelationshipCategory.PROFESSIONAL: "#9F7AEA",
    RelationshipCategory.POLITICAL: "#ED8936",
    RelationshipCategory.ECONOMIC: "#667EEA",
    RelationshipCategory.RIVAL: NEGATIVE_COLOR,
    RelationshipCategory.CONFLICT: NEGATIVE_COLOR,
}


def entity_color(entity_type: Any) -> str:
    return _ENTITY_COLORS.get(EntityCategory.from_value(entity_type), DEFAULT_COLOR)


def relationship_color(relationship_type: Any, sentiment: Any = None) -> str:
    """Edge color; negative sentiment is red whatever the relationship type."""

    if isinstance(sentiment, str) and sentiment.strip().lower() == "negative":
        return NEGATIVE_COLOR
    return _RELATIONSHIP_COLORS.get(RelationshipCategory.from_value(relationship_type), DEFAULT_COLOR)


def edge_width(strength: Any) -> float:
    """Clamp ``strength`` into the renderable stroke range (non-numeric -> minimum)."""

    try:
        value = float(strength)
    except (TypeError, ValueError):
        return MIN_EDGE_WIDTH
    if value != value:  # NaN
        return MIN_EDGE_WIDTH
    return min(max(value, MIN_EDGE_WIDTH), MAX_EDGE_WIDTH)


def _field(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def build_display_hints(graph: NetworkGraph | Mapping[str, Iterable[Any]]) -> DisplayHints:
    """Compute node and edge styling for a normalized graph.

    Accepts either a :class:`NetworkGraph` or the plain dict returned by
    :func:`leadernet.normalization.normalize_network_data`.
    """

    if isinstance(graph, NetworkGraph):
        entities: Iterable[Any] = graph.entities
        relationships: Iterable[Any] = graph.relationships
    else:
        entities = graph.get("entities") or []
        relationships = graph.get("relationships") or []

    nodes = [
        NodeStyle(name=str(_field(entity, "name")), color=entity_color(_field(entity, "type")))
        for entity in entities
    ]
    edges = [
        EdgeStyle(
            source=str(_field(rel, "source")),
            target=str(_field(rel, "target")),
            color=relationship_color(_field(rel, "type"), _field(rel, "sentiment")),
            width=edge_width(_field(rel, "strength")),
        )
        for rel in relationships
    ]
    return DisplayHints(nodes=nodes, edges=edges)


__all__ = [
    "DEFAULT_COLOR",
    "EntityCategory",
    "RelationshipCategory",
    "build_display_hints",
    "edge_width",
    "entity_color",
    "relationship_color",
]
