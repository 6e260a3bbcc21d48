"""Pydantic models describing leader networks and the requests that build them."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NetworkEntity(BaseModel):
    """Canonical entity emitted by the normalizer."""

    model_config = ConfigDict(extra="allow")

    name: str
    type: str = "person"
    role: str = "Unknown"
    original_names: List[str] = Field(default_factory=list)


class NetworkRelationship(BaseModel):
    """Canonical relationship between two entities (real or fallback)."""

    model_config = ConfigDict(extra="allow")

    source: str
    target: str
    type: str = "unknown"
    sentiment: str = "neutral"
    strength: int | float | str | None = 1
    description: str = ""
    source_original: str | None = None
    target_original: str | None = None
    is_fallback: bool = False


class NetworkGraph(BaseModel):
    """Entity/relationship pair exchanged with the presentation layer."""

    entities: List[NetworkEntity] = Field(default_factory=list)
    relationships: List[NetworkRelationship] = Field(default_factory=list)

    @classmethod
    def from_normalized(cls, payload: Dict[str, List[Dict[str, Any]]]) -> "NetworkGraph":
        """Build a graph from :func:`normalize_network_data` output."""

        return cls(
            entities=[NetworkEntity(**entity) for entity in payload.get("entities", [])],
            relationships=[NetworkRelationship(**rel) for rel in payload.get("relationships", [])],
        )


class NodeStyle(BaseModel):
    name: str
    color: str


class EdgeStyle(BaseModel):
    source: str
    target: str
    color: str
    width: float


class DisplayHints(BaseModel):
    """Colors and widths the graph renderer applies to nodes and edges."""

    nodes: List[NodeStyle] = Field(default_factory=list)
    edges: List[EdgeStyle] = Field(default_factory=list)


class NewsArticle(BaseModel):
    """Article metadata returned by the GDELT DOC API."""

    title: str = ""
    url: str | None = None
    source: str | None = None
    published: str | None = None
    tone: float = 0.0
    locations: List[Any] = Field(default_factory=list)
    persons: List[Any] = Field(default_factory=list)
    organizations: List[Any] = Field(default_factory=list)


class LeaderNetworkRequest(BaseModel):
    """Options for building a network from recent news coverage."""

    days_back: int = Field(default=30, ge=1, le=365)
    max_records: int = Field(default=250, ge=1, le=250)
    english_only: bool | None = None


class LeaderNetworkResult(NetworkGraph):
    """Network assembled from news coverage plus generated insights."""

    leader_name: str
    insights: Dict[str, Any] = Field(default_factory=dict)
    display: DisplayHints = Field(default_factory=DisplayHints)
    collection_timestamp: datetime
    data_points_analyzed: int = 0


class ConnectionsRequest(BaseModel):
    """Options for building a leader's top-connection network from web search."""

    leader_name: str = Field(min_length=1)
    num_connections: int | None = Field(default=None, ge=1, le=50)
    english_only: bool = True

    @field_validator("leader_name", mode="after")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("leader_name must not be blank")
        return stripped


class ConnectionsResult(NetworkGraph):
    """Top-connection network plus the search attributions behind it."""

    leader_name: str
    insights: Dict[str, Any] = Field(default_factory=dict)
    display: DisplayHints = Field(default_factory=DisplayHints)
    collection_timestamp: datetime
    top_connections: int
    search_sources: List[str] = Field(default_factory=list)
    layers: Dict[str, int] = Field(default_factory=dict)
    data_points_analyzed: int = 0
