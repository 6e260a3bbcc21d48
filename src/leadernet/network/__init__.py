"""Network models, layering and display hints."""

from .layering import select_connection_layers
from .models import (
    ConnectionsRequest,
    ConnectionsResult,
    DisplayHints,
    LeaderNetworkRequest,
    LeaderNetworkResult,
    NetworkEntity,
    NetworkGraph,
    NetworkRelationship,
    NewsArticle,
)
from .palette import EntityCategory, RelationshipCategory, build_display_hints

__all__ = [
    "ConnectionsRequest",
    "ConnectionsResult",
    "DisplayHints",
    "EntityCategory",
    "LeaderNetworkRequest",
    "LeaderNetworkResult",
    "NetworkEntity",
    "NetworkGraph",
    "NetworkRelationship",
    "NewsArticle",
    "RelationshipCategory",
    "build_display_hints",
    "select_connection_layers",
]
