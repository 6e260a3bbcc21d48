"""Text sources feeding network extraction (GDELT news, connection search)."""

from .gdelt import GdeltNewsClient
from .search import ConnectionSearcher, build_search_queries

__all__ = ["ConnectionSearcher", "GdeltNewsClient", "build_search_queries"]
