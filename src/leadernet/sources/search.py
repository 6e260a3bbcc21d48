"""Gather text about a leader's connections via a fixed set of search queries.

No live web search backend is wired in: each query is answered by the chat
model acting as a search assistant, and the non-empty answers are returned as
excerpts.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from leadernet.extraction.llm_client import NetworkLLMClient
from leadernet.extraction.prompts import CONNECTION_SEARCH, SEARCH_QUERY_TEMPLATES

LOGGER = logging.getLogger(__name__)


def build_search_queries(leader_name: str, templates: Sequence[str] = SEARCH_QUERY_TEMPLATES) -> List[str]:
    return [template.format(name=leader_name) for template in templates]


class ConnectionSearcher:
    """Collect search-style excerpts about allies, advisors, family and rivals."""

    def __init__(self, *, llm_client: NetworkLLMClient | None = None) -> None:
        self.llm_client = llm_client or NetworkLLMClient()

    def search(self, leader_name: str) -> List[str]:
        excerpts: List[str] = []
        for query in build_search_queries(leader_name):
            LOGGER.debug("Executing connection search: %s", query)
            content = self.llm_client.complete(CONNECTION_SEARCH.system_message, CONNECTION_SEARCH.render(query=query))
            if content and content.strip():
                excerpts.append(content.strip())
        LOGGER.info("Connection search for %s produced %d excerpts", leader_name, len(excerpts))
        return excerpts


__all__ = ["ConnectionSearcher", "build_search_queries"]
