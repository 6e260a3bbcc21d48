"""Unit tests for leadernet.sources.search."""

from __future__ import annotations

from leadernet.extraction.prompts import CONNECTION_SEARCH
from leadernet.sources.search import ConnectionSearcher, build_search_queries


class _StubLLM:
    def __init__(self) -> None:
        self.prompts: list[tuple[str, str]] = []

    def complete(self, system: str, prompt: str) -> str:
        self.prompts.append((system, prompt))
        if "rivals" in prompt:
            return "   "
        return f"Excerpt for {prompt}"


def test_search_queries_cover_each_relationship_kind():
    assert build_search_queries("Xi Jinping") == [
        "Xi Jinping top political allies",
        "Xi Jinping closest advisors cabinet members",
        "Xi Jinping key political relationships",
        "Xi Jinping family members political connections",
        "Xi Jinping political rivals opponents",
    ]


def test_search_skips_blank_answers():
    llm = _StubLLM()
    excerpts = ConnectionSearcher(llm_client=llm).search("Xi Jinping")

    assert len(llm.prompts) == 5
    assert all(system == CONNECTION_SEARCH.system_message for system, _ in llm.prompts)
    assert len(excerpts) == 4
    assert excerpts[0] == "Excerpt for Xi Jinping top political allies"
