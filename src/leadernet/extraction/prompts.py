"""Prompt catalog for network extraction, insights, search and scenarios."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PromptTemplate:
    """System message plus a ``str.format`` template for the user turn."""

    slug: str
    system_message: str
    template: str

    def render(self, **values: object) -> str:
        return self.template.format(**values)


_NETWORK_SCHEMA = """
{{
  "entities": [
    {{"name": "entity name", "type": "person/organization/location", "role": "brief description of their role"}}
  ],
  "relationships": [
    {{
      "source": "entity1 name",
      "target": "entity2 name",
      "type": "relationship type (ally, opponent, advisor, etc.)",
      "sentiment": "positive/negative/neutral",
      "strength": 1-5 scale,
      "description": "brief description of the relationship"
    }}
  ]
}}
""".strip()

NETWORK_EXTRACTION = PromptTemplate(
    slug="network",
    system_message="You are a political network analyzer. Extract relationships and sentiments from text.",
    template=(
        "Analyze the following text and extract political relationships and sentiments.\n"
        "Format the output as JSON with the following structure:\n"
        f"{_NETWORK_SCHEMA}\n\n"
        "Return only the JSON object.\n\n"
        "Text to analyze:\n{text}"
    ),
)

CONNECTION_EXTRACTION = PromptTemplate(
    slug="connections",
    system_message="""
You are a political network analyzer that extracts relationships from text.
For each connection identify the connected entity (person, organization, country, etc.), the
relationship type (ally, rival, family, advisor, etc.), the sentiment (positive, neutral,
negative), a strength rating on a 1-5 scale and a brief description. Respond with a single JSON
object with the keys "entities", "relationships" and "sources" (brief source attributions).
Every relationship must connect two listed entities. Never add explanations outside the JSON.
""".strip(),
    template=(
        "Extract the top {num_connections} most important connections for {leader_name} "
        "from the search results below. Include {leader_name} in the entities.\n\n"
        "Search results:\n{text}"
    ),
)

NETWORK_INSIGHTS = PromptTemplate(
    slug="insights",
    system_message="You are a political network analysis expert. Provide insights about political networks.",
    template=(
        "Analyze this political network and provide insights:\n{network}\n\n"
        "Provide analysis as a JSON object with the keys \"key_players\", "
        "\"relationship_patterns\", \"vulnerabilities\" and \"evolution_suggestions\", "
        "each holding a list."
    ),
)

CONNECTION_INSIGHTS = PromptTemplate(
    slug="connection_insights",
    system_message=(
        "You are a political network analyst that provides insights about political figures "
        "and their relationships."
    ),
    template=(
        "Analyze this political network for {leader_name} and generate 3-5 key insights about the "
        "leader's connections. Focus on patterns, influential connections and potential implications.\n\n"
        "Network:\n{network}\n\n"
        "Respond with JSON: {{\"insights\": [{{\"title\": \"Insight title\", \"description\": \"Supporting evidence\"}}]}}"
    ),
)

CONNECTION_SEARCH = PromptTemplate(
    slug="search",
    system_message="""
You are a political analysis assistant that provides accurate information about political figures
and their relationships. Answer a search query with 3-5 short factual excerpts, formatted as
plain text. Highlight the specific people, organizations or entities connected to the leader and
focus on allies, adversaries and other important relationships.
""".strip(),
    template="{query}",
)

SCENARIO_ANALYSIS = PromptTemplate(
    slug="scenario",
    system_message="You are a political network analysis system specializing in scenario planning.",
    template="""
You are a political network analyzer specializing in scenario planning. Analyze the following
hypothetical scenario based on the provided network data for {leader_name}.

CURRENT NETWORK SUMMARY:
Top Entities:
{entity_summary}

Top Relationships:
{relationship_summary}

SCENARIO QUESTION:
{question}

Provide a comprehensive analysis in the following format:
Summary: A brief overview of the scenario's potential impact
Network Vulnerabilities: Critical vulnerabilities or areas of potential political disruption within the leader's network
Network Impact: How the leader's network structure would change in response to the scenario
Political Outcomes: Immediate consequences and long-term implications for the leader's position and influence
Geopolitical Strategy Implications: How the network changes would affect foreign policy, diplomatic positioning and strategic calculations
Key Entities Affected: One line per entity as "Name: impact"
Key Relationships Affected: One line per relationship as "Source → Target: change"

Keep the answers succinct.
""".strip(),
)


# ``{name}`` is replaced with the leader being searched.
SEARCH_QUERY_TEMPLATES = (
    "{name} top political allies",
    "{name} closest advisors cabinet members",
    "{name} key political relationships",
    "{name} family members political connections",
    "{name} political rivals opponents",
)
