"""Unit tests for leadernet.network.layering."""

from leadernet.network.layering import LEADER_ROLE, select_connection_layers


def _extraction():
    return {
        "entities": [
            {"name": "Xi Jinping", "type": "politician", "role": "President"},
            {"name": "Li Qiang", "type": "politician", "role": "Premier"},
        ],
        "relationships": [
            {"source": "Xi Jinping", "target": "Li Qiang", "strength": 5},
            {"source": "Wang Yi", "target": "xi jinping", "strength": 4},
            {"source": "Xi Jinping", "target": "Li Qiang", "strength": 2},
            {"source": "Xi Jinping", "target": "Cai Qi", "strength": 3},
            {"source": "Li Qiang", "target": "Wang Yi", "strength": 2},
            {"source": "Wang Yi", "target": "Antony Blinken", "strength": 1},
            {"source": "Outsider", "target": "Stranger", "strength": 5},
            {"source": None, "target": "Xi Jinping", "strength": 5},
        ],
        "sources": ["Reuters"],
    }


def test_primary_layer_keeps_strongest_edge_per_counterpart():
    result = select_connection_layers(_extraction(), "Xi Jinping", 2)

    primary = result["relationships"][: result["meta"]["primary_connections"]]
    assert [(rel["source"], rel["target"], rel["strength"]) for rel in primary] == [
        ("Xi Jinping", "Li Qiang", 5),
        ("Wang Yi", "xi jinping", 4),
    ]


def test_secondary_and_tertiary_layers():
    result = select_connection_layers(_extraction(), "Xi Jinping", 2)

    meta = result["meta"]
    assert meta["primary_connections"] == 2
    # duplicate Xi -> Li edge and Li -> Wang both join primary entities
    assert meta["secondary_connections"] == 2
    # Xi -> Cai Qi (beyond the limit) and Wang -> Blinken touch the primary set
    assert meta["tertiary_connections"] == 2
    pairs = {(rel["source"], rel["target"]) for rel in result["relationships"]}
    assert ("Outsider", "Stranger") not in pairs
    assert meta["total_relationships"] == len(result["relationships"]) == 6


def test_missing_endpoints_are_added_as_connections():
    result = select_connection_layers(_extraction(), "Xi Jinping", 2)

    added = {entity["name"]: entity for entity in result["entities"][2:]}
    assert set(added) == {"Wang Yi", "Cai Qi", "Antony Blinken"}
    assert added["Cai Qi"] == {"name": "Cai Qi", "type": "person", "role": "Connection"}
    assert result["sources"] == ["Reuters"]


def test_leader_is_added_when_missing():
    result = select_connection_layers({"entities": [], "relationships": []}, "Jacinda Ardern", 5)

    assert result["entities"] == [{"name": "Jacinda Ardern", "type": "politician", "role": LEADER_ROLE}]
    assert result["relationships"] == []
    assert result["meta"]["primary_connections"] == 0


def test_input_is_not_mutated():
    extraction = _extraction()
    select_connection_layers(extraction, "Xi Jinping", 1)
    assert len(extraction["entities"]) == 2
    assert len(extraction["relationships"]) == 8
