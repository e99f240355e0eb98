"""Tests for the algorithm registry."""

import pytest

from algorithms import (
    REGISTRY,
    StructureKind,
    algorithms_by_family,
    families,
    get_algorithm,
    list_algorithms,
    require_algorithm,
)
from engine import materialize

from conftest import assert_well_formed

KINDS = {k.value for k in StructureKind}


@pytest.mark.parametrize("key", sorted(REGISTRY))
def test_sample_form_produces_a_well_formed_trace(key: str) -> None:
    info = REGISTRY[key]
    trace = materialize(info.produce(info.sample_form()), label=info.label)
    assert_well_formed(trace)
    assert trace.label == info.label
    assert {s.kind for s in trace} <= KINDS
    for snap in trace:
        if snap.pseudocode_line is not None:
            assert 0 <= snap.pseudocode_line < len(info.pseudocode)


@pytest.mark.parametrize("key", sorted(REGISTRY))
def test_sample_trace_is_deterministic(key: str) -> None:
    info = REGISTRY[key]
    first = materialize(info.produce(info.sample_form()))
    second = materialize(info.produce(info.sample_form()))
    assert [s.to_dict() for s in first] == [s.to_dict() for s in second]


def test_registry_keys_match_entries() -> None:
    assert all(key == info.key for key, info in REGISTRY.items())
    assert len(REGISTRY) == 31


def test_lookup_helpers() -> None:
    assert get_algorithm("bfs") is REGISTRY["bfs"]
    assert get_algorithm("nope") is None
    assert require_algorithm("dfs").label == "Depth-First Search"
    with pytest.raises(ValueError, match="Unknown algorithm"):
        require_algorithm("nope")
    assert list_algorithms()[0].key == "linear_search"


def test_families_in_registry_order() -> None:
    assert families() == [
        "searching",
        "sorting",
        "techniques",
        "graphs",
        "dynamic-programming",
        "trees",
        "tries",
        "stacks",
        "queues",
        "linked-lists",
        "bit-manipulation",
    ]
    assert [a.key for a in algorithms_by_family("graphs")] == ["bfs", "dfs", "dijkstra"]


def test_sample_forms_cover_every_field() -> None:
    for info in REGISTRY.values():
        assert set(info.sample_form()) == {f.name for f in info.fields}
        assert info.complexity_time
