"""Tests for ext3order.sequencer."""

from __future__ import annotations

import pytest

from ext3order.errors import CycleDetectedError
from ext3order.sequencer import sequence, toposort


def test_toposort_lists_dependents_first() -> None:
    assert toposort([("b", "a"), ("c", "b")]) == ["c", "b", "a"]


def test_sequence_places_dependencies_first() -> None:
    graph = {"Top": ["Mid"], "Base": [], "Mid": ["Base"]}
    assert sequence(graph, ["Top", "Base", "Mid"]) == ["Base", "Mid", "Top"]


def test_isolated_files_follow_in_ingestion_order() -> None:
    graph = {"x": [], "b": ["a"], "a": [], "y": []}
    assert sequence(graph, ["x", "b", "a", "y"]) == ["a", "b", "x", "y"]


def test_sequence_defaults_to_graph_order() -> None:
    assert sequence({"one": [], "two": []}) == ["one", "two"]


def test_every_edge_is_respected_and_order_is_stable() -> None:
    graph = {
        "app": ["view", "store"],
        "view": ["base"],
        "store": ["model", "base"],
        "model": ["base"],
        "base": [],
        "lonely": [],
    }
    order = sequence(graph, list(graph))

    assert sorted(order) == sorted(graph)
    for node, deps in graph.items():
        for dep in deps:
            assert order.index(dep) < order.index(node)
    assert sequence(graph, list(graph)) == order


def test_cycle_is_rejected() -> None:
    with pytest.raises(CycleDetectedError) as excinfo:
        sequence({"a": ["b"], "b": ["a"]}, ["a", "b"])

    cycle = excinfo.value.cycle
    assert set(cycle) == {"a", "b"}
    assert cycle[0] == cycle[-1]
    assert excinfo.value.edge == (cycle[0], cycle[1])
    assert "a" in str(excinfo.value) and "b" in str(excinfo.value)


def test_reported_cycle_follows_dependency_edges() -> None:
    graph = {"d": ["a"], "a": ["b"], "b": ["c"], "c": ["a"]}

    with pytest.raises(CycleDetectedError) as excinfo:
        sequence(graph)

    cycle = excinfo.value.cycle
    assert set(cycle) == {"a", "b", "c"}
    for node, dep in zip(cycle, cycle[1:]):
        assert dep in graph[node]
