"""Tests for ext3order.graph."""

from __future__ import annotations

from pathlib import Path

from ext3order.graph import build_file_graph
from ext3order.models import FileDependency
from ext3order.symbols import SymbolTable


def test_class_dependencies_become_file_edges() -> None:
    table = SymbolTable()
    table.declare("A", "a.js")
    table.declare("B", "b.js", ["A", "Missing"])

    graph = build_file_graph(table, ["a.js", "b.js", "c.js"])

    assert graph == {"a.js": [], "b.js": ["a.js"], "c.js": []}


def test_classes_in_the_same_file_create_no_self_edge() -> None:
    table = SymbolTable()
    table.declare("A", "one.js")
    table.declare("B", "one.js", ["A"])

    assert build_file_graph(table, ["one.js"]) == {"one.js": []}


def test_repeated_dependencies_yield_a_single_edge() -> None:
    table = SymbolTable()
    table.declare("A", "a.js")
    table.declare("A2", "a.js")
    table.declare("B", "b.js", ["A", "A2"])
    table.declare("B", "b.js", ["A"])

    assert build_file_graph(table, ["a.js", "b.js"])["b.js"] == ["a.js"]


def test_directive_edges_are_matched_to_ingested_files(tmp_path: Path) -> None:
    edges = [
        FileDependency("a.js", str(tmp_path / "b.js")),
        FileDependency("a.js", str(tmp_path / "not-ingested.js")),
    ]

    graph = build_file_graph(SymbolTable(), ["a.js", "b.js"], edges, base_dir=tmp_path)

    assert graph == {"a.js": ["b.js"], "b.js": []}


def test_directive_and_class_edges_are_merged(tmp_path: Path) -> None:
    a = str(tmp_path / "a.js")
    b = str(tmp_path / "b.js")
    table = SymbolTable()
    table.declare("B", b)
    table.declare("A", a, ["B"])

    graph = build_file_graph(table, [a, b], [FileDependency(a, b)], base_dir=tmp_path)

    assert graph == {a: [b], b: []}
