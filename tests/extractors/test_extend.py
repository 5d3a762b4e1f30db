"""Tests for the assignment-style Ext.extend extractor."""

from __future__ import annotations

import textwrap
from pathlib import Path

from ext3order.extractors import ExtendExtractor, ScannedSource
from ext3order.models import ClassDeclaration, SourceFile


def _extract(text: str, tmp_path: Path, extractor: ExtendExtractor | None = None) -> list:
    source = ScannedSource(
        file=SourceFile("a.js", textwrap.dedent(text).lstrip("\n")), base_dir=tmp_path
    )
    return list((extractor or ExtendExtractor()).extract(source))


def test_extend_declarations_are_found(tmp_path: Path) -> None:
    text = """
        App.Base = Ext.extend(Ext.Panel, {
            initComponent: function () {
                var tpl = '{';
                App.Base.superclass.initComponent.call(this);
            }
        });
        App.Child = Ext.extend(App.Base, { title: 'child' });
    """

    assert _extract(text, tmp_path) == [
        ClassDeclaration("App.Base", "a.js", ("Ext.Panel",), "extend"),
        ClassDeclaration("App.Child", "a.js", ("App.Base",), "extend"),
    ]


def test_self_extension_yields_nothing(tmp_path: Path) -> None:
    assert _extract("X = Ext.extend(X, { a: 1 });\n", tmp_path) == []


def test_unbalanced_declaration_is_skipped(tmp_path: Path) -> None:
    text = "Broken = Ext.extend(Base, {\n    a: function () {\n"
    assert _extract(text, tmp_path) == []


def test_commented_out_declarations_are_ignored(tmp_path: Path) -> None:
    text = """
        // Old = Ext.extend(Gone, {});
        /* Older = Ext.extend(Gone, {}); */
        New = Ext.extend(Base, {});
    """
    findings = _extract(text, tmp_path)
    assert [finding.name for finding in findings] == ["New"]


def test_multiline_whitespace_between_tokens(tmp_path: Path) -> None:
    text = "var Foo =\n    Ext\n    .extend(\n        Bar, {});\n"
    findings = _extract(text, tmp_path)
    assert findings == [ClassDeclaration("Foo", "a.js", ("Bar",), "extend")]


def test_custom_namespaces(tmp_path: Path) -> None:
    extractor = ExtendExtractor(["Ext", "Lib.core"])
    text = "Foo = Lib.core.extend(Bar, {});\nBaz = Ext.extend(Foo, {});\n"

    findings = _extract(text, tmp_path, extractor)

    assert [(f.name, f.depends_on) for f in findings] == [("Foo", ("Bar",)), ("Baz", ("Foo",))]
