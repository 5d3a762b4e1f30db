"""CLI behaviour tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from ext3order.cli import _build_parser, main


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    src = tmp_path / "mocks"
    _write(src / "a_child.js", "App.Child = Ext.extend(App.Parent, {});\n")
    _write(src / "b_parent.js", "App.Parent = Ext.extend(Ext.Panel, {});\n")
    _write(src / "c_plain.js", "var plain = 1;\n")
    return src


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "order"])
    assert args.verbose is True
    assert args.command == "order"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["classes", "--verbose"])
    assert args.verbose is True
    assert args.command == "classes"


def test_cli_collects_repeatable_options() -> None:
    parser = _build_parser()
    args = parser.parse_args(
        ["order", "src", "--namespace", "Ext", "--namespace", "App", "--extractor", "extend"]
    )
    assert args.path == "src"
    assert args.namespaces == ["Ext", "App"]
    assert args.extractors == ["extend"]


def test_order_prints_dependency_first_paths(project: Path, capsys) -> None:
    main(["order", str(project)])

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["mocks/b_parent.js", "mocks/a_child.js", "mocks/c_plain.js"]


def test_order_writes_concatenated_output(project: Path, tmp_path: Path, capsys) -> None:
    output = tmp_path / "deploy" / "debug.js"

    main(["order", str(project), "--output", str(output)])

    bundle = output.read_text(encoding="utf-8")
    assert bundle.index("App.Parent =") < bundle.index("App.Child =")
    assert "Wrote 3 files" in capsys.readouterr().out


def test_classes_lists_symbols(project: Path, capsys) -> None:
    main(["classes", str(project)])

    out = capsys.readouterr().out
    assert "App.Child\tmocks/a_child.js\t<- App.Parent" in out
    assert "App.Parent\tmocks/b_parent.js\t<- Ext.Panel" in out


def test_cycle_exits_with_error(project: Path, capsys) -> None:
    _write(project / "b_parent.js", "App.Parent = Ext.extend(App.Child, {});\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["order", str(project)])

    assert excinfo.value.code == 1
    assert "Cyclic dependency" in capsys.readouterr().err


def test_missing_directory_exits_with_error(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["order", str(tmp_path / "missing")])
    assert excinfo.value.code == 1


def test_config_verbose_enables_debug_logging(project: Path) -> None:
    _write(project / ".ext3order.yml", "verbose: true\n")

    main(["order", str(project)])

    assert logging.getLogger("ext3order").level == logging.DEBUG
