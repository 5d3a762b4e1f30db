"""Tests for ext3order.scanning.literals."""

from __future__ import annotations

from ext3order.scanning import BraceCounter, strip_comments, strip_literals


def test_strip_literals_removes_quoted_strings() -> None:
    text = "var a = '{'; var b = \"}\";"
    assert strip_literals(text) == "var a = ; var b = ;"


def test_strip_literals_does_not_stop_at_escaped_quote() -> None:
    text = r"x = 'it\'s {' + y"
    assert strip_literals(text) == "x =  + y"


def test_strip_literals_removes_regex_literals() -> None:
    text = r"var re = /\{+/; {"
    assert strip_literals(text) == "var re = ; {"


def test_strip_comments_removes_block_and_line_comments() -> None:
    text = "/* { */ a(); // {\nb();\n// }\nc();"
    stripped = strip_comments(text)

    assert "{" not in stripped
    assert "}" not in stripped
    assert "b();" in stripped
    assert "c();" in stripped


def test_strip_comments_keeps_urls_inside_strings() -> None:
    text = "var u = 'http://example.com';"
    assert strip_comments(text) == text


def test_brace_counter_ignores_braces_in_literals() -> None:
    text = "a { b '}' } {"
    counter = BraceCounter(text)

    assert counter.balance(0, len(text)) == 1
    assert counter.is_balanced(0, text.rindex("{"))
    assert not counter.is_balanced(0, len(text))


def test_brace_counter_clamps_out_of_range_spans() -> None:
    counter = BraceCounter("{}")
    assert counter.balance(-5, 100) == 0
    assert counter.balance(1, 0) == 0
