"""Literal and comment stripping plus literal-aware brace counting."""

from __future__ import annotations

import re
from typing import List

# Quoted strings and slash-delimited regex literals. A backslash escapes the
# next character, so an escaped delimiter never closes the literal.
_LITERAL_RE = re.compile(
    r"""'(?:[^'\\\n]|\\.)*'"""
    r'''|"(?:[^"\\\n]|\\.)*"'''
    r"""|/(?:[^/\\\n]|\\.)+/"""
)

_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/|(?:^|[\s;]+)//.*$", re.MULTILINE)


def strip_literals(text: str) -> str:
    """Return ``text`` with string and regex literals removed."""
    return _LITERAL_RE.sub("", text)


def strip_comments(text: str) -> str:
    """Return ``text`` without block comments and ``//`` line comments."""
    return _COMMENT_RE.sub("", text)


class BraceCounter:
    """Counts ``{`` and ``}`` outside of literals for any span of a buffer.

    Literal spans are detected once over the whole buffer and the running
    balance is kept as prefix sums, so every span query is constant time.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        in_literal = bytearray(len(text))
        for match in _LITERAL_RE.finditer(text):
            in_literal[match.start() : match.end()] = b"\x01" * (match.end() - match.start())

        prefix: List[int] = [0]
        running = 0
        for index, char in enumerate(text):
            if not in_literal[index]:
                if char == "{":
                    running += 1
                elif char == "}":
                    running -= 1
            prefix.append(running)
        self._prefix = prefix

    def balance(self, start: int, end: int) -> int:
        """Return open minus close braces within ``[start, end)``."""
        start = max(0, min(start, len(self.text)))
        end = max(start, min(end, len(self.text)))
        return self._prefix[end] - self._prefix[start]

    def is_balanced(self, start: int, end: int) -> bool:
        return self.balance(start, end) == 0


__all__ = ["BraceCounter", "strip_comments", "strip_literals"]
