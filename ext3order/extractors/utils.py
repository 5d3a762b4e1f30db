"""Shared helpers for extractor patterns."""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence

# Dotted JavaScript identifier such as ``App.view.Main``.
IDENTIFIER = r"[\w$][\w$.]*"

_QUOTED_NAME_RE = re.compile(r"""(['"])(""" + IDENTIFIER + r""")\1""")
_QUOTED_VALUE_RE = re.compile(r"""(['"])(""" + IDENTIFIER + r""")\1(?!\s*:)""")


def namespace_pattern(namespaces: Sequence[str]) -> str:
    """Return a regex alternation for the configured base expressions."""
    if not namespaces:
        raise ValueError("At least one namespace is required")
    parts = []
    for namespace in namespaces:
        pieces = [re.escape(piece) for piece in namespace.split(".") if piece]
        parts.append(r"\s*\.\s*".join(pieces))
    return "(?:" + "|".join(parts) + ")"


def quoted_names(text: str) -> List[str]:
    """Return every quoted identifier in ``text`` without its quotes."""
    return [match.group(2) for match in _QUOTED_NAME_RE.finditer(text)]


def quoted_values(text: str) -> List[str]:
    """Like :func:`quoted_names` but skips object keys (``'key': ...``)."""
    return [match.group(2) for match in _QUOTED_VALUE_RE.finditer(text)]


def clean_name(raw: str) -> str:
    """Normalise a captured class or path token."""
    value = raw.strip()
    if value.endswith("*/"):
        value = value[:-2].rstrip()
    return value.strip("{}").strip().strip("'\"")


def unique(items: Iterable[str]) -> List[str]:
    seen: dict[str, None] = {}
    for item in items:
        if item:
            seen.setdefault(item, None)
    return list(seen)
