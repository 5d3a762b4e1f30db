"""Extractor for ``@class`` / ``@extends`` doc-comment tags."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from .base import Extractor, ScannedSource
from .utils import clean_name
from ..models import ClassDeclaration, Finding

_CLASS_TAG_RE = re.compile(r"\W+@class\s+(.+)")
_EXTENDS_TAG_RE = re.compile(r"\W+@extends\s+(.+)")


def _tag_value(raw: str) -> str:
    # Only the first token is the name; the rest of the line is description.
    cleaned = clean_name(raw)
    return cleaned.split()[0] if cleaned else ""


class AnnotationExtractor(Extractor):
    """Pairs each ``@extends`` tag with the most recent ``@class`` in the file."""

    name = "annotations"

    def extract(self, source: ScannedSource) -> Iterable[Finding]:
        current: Optional[str] = None
        for line in source.lines():
            class_match = _CLASS_TAG_RE.search(line)
            if class_match:
                current = _tag_value(class_match.group(1)) or None
                if current:
                    yield ClassDeclaration(current, source.identity, (), self.name)

            extends_match = _EXTENDS_TAG_RE.search(line)
            if extends_match and current:
                base = _tag_value(extends_match.group(1))
                if base:
                    yield ClassDeclaration(current, source.identity, (base,), self.name)
