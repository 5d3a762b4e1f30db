"""Extractor for assignment-style ``X = Ext.extend(Parent, {...})`` calls."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from .base import Extractor, ScannedSource
from .utils import IDENTIFIER, namespace_pattern
from ..config import DEFAULT_NAMESPACES
from ..logging import get_logger
from ..models import ClassDeclaration, Finding
from ..scanning import BlockScanner

logger = get_logger("extractors.extend")


class ExtendExtractor(Extractor):
    """Finds ``Identifier = NS.extend(ParentIdentifier`` declarations."""

    name = "extend"

    def __init__(self, namespaces: Sequence[str] = DEFAULT_NAMESPACES) -> None:
        namespace = namespace_pattern(namespaces)
        self._start_re = re.compile(
            rf"(?<![\w$.])({IDENTIFIER})\s*=\s*{namespace}\s*\.\s*extend\s*\(\s*({IDENTIFIER})"
        )
        self._token_re = re.compile(rf"{namespace}\s*\.\s*extend\s*\(")

    def supports(self, source: ScannedSource) -> bool:
        return "extend" in source.text

    def extract(self, source: ScannedSource) -> Iterable[Finding]:
        scanner = BlockScanner(source.code, self._start_re, self._token_re, source.braces)
        for span in scanner.spans():
            current, parent = span.match.group(1), span.match.group(2)
            if not span.balanced:
                logger.debug("Skipping unbalanced extend block for %s in %s", current, source.identity)
                continue
            if current == parent:
                logger.debug("Ignoring self-extension of %s in %s", current, source.identity)
                continue
            logger.debug("Adding class to dependencies: %s", current)
            yield ClassDeclaration(current, source.identity, (parent,), self.name)
