"""Extractor for declarative ``Ext.define('Name', {...})`` registrations."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence

from .base import Extractor, ScannedSource
from .utils import IDENTIFIER, namespace_pattern, quoted_names, quoted_values, unique
from ..config import DEFAULT_NAMESPACES
from ..logging import get_logger
from ..models import ClassDeclaration, Finding
from ..scanning import BlockScanner

logger = get_logger("extractors.define")


def _key(name: str) -> str:
    return rf"""(?<![\w$.])['"]?{name}['"]?\s*:\s*"""


_SINGLE = rf"""(['"])({IDENTIFIER})\1"""

_EXTEND_RE = re.compile(_key("extend") + _SINGLE)
_OVERRIDE_RE = re.compile(_key("override") + _SINGLE)
_MODEL_RE = re.compile(_key("model") + _SINGLE)
_REQUIRES_RE = re.compile(_key("requires") + rf"""(\[[^\]]*\]|['"]{IDENTIFIER}['"])""")
_MIXINS_RE = re.compile(_key("mixins") + rf"""(\[[^\]]*\]|\{{[^}}]*\}}|['"]{IDENTIFIER}['"])""")


def _single(pattern: re.Pattern[str], body: str) -> List[str]:
    match = pattern.search(body)
    return [match.group(2)] if match else []


def _listed(pattern: re.Pattern[str], body: str) -> List[str]:
    match = pattern.search(body)
    if not match:
        return []
    value = match.group(1)
    if value.startswith("{"):
        return quoted_values(value)
    return quoted_names(value)


class DefineExtractor(Extractor):
    """Collects ``extend``, ``override``, ``requires``, ``mixins`` and ``model`` targets."""

    name = "define"

    def __init__(self, namespaces: Sequence[str] = DEFAULT_NAMESPACES) -> None:
        namespace = namespace_pattern(namespaces)
        self._start_re = re.compile(rf"{namespace}\s*\.\s*define\s*\(")
        self._name_re = re.compile(
            rf"""{namespace}\s*\.\s*define\s*\(\s*(['"])({IDENTIFIER})\1"""
        )

    def supports(self, source: ScannedSource) -> bool:
        return "define" in source.text

    def extract(self, source: ScannedSource) -> Iterable[Finding]:
        scanner = BlockScanner(source.code, self._start_re, counter=source.braces)
        for span in scanner.spans():
            if not span.balanced:
                logger.debug(
                    "Skipping unbalanced define block at offset %d in %s", span.start, source.identity
                )
                continue
            declaration = self._declaration(span.text(source.code), source.identity)
            if declaration is not None:
                logger.debug("Adding class: %s", declaration.name)
                yield declaration

    def _declaration(self, block: str, identity: str) -> Optional[ClassDeclaration]:
        name_match = self._name_re.match(block)
        if name_match is None:
            return None
        name = name_match.group(2)
        body = block[name_match.end() :]
        dependencies = unique(
            _single(_EXTEND_RE, body)
            + _single(_OVERRIDE_RE, body)
            + _listed(_REQUIRES_RE, body)
            + _listed(_MIXINS_RE, body)
            + _single(_MODEL_RE, body)
        )
        return ClassDeclaration(name, identity, tuple(dep for dep in dependencies if dep != name), self.name)
