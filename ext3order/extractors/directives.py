"""Extractor for explicit ``#dependsFile`` directives."""

from __future__ import annotations

import re
from typing import Iterable

from .base import Extractor, ScannedSource
from .utils import clean_name
from ..models import FileDependency, Finding
from ..paths import resolve_path

_DEPENDS_FILE_RE = re.compile(r"\W+#dependsFile\s+(.+)")


class FileDirectiveExtractor(Extractor):
    """Emits direct file edges; targets resolve against the run's base directory."""

    name = "directives"

    def extract(self, source: ScannedSource) -> Iterable[Finding]:
        for line in source.lines():
            match = _DEPENDS_FILE_RE.search(line)
            if not match:
                continue
            relative = clean_name(match.group(1))
            if not relative:
                continue
            yield FileDependency(
                source=source.identity,
                target=resolve_path(relative, source.base_dir),
                origin=self.name,
            )
