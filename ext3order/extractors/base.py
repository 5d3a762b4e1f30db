"""Base classes for declaration extractors."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Iterable, List

from ..models import Finding, SourceFile
from ..scanning import BraceCounter, strip_comments

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass
class ScannedSource:
    """A source file prepared once for every extractor pass."""

    file: SourceFile
    base_dir: Path
    text: str = field(init=False)

    def __post_init__(self) -> None:
        self.text = self.file.text

    @property
    def identity(self) -> str:
        return self.file.identity

    @cached_property
    def code(self) -> str:
        """The text with comments removed, for code-pattern extractors."""
        return strip_comments(self.text)

    @cached_property
    def braces(self) -> BraceCounter:
        return BraceCounter(self.code)

    def lines(self) -> List[str]:
        return _LINE_BREAK_RE.split(self.text)


class Extractor(ABC):
    """Contract for strategies that find class and file dependencies in a source."""

    name: str = ""

    def supports(self, source: ScannedSource) -> bool:
        """Return True when this extractor should run for the source."""
        return bool(source.text)

    @abstractmethod
    def extract(self, source: ScannedSource) -> Iterable[Finding]:
        """Yield class declarations or file dependencies found in the source."""
