"""Core data models shared across ext3order components."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class SourceFile:
    """A source item handed to the sequencer: identity plus raw content."""

    identity: str
    content: Optional[Union[str, bytes]]

    @property
    def is_empty(self) -> bool:
        return self.content is None or len(self.content) == 0

    @property
    def text(self) -> str:
        if self.content is None:
            return ""
        if isinstance(self.content, bytes):
            return self.content.decode("utf-8", errors="replace")
        return self.content


@dataclass(frozen=True)
class ClassDeclaration:
    """A class found in a file together with the class names it depends on."""

    name: str
    source: str
    depends_on: Tuple[str, ...] = ()
    origin: str = ""


@dataclass(frozen=True)
class FileDependency:
    """A direct file-level edge: ``source`` must follow ``target``."""

    source: str
    target: str
    origin: str = ""


Finding = Union[ClassDeclaration, FileDependency]

# identity -> identities that must come before it
FileGraph = Dict[str, List[str]]
