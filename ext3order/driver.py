"""Run orchestration: ingest, extract, build the file graph, sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from .config import DEFAULT_NAMESPACES, OrderConfig
from .errors import EmptyInputError
from .extractors import Extractor, ScannedSource, discover_extractors
from .graph import build_file_graph
from .logging import get_logger
from .models import ClassDeclaration, FileDependency, FileGraph, Finding, SourceFile
from .sequencer import sequence
from .symbols import SymbolTable


@dataclass
class OrderingContext:
    """Mutable state owned by a single run."""

    base_dir: Path
    files: Dict[str, SourceFile] = field(default_factory=dict)
    symbols: SymbolTable = field(default_factory=SymbolTable)
    file_edges: List[FileDependency] = field(default_factory=list)

    def ingest(self, file: SourceFile) -> None:
        if file.is_empty:
            raise EmptyInputError(file.identity)
        self.files[file.identity] = file

    def record(self, finding: Finding) -> None:
        if isinstance(finding, ClassDeclaration):
            self.symbols.declare(finding.name, finding.source, finding.depends_on)
        elif isinstance(finding, FileDependency):
            if finding.source != finding.target:
                self.file_edges.append(finding)
        else:
            raise TypeError(f"Unsupported extractor finding: {finding!r}")


@dataclass
class OrderingResult:
    """Outcome of a successful run."""

    files: List[SourceFile]
    graph: FileGraph
    symbols: SymbolTable

    @property
    def order(self) -> List[str]:
        return [file.identity for file in self.files]


class Sequencer:
    """Orders source files so every base class precedes its subclasses."""

    def __init__(
        self,
        extractors: Optional[Iterable[Extractor]] = None,
        *,
        base_dir: Path | None = None,
        namespaces: Sequence[str] = DEFAULT_NAMESPACES,
    ) -> None:
        if extractors is None:
            extractors = discover_extractors(namespaces=namespaces)
        self.extractors = list(extractors)
        self.base_dir = base_dir
        self.logger = get_logger("driver")

    @classmethod
    def from_config(cls, config: OrderConfig) -> "Sequencer":
        extractors = discover_extractors(
            config.extractors.enabled or None, namespaces=config.namespaces
        )
        return cls(extractors, base_dir=config.base_dir)

    def run(self, files: Iterable[SourceFile]) -> OrderingResult:
        """Order ``files``; raises an ``OrderingError`` before producing any output."""
        base_dir = Path(self.base_dir) if self.base_dir is not None else Path.cwd()
        context = OrderingContext(base_dir=base_dir)
        for file in files:
            context.ingest(file)
        self.logger.debug("Ingested %d files", len(context.files))

        for file in context.files.values():
            self._analyse(context, file)
        self.logger.debug(
            "Found %d classes and %d file directives",
            len(context.symbols),
            len(context.file_edges),
        )

        identities = list(context.files)
        graph = build_file_graph(
            context.symbols, identities, context.file_edges, base_dir=base_dir
        )
        order = sequence(graph, identities)
        return OrderingResult(
            files=[context.files[identity] for identity in order],
            graph=graph,
            symbols=context.symbols,
        )

    def _analyse(self, context: OrderingContext, file: SourceFile) -> None:
        source = ScannedSource(file=file, base_dir=context.base_dir)
        for extractor in self.extractors:
            if not extractor.supports(source):
                continue
            for finding in extractor.extract(source):
                context.record(finding)


def order_files(files: Iterable[SourceFile], **options: object) -> List[SourceFile]:
    """Convenience wrapper returning ``files`` in dependency-first order."""
    return Sequencer(**options).run(files).files  # type: ignore[arg-type]


__all__ = ["OrderingContext", "OrderingResult", "Sequencer", "order_files"]
