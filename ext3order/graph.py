"""Lowering of class dependencies into a file dependency graph."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence

from .logging import get_logger
from .models import FileDependency, FileGraph
from .paths import resolve_path
from .symbols import SymbolTable

logger = get_logger("graph")


def build_file_graph(
    symbols: SymbolTable,
    identities: Sequence[str],
    file_edges: Iterable[FileDependency] = (),
    *,
    base_dir: Optional[Path] = None,
) -> FileGraph:
    """Return ``identity -> identities it must follow`` for every ingested file.

    Class dependencies that never resolve to a defining file are dropped, as
    are directive targets that are not part of ``identities``.
    """
    graph: Dict[str, Dict[str, None]] = {identity: {} for identity in identities}

    def _add(source: str, target: str) -> None:
        if source == target:
            return
        graph.setdefault(source, {}).setdefault(target, None)

    for class_name, file, dependencies in symbols.items():
        for dependency in dependencies:
            target = symbols.resolve(dependency)
            if target is None:
                logger.debug("Dropping unresolved reference %s -> %s", class_name, dependency)
                continue
            _add(file, target)

    anchor = base_dir if base_dir is not None else Path.cwd()
    by_path = {resolve_path(identity, anchor): identity for identity in identities}
    for edge in file_edges:
        target = by_path.get(resolve_path(edge.target, anchor))
        if target is None:
            logger.debug("Dropping directive from %s to unknown file %s", edge.source, edge.target)
            continue
        _add(edge.source, target)

    return {identity: list(targets) for identity, targets in graph.items()}


__all__ = ["build_file_graph"]
