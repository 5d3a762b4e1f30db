"""Topological sequencing of the file dependency graph."""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .errors import CycleDetectedError
from .logging import get_logger

logger = get_logger("sequencer")


def sequence(
    graph: Mapping[str, Sequence[str]],
    ingestion_order: Optional[Sequence[str]] = None,
) -> List[str]:
    """Return every file identity in dependency-first order.

    Files that take part in at least one edge are sorted topologically; the
    remaining files follow in ingestion order.
    """
    edges = [(node, dependency) for node, deps in graph.items() for dependency in deps]
    ordered = list(reversed(toposort(edges)))

    placed = set(ordered)
    for identity in ingestion_order if ingestion_order is not None else list(graph):
        if identity not in placed:
            ordered.append(identity)
            placed.add(identity)

    logger.debug("Resolved order: %s", ordered)
    return ordered


def toposort(edges: Sequence[Tuple[str, str]]) -> List[str]:
    """Kahn's algorithm over ``(dependent, dependency)`` pairs, dependents first.

    Ties are broken by first appearance in ``edges``.
    """
    nodes: Dict[str, None] = {}
    outgoing: Dict[str, Dict[str, None]] = {}
    incoming: Dict[str, Dict[str, None]] = {}
    for dependent, dependency in edges:
        nodes.setdefault(dependent, None)
        nodes.setdefault(dependency, None)
        if dependency in outgoing.setdefault(dependent, {}):
            continue
        outgoing[dependent][dependency] = None
        incoming.setdefault(dependency, {})[dependent] = None

    in_degree = {node: len(incoming.get(node, ())) for node in nodes}
    queue = deque(node for node in nodes if in_degree[node] == 0)
    result: List[str] = []
    while queue:
        node = queue.popleft()
        result.append(node)
        for dependency in outgoing.get(node, ()):
            in_degree[dependency] -= 1
            if in_degree[dependency] == 0:
                queue.append(dependency)

    if len(result) != len(nodes):
        remaining = [node for node in nodes if in_degree[node] > 0]
        raise CycleDetectedError(_find_cycle(remaining, incoming, in_degree))
    return result


def _find_cycle(
    remaining: Sequence[str],
    incoming: Mapping[str, Mapping[str, None]],
    in_degree: Mapping[str, int],
) -> List[str]:
    # Every unsorted node still has an unsorted dependent, so walking
    # dependents backwards must revisit a node.
    path: List[str] = []
    position: Dict[str, int] = {}
    node = remaining[0]
    while node not in position:
        position[node] = len(path)
        path.append(node)
        node = next(dep for dep in incoming[node] if in_degree[dep] > 0)
    cycle = list(reversed(path[position[node] :]))
    cycle.append(cycle[0])
    return cycle


__all__ = ["sequence", "toposort"]
