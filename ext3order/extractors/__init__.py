"""Declaration extractor implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict, Iterable, List, Sequence, Set

from ..config import DEFAULT_NAMESPACES
from .annotations import AnnotationExtractor
from .base import Extractor, ScannedSource
from .define import DefineExtractor
from .directives import FileDirectiveExtractor
from .extend import ExtendExtractor

_ENTRY_POINT_GROUP = "ext3order.extractors"

BUILTIN_EXTRACTORS = ("annotations", "directives", "extend", "define")


def _builtin_factories(namespaces: Sequence[str]) -> Dict[str, Callable[[], Extractor]]:
    return {
        "annotations": AnnotationExtractor,
        "directives": FileDirectiveExtractor,
        "extend": lambda: ExtendExtractor(namespaces),
        "define": lambda: DefineExtractor(namespaces),
    }


def discover_extractors(
    enabled: Sequence[str] | None = None,
    *,
    namespaces: Sequence[str] = DEFAULT_NAMESPACES,
) -> List[Extractor]:
    """Return instantiated extractors, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled:
        enabled_set = {name.lower() for name in enabled}

    extractors: List[Extractor] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[[], Extractor]) -> None:
        key = name.lower()
        if enabled_set is not None and key not in enabled_set:
            return
        if key in seen:
            return
        instance = factory()
        if not isinstance(instance, Extractor):
            raise TypeError(f"Extractor factory for '{name}' did not return an Extractor instance")
        extractors.append(instance)
        seen.add(key)
        if enabled_set is not None:
            enabled_set.discard(key)

    for name, factory in _builtin_factories(namespaces).items():
        _add(name, factory)

    for entry in _iter_entry_points():
        name = entry.name
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Failed to load extractor entry point '{name}': {exc}") from exc

        def _factory(obj: object = loaded) -> Extractor:
            return _coerce_extractor(obj)

        _add(name, _factory)

    if enabled_set:
        missing = ", ".join(sorted(enabled_set))
        raise ValueError(f"Unknown extractors requested: {missing}")

    return extractors


def _coerce_extractor(obj: object) -> Extractor:
    if isinstance(obj, Extractor):
        return obj
    if isinstance(obj, type) and issubclass(obj, Extractor):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, Extractor):
            return instance
    raise TypeError("Extractor entry point must be an Extractor subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    entry_points = metadata.entry_points()
    if hasattr(entry_points, "select"):
        return entry_points.select(group=_ENTRY_POINT_GROUP)  # type: ignore[return-value]

    return entry_points.get(_ENTRY_POINT_GROUP, [])  # type: ignore[return-value]


__all__ = [
    "AnnotationExtractor",
    "BUILTIN_EXTRACTORS",
    "DefineExtractor",
    "ExtendExtractor",
    "Extractor",
    "FileDirectiveExtractor",
    "ScannedSource",
    "discover_extractors",
]
