"""Class-name symbol table shared by every extractor pass of a run."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Tuple


class SymbolTable:
    """Maps class names to their defining file and to the classes they depend on.

    Re-declaring a class merges: the dependency sets are unioned in insertion
    order and the most recent declaration decides the defining file. Nothing is
    ever removed.
    """

    def __init__(self) -> None:
        self._defining_file: Dict[str, str] = {}
        self._depends_on: Dict[str, Dict[str, None]] = {}

    def declare(self, class_name: str, file: str, deps: Iterable[str] = ()) -> None:
        self._defining_file[class_name] = file
        known = self._depends_on.setdefault(class_name, {})
        for dep in deps:
            if dep and dep != class_name:
                known.setdefault(dep, None)

    def resolve(self, class_name: str) -> Optional[str]:
        return self._defining_file.get(class_name)

    def dependencies(self, class_name: str) -> Tuple[str, ...]:
        return tuple(self._depends_on.get(class_name, ()))

    def items(self) -> Iterator[Tuple[str, str, Tuple[str, ...]]]:
        """Yield ``(class_name, defining_file, dependencies)`` in declaration order."""
        for class_name, file in self._defining_file.items():
            yield class_name, file, self.dependencies(class_name)

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._defining_file

    def __iter__(self) -> Iterator[str]:
        return iter(self._defining_file)

    def __len__(self) -> int:
        return len(self._defining_file)


__all__ = ["SymbolTable"]
