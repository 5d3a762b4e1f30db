"""Fatal errors raised by an ordering run."""

from __future__ import annotations

from typing import Sequence, Tuple


class OrderingError(RuntimeError):
    """Base class for errors that abort an ordering run."""


class EmptyInputError(OrderingError):
    """Raised when a source item has no content."""

    def __init__(self, identity: str) -> None:
        super().__init__(f'"{identity}" is empty.')
        self.identity = identity


class CycleDetectedError(OrderingError):
    """Raised when the file graph is not acyclic."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        self.edge: Tuple[str, str] = (self.cycle[0], self.cycle[1])
        chain = " -> ".join(self.cycle)
        super().__init__(f"Cyclic dependency, no valid order exists: {chain}")


__all__ = ["CycleDetectedError", "EmptyInputError", "OrderingError"]
