"""Dependency-first ordering of ExtJS-style JavaScript sources."""

from .driver import OrderingResult, Sequencer, order_files
from .errors import CycleDetectedError, EmptyInputError, OrderingError
from .models import ClassDeclaration, FileDependency, SourceFile
from .stream import CollectingSink, OrderTransform

__all__ = [
    "ClassDeclaration",
    "CollectingSink",
    "CycleDetectedError",
    "EmptyInputError",
    "FileDependency",
    "OrderTransform",
    "OrderingError",
    "OrderingResult",
    "Sequencer",
    "SourceFile",
    "order_files",
]
