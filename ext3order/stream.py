"""Collect-then-flush wrapper feeding files into a run and emitting them in order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from .driver import Sequencer
from .errors import EmptyInputError, OrderingError
from .logging import get_logger
from .models import SourceFile


class OrderSink(Protocol):
    """Receives ordered files, then exactly one end or error signal."""

    def on_data(self, file: SourceFile) -> None: ...

    def on_end(self) -> None: ...

    def on_error(self, error: OrderingError) -> None: ...


@dataclass
class CollectingSink:
    """Sink that records everything it receives."""

    files: List[SourceFile] = field(default_factory=list)
    errors: List[OrderingError] = field(default_factory=list)
    ended: bool = False

    def on_data(self, file: SourceFile) -> None:
        self.files.append(file)

    def on_end(self) -> None:
        self.ended = True

    def on_error(self, error: OrderingError) -> None:
        self.errors.append(error)


class OrderTransform:
    """Buffers every file passed to :meth:`transform` and orders them on :meth:`flush`."""

    def __init__(self, sink: OrderSink, sequencer: Optional[Sequencer] = None) -> None:
        self.sink = sink
        self.sequencer = sequencer or Sequencer()
        self.logger = get_logger("stream")
        self._pending: List[SourceFile] = []
        self._failed = False

    @property
    def failed(self) -> bool:
        return self._failed

    def transform(self, file: SourceFile) -> None:
        if self._failed:
            return
        if file.is_empty:
            self._fail(EmptyInputError(file.identity))
            return
        self._pending.append(file)

    def flush(self) -> None:
        if self._failed:
            return
        try:
            result = self.sequencer.run(self._pending)
        except OrderingError as exc:
            self._fail(exc)
            return
        finally:
            self._pending = []

        for file in result.files:
            self.sink.on_data(file)
        self.sink.on_end()

    def _fail(self, error: OrderingError) -> None:
        self.logger.error("%s", error)
        self._failed = True
        self._pending = []
        self.sink.on_error(error)


__all__ = ["CollectingSink", "OrderSink", "OrderTransform"]
