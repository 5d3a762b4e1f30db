"""Balanced-block location over raw source text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from re import Match, Pattern
from typing import Iterator, Optional

from ..logging import get_logger
from .literals import BraceCounter

logger = get_logger("scanning")


@dataclass(frozen=True)
class BlockSpan:
    """Region ``[start, end)`` believed to hold one declaration."""

    start: int
    end: int
    balanced: bool
    match: Match[str]

    def text(self, source: str) -> str:
        return source[self.start : self.end]


class _State(Enum):
    SEEKING_START = "seeking_start"
    SEEKING_BALANCE = "seeking_balance"
    EMIT = "emit"
    ADVANCE = "advance"


class BlockScanner:
    """Finds successive declaration spans whose braces balance.

    A span starts at a match of ``start_pattern`` and tentatively ends at the
    next one. While the braces between the two do not balance, the end moves
    to the following ``start_pattern`` match, then to the following
    ``token_pattern`` match, and finally to the end of the text, where the
    span is emitted as unbalanced.
    """

    def __init__(
        self,
        text: str,
        start_pattern: Pattern[str],
        token_pattern: Optional[Pattern[str]] = None,
        counter: Optional[BraceCounter] = None,
    ) -> None:
        if counter is not None and counter.text != text:
            raise ValueError("BraceCounter was built for a different buffer")
        self.text = text
        self.cursor = 0
        self._start_pattern = start_pattern
        self._token_pattern = token_pattern
        self._counter = counter or BraceCounter(text)

    def locate(self, search_from: Optional[int] = None) -> Optional[BlockSpan]:
        """Return the next span at or after the cursor, or None when exhausted."""
        if search_from is not None:
            self.cursor = search_from

        state = _State.SEEKING_START
        start_match: Optional[Match[str]] = None
        boundary: Optional[Match[str]] = None
        span: Optional[BlockSpan] = None

        while True:
            if state is _State.SEEKING_START:
                start_match = self._start_pattern.search(self.text, self.cursor)
                if start_match is None:
                    return None
                boundary = self._start_pattern.search(self.text, start_match.end())
                state = _State.SEEKING_BALANCE

            elif state is _State.SEEKING_BALANCE:
                assert start_match is not None
                end = boundary.start() if boundary is not None else len(self.text)
                balance = self._counter.balance(start_match.start(), end)
                logger.debug(
                    "Brace balance for span [%d, %d): %d", start_match.start(), end, balance
                )
                if balance == 0 or boundary is None:
                    span = BlockSpan(start_match.start(), end, balance == 0, start_match)
                    state = _State.EMIT
                else:
                    boundary = self._next_boundary(boundary)

            elif state is _State.EMIT:
                assert span is not None
                if not span.balanced:
                    logger.debug("Span at %d never balances before end of input", span.start)
                state = _State.ADVANCE

            else:
                assert span is not None
                # Unbalanced spans are retried one character later.
                self.cursor = span.end if span.balanced else span.start + 1
                return span

    def spans(self) -> Iterator[BlockSpan]:
        """Iterate over every span from the current cursor onwards."""
        while True:
            span = self.locate()
            if span is None:
                return
            yield span

    def _next_boundary(self, boundary: Match[str]) -> Optional[Match[str]]:
        following = self._start_pattern.search(self.text, boundary.end())
        if following is None and self._token_pattern is not None:
            following = self._token_pattern.search(self.text, boundary.end())
        return following


__all__ = ["BlockScanner", "BlockSpan"]
