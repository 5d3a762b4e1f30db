"""Pattern-based scanning helpers used by the declaration extractors."""

from .blocks import BlockScanner, BlockSpan
from .literals import BraceCounter, strip_comments, strip_literals

__all__ = [
    "BlockScanner",
    "BlockSpan",
    "BraceCounter",
    "strip_comments",
    "strip_literals",
]
