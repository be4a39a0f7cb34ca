"""Regular-expression matching against a shared :class:`Buffer`.

A :class:`Matcher` wraps one compiled pattern and reports the first match at
or after a starting offset as a :class:`Match`, with inclusive raw offsets.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Tuple, Union

from text_split.buffer import Buffer

logger = logging.getLogger(__name__)

PatternLike = Union[str, "re.Pattern[str]", "Matcher"]

DEFAULT_FLAGS = re.MULTILINE

_FLAG_NAMES = {
    "multiline": re.MULTILINE,
    "ignore_case": re.IGNORECASE,
    "dotall": re.DOTALL,
}


def resolve_flags(**enabled: bool) -> int:
    """Combine named regex flags (``multiline``, ``ignore_case``, ``dotall``)."""
    unknown = sorted(set(enabled) - set(_FLAG_NAMES))
    if unknown:
        raise ValueError(f"Unknown regex flags: {', '.join(unknown)}")
    flags = 0
    for name, on in enabled.items():
        if on:
            flags |= _FLAG_NAMES[name]
    return flags


@dataclass(frozen=True)
class Match:
    """Raw outcome of one successful search.

    Attributes:
        mhead: Offset of the first matched character.
        mtail: Offset of the last matched character (inclusive).
        found: The matched text.
        matched: Capture-group texts in declaration order; ``None`` for
            groups that did not participate.
    """

    mhead: int
    mtail: int
    found: str
    matched: Tuple[str | None, ...] = ()


@dataclass(frozen=True)
class Matcher:
    """A compiled pattern evaluated against a buffer from a given offset."""

    pattern: "re.Pattern[str]"

    @classmethod
    def compile(cls, pattern: PatternLike, flags: int = DEFAULT_FLAGS) -> Matcher:
        """Return a matcher for ``pattern``.

        Strings are compiled with ``flags``; compiled patterns keep their own.
        """
        if isinstance(pattern, Matcher):
            return pattern
        if isinstance(pattern, re.Pattern):
            return cls(pattern)
        return cls(re.compile(pattern, flags))

    def search(self, buffer: Buffer, start: int) -> Match | None:
        """Find the first match at or after ``start``; ``None`` when absent."""
        length = len(buffer)
        if start >= length:
            logger.debug("search %r skipped: offset %d exhausted", self.pattern.pattern, start)
            return None
        m = self.pattern.search(buffer.text, start)
        if m is None:
            logger.debug("search %r from %d: no match", self.pattern.pattern, start)
            return None
        mhead, end = m.span()
        if mhead == end and mhead >= length:
            # Zero-width match at end of text consumes nothing.
            logger.debug("search %r from %d: empty match at end", self.pattern.pattern, start)
            return None
        mtail = max(mhead, end - 1)
        logger.debug("search %r from %d: match %d..%d", self.pattern.pattern, start, mhead, mtail)
        return Match(mhead=mhead, mtail=mtail, found=m.group(0), matched=m.groups())


__all__ = ["DEFAULT_FLAGS", "Match", "Matcher", "PatternLike", "resolve_flags"]
