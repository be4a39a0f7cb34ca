"""Line-aligned splitting of text around successive pattern matches.

A root :class:`Split` wraps the whole text. Each :meth:`Split.find` searches
from just past the previous match's lines and returns a new node whose match
is widened to whole lines, so callers can read what came before it
(:meth:`Split.preceding`), what comes after (:meth:`Split.remaining`), and
slurp text across consecutive matches.

Usage::

    split = Split.from_text(data).find(r"#\\s*--- START")
    split, content = split.find(r" The end", slurp="[]")
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from text_split.buffer import Buffer
from text_split.config import SplitConfig
from text_split.matcher import DEFAULT_FLAGS, Matcher, PatternLike
from text_split.slurp import (
    SlurpLike,
    SlurpSpec,
    assemble,
    parse_slurp,
    resolve,
    to_lines,
)

logger = logging.getLogger(__name__)

Slurped = Union[str, List[str]]


@dataclass(frozen=True)
class Split:
    """One node of a split chain.

    Offsets index into the shared :attr:`buffer`. ``head``/``tail`` are the
    match widened to whole lines (``tail`` is the terminating newline, or the
    last index when the text has none); ``mhead``/``mtail`` are the raw match.
    """

    buffer: Buffer = field(repr=False, compare=False)
    start: int = 0
    head: int = 0
    tail: int = 0
    mhead: int = 0
    mtail: int = 0
    found: str = ""
    matched: Tuple[str | None, ...] = ()
    content: str = ""
    matcher: Matcher | None = None
    default: SlurpSpec = field(default_factory=SlurpSpec)
    flags: int = DEFAULT_FLAGS
    _parent: Split | None = field(default=None, repr=False, compare=False)
    _root: Split | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_buffer(
        cls,
        buffer: Buffer,
        default: SlurpLike | None = None,
        flags: int = DEFAULT_FLAGS,
    ) -> Split:
        """Return a root node over an existing shared ``buffer``."""
        return cls(buffer=buffer, default=parse_slurp(default), flags=flags)

    @classmethod
    def from_text(
        cls,
        text: str,
        default: SlurpLike | None = None,
        flags: int = DEFAULT_FLAGS,
    ) -> Split:
        """Return a root node over ``text``."""
        return cls.from_buffer(Buffer.from_text(text), default=default, flags=flags)

    @classmethod
    def from_config(cls, text: str, config: SplitConfig) -> Split:
        """Return a root node using the slurp default and regex flags of ``config``."""
        return cls.from_text(text, default=config.slurp, flags=config.regex_flags())

    @property
    def parent(self) -> Split:
        """The node this one was found from; the root is its own parent."""
        return self._parent if self._parent is not None else self

    @property
    def root(self) -> Split:
        return self._root if self._root is not None else self

    @property
    def data(self) -> str:
        return self.buffer.text

    def is_root(self) -> bool:
        return self._parent is None

    def ancestors(self) -> Iterator[Split]:
        """Yield this node, then each parent up to and including the root."""
        node: Split | None = self
        while node is not None:
            yield node
            node = node._parent

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.ancestors()) - 1

    def find(
        self,
        pattern: PatternLike,
        *,
        slurp: SlurpLike | bool | None = None,
        chomp: bool | None = None,
        chomped: bool | None = None,
        default: SlurpLike | None = None,
    ) -> Split | tuple[Split, Slurped] | None:
        """Find ``pattern`` after this node's lines and return the next node.

        Returns ``None`` when the text is exhausted or the pattern does not
        occur. When ``slurp`` is given (``True`` for the inherited default)
        the result is a ``(node, slurped)`` pair instead; an empty or false
        ``slurp`` returns the node alone. ``chomp``/``chomped`` only apply to
        a requested slurp and are rejected otherwise. ``default`` replaces the
        slurp default the new node passes on to its children.
        """
        if not slurp and (chomp is not None or chomped is not None):
            raise TypeError("chomp applies only when slurp is requested")
        matcher = Matcher.compile(pattern, self.flags)
        start = 0 if self.is_root() else self.tail + 1
        match = matcher.search(self.buffer, start)
        if match is None:
            return None

        head, tail = self.buffer.extend(match.mhead, match.mtail)
        split = Split(
            buffer=self.buffer,
            start=start,
            head=head,
            tail=tail,
            mhead=match.mhead,
            mtail=match.mtail,
            found=match.found,
            matched=match.matched,
            content=self.buffer.slice(head, tail + 1),
            matcher=matcher,
            default=parse_slurp(default, self.default),
            flags=self.flags,
            _parent=self,
            _root=self.root,
        )
        logger.debug("split at lines %d..%d (search from %d)", head, tail, start)

        if not slurp:
            return split
        spec = None if slurp is True else slurp
        return split, split.slurp(spec, chomp=chomp, chomped=chomped)

    split = find

    def preceding(self) -> str:
        """Text from where the search started up to this match's first line."""
        return self.buffer.slice(self.start, self.head)

    pre = preceding

    def remaining(self) -> str:
        """Text after this match's last line; the whole text for the root."""
        if self.is_root():
            return self.buffer.text
        return self.buffer.slice(self.tail + 1, len(self.buffer))

    rem = remaining

    def match(self, index: int = -1) -> str | None:
        """Return ``found`` for ``-1``, else capture group ``index`` (``None`` if absent)."""
        if index == -1:
            return self.found
        if 0 <= index < len(self.matched):
            return self.matched[index]
        return None

    def is_(self, index: int, criterion: str | re.Pattern[str]) -> bool | None:
        """Test ``match(index)`` against a compiled pattern or an exact string.

        ``None`` when there is nothing at ``index`` to test.
        """
        value = self.match(index)
        if value is None:
            return None
        if isinstance(criterion, re.Pattern):
            return criterion.search(value) is not None
        return value == criterion

    def _assemble(
        self, spec: SlurpLike | None, chomp: bool | None, chomped: bool | None
    ) -> tuple[SlurpSpec, str]:
        resolved = resolve(self.default, spec, chomp if chomp is not None else chomped)
        text = assemble(resolved, self.parent.content, self.preceding(), self.content)
        return resolved, text

    def slurp_text(
        self,
        spec: SlurpLike | None = None,
        chomp: bool | None = None,
        chomped: bool | None = None,
    ) -> str:
        """Slurp as one string regardless of the spec's list mode."""
        return self._assemble(spec, chomp, chomped)[1]

    def slurp_lines(
        self,
        spec: SlurpLike | None = None,
        chomp: bool | None = None,
        chomped: bool | None = None,
    ) -> list[str]:
        """Slurp as a list of lines, terminators kept unless the spec chomps."""
        resolved, text = self._assemble(spec, chomp, chomped)
        return to_lines(text, chomp=resolved.chomp)

    def slurp(
        self,
        spec: SlurpLike | None = None,
        chomp: bool | None = None,
        chomped: bool | None = None,
    ) -> Slurped:
        """Slurp as lines when the resolved spec wants a list, else as a string.

        ``chomped`` is an alias of ``chomp``; ``chomp`` wins when both are given.
        """
        resolved, text = self._assemble(spec, chomp, chomped)
        if resolved.wantlist:
            return to_lines(text, chomp=resolved.chomp)
        return text


def iter_splits(
    split: Split, patterns: Iterable[PatternLike], slurp: SlurpLike | None = None
) -> Iterator[tuple[Split, Slurped]]:
    """Find each of ``patterns`` in turn, yielding ``(node, slurped)``.

    Stops at the first pattern that does not match.
    """
    for pattern in patterns:
        found = split.find(pattern)
        if found is None:
            logger.debug("chain stopped at depth %d", split.depth)
            return
        split = found  # type: ignore[assignment]
        yield split, split.slurp(slurp)


__all__ = ["Slurped", "Split", "iter_splits"]
