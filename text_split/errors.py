"""Exceptions raised by :mod:`text_split`.

A pattern that does not occur is not an error: :meth:`Split.find` returns
``None`` for that case.
"""

from __future__ import annotations


class TextSplitError(Exception):
    """Base class for text_split failures."""


class InvalidSlurpSpec(TextSplitError, ValueError):
    """A slurp spec string or mapping could not be parsed."""

    def __init__(self, spec: object, reason: str | None = None) -> None:
        self.spec = spec
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid slurp pattern ({spec!r}){detail}")


__all__ = ["InvalidSlurpSpec", "TextSplitError"]
