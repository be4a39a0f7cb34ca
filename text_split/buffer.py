"""Shared source text and line-boundary helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Buffer:
    """Immutable text shared by every node of a split chain."""

    text: str

    @classmethod
    def from_text(cls, text: str) -> Buffer:
        return cls(text=text)

    def __len__(self) -> int:
        return len(self.text)

    def slice(self, start: int, end: int) -> str:
        """Return ``text[start:end]`` clamped to the buffer, ``""`` when empty."""
        length = len(self.text)
        safe_start = max(0, min(start, length))
        safe_end = max(0, min(end, length))
        if safe_start >= safe_end:
            return ""
        return self.text[safe_start:safe_end]

    def extend(self, mhead: int, mtail: int) -> tuple[int, int]:
        """Widen a raw match span to whole lines as ``(head, tail)``."""
        return line_head(self.text, mhead), line_tail(self.text, mtail)


def line_head(text: str, offset: int) -> int:
    """Offset just past the nearest newline at or before ``offset``, else 0.

    A match that begins on a newline therefore gets ``head == offset + 1``:
    its lines start after that newline.
    """
    if offset < 0:
        return 0
    return text.rfind("\n", 0, offset + 1) + 1


def line_tail(text: str, offset: int) -> int:
    """Offset of the nearest newline at or after ``offset``, else the last index."""
    index = text.find("\n", max(0, offset))
    return index if index != -1 else len(text) - 1


__all__ = ["Buffer", "line_head", "line_tail"]
