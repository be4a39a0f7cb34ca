"""Slurp specs: what text to collect across one link of a split chain.

A spec is either a mapping of flags or a compact symbolic string::

    [@$]? [[(] [])] /?

``@`` asks for a list of lines (``$`` or nothing for one string), ``[``
includes the parent's matched lines, ``]`` includes the node's own matched
lines, and a trailing ``/`` chomps line terminators from list results.
The default spec ``"[)"`` slurps the parent's lines plus everything up to,
but excluding, the current match.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError

from text_split.errors import InvalidSlurpSpec

DEFAULT_SLURP = "[)"

_SYMBOLIC = re.compile(r"(?P<sigil>[@$])?(?P<left>[(\[])(?P<right>[)\]])(?P<chomp>/)?")


class SlurpSpec(BaseModel):
    """Resolved slurp flags."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    slurpl: StrictBool = True
    slurpr: StrictBool = False
    chomp: StrictBool = False
    wantlist: StrictBool = False


SlurpLike = Union[str, SlurpSpec, Mapping[str, Any]]


def _chomped_to_chomp(options: Mapping[str, Any]) -> dict[str, Any]:
    """Accept ``chomped`` as an alias of ``chomp``; ``chomp`` wins when both exist."""
    out = dict(options)
    if "chomped" in out:
        chomped = out.pop("chomped")
        out.setdefault("chomp", chomped)
    return out


def _parse_symbolic(spec: str) -> dict[str, bool]:
    m = _SYMBOLIC.fullmatch(spec)
    if m is None:
        raise InvalidSlurpSpec(spec)
    flags = {
        "slurpl": m["left"] == "[",
        "slurpr": m["right"] == "]",
    }
    if m["sigil"]:
        flags["wantlist"] = m["sigil"] == "@"
    if m["chomp"]:
        flags["chomp"] = True
    return flags


def parse_slurp(spec: SlurpLike | None, base: SlurpSpec | None = None) -> SlurpSpec:
    """Apply ``spec`` on top of ``base`` and return the resolved :class:`SlurpSpec`.

    Flags not mentioned by ``spec`` keep their value from ``base`` (the
    built-in default when ``base`` is ``None``).
    """
    base = base if base is not None else SlurpSpec()
    if spec is None:
        return base
    if isinstance(spec, SlurpSpec):
        return spec
    if isinstance(spec, str):
        updates: Mapping[str, Any] = _parse_symbolic(spec)
    elif isinstance(spec, Mapping):
        updates = _chomped_to_chomp(spec)
    else:
        raise InvalidSlurpSpec(spec, f"unsupported type {type(spec).__name__}")
    try:
        return SlurpSpec.model_validate({**base.model_dump(), **updates})
    except ValidationError as exc:
        raise InvalidSlurpSpec(spec, str(exc)) from exc


def resolve(
    default: SlurpSpec, spec: SlurpLike | None = None, chomp: bool | None = None
) -> SlurpSpec:
    """Effective spec: ``default``, then ``spec``, then an explicit ``chomp``."""
    resolved = parse_slurp(spec, default)
    if chomp is not None:
        resolved = resolved.model_copy(update={"chomp": bool(chomp)})
    return resolved


def render(spec: SlurpSpec) -> str:
    """Return the canonical symbolic form of ``spec``."""
    return "".join(
        (
            "@" if spec.wantlist else "$",
            "[" if spec.slurpl else "(",
            "]" if spec.slurpr else ")",
            "/" if spec.chomp else "",
        )
    )


def assemble(
    spec: SlurpSpec, parent_content: str, preceding: str, content: str
) -> str:
    """Concatenate the parts of a chain link selected by ``spec``."""
    parts = (
        parent_content if spec.slurpl else "",
        preceding,
        content if spec.slurpr else "",
    )
    return "".join(parts)


def to_lines(text: str, chomp: bool = False) -> list[str]:
    """Split ``text`` on newlines, keeping blank lines.

    Terminators are dropped when ``chomp`` is true and restored on every
    line otherwise, including a final line that lacked one.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return list(lines) if chomp else [f"{line}\n" for line in lines]


__all__ = [
    "DEFAULT_SLURP",
    "SlurpLike",
    "SlurpSpec",
    "assemble",
    "parse_slurp",
    "render",
    "resolve",
    "to_lines",
]
