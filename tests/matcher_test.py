import re

import pytest

from text_split.buffer import Buffer
from text_split.matcher import Match, Matcher, resolve_flags


def test_search_reports_inclusive_offsets_and_groups() -> None:
    buffer = Buffer.from_text("alpha beta\ngamma delta\n")
    match = Matcher.compile(r"(ga)(m+)a").search(buffer, 0)
    assert match == Match(mhead=11, mtail=15, found="gamma", matched=("ga", "mm"))


def test_search_starts_at_offset() -> None:
    buffer = Buffer.from_text("ab ab ab")
    assert Matcher.compile("ab").search(buffer, 1).mhead == 3


def test_non_participating_group_is_none() -> None:
    buffer = Buffer.from_text("xz")
    match = Matcher.compile(r"x(y)?(z)").search(buffer, 0)
    assert match is not None
    assert match.matched == (None, "z")


def test_no_match_and_exhausted() -> None:
    buffer = Buffer.from_text("abc")
    matcher = Matcher.compile("zzz")
    assert matcher.search(buffer, 0) is None
    assert Matcher.compile("c").search(buffer, 3) is None
    assert Matcher.compile("c").search(buffer, 10) is None


def test_string_patterns_are_multiline_by_default() -> None:
    buffer = Buffer.from_text("one\ntwo\n")
    match = Matcher.compile(r"^two$").search(buffer, 0)
    assert match is not None and match.mhead == 4


def test_compiled_patterns_keep_their_flags() -> None:
    buffer = Buffer.from_text("one\ntwo\n")
    assert Matcher.compile(re.compile(r"^two$")).search(buffer, 0) is None


def test_zero_width_match_is_clamped() -> None:
    buffer = Buffer.from_text("ab\ncd\n")
    match = Matcher.compile(r"^").search(buffer, 3)
    assert match is not None
    assert (match.mhead, match.mtail, match.found) == (3, 3, "")


def test_zero_width_match_at_end_is_no_match() -> None:
    buffer = Buffer.from_text("ab")
    assert Matcher.compile(r"\Z").search(buffer, 1) is None


def test_resolve_flags() -> None:
    assert resolve_flags(multiline=True, ignore_case=True) == re.MULTILINE | re.IGNORECASE
    assert resolve_flags(multiline=False, dotall=True) == re.DOTALL
    with pytest.raises(ValueError):
        resolve_flags(verbose=True)
