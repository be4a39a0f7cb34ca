from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from text_split import Split  # noqa: E402

_SCENARIO = (
    "\n{\n    abcdefghijklmnopqrstuvwxyz\n\nqwerty\n-\n"
    "1 2 3 4 5 5 6 7 8 9     \n\n    xyzzy\n\n}\n\n"
)

_SYNOPSIS = (
    "# Xyzzy\n"
    "#   --- START \n"
    "    qwerty\n"
    "\n"
    "        1 2 3 4 5 6\n"
    "8 9 10 The end\n"
    "\n"
    "# abcdefghi\n"
    "        jklmnop\n"
)


@pytest.fixture
def scenario_text() -> str:
    return _SCENARIO


@pytest.fixture
def synopsis_text() -> str:
    return _SYNOPSIS


@pytest.fixture
def root(scenario_text: str) -> Split:
    return Split.from_text(scenario_text)


@pytest.fixture
def chain_invariants() -> Callable[[Split], None]:
    """Assert the offset invariants that hold for every found node."""

    def _check(split: Split) -> None:
        last = len(split.buffer) - 1
        assert 0 <= split.start <= split.mhead <= split.mtail <= split.tail <= last
        # A match that begins on a newline has its lines start just after it.
        if split.data[split.mhead] == "\n":
            assert split.head == split.mhead + 1
        else:
            assert split.start <= split.head <= split.mhead
        assert split.start == split.parent.tail + 1 or split.parent.is_root()
        rebuilt = split.preceding() + split.content + split.remaining()
        assert rebuilt == split.data[split.start:]

    return _check
