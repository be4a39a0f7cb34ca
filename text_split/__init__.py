"""Line-aligned text splitting with fine-grained control over slurped regions."""

from text_split.buffer import Buffer
from text_split.config import SplitConfig, load_config
from text_split.errors import InvalidSlurpSpec, TextSplitError
from text_split.matcher import Match, Matcher
from text_split.slurp import DEFAULT_SLURP, SlurpSpec, parse_slurp, render
from text_split.split import Split, iter_splits

__all__ = [
    "Buffer",
    "DEFAULT_SLURP",
    "InvalidSlurpSpec",
    "Match",
    "Matcher",
    "SlurpSpec",
    "Split",
    "SplitConfig",
    "TextSplitError",
    "iter_splits",
    "load_config",
    "parse_slurp",
    "render",
]
