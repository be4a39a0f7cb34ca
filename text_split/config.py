from __future__ import annotations

import os
import pathlib
from functools import reduce
from importlib import import_module
from typing import Any, Dict, Iterable, List, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from text_split.matcher import resolve_flags
from text_split.slurp import DEFAULT_SLURP, parse_slurp

yaml = cast(Any, import_module("yaml"))

ENV_PREFIX = "TEXT_SPLIT__"


class SplitConfig(BaseModel):
    """Settings for a split run: slurp default, regex flags, patterns to walk."""

    model_config = ConfigDict(extra="forbid")

    slurp: str = DEFAULT_SLURP
    multiline: bool = True
    ignore_case: bool = False
    dotall: bool = False
    patterns: List[str] = Field(default_factory=list)

    @field_validator("slurp")
    @classmethod
    def _check_slurp(cls, value: str) -> str:
        parse_slurp(value)
        return value

    def regex_flags(self) -> int:
        """Return the ``re`` flags for compiling string patterns."""
        return resolve_flags(
            multiline=self.multiline,
            ignore_case=self.ignore_case,
            dotall=self.dotall,
        )


def _read_yaml(path: str | os.PathLike | None) -> Dict[str, Any]:
    """Return a dict from YAML or {} if path is None/missing/empty."""
    if not path:
        return {}
    p = pathlib.Path(path)
    if not p.exists():
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise TypeError("text_split config must contain a top-level mapping")
    return data


def _coerce(key: str, raw: str) -> Any:
    """YAML-coerce ``raw`` unless ``key`` names a plain string setting."""
    field = SplitConfig.model_fields.get(key)
    if field is not None and field.annotation is str:
        return raw
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def _env_overrides() -> Dict[str, Any]:
    """
    Map TEXT_SPLIT__KEY=value -> {key: value} (key lower-cased).
    Values are YAML-coerced (so 'true', '[a, b]' etc. become bool/list);
    string settings such as ``slurp`` are taken verbatim.
    """
    return {
        k[len(ENV_PREFIX):].lower(): _coerce(k[len(ENV_PREFIX):].lower(), v)
        for k, v in os.environ.items()
        if k.startswith(ENV_PREFIX)
    }


def load_config(
    path: str | os.PathLike | None = "text_split.yaml",
    overrides: Dict[str, Any] | None = None,
) -> SplitConfig:
    """Load YAML + env/CLI overrides into a validated SplitConfig."""
    sources: Iterable[Dict[str, Any]] = (
        d for d in (_read_yaml(path), _env_overrides(), overrides) if d
    )
    merged = reduce(lambda acc, d: {**acc, **d}, sources, {})
    return SplitConfig.model_validate(merged)


__all__ = ["ENV_PREFIX", "SplitConfig", "load_config"]
