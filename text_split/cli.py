from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, List, Optional

import typer

from text_split.config import SplitConfig, load_config
from text_split.slurp import parse_slurp, render
from text_split.split import Split, iter_splits

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _exit_with_error(exc: Exception) -> None:
    """Print ``exc`` to stderr and exit with status 1."""
    print(f"error: {exc}", file=sys.stderr)
    raise typer.Exit(1)


def _safe(func: Callable[[], None]) -> None:
    """Invoke ``func`` and exit non-zero on any exception."""
    try:
        func()
    except Exception as exc:  # pragma: no cover - exercised in CLI tests
        _exit_with_error(exc)


def _cli_overrides(patterns: List[str], slurp: str | None) -> dict[str, Any]:
    return {
        k: v
        for k, v in {
            "patterns": patterns or None,
            "slurp": slurp,
        }.items()
        if v is not None
    }


def _row(index: int, split: Split, slurped: Any) -> dict[str, Any]:
    return {
        "index": index,
        "start": split.start,
        "head": split.head,
        "tail": split.tail,
        "mhead": split.mhead,
        "mtail": split.mtail,
        "found": split.found,
        "matched": list(split.matched),
        "slurp": slurped,
    }


def _rows(text: str, cfg: SplitConfig, remaining: bool) -> Iterator[dict[str, Any]]:
    last = root = Split.from_config(text, cfg)
    for index, (split, slurped) in enumerate(iter_splits(root, cfg.patterns)):
        last = split
        yield _row(index, split, slurped)
    if remaining:
        yield {"remaining": last.remaining()}


def _run_split(
    input_path: Path,
    patterns: List[str],
    slurp: str | None,
    config: str,
    remaining: bool,
    verbose: bool,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    cfg = load_config(config, overrides=_cli_overrides(patterns, slurp))
    if not cfg.patterns:
        raise ValueError("no patterns given (use --pattern or the config file)")
    text = input_path.read_text(encoding="utf-8")
    for row in _rows(text, cfg, remaining):
        print(json.dumps(row, ensure_ascii=False))


def _run_slurp_spec(spec: str) -> None:
    parsed = parse_slurp(spec)
    print(json.dumps({**parsed.model_dump(), "symbolic": render(parsed)}))


@app.command()
def split(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    patterns: Optional[List[str]] = typer.Option(None, "--pattern", "-p"),
    slurp: Optional[str] = typer.Option(None, "--slurp"),
    config: str = typer.Option("text_split.yaml", "--config"),
    remaining: bool = typer.Option(False, "--remaining"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Walk PATTERNS through INPUT_PATH and print one JSON row per match."""
    _safe(
        lambda: _run_split(
            input_path, patterns or [], slurp, config, remaining, verbose
        )
    )


@app.command("slurp-spec")
def slurp_spec(spec: str = typer.Argument(...)) -> None:
    """Print the flags a symbolic slurp spec resolves to."""
    _safe(lambda: _run_slurp_spec(spec))


if __name__ == "__main__":
    app()
