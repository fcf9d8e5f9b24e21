from __future__ import annotations

import json
import logging
import re
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, List, Optional

import typer

from buena_vista.config import DisplayOptions, TruncateOptions, load_options
from buena_vista.markup import display_truncated_text
from buena_vista.truncation import truncation_pairs

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _exit_with_error(exc: Exception) -> None:
    """Print ``exc`` to stderr and exit with status 1."""
    print(f"error: {exc}", file=sys.stderr)
    raise typer.Exit(1)


def _safe(func: Callable[[], None]) -> None:
    """Invoke ``func`` and exit non-zero on any exception."""
    try:
        func()
    except typer.Exit:
        raise
    except Exception as exc:  # pragma: no cover - exercised in CLI tests
        _exit_with_error(exc)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _read_segments(files: List[Path] | None) -> list[str]:
    """One segment per file, or blank-line separated paragraphs from stdin."""
    if files:
        return [p.read_text(encoding="utf-8") for p in files]
    return [part for part in _PARAGRAPH_BREAK.split(sys.stdin.read()) if part.strip()]


def _cli_overrides(**values: Any) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


def _run_truncate(
    files: List[Path] | None,
    length: int | None,
    preserve_whitespace: bool,
    config: Path | None,
    as_json: bool,
) -> None:
    opts = load_options(
        config,
        overrides=_cli_overrides(
            length=length, whitespace="preserve" if preserve_whitespace else None
        ),
        model=TruncateOptions,
    )
    pairs = truncation_pairs(_read_segments(files), opts)
    if as_json:
        print(json.dumps([{"visible": v, "hidden": h} for v, h in pairs], ensure_ascii=False))
        return
    print("".join(v for v, _ in pairs))
    print("---")
    print("".join(h for _, h in pairs))


def _run_html(
    files: List[Path] | None,
    length: int | None,
    preserve_whitespace: bool,
    config: Path | None,
    block_tag: str | None,
    more: str | None,
    no_more: bool,
) -> None:
    opts = load_options(
        config,
        overrides=_cli_overrides(
            length=length,
            whitespace="preserve" if preserve_whitespace else None,
            block_tag=block_tag,
            more=False if no_more else more,
        ),
        model=DisplayOptions,
    )
    print(display_truncated_text(_read_segments(files), **opts.model_dump()))


@app.command()
def truncate(
    files: Optional[List[Path]] = typer.Argument(None, exists=True, dir_okay=False, readable=True),
    length: Optional[int] = typer.Option(None, "--length", "-n"),
    preserve_whitespace: bool = typer.Option(False, "--preserve-whitespace"),
    config: Optional[Path] = typer.Option(None, "--config"),
    as_json: bool = typer.Option(False, "--json"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Print the visible text, a '---' line, then the hidden text."""
    _configure_logging(verbose)
    _safe(lambda: _run_truncate(files, length, preserve_whitespace, config, as_json))


@app.command()
def html(
    files: Optional[List[Path]] = typer.Argument(None, exists=True, dir_okay=False, readable=True),
    length: Optional[int] = typer.Option(None, "--length", "-n"),
    preserve_whitespace: bool = typer.Option(False, "--preserve-whitespace"),
    config: Optional[Path] = typer.Option(None, "--config"),
    block_tag: Optional[str] = typer.Option(None, "--block-tag"),
    more: Optional[str] = typer.Option(None, "--more"),
    no_more: bool = typer.Option(False, "--no-more"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Print the truncated text as HTML blocks with an expand link."""
    _configure_logging(verbose)
    _safe(
        lambda: _run_html(files, length, preserve_whitespace, config, block_tag, more, no_more)
    )


if __name__ == "__main__":
    app()
