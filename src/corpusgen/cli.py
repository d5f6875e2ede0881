"""Typer-based command line interface for the corpus generator.

``corpusgen generate`` takes no options: every parameter comes from the
packaged defaults (budget 200,000,000 characters, seed 42, geometric
probability 0.01) and the corpus is written to standard output.
``corpusgen check`` reads a corpus from standard input and verifies it against
the output contract for the same defaults.

Exit codes
----------
0 success
3 I/O error (write failure, broken pipe)
4 configuration error
6 verification failure (malformed lines or budget exceeded)
"""

from __future__ import annotations

import sys
from typing import NoReturn

import typer
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .generator import CorpusGenerator
from .utils.logging import configure_logging, get_logger
from .verify import scanner

app = typer.Typer(
    name="corpusgen",
    help="Deterministic test corpus generator. Run 'corpusgen generate'.",
)

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load() -> ConfigModel:
    try:
        cfg = load_config()
    except (ValidationError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging(cfg.logging.level)
    return cfg


@app.callback()
def main() -> None:
    """Entry point for the corpusgen command group."""
    pass


@app.command()
def generate() -> None:
    """Write the corpus to standard output."""

    cfg = _load()
    gen = CorpusGenerator(cfg.generator)
    try:
        gen.write(sys.stdout)
        sys.stdout.flush()
    except OSError as exc:
        _safe_exit(3, f"Write failed: {exc}")


@app.command()
def check() -> None:
    """Verify a corpus read from standard input."""

    cfg = _load()
    try:
        report = scanner.scan_stream(
            sys.stdin,
            budget=cfg.generator.max_total_length,
            min_line_length=cfg.generator.min_line_length,
            max_reported=cfg.verification.max_reported_invalid,
        )
    except OSError as exc:
        _safe_exit(3, f"Read failed: {exc}")

    typer.echo(report.summary(), err=True)
    if report.invalid_lines:
        shown = ", ".join(str(n) for n in report.invalid_lines)
        typer.echo(f"Invalid lines: {shown}", err=True)
    if not report.within_budget:
        typer.echo("Budget exceeded", err=True)
    if not report.ok:
        log.warning("corpus check failed: %s", report.summary())
        _safe_exit(6, None)
