from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from core import __version__
from core.config import Config, default_repo_root
from core.config_file import create_default_config
from core.exceptions import FactorialError
from core.log import get_logger, setup_logging
from shell.evaluate import PROMPT, evaluate
from tools.parsing import ASCII_WHITESPACE

app = typer.Typer(
    add_completion=False,
    help="Compute n! as an unsigned 64-bit integer.",
    # "-3" must reach the N argument instead of being rejected as an option
    context_settings={"ignore_unknown_options": True},
)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

logger = get_logger("cli")


def _fail(exc: Exception) -> typer.Exit:
    err_console.print(f"[red]Error: {escape(str(exc))}[/red]", soft_wrap=True)
    return typer.Exit(code=1)


def _read_line() -> str:
    # Extraction skips blank lines before the number; "" means EOF and reads as 0
    line = console.input(PROMPT, markup=False, stream=sys.stdin)
    while line and not line.strip(ASCII_WHITESPACE):
        line = sys.stdin.readline()
    return line


@app.command()
def main(
    n: Optional[str] = typer.Argument(None, metavar="[N]", help="Integer to use instead of prompting"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Reject malformed input and results above 20! (env: FACT_STRICT)"
    ),
    profile: str = typer.Option("", "--profile", help="Config file profile: dev|prod|test"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
    init_config: bool = typer.Option(False, "--init-config", help="Write a default .factorial.toml and exit"),
) -> None:
    """Prompt for an integer and print its factorial."""
    if version:
        console.print(f"factorial-cli {__version__}")
        raise typer.Exit(code=0)

    if init_config:
        try:
            path = create_default_config(str(default_repo_root()))
        except FactorialError as exc:
            raise _fail(exc) from exc
        console.print(f"Created config at: {path}", soft_wrap=True)
        raise typer.Exit(code=0)

    try:
        cfg = Config(profile=profile or None)
    except FactorialError as exc:
        raise _fail(exc) from exc

    setup_logging("DEBUG" if verbose else cfg.log_level)
    if cfg.config_path:
        logger.debug("loaded config from %s (profile=%s)", cfg.config_path, cfg.profile)
    if strict is None:
        strict = cfg.strict

    text = n if n is not None else _read_line()
    try:
        evaluation = evaluate(text, strict=strict)
    except FactorialError as exc:
        raise _fail(exc) from exc

    console.print(evaluation.render(), soft_wrap=True)
