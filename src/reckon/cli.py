"""
reckon CLI - Entry point.

The external driver around the arithmetic pipeline:

- repl: interactive read-eval-print loop
- eval: evaluate one expression and exit
- tokens: show the token stream for an expression
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.style import Style
from rich.text import Text

from reckon._version import get_version
from reckon.core.arithmetic import Evaluation, Token, parse_and_evaluate, tokenize
from reckon.core.config import ReckonConfig, apply_env_overrides, find_config, load_config
from reckon.core.errors import ConfigError
from reckon.logging import configure_logging

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True, highlight=False)

STYLES = {
    "result": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "context": Style(color="bright_black"),
    "token": Style(color="cyan"),
}


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"reckon {get_version()} (Python {platform.python_version()})")
        raise typer.Exit()


app = typer.Typer(
    help="reckon - integer and decimal arithmetic, one line at a time.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    """reckon CLI main callback for global options."""
    pass


# =============================================================================
# Configuration
# =============================================================================


def _load(config_path: Path | None) -> ReckonConfig:
    try:
        if config_path:
            config = apply_env_overrides(load_config(config_path))
        else:
            config = find_config()
    except (ConfigError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    configure_logging(config.logging.level_number)
    if config.path:
        logger.debug("Loaded configuration from %s", config.path)
    return config


# =============================================================================
# Output helpers
# =============================================================================


def print_tokens(tokens: list[Token]) -> None:
    for tok in tokens:
        line = Text(f"{tok.kind:<10}", style=STYLES["token"])
        line.append(f" {tok.text!r}")
        if tok.error:
            line.append(f"  ({tok.error})", style=STYLES["error"])
        console.print(line)


def print_evaluation(result: Evaluation) -> None:
    """Print the formatted number, or every diagnostic in order."""
    if result.ok:
        console.print(Text(str(result.value), style=STYLES["result"]))
        return

    for diagnostic in result.diagnostics:
        console.print(Text(diagnostic, style=STYLES["error"]))
    if result.context is not None:
        console.print(Text(result.context.format(), style=STYLES["context"]))


# =============================================================================
# Commands
# =============================================================================


@app.command()
def repl(
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to reckon.toml (default: ./reckon.toml)"
    ),
    show_tokens: bool = typer.Option(
        False, "--show-tokens", help="Print the token stream before each result"
    ),
) -> None:
    """Read lines from stdin and print each result until an exit command."""
    config = _load(config_path)
    show_tokens = show_tokens or config.repl.show_tokens
    exit_commands = set(config.repl.exit_commands)

    while True:
        try:
            line = console.input(config.repl.prompt, markup=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        stripped = line.strip()
        if stripped in exit_commands:
            break
        if not stripped:
            continue

        if show_tokens:
            print_tokens(tokenize(line))
        print_evaluation(parse_and_evaluate(line))


@app.command("eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '2 + 3 * 4'"),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Path to reckon.toml"),
) -> None:
    """Evaluate a single expression."""
    _load(config_path)
    result = parse_and_evaluate(expression)
    print_evaluation(result)
    if not result.ok:
        raise typer.Exit(code=1)


@app.command()
def tokens(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Print the token stream for an expression, one token per line."""
    print_tokens(tokenize(expression))


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
