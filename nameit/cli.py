from __future__ import annotations

import logging
import os
import sys
import warnings
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Tuple

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import ENV_PREFIX, Config, Settings
from .errors import NameitError, UnknownOutputFormatWarning
from .generator import DEFAULT_RANDOM_CHARS, DEFAULT_RANDOM_LENGTH, DEFAULT_SEPARATOR, generate_batch
from .lists import Mode
from .output import write_names
from .wordsource import load_word_lists, parse_word_list


logger = logging.getLogger(__name__)

app = typer.Typer(
    name="nameit",
    help="Generate memorable random names.",
    add_completion=False,
)
err_console = Console(stderr=True, soft_wrap=True)

# Options that feed Settings, by parameter name
SETTING_PARAMS = (
    "mode",
    "count",
    "prefix",
    "separator",
    "output",
    "append_random",
    "random_chars",
    "random_length",
    "adjectives_list",
    "nouns_list",
    "adjectives_file",
    "nouns_file",
)

# Pairs that may not both be given on the command line
EXCLUSIVE_OPTIONS = (
    ("mode", "adjectives_list"),
    ("mode", "adjectives_file"),
    ("mode", "nouns_list"),
    ("mode", "nouns_file"),
    ("adjectives_list", "adjectives_file"),
    ("nouns_list", "nouns_file"),
)


def _env(name: str) -> str:
    return f"{ENV_PREFIX}{name.upper()}"


def _flag(name: str) -> str:
    return "--" + name.replace("_", "-")


def _configure_logging(verbose: bool) -> None:
    log_level = os.getenv("NAMEIT_LOG_LEVEL", "INFO" if verbose else "WARNING")
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(name)s: %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"nameit {__version__}")
        raise typer.Exit()


def _source_name(ctx: typer.Context, name: str) -> str:
    # Compared by name: typer may run on click or on its own vendored copy
    source = ctx.get_parameter_source(name)
    return getattr(source, "name", "")


def check_exclusive_options(ctx: typer.Context) -> None:
    """Reject mutually exclusive options given together on the command line."""
    given = {name for name in SETTING_PARAMS if _source_name(ctx, name) == "COMMANDLINE"}
    for first, second in EXCLUSIVE_OPTIONS:
        if first in given and second in given:
            raise typer.BadParameter(
                f"Options {_flag(first)} and {_flag(second)} are mutually exclusive",
                ctx=ctx,
            )


def explicit_settings(ctx: typer.Context) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Split explicitly set option values into (command line, NAMEIT_* environment)."""
    command_line: Dict[str, Any] = {}
    environment: Dict[str, Any] = {}
    layers = {"COMMANDLINE": command_line, "ENVIRONMENT": environment}
    for name in SETTING_PARAMS:
        layer = layers.get(_source_name(ctx, name))
        if layer is None:
            continue
        value = ctx.params[name]
        if name in ("adjectives_list", "nouns_list"):
            value = parse_word_list(value)
        layer[name] = value
    return command_line, environment


def cmd_generate(settings: Settings, stream: Optional[TextIO] = None) -> int:
    """Generate names for settings and write them to stream (stdout by default)."""
    stream = stream or sys.stdout
    try:
        adjectives, nouns = load_word_lists(
            mode=settings.mode,
            adjectives_list=settings.adjectives_list,
            nouns_list=settings.nouns_list,
            adjectives_file=settings.adjectives_file,
            nouns_file=settings.nouns_file,
        )
        names = generate_batch(adjectives, nouns, settings.format_options(), settings.count)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", UnknownOutputFormatWarning)
            write_names(names, settings.output, stream)

        for w in caught:
            if issubclass(w.category, UnknownOutputFormatWarning):
                err_console.print(f"[yellow]Warning:[/yellow] {escape(str(w.message))}")
            else:
                warnings.warn(w.message, w.category)
        return 0
    except NameitError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1


@app.command(help="Generate memorable random names like 'quiet-forest' or 'app-quiet-forest-042'.")
def generate_command(
    ctx: typer.Context,
    mode: Mode = typer.Option(
        Mode.modern, "--mode", case_sensitive=False, envvar=_env("mode"),
        help="Built-in word list to use",
    ),
    count: int = typer.Option(
        1, "--count", min=0, envvar=_env("count"),
        help="Number of names to generate",
    ),
    prefix: str = typer.Option(
        "", "--prefix", envvar=_env("prefix"),
        help="Prepend prefix to name",
    ),
    separator: str = typer.Option(
        DEFAULT_SEPARATOR, "--separator", envvar=_env("separator"),
        help="Separator between words",
    ),
    output: str = typer.Option(
        "text", "--output", envvar=_env("output"),
        help="Output format: text, json, or yaml",
    ),
    append_random: bool = typer.Option(
        False, "--append-random", envvar=_env("append_random"),
        help="Append a random token to the end of the name",
    ),
    random_chars: str = typer.Option(
        DEFAULT_RANDOM_CHARS, "--random-chars", envvar=_env("random_chars"),
        help="Characters to use when generating the random token",
    ),
    random_length: int = typer.Option(
        DEFAULT_RANDOM_LENGTH, "--random-length", min=0, envvar=_env("random_length"),
        help="Length of the random token",
    ),
    adjectives_list: Optional[str] = typer.Option(
        None, "--adjectives-list", envvar=_env("adjectives_list"),
        help="Comma-separated adjectives to use instead of a built-in list",
    ),
    nouns_list: Optional[str] = typer.Option(
        None, "--nouns-list", envvar=_env("nouns_list"),
        help="Comma-separated nouns to use instead of a built-in list",
    ),
    adjectives_file: Optional[Path] = typer.Option(
        None, "--adjectives-file", envvar=_env("adjectives_file"),
        help="Path to file containing adjectives, one per line",
    ),
    nouns_file: Optional[Path] = typer.Option(
        None, "--nouns-file", envvar=_env("nouns_file"),
        help="Path to file containing nouns, one per line",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", envvar=_env("config"),
        help="Config file (default is $HOME/.nameit.yaml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log config and word list details to stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit",
    ),
):
    _configure_logging(verbose)
    check_exclusive_options(ctx)

    try:
        command_line, environment = explicit_settings(ctx)
        settings = Settings.resolve(command_line, Config(config), environment)
    except NameitError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logger.debug(f"Resolved settings: {settings}")
    code = cmd_generate(settings)
    raise typer.Exit(code)


def main(argv: list[str] | None = None) -> int:
    # Programmatic entry point that returns an int code.
    # Standalone mode lets typer report its own usage errors before exiting.
    try:
        app(args=argv, prog_name="nameit")
        return 0
    except SystemExit as e:
        return int(e.code or 0)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
