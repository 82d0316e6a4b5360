"""Entry point for fizzbuzz-cli."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from fizzbuzz_cli import __version__
from fizzbuzz_cli.commands import config as config_commands
from fizzbuzz_cli.commands.classify import classify_command
from fizzbuzz_cli.commands.common import classify_range, emit_classifications
from fizzbuzz_cli.commands.run import run_command
from fizzbuzz_cli.commands.summary import summary_command
from fizzbuzz_cli.core.classify import rules_from_config
from fizzbuzz_cli.core.config import (
    ConfigError,
    default_config_path,
    load_config,
    resolve_range_defaults,
)
from fizzbuzz_cli.core.state import CLIState

app = typer.Typer(
    add_completion=False,
    help="FizzBuzz command-line interface",
    invoke_without_command=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output JSON where available"),
    plain_output: bool = typer.Option(
        False,
        "--plain",
        help="Output plain text (no rich formatting/tables)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Quiet output"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Initialize global CLI state; with no command, print FizzBuzz for 1..100."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if json_output and plain_output:
        typer.echo("Options --json and --plain are mutually exclusive.")
        raise typer.Exit(code=2)

    cfg_path = (config or default_config_path()).expanduser().resolve()
    try:
        cfg = load_config(cfg_path)
        rules = rules_from_config(cfg)
        range_defaults = resolve_range_defaults(cfg)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)

    console = Console(
        quiet=quiet,
        no_color=plain_output,
        log_time=False,
        log_path=False,
    )
    err_console = Console(stderr=True, no_color=plain_output, log_time=False, log_path=False)
    ctx.obj = CLIState(
        json_output=(json_output and not plain_output),
        plain_output=plain_output,
        verbose=verbose,
        quiet=quiet,
        config_path=cfg_path,
        config=cfg,
        console=console,
        err_console=err_console,
        rules=rules,
        range_defaults=range_defaults,
    )
    ctx.obj.debug(f"Loaded config from {cfg_path}")

    if ctx.invoked_subcommand is None:
        if range_defaults["start"] > range_defaults["end"]:
            typer.echo(
                f"Config error: range start ({range_defaults['start']}) "
                f"is greater than end ({range_defaults['end']})"
            )
            raise typer.Exit(code=2)

        state = ctx.obj
        emit_classifications(
            state,
            classify_range(state, range_defaults["start"], range_defaults["end"]),
        )
        raise typer.Exit(code=0)


# Top-level commands
app.command("run")(run_command)
app.command("classify")(classify_command)
app.command("summary")(summary_command)
app.add_typer(config_commands.app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
