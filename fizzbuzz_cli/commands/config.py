"""Config inspection commands."""

from __future__ import annotations

import typer

from fizzbuzz_cli.commands.common import get_state, print_json_payload
from fizzbuzz_cli.core.config import DEFAULT_CONFIG, save_config

app = typer.Typer(help="Configuration commands")


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Print the effective configuration."""
    state = get_state(ctx)
    state.debug(f"Config path: {state.config_path}")
    print_json_payload(state, state.config)


@app.command("init")
def init_command(
    ctx: typer.Context,
    force: bool = typer.Option(False, help="Overwrite an existing config file"),
) -> None:
    """Write the default configuration to the config path."""
    state = get_state(ctx)
    if state.config_path.exists() and not force:
        typer.echo(f"Config already exists: {state.config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    path = save_config(DEFAULT_CONFIG, state.config_path)
    if state.json_output:
        print_json_payload(state, {"status": "written", "path": str(path)})
        return
    typer.echo(f"Wrote config to: {path}")
