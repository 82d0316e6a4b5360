"""Shared command helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Optional

import typer

from fizzbuzz_cli.core.classify import classification_to_dict, iter_fizzbuzz, render
from fizzbuzz_cli.core.models import Classification
from fizzbuzz_cli.core.state import CLIState
from fizzbuzz_cli.exporters.json_export import write_classifications_json
from fizzbuzz_cli.exporters.yaml_export import dump_yaml, write_classifications_yaml


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    state.console.print_json(data=payload)


def classify_range(state: CLIState, start: int, end: int) -> List[Classification]:
    """Classify start..end with the rules loaded into the CLI state."""
    state.debug(f"Classifying {start}..{end} with fizz={state.rules.fizz} buzz={state.rules.buzz}")
    return [classification for _, classification in iter_fizzbuzz(start, end, state.rules)]


def emit_classifications(
    state: CLIState,
    classifications: Iterable[Classification],
    output_format: str = "text",
    output_file: Optional[Path] = None,
) -> None:
    """Emit classifications as labels (one per line), JSON or YAML."""
    items = list(classifications)
    if state.json_output:
        output_format = "json"

    if output_format == "text":
        lines = [render(item) for item in items]
        if output_file:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text("".join(f"{line}\n" for line in lines))
            state.debug(f"Wrote {len(lines)} lines to {output_file}")
        for line in lines:
            typer.echo(line)
        return

    records = [classification_to_dict(item) for item in items]
    if output_format == "json":
        if output_file:
            write_classifications_json(output_file, items)
            state.debug(f"Wrote {len(records)} records to {output_file}")
        print_json_payload(state, records)
        return

    if output_file:
        write_classifications_yaml(output_file, items)
        state.debug(f"Wrote {len(records)} records to {output_file}")
    typer.echo(dump_yaml(records), nl=False)

