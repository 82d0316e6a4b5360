"""Single-number classification command."""

from __future__ import annotations

from typing import List

import typer
from rich.table import Table

from fizzbuzz_cli.commands.common import get_state, print_json_payload
from fizzbuzz_cli.core.classify import classification_to_dict, classify, render


def classify_command(
    ctx: typer.Context,
    numbers: List[int] = typer.Argument(
        ...,
        help="Integers to classify (use -- before negative numbers)",
    ),
) -> None:
    """Classify one or more integers."""
    state = get_state(ctx)
    results = [classify(n, state.rules) for n in numbers]

    if state.json_output:
        print_json_payload(state, [classification_to_dict(item) for item in results])
        return

    if state.plain_output:
        for item in results:
            typer.echo(f"{item.value}\t{item.kind.value}\t{render(item)}")
        return

    table = Table(title="Classification")
    table.add_column("N", justify="right")
    table.add_column("Kind")
    table.add_column("Label")
    for item in results:
        table.add_row(str(item.value), item.kind.value, render(item))
    state.console.print(table)
