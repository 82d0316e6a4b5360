"""FizzBuzz range command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from fizzbuzz_cli.commands.common import classify_range, emit_classifications, get_state
from fizzbuzz_cli.core.constants import OUTPUT_FORMATS
from fizzbuzz_cli.utils.ranges import resolve_range


def run_command(
    ctx: typer.Context,
    start: Optional[int] = typer.Option(None, help="First integer (default: 1)"),
    end: Optional[int] = typer.Option(None, help="Last integer, inclusive (default: 100)"),
    output_format: str = typer.Option("text", "--format", help="Output format: text|json|yaml"),
    output_file: Optional[Path] = typer.Option(None, help="Also write output to file"),
) -> None:
    """Print the FizzBuzz label for every integer in a range."""
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter("--format must be one of: text, json, yaml")

    state = get_state(ctx)
    lo, hi = resolve_range(start=start, end=end, defaults=state.range_defaults)
    emit_classifications(
        state,
        classify_range(state, lo, hi),
        output_format=output_format,
        output_file=output_file,
    )
