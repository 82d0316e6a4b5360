"""Range summary command."""

from __future__ import annotations

from typing import Optional

import typer

from fizzbuzz_cli.commands.common import get_state, print_json_payload
from fizzbuzz_cli.core.analysis import summarize
from fizzbuzz_cli.utils.ranges import resolve_range


def summary_command(
    ctx: typer.Context,
    start: Optional[int] = typer.Option(None, help="First integer (default: 1)"),
    end: Optional[int] = typer.Option(None, help="Last integer, inclusive (default: 100)"),
) -> None:
    """Count FizzBuzz variants over a range."""
    state = get_state(ctx)
    lo, hi = resolve_range(start=start, end=end, defaults=state.range_defaults)
    state.debug(f"Summarizing {lo}..{hi}")
    report = summarize(lo, hi, state.rules)

    if state.json_output:
        print_json_payload(state, report)
        return

    state.console.print(f"Range: {lo} to {hi} ({report['total']} numbers)")
    for label, count in report["by_kind"].items():
        state.console.print(f"{label:8s}  {count}")
