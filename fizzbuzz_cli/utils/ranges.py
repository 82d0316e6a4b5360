"""Integer range resolution helpers."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import typer

from fizzbuzz_cli.core.constants import DEFAULT_END, DEFAULT_START


def resolve_range(
    start: Optional[int] = None,
    end: Optional[int] = None,
    defaults: Optional[Dict[str, int]] = None,
) -> Tuple[int, int]:
    """Resolve CLI range flags into concrete inclusive bounds.

    Explicit flags win over ``defaults`` (env/config), which win over the
    built-in 1..100 range.
    """
    fallback = defaults or {}
    lo = start if start is not None else fallback.get("start", DEFAULT_START)
    hi = end if end is not None else fallback.get("end", DEFAULT_END)

    if lo > hi:
        raise typer.BadParameter(f"--start ({lo}) must not be greater than --end ({hi})")
    return lo, hi
