"""Runtime state container for CLI context."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

from fizzbuzz_cli.core.models import Rules


@dataclass
class CLIState:
    """CLI runtime options and loaded configuration."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    err_console: Console
    rules: Rules
    range_defaults: Dict[str, int]

    def debug(self, message: str) -> None:
        """Emit a diagnostic line on stderr when --verbose is set."""
        if self.verbose:
            self.err_console.log(message)
