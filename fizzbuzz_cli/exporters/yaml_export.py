"""YAML export of classified ranges."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

import yaml

from fizzbuzz_cli.core.classify import classification_to_dict
from fizzbuzz_cli.core.models import Classification


def dump_yaml(payload: Any) -> str:
    """Serialize payload as block-style YAML, keeping key order."""
    return yaml.safe_dump(payload, sort_keys=False, default_flow_style=False)


def write_classifications_yaml(path: Path, classifications: Iterable[Classification]) -> Path:
    """Write classifications as a YAML list of {n, kind, label} records."""
    records = [classification_to_dict(item) for item in classifications]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_yaml(records))
    return path
