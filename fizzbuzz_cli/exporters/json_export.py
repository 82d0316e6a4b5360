"""JSON export of classified ranges."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from fizzbuzz_cli.core.classify import classification_to_dict
from fizzbuzz_cli.core.models import Classification


def write_classifications_json(path: Path, classifications: Iterable[Classification]) -> Path:
    """Write classifications as a JSON list of {n, kind, label} records."""
    records = [classification_to_dict(item) for item in classifications]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, indent=2) + "\n")
    return path
