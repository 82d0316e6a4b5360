"""Range summaries."""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict

from fizzbuzz_cli.core.classify import iter_fizzbuzz
from fizzbuzz_cli.core.constants import KIND_LABELS
from fizzbuzz_cli.core.models import DEFAULT_RULES, Kind, Rules


def summarize(start: int, end: int, rules: Rules = DEFAULT_RULES) -> Dict[str, Any]:
    """Count each variant over start..end inclusive."""
    by_kind: Counter = Counter({kind.value: 0 for kind in Kind})
    for _, classification in iter_fizzbuzz(start, end, rules):
        by_kind[classification.kind.value] += 1

    return {
        "total": sum(by_kind.values()),
        "by_kind": {KIND_LABELS[kind.value]: by_kind[kind.value] for kind in Kind},
        "range": {"start": start, "end": end},
        "rules": {"fizz": rules.fizz, "buzz": rules.buzz},
    }
