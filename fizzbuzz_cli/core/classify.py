"""FizzBuzz classification utilities."""

from __future__ import annotations

from typing import Any, Dict, Generator, Tuple

from fizzbuzz_cli.core.config import ConfigError
from fizzbuzz_cli.core.constants import DEFAULT_END, DEFAULT_START, KIND_LABELS
from fizzbuzz_cli.core.models import DEFAULT_RULES, Classification, Kind, Rules


def classify(n: int, rules: Rules = DEFAULT_RULES) -> Classification:
    """Classify an integer by divisibility, checking the combined case first."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"classify() expects an int, got {type(n).__name__}")

    pair = (n % rules.fizz, n % rules.buzz)
    if pair == (0, 0):
        return Classification(Kind.FIZZBUZZ, n)
    if pair[0] == 0:
        return Classification(Kind.FIZZ, n)
    if pair[1] == 0:
        return Classification(Kind.BUZZ, n)
    return Classification(Kind.NUMBER, n)


def render(classification: Classification) -> str:
    """Render a classification as its output label."""
    if classification.kind is Kind.NUMBER:
        return str(classification.value)
    return KIND_LABELS[classification.kind.value]


def fizzbuzz(n: int, rules: Rules = DEFAULT_RULES) -> str:
    """Return the FizzBuzz label for ``n``."""
    return render(classify(n, rules))


def iter_fizzbuzz(
    start: int = DEFAULT_START,
    end: int = DEFAULT_END,
    rules: Rules = DEFAULT_RULES,
) -> Generator[Tuple[int, Classification], None, None]:
    """Yield (n, classification) for start..end inclusive, in increasing order."""
    for n in range(start, end + 1):
        yield n, classify(n, rules)


def classification_to_dict(classification: Classification) -> Dict[str, Any]:
    """Serialize a classification for JSON/YAML output."""
    return {
        "n": classification.value,
        "kind": classification.kind.value,
        "label": render(classification),
    }


def _positive_int(section: str, key: str, raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int) or raw <= 0:
        raise ConfigError(f"[{section}] {key} must be a positive integer, got {raw!r}")
    return raw


def rules_from_config(config: Dict[str, Any]) -> Rules:
    """Build rules from config if provided, otherwise defaults."""
    configured = config.get("rules", {})
    if not isinstance(configured, dict):
        raise ConfigError(f"[rules] must be a table, got {configured!r}")
    if not configured:
        return DEFAULT_RULES

    return Rules(
        fizz=_positive_int("rules", "fizz", configured.get("fizz", DEFAULT_RULES.fizz)),
        buzz=_positive_int("rules", "buzz", configured.get("buzz", DEFAULT_RULES.buzz)),
    )
