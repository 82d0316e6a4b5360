"""Static constants and mappings for the FizzBuzz CLI."""

from __future__ import annotations

DEFAULT_FIZZ = 3
DEFAULT_BUZZ = 5

DEFAULT_START = 1
DEFAULT_END = 100

KIND_LABELS = {
    "fizzbuzz": "FizzBuzz",
    "fizz": "Fizz",
    "buzz": "Buzz",
    "number": "Number",
}

OUTPUT_FORMATS = ("text", "json", "yaml")
