"""Lightweight data models used across commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fizzbuzz_cli.core.constants import DEFAULT_BUZZ, DEFAULT_FIZZ


class Kind(str, Enum):
    """The four mutually exclusive FizzBuzz variants."""

    FIZZBUZZ = "fizzbuzz"
    FIZZ = "fizz"
    BUZZ = "buzz"
    NUMBER = "number"


@dataclass(frozen=True)
class Classification:
    """Result of applying the FizzBuzz rule to one integer.

    ``value`` is the originating integer; only ``Kind.NUMBER`` renders it.
    """

    kind: Kind
    value: int


@dataclass(frozen=True)
class Rules:
    """Divisors used by the classifier."""

    fizz: int = DEFAULT_FIZZ
    buzz: int = DEFAULT_BUZZ


DEFAULT_RULES = Rules()
