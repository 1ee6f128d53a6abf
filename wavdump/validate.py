from __future__ import annotations
import re
from typing import Iterable, Optional, Tuple

from .config import MAX_DURATION, MAX_FREQ, MIN_FREQ
from .errors import ArgumentError

# ASCII decimal only: no underscores, no non-ASCII digits
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _to_int(literal: str) -> Optional[int]:
    s = literal.strip()
    if not _INT_RE.fullmatch(s):
        return None
    return int(s, 10)


def parse_duration(literal: str) -> int:
    v = _to_int(literal)
    if v is None or v <= 0:
        raise ArgumentError("output file duration", literal, "should be a positive, non-null number")
    if v > MAX_DURATION:
        raise ArgumentError("output file duration", literal, f"should not exceed {MAX_DURATION} seconds")
    return v


def parse_frequency(literal: str) -> int:
    v = _to_int(literal)
    if v is None or not (MIN_FREQ <= v <= MAX_FREQ):
        raise ArgumentError(
            "list of frequencies", literal,
            f"contains a frequency outside the range [{MIN_FREQ},{MAX_FREQ}] Hz",
        )
    return v


def parse_frequencies(literals: Iterable[str]) -> Tuple[int, ...]:
    """Validate in order; the first offending literal is the one reported."""
    freqs = tuple(parse_frequency(s) for s in literals)
    if not freqs:
        raise ArgumentError("list of frequencies", "", "requires at least one frequency")
    return freqs
