"""Map an unbounded perplexity onto the 0-100 weirdness scale."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

MIN_SCORE = 0
MAX_SCORE = 100

_EXPONENT = 1.7
_SCALE = 11


def _round_half_away_from_zero(value: float) -> int:
    # Built-in round() ties to even; Decimal(value) is the exact binary value.
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def raw_weirdness(perplexity: float) -> float:
    """Unclamped score ``ln(perplexity + 1) ** 1.7 * 11``."""

    return math.log(perplexity + 1) ** _EXPONENT * _SCALE


def weirdness_from_perplexity(perplexity: float) -> int:
    """Integer weirdness score in ``[0, 100]``, non-decreasing in ``perplexity``."""

    raw = raw_weirdness(perplexity)
    if math.isinf(raw):
        return MAX_SCORE
    return min(MAX_SCORE, max(MIN_SCORE, _round_half_away_from_zero(raw)))
