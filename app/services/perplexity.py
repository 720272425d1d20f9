"""Reduce per-token log-probabilities to a perplexity estimate."""
from __future__ import annotations

import math
from typing import Optional, Sequence

from app.core.errors import InsufficientDataError


def average_logprob(logprobs: Sequence[Optional[float]]) -> float:
    """Mean log-probability of a token sequence, counting missing entries as 0."""

    if not logprobs:
        raise InsufficientDataError("No token log-probabilities returned by the provider")
    # Missing logprobs are neutral rather than rejected.
    total = math.fsum(logprob or 0.0 for logprob in logprobs)
    return total / len(logprobs)


def estimate_perplexity(logprobs: Sequence[Optional[float]]) -> float:
    """Return ``exp(-mean logprob)``; strictly positive and exactly 1.0 for a zero mean.

    No upper bound is applied. Means so negative that ``exp`` leaves the float
    range yield ``math.inf``, which the weirdness scorer saturates.
    """

    avg = average_logprob(logprobs)
    try:
        return math.exp(-avg)
    except OverflowError:
        return math.inf
