"""Result assembly: word count, weirdness score and failure fallback."""
from __future__ import annotations

import logging
import re
from typing import Sequence

from app.core.errors import EmptyInputError, InsufficientDataError, WeirdnessError
from app.models.response import ScoreError, ScoreResult
from app.models.tokens import TokenLogProb
from app.services.perplexity import estimate_perplexity
from app.services.provider import TokenLogProbProvider
from app.services.weirdness import weirdness_from_perplexity

logger = logging.getLogger(__name__)

PERPLEXITY_PREFIX = "Perplexity ≈"
FALLBACK_DISPLAY = "Error calculating weirdness"
FALLBACK_MESSAGE = "Could not reach the language model – check HF_TOKEN or try later."

# Whitespace as recognised by JavaScript `\s` and `String.prototype.trim`.
_WHITESPACE = "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_WHITESPACE_RE = re.compile(f"[{re.escape(_WHITESPACE)}]+")


def normalize_sentence(raw: str) -> str:
    """Trim surrounding whitespace, rejecting input that is blank."""

    sentence = raw.strip(_WHITESPACE)
    if not sentence:
        raise EmptyInputError()
    return sentence


def count_words(sentence: str) -> int:
    """Number of whitespace-separated words in ``sentence``."""

    return sum(1 for word in _WHITESPACE_RE.split(sentence) if word)


def format_perplexity(perplexity: float) -> str:
    return f"{PERPLEXITY_PREFIX} {perplexity:.1f}"


def score_logprobs(word_count: int, tokens: Sequence[TokenLogProb]) -> ScoreResult:
    """Score a sentence from its prefill tokens.

    Raises ``InsufficientDataError`` when ``tokens`` is empty.
    """

    perplexity = estimate_perplexity([token.logprob for token in tokens])
    weirdness = weirdness_from_perplexity(perplexity)
    return ScoreResult(
        word_count=word_count,
        weirdness=weirdness,
        perplexity_display=format_perplexity(perplexity),
        perplexity=perplexity,
        token_count=len(tokens),
    )


def fallback_result(word_count: int, error: WeirdnessError) -> ScoreResult:
    """Zero score carrying the error kind; the error detail only goes to the log."""

    logger.warning("Weirdness scoring failed [%s]: %s", error.kind.value, error)
    return ScoreResult(
        word_count=word_count,
        weirdness=0,
        perplexity_display=FALLBACK_DISPLAY,
        error=ScoreError(kind=error.kind, message=FALLBACK_MESSAGE),
    )


async def score_sentence(sentence: str, provider: TokenLogProbProvider) -> ScoreResult:
    """Public entry point for routers to score a trimmed, non-empty sentence.

    Provider and estimator failures come back as a fallback ``ScoreResult``
    instead of being raised.
    """

    word_count = count_words(sentence)
    outcome = await provider.get_token_logprobs(sentence)
    if not outcome.ok:
        return fallback_result(word_count, outcome.error)

    try:
        result = score_logprobs(word_count, outcome.tokens)
    except InsufficientDataError as exc:
        return fallback_result(word_count, exc)

    logger.debug("Scored %d words over %d tokens: weirdness=%d", word_count, result.token_count, result.weirdness)
    return result
