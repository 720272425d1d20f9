"""Service layer modules."""

from .perplexity import average_logprob, estimate_perplexity
from .provider import HuggingFaceProvider, ProviderResult, TokenLogProbProvider
from .scorer import count_words, fallback_result, normalize_sentence, score_logprobs, score_sentence
from .weirdness import weirdness_from_perplexity

__all__ = [
    "HuggingFaceProvider",
    "ProviderResult",
    "TokenLogProbProvider",
    "average_logprob",
    "count_words",
    "estimate_perplexity",
    "fallback_result",
    "normalize_sentence",
    "score_logprobs",
    "score_sentence",
    "weirdness_from_perplexity",
]
