"""Token-level data returned by the language model provider."""
from typing import Optional

from pydantic import BaseModel, Field


class TokenLogProb(BaseModel):
    """One prefill token and its natural-log probability under the model.

    The provider reports no logprob for the first token of a sequence, so
    ``logprob`` may be ``None``. NaN and infinite values are rejected.
    """

    token: str
    logprob: Optional[float] = Field(None, allow_inf_nan=False)
