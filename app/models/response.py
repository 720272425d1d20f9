"""Response models for the analyze endpoint."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.errors import ErrorKind


class ScoreError(BaseModel):
    """Display-safe description of why a score fell back to zero."""

    kind: ErrorKind
    message: str


class ScoreResult(BaseModel):
    """Word count, weirdness score and perplexity display for one sentence."""

    word_count: int = Field(..., ge=0)
    weirdness: int = Field(..., ge=0, le=100)
    perplexity_display: str
    perplexity: Optional[float] = None
    token_count: int = Field(0, ge=0)
    error: Optional[ScoreError] = None


class AnalyzeResponse(BaseModel):
    """Scored sentence as returned to API clients."""

    sentence: str
    result: ScoreResult

    # Provide an OpenAPI example to document the contract for clients.
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "sentence": "flying broccoli eating ten thousand frogs is greater than 50 burritos",
                "result": {
                    "word_count": 11,
                    "weirdness": 86,
                    "perplexity_display": "Perplexity ≈ 27.4",
                    "perplexity": 27.43,
                    "token_count": 16,
                    "error": None,
                },
            }
        }
    )
