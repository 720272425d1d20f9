"""Pydantic models for requests and responses."""

from .request import AnalyzeRequest
from .response import AnalyzeResponse, ScoreError, ScoreResult
from .tokens import TokenLogProb

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "ScoreError",
    "ScoreResult",
    "TokenLogProb",
]
