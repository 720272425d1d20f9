"""Error taxonomy shared by the scoring pipeline and the API layer.

Provider and estimator failures are carried as values (see
``app.services.provider.ProviderResult``) until the result assembler maps them
to a display-safe fallback. Only ``EmptyInputError`` reaches the HTTP layer.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Failure categories reported alongside a fallback score."""

    EMPTY_INPUT = "empty_input"
    CREDENTIAL = "credential_error"
    PROVIDER = "provider_error"
    INSUFFICIENT_DATA = "insufficient_data"


class WeirdnessError(Exception):
    """Base exception for all weirdness scoring errors."""

    kind: ErrorKind = ErrorKind.PROVIDER


class EmptyInputError(WeirdnessError):
    """Raised when the submitted sentence is blank after trimming."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self) -> None:
        super().__init__("Sentence must not be empty")


class CredentialError(WeirdnessError):
    """The provider access token is missing or was rejected."""

    kind = ErrorKind.CREDENTIAL


class ProviderError(WeirdnessError):
    """Transport failure, non-success status or unreadable provider response."""

    kind = ErrorKind.PROVIDER

    def __init__(self, detail: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(detail)


class InsufficientDataError(WeirdnessError):
    """No token log-probabilities were available to score."""

    kind = ErrorKind.INSUFFICIENT_DATA
