"""Language model provider adapter returning prefill token log-probabilities."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol

import httpx

from app.core.config import Settings
from app.core.errors import CredentialError, InsufficientDataError, ProviderError, WeirdnessError
from app.core.http_client import post_json
from app.models.tokens import TokenLogProb

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderResult:
    """Either the sentence's prefill tokens or the error that prevented fetching them."""

    tokens: List[TokenLogProb] = field(default_factory=list)
    error: Optional[WeirdnessError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, tokens: List[TokenLogProb]) -> "ProviderResult":
        return cls(tokens=list(tokens))

    @classmethod
    def failure(cls, error: WeirdnessError) -> "ProviderResult":
        return cls(error=error)


class TokenLogProbProvider(Protocol):
    """Anything that can score a sentence's own tokens under a language model."""

    async def get_token_logprobs(self, sentence: str) -> ProviderResult:
        ...


def parse_prefill(body: Any) -> List[TokenLogProb]:
    """Extract ``details.prefill`` from a text-generation response body.

    The inference API answers with a list of generations; a bare object is
    accepted too. Raises ``ProviderError`` when the shape is not recognised.
    """

    generation = body[0] if isinstance(body, list) and body else body
    if not isinstance(generation, dict):
        raise ProviderError(f"Unexpected inference response shape: {type(body).__name__}")

    details = generation.get("details") or {}
    prefill = details.get("prefill") if isinstance(details, dict) else None
    if prefill is None:
        return []
    if not isinstance(prefill, list):
        raise ProviderError("Inference response 'details.prefill' is not a list")

    try:
        return [TokenLogProb(token=item.get("text") or "", logprob=item.get("logprob")) for item in prefill]
    except (AttributeError, ValueError) as exc:
        raise ProviderError(f"Cannot parse prefill tokens: {exc}") from exc


class HuggingFaceProvider:
    """Prefill log-probabilities from the Hugging Face text-generation inference API.

    Configuration is passed to the constructor; ``transport`` replaces the
    network layer of the underlying httpx client.
    """

    def __init__(
        self,
        token: Optional[str],
        model: str = "distilgpt2",
        api_base: str = "https://api-inference.huggingface.co/models",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.token = token
        self.model = model
        self.api_base = api_base
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "HuggingFaceProvider":
        token = settings.hf_token.get_secret_value() if settings.hf_token else None
        return cls(
            token=token,
            model=settings.hf_model,
            api_base=settings.hf_api_base,
            timeout=settings.http_timeout,
            transport=transport,
        )

    @property
    def url(self) -> str:
        return f"{self.api_base.rstrip('/')}/{self.model}"

    def build_payload(self, sentence: str) -> dict:
        """Request one new token so the response carries prefill details for the input."""

        return {
            "inputs": sentence,
            "parameters": {
                "max_new_tokens": 1,
                "details": True,
                "decoder_input_details": True,
                "return_full_text": False,
            },
        }

    async def get_token_logprobs(self, sentence: str) -> ProviderResult:
        if not self.token or not self.token.strip():
            return ProviderResult.failure(CredentialError("HF_TOKEN is not set"))

        try:
            body = await post_json(self.url, self.build_payload(sentence), self.token, self.timeout, self.transport)
            tokens = parse_prefill(body)
        except (CredentialError, ProviderError) as exc:
            return ProviderResult.failure(exc)

        if not tokens:
            return ProviderResult.failure(InsufficientDataError("No token logprobs returned by the inference API"))

        logger.debug("Received %d prefill tokens from %s", len(tokens), self.model)
        return ProviderResult.success(tokens)
