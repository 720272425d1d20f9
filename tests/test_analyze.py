"""Tests for the health check and the versioned analyze endpoint."""
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.api.endpoints.analyze import get_provider
from app.core.config import get_settings
from app.core.errors import CredentialError
from app.main import app
from app.models.tokens import TokenLogProb
from app.services.provider import HuggingFaceProvider, ProviderResult

client = TestClient(app)


class StubProvider:
    def __init__(self, result: ProviderResult) -> None:
        self.result = result
        self.calls = 0

    async def get_token_logprobs(self, sentence: str) -> ProviderResult:
        self.calls += 1
        return self.result


@pytest.fixture(autouse=True)
def reset_overrides(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate settings and dependency overrides between tests."""

    monkeypatch.delenv("HF_TOKEN", raising=False)
    get_settings.cache_clear()
    yield
    app.dependency_overrides.clear()
    get_settings.cache_clear()


def _use(provider: StubProvider) -> StubProvider:
    app.dependency_overrides[get_provider] = lambda: provider
    return provider


def test_health_endpoint_returns_ok() -> None:
    """Ensure the health check remains accessible at the root."""

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_analyze_returns_score() -> None:
    tokens = [TokenLogProb(token=text, logprob=-1.0) for text in ["hello", " world"]]
    _use(StubProvider(ProviderResult.success(tokens)))

    response = client.post("/v1/analyze", json={"sentence": "  hello   world  "})

    assert response.status_code == 200
    body = response.json()
    assert body["sentence"] == "hello   world"
    assert body["result"]["word_count"] == 2
    assert body["result"]["weirdness"] == 17
    assert body["result"]["perplexity_display"] == "Perplexity ≈ 2.7"
    assert body["result"]["error"] is None


def test_provider_failure_still_returns_200() -> None:
    _use(StubProvider(ProviderResult.failure(CredentialError("HF_TOKEN is not set"))))

    response = client.post("/v1/analyze", json={"sentence": "purple silence sings"})

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["word_count"] == 3
    assert result["weirdness"] == 0
    assert result["perplexity_display"] == "Error calculating weirdness"
    assert result["error"]["kind"] == "credential_error"
    assert "HF_TOKEN is not set" not in response.text


@pytest.mark.parametrize("sentence", ["", "    ", "\n\t"])
def test_blank_sentence_short_circuits(sentence: str) -> None:
    provider = _use(StubProvider(ProviderResult.success([])))

    response = client.post("/v1/analyze", json={"sentence": sentence})

    assert response.status_code == 400
    assert response.json() == {"detail": "Sentence must not be empty"}
    assert provider.calls == 0


def test_analyze_requires_sentence() -> None:
    """Missing required fields should surface validation errors with field paths."""

    response = client.post("/v1/analyze", json={})

    assert response.status_code == 422
    detail = response.json()["detail"][0]
    assert detail["loc"] == ["body", "sentence"]


def test_unversioned_route_not_available() -> None:
    response = client.post("/analyze", json={"sentence": "hello"})

    assert response.status_code == 404


def test_default_provider_reports_missing_token() -> None:
    """Without HF_TOKEN the real provider falls back without touching the network."""

    get_settings.cache_clear()
    provider = get_provider(get_settings())
    assert isinstance(provider, HuggingFaceProvider)

    response = client.post("/v1/analyze", json={"sentence": "hello world"})

    assert response.status_code == 200
    assert response.json()["result"]["error"]["kind"] == "credential_error"


def test_openapi_documents_analyze_contract() -> None:
    response = client.get("/openapi.json")

    assert response.status_code == 200
    schema = response.json()

    analyze_path = schema["paths"]["/v1/analyze"]["post"]
    request_ref = analyze_path["requestBody"]["content"]["application/json"]["schema"]
    assert request_ref == {"$ref": "#/components/schemas/AnalyzeRequest"}

    request_schema = schema["components"]["schemas"]["AnalyzeRequest"]
    assert request_schema["required"] == ["sentence"]
    assert "example" in request_schema
