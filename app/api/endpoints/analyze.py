"""API endpoint for scoring a sentence's weirdness."""
from fastapi import APIRouter, Depends, HTTPException

from app.core.config import Settings, get_settings
from app.core.errors import EmptyInputError
from app.models.request import AnalyzeRequest
from app.models.response import AnalyzeResponse
from app.services.provider import HuggingFaceProvider, TokenLogProbProvider
from app.services.scorer import normalize_sentence, score_sentence

router = APIRouter()


def get_provider(settings: Settings = Depends(get_settings)) -> TokenLogProbProvider:
    """Build the language model provider from the injected settings."""

    return HuggingFaceProvider.from_settings(settings)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    request: AnalyzeRequest, provider: TokenLogProbProvider = Depends(get_provider)
) -> AnalyzeResponse:
    """Return the word count and weirdness score for the submitted sentence."""

    try:
        sentence = normalize_sentence(request.sentence)
    except EmptyInputError as exc:
        # Blank input never reaches the provider.
        raise HTTPException(400, str(exc)) from exc

    result = await score_sentence(sentence, provider)
    return AnalyzeResponse(sentence=sentence, result=result)
