"""Request models for the analyze endpoint."""
from pydantic import BaseModel, ConfigDict, Field


class AnalyzeRequest(BaseModel):
    """Request payload for the /v1/analyze endpoint."""

    sentence: str = Field(..., description="Free-text sentence to score; surrounding whitespace is ignored")

    # Provide an OpenAPI example to document the contract for clients.
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "sentence": "flying broccoli eating ten thousand frogs is greater than 50 burritos",
            }
        }
    )
