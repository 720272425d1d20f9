"""Application configuration settings.

This module centralizes environment-driven configuration using pydantic's
settings management so that dependencies can inject configuration at runtime.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings sourced from environment variables or a .env file."""

    # A missing token is reported per request as a credential error, not at startup.
    hf_token: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("HF_TOKEN"),
        description="Access token for the Hugging Face inference API",
    )
    hf_api_base: str = Field(
        "https://api-inference.huggingface.co/models",
        validation_alias=AliasChoices("HF_API_BASE"),
        description="Base URL of the Hugging Face inference API (model id is appended)",
    )
    hf_model: str = Field(
        "distilgpt2",
        validation_alias=AliasChoices("HF_MODEL"),
        description="Causal language model used to score sentences",
    )
    http_timeout: float = Field(
        30.0,
        validation_alias=AliasChoices("HTTP_TIMEOUT"),
        description="HTTP client timeout (seconds) for outbound inference requests",
        ge=0,
    )
    app_name: str = Field(
        "weirdness_checker",
        validation_alias=AliasChoices("APP_NAME"),
        description="Application name shown in the OpenAPI document",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO",
        validation_alias=AliasChoices("LOG_LEVEL"),
        description="Level for the application console logger",
    )

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection usage."""

    return Settings()
