"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.router import api_v1_router
from app.core.config import get_settings
from app.core.logging import configure_logging


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level).info("Scoring sentences with model %s", settings.hf_model)
    yield


app = FastAPI(title=f"{get_settings().app_name} (Hugging Face)", version="1.0.0", lifespan=lifespan)


@app.get("/health")
async def health() -> dict[str, str]:
    """Return service health information."""

    return {"status": "ok"}


# Mount versioned API routers.
app.include_router(api_v1_router)
