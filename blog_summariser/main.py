import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Union

from fastapi import Depends, FastAPI, HTTPException, Request

from blog_summariser.config import Settings, get_settings
from blog_summariser.errors import InputError
from blog_summariser.logging import setup_logging
from blog_summariser.schemas import SummariseRequest, SummariseResponse
from blog_summariser.summariser import Summariser


logger = logging.getLogger("api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logging(settings.log_level)

    app.state.settings = settings
    summariser = Summariser(settings=settings)
    app.state.summariser = summariser
    if not settings.has_api_key:
        logger.warning("GEMINI_API_KEY is not set; summaries will use the extractive method")

    try:
        yield
    finally:
        await summariser.close()


app = FastAPI(lifespan=lifespan)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_summariser(request: Request) -> Summariser:
    return request.app.state.summariser


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/config")
async def read_config(settings: Settings = Depends(get_app_settings)) -> dict[str, Union[str, int, bool]]:
    return {
        "environment": settings.environment,
        "model": settings.gemini_model,
        "fallback_model": settings.gemini_fallback_model,
        "sentence_count": settings.summary_sentence_count,
        "api_key_configured": settings.has_api_key,
    }


@app.post("/summarise", response_model=SummariseResponse)
async def summarise_text(
    payload: SummariseRequest,
    summariser: Summariser = Depends(get_summariser),
) -> SummariseResponse:
    try:
        result = await summariser.summarise(payload.text, payload.sentence_count)
    except InputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return SummariseResponse.from_result(result)
