"""GET /scrape and GET /api/summarize endpoint handlers."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.api.schemas import ErrorResponse, ScrapeResponse, SummaryResponse
from src.digest.errors import ValidationError
from src.digest.pipeline import ArticlePipeline

logger = logging.getLogger(__name__)

MISSING_URL_ERROR = "Missing 'url' in request body"
INVALID_URL_ERROR = "Invalid 'url'"
SCRAPE_FAILED_ERROR = "Failed to fetch content"
SUMMARIZE_FAILED_ERROR = "Failed to fetch or summarize article"

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

router = APIRouter()


def _get_pipeline(request: Request) -> ArticlePipeline:
    return request.app.state.pipeline


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/scrape", response_model=ScrapeResponse, responses=_ERROR_RESPONSES)
async def scrape(
    url: str | None = None,
    clean: bool = False,
    pipeline: ArticlePipeline = Depends(_get_pipeline),
):
    if not url or not url.strip():
        return _error(400, MISSING_URL_ERROR)

    try:
        content = await pipeline.scrape(url, clean=clean)
    except ValidationError:
        logger.info("rejected scrape request", extra={"url": url[:200]})
        return _error(400, INVALID_URL_ERROR)
    except Exception:
        logger.exception("scrape failed", extra={"url": url[:200]})
        return _error(500, SCRAPE_FAILED_ERROR)

    return ScrapeResponse(content=content)


@router.get("/api/summarize", response_model=SummaryResponse, responses=_ERROR_RESPONSES)
async def summarize(
    url: str | None = None,
    mode: Literal["chained", "direct"] = "chained",
    pipeline: ArticlePipeline = Depends(_get_pipeline),
):
    if not url or not url.strip():
        return _error(400, MISSING_URL_ERROR)

    try:
        if mode == "direct":
            summary = await pipeline.summarize_direct(url)
        else:
            summary = await pipeline.summarize(url)
    except ValidationError:
        logger.info("rejected summarize request", extra={"url": url[:200]})
        return _error(400, INVALID_URL_ERROR)
    except Exception:
        logger.exception("summarize failed", extra={"url": url[:200], "mode": mode})
        return _error(500, SUMMARIZE_FAILED_ERROR)

    return SummaryResponse(summary=summary)
