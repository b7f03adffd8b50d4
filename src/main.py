"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import router
from src.config import get_settings
from src.digest.pipeline import build_pipeline
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting article digest service")

    # One pipeline (and one provider capability) shared by every request
    app.state.settings = settings
    app.state.pipeline = build_pipeline(settings)

    logger.info(
        "article digest service ready",
        extra={
            "llm_model": settings.llm_model_name,
            "article_selectors": settings.article_selectors,
            "fetch_timeout_seconds": settings.fetch_timeout_seconds,
            "generation_timeout_seconds": settings.generation_timeout_seconds,
        },
    )

    yield

    logger.info("shutting down article digest service")


app = FastAPI(title="Article Digest Service", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run("src.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
