"""Article pipeline — fetch -> extract -> clean/strip -> summarize orchestrator."""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator

from src.config import Settings
from src.digest.events import EventCallback, PipelineStage, emit_event
from src.digest.extract import ArticleExtractor, ExtractedArticle
from src.digest.fetch import HtmlFetcher, PageFetcher, validate_article_url
from src.digest.generate import AgentTextGenerator
from src.digest.prompts import CHAINED_SUMMARY_MAX_WORDS, DIRECT_SUMMARY_MAX_WORDS
from src.digest.summarize import Summarizer, TextCleaner
from src.digest.text import strip_tags, word_count

logger = logging.getLogger(__name__)


@dataclass
class _Run:
    """Request-scoped state of one pipeline invocation."""

    operation: str
    url: str
    on_event: EventCallback | None = None
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    stage: PipelineStage = PipelineStage.IDLE

    async def enter(self, stage: PipelineStage) -> None:
        logger.debug(
            "pipeline stage entered",
            extra={
                "run_id": self.run_id,
                "operation": self.operation,
                "from_stage": self.stage.value,
                "stage": stage.value,
            },
        )
        self.stage = stage
        await emit_event(
            self.on_event,
            "stage",
            {"run_id": self.run_id, "operation": self.operation, "stage": stage.value},
        )


class ArticlePipeline:
    """Drives the digest stages strictly in order for a single article URL.

    A failing stage moves the run to ``failed``, logs the cause and re-raises;
    nothing produced by earlier stages is returned and nothing is retried.
    """

    def __init__(
        self,
        *,
        fetcher: PageFetcher,
        extractor: ArticleExtractor,
        cleaner: TextCleaner,
        summarizer: Summarizer,
    ) -> None:
        self._fetcher = fetcher
        self._extractor = extractor
        self._cleaner = cleaner
        self._summarizer = summarizer

    async def scrape(
        self,
        url: str,
        clean: bool = False,
        on_event: EventCallback | None = None,
    ) -> str:
        """Return the extracted article text, optionally passed through the cleaner."""
        run = _Run("scrape", validate_article_url(url), on_event)
        async with self._tracked(run):
            article = await self._fetch_and_extract(run)
            text = article.text
            if clean:
                await run.enter(PipelineStage.CLEANING)
                text = await self._cleaner.clean(text)
        return text

    async def summarize(self, url: str, on_event: EventCallback | None = None) -> str:
        """Chained path: clean the extracted text, then summarize the cleaned text."""
        run = _Run("summarize", validate_article_url(url), on_event)
        async with self._tracked(run):
            article = await self._fetch_and_extract(run)

            await run.enter(PipelineStage.CLEANING)
            cleaned = await self._cleaner.clean(article.text)

            await run.enter(PipelineStage.SUMMARIZING)
            summary = await self._summarizer.summarize(
                cleaned, max_words=CHAINED_SUMMARY_MAX_WORDS
            )
        return summary

    async def summarize_direct(self, url: str, on_event: EventCallback | None = None) -> str:
        """Direct path: strip tags from the extracted text and summarize it once."""
        run = _Run("summarize_direct", validate_article_url(url), on_event)
        async with self._tracked(run):
            article = await self._fetch_and_extract(run)

            await run.enter(PipelineStage.STRIPPING)
            stripped = strip_tags(article.text)

            await run.enter(PipelineStage.SUMMARIZING)
            summary = await self._summarizer.summarize(
                stripped, max_words=DIRECT_SUMMARY_MAX_WORDS, direct=True
            )
        return summary

    async def _fetch_and_extract(self, run: _Run) -> ExtractedArticle:
        await run.enter(PipelineStage.FETCHING)
        html = await self._fetcher.fetch(run.url)

        await run.enter(PipelineStage.EXTRACTING)
        article = self._extractor.extract(html)
        if not article.paragraphs:
            logger.warning(
                "no article paragraphs matched",
                extra={
                    "run_id": run.run_id,
                    "url": run.url,
                    "selectors": list(self._extractor.selectors),
                },
            )
        else:
            logger.info(
                "article extracted",
                extra={
                    "run_id": run.run_id,
                    "paragraphs": len(article.paragraphs),
                    "words": word_count(article.text),
                    "selector": article.selector,
                },
            )
        return article

    @asynccontextmanager
    async def _tracked(self, run: _Run) -> AsyncIterator[None]:
        logger.info(
            "pipeline started",
            extra={"run_id": run.run_id, "operation": run.operation, "url": run.url},
        )
        try:
            yield
        except Exception as exc:
            failed_stage = run.stage
            await run.enter(PipelineStage.FAILED)
            logger.warning(
                "pipeline failed",
                extra={
                    "run_id": run.run_id,
                    "operation": run.operation,
                    "url": run.url,
                    "stage": failed_stage.value,
                    "error": repr(exc),
                },
            )
            raise
        await run.enter(PipelineStage.DONE)
        logger.info(
            "pipeline completed",
            extra={"run_id": run.run_id, "operation": run.operation},
        )


def build_pipeline(settings: Settings) -> ArticlePipeline:
    """Build the default pipeline from configured component instances."""
    generate = AgentTextGenerator(
        settings.llm_model_name,
        timeout=settings.generation_timeout_seconds,
    )
    return ArticlePipeline(
        fetcher=HtmlFetcher(
            timeout=settings.fetch_timeout_seconds,
            user_agent=settings.user_agent,
        ),
        extractor=ArticleExtractor(settings.article_selectors),
        cleaner=TextCleaner(generate),
        summarizer=Summarizer(generate),
    )
