"""Text cleaner and summarizer — the two generation calls of the pipeline."""

from __future__ import annotations

import logging

from src.digest.errors import GenerationError
from src.digest.generate import TextGenerator
from src.digest.prompts import (
    CHAINED_SUMMARY_MAX_WORDS,
    format_clean_prompt,
    format_summary_prompt,
)
from src.digest.text import word_count

logger = logging.getLogger(__name__)


async def _generate(generate: TextGenerator, prompt: str, stage: str) -> str:
    try:
        return await generate(prompt)
    except GenerationError as exc:
        raise GenerationError(stage, exc.cause) from exc
    except Exception as exc:
        raise GenerationError(stage, exc) from exc


class TextCleaner:
    """Asks the provider to drop ads, tracking links and markdown noise verbatim."""

    def __init__(self, generate: TextGenerator) -> None:
        self._generate = generate

    async def clean(self, text: str) -> str:
        cleaned = await _generate(self._generate, format_clean_prompt(text), "cleaning")
        logger.debug(
            "article cleaned",
            extra={"words_in": word_count(text), "words_out": word_count(cleaned)},
        )
        return cleaned


class Summarizer:
    """Asks the provider for a word-bounded, news-report style summary.

    The word ceiling is an instruction to the provider; the result is not
    truncated or length-checked.
    """

    def __init__(self, generate: TextGenerator) -> None:
        self._generate = generate

    async def summarize(
        self,
        text: str,
        max_words: int = CHAINED_SUMMARY_MAX_WORDS,
        direct: bool = False,
    ) -> str:
        prompt = format_summary_prompt(text, max_words=max_words, direct=direct)
        summary = await _generate(self._generate, prompt, "summarizing")
        words = word_count(summary)
        if words > max_words:
            logger.info(
                "summary exceeds requested word ceiling",
                extra={"max_words": max_words, "words": words},
            )
        return summary
