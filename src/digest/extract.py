"""Structural extractor — pulls article-body paragraphs out of page HTML."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"


@dataclass
class ExtractedArticle:
    """Paragraph texts in document order, plus the selector that matched."""

    paragraphs: list[str] = field(default_factory=list)
    selector: str | None = None

    @property
    def text(self) -> str:
        return PARAGRAPH_SEPARATOR.join(self.paragraphs)


class ArticleExtractor:
    """Selects article-body nodes using an ordered list of CSS selector paths.

    The first selector that matches at least one node wins. A page that
    matches none of them yields an empty article rather than an error.
    """

    def __init__(self, selectors: Sequence[str]) -> None:
        if not selectors:
            raise ValueError("at least one article selector is required")
        self._selectors = tuple(selectors)

    @property
    def selectors(self) -> tuple[str, ...]:
        return self._selectors

    def extract(self, html: str) -> ExtractedArticle:
        soup = BeautifulSoup(html, "html.parser")

        for selector in self._selectors:
            nodes = soup.select(selector)
            if nodes:
                paragraphs = [node.get_text() for node in nodes]
                logger.debug(
                    "article paragraphs extracted",
                    extra={"selector": selector, "paragraphs": len(paragraphs)},
                )
                return ExtractedArticle(paragraphs=paragraphs, selector=selector)

        logger.debug("no selector matched", extra={"selectors": list(self._selectors)})
        return ExtractedArticle()
