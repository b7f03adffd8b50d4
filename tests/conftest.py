"""Fixtures — fake fetcher, article HTML, pipeline builders."""

from unittest.mock import AsyncMock

import pytest

from src.config import DEFAULT_ARTICLE_SELECTORS
from src.digest.errors import FetchError
from src.digest.extract import ArticleExtractor
from src.digest.pipeline import ArticlePipeline
from src.digest.summarize import Summarizer, TextCleaner

ARTICLE_URL = "https://www.example.com/world/2026/oct/19/some-story"


def make_article_html(paragraphs: list[str]) -> str:
    """Build a page whose body paragraphs sit under the default selector path."""
    body = "\n".join(f'<p class="dcr-16w5gq9">{p}</p>' for p in paragraphs)
    return f"""
    <html>
      <head><title>Story</title></head>
      <body>
        <nav><p class="dcr-16w5gq9">Navigation link</p></nav>
        <main id="maincontent">
          <h1>Headline</h1>
          <div class="article-body-commercial-selector article-body-viewer-selector">
            {body}
            <aside><p class="other">Advertisement</p></aside>
          </div>
        </main>
      </body>
    </html>
    """


class FakeFetcher:
    """Serves canned HTML per URL, or fails every fetch with ``FetchError``."""

    def __init__(self, pages: dict[str, str] | None = None, error: Exception | None = None) -> None:
        self.pages = pages or {}
        self.error = error
        self.calls: list[str] = []

    async def fetch(self, url: str) -> str:
        self.calls.append(url)
        if self.error is not None:
            raise FetchError(url, self.error)
        return self.pages.get(url, "<html><body></body></html>")


@pytest.fixture
def article_html() -> str:
    return make_article_html(["A.", "B.", "C."])


@pytest.fixture
def fetcher(article_html: str) -> FakeFetcher:
    return FakeFetcher({ARTICLE_URL: article_html})


@pytest.fixture
def echo_cleaner() -> AsyncMock:
    cleaner = AsyncMock(spec=TextCleaner)
    cleaner.clean.side_effect = lambda text: text
    return cleaner


@pytest.fixture
def prefix_summarizer() -> AsyncMock:
    summarizer = AsyncMock(spec=Summarizer)
    summarizer.summarize.side_effect = lambda text, **kwargs: f"SUMMARY: {text}"
    return summarizer


@pytest.fixture
def pipeline(fetcher: FakeFetcher, echo_cleaner: AsyncMock, prefix_summarizer: AsyncMock) -> ArticlePipeline:
    return ArticlePipeline(
        fetcher=fetcher,
        extractor=ArticleExtractor(DEFAULT_ARTICLE_SELECTORS),
        cleaner=echo_cleaner,
        summarizer=prefix_summarizer,
    )
