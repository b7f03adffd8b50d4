"""HTML fetcher — one HTTP GET per article, no retries."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol
from urllib.parse import urlparse

import httpx

from src.digest.errors import FetchError, ValidationError

logger = logging.getLogger(__name__)

_VALID_SCHEMES = {"http", "https"}


def validate_article_url(url: str | None) -> str:
    """Return *url* stripped, or raise ``ValidationError``.

    Accepts only absolute http(s) URLs with a hostname and no embedded
    credentials.
    """
    if url is None or not url.strip():
        raise ValidationError(url, "missing url")

    url = url.strip()
    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise ValidationError(url, "malformed url") from exc

    if parsed.scheme not in _VALID_SCHEMES:
        raise ValidationError(url, "unsupported scheme")

    if parsed.username or parsed.password:
        raise ValidationError(url, "embedded credentials")

    if not parsed.hostname:
        raise ValidationError(url, "missing host")

    return url


class PageFetcher(Protocol):
    """Protocol for HTML fetchers."""

    async def fetch(self, url: str) -> str: ...


class HtmlFetcher:
    """Retrieves raw article HTML over HTTP with httpx."""

    def __init__(
        self,
        *,
        timeout: float = 15.0,
        user_agent: str = "article-digest-service/0.1.0",
    ) -> None:
        self._timeout = timeout
        self._user_agent = user_agent

    async def fetch(self, url: str) -> str:
        """GET *url* and return the response body as text."""
        logger.debug("fetching article", extra={"url": url})
        # Deadline covers the whole request, not each connect/read
        try:
            resp = await asyncio.wait_for(self._get(url), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise FetchError(url, exc) from exc
        except httpx.HTTPError as exc:
            raise FetchError(url, exc) from exc

        logger.debug(
            "article fetched",
            extra={"url": url, "status_code": resp.status_code, "length": len(resp.text)},
        )
        return resp.text

    async def _get(self, url: str) -> httpx.Response:
        async with httpx.AsyncClient(
            follow_redirects=True,
            headers={"User-Agent": self._user_agent},
        ) as client:
            resp = await client.get(url, timeout=self._timeout)
            resp.raise_for_status()
        return resp
