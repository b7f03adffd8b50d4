"""Exceptions raised by the article digest pipeline."""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for every failure the pipeline reports to its caller."""


class ValidationError(PipelineError):
    """The requested article URL is missing or malformed."""

    def __init__(self, url: str | None, reason: str = "invalid url") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{reason}: {url!r}")


class FetchError(PipelineError):
    """The article page could not be retrieved."""

    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"failed to fetch {url}: {cause}")


class GenerationError(PipelineError):
    """The generative-text provider failed or returned nothing usable."""

    def __init__(self, stage: str, cause: BaseException | str) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage} failed: {cause}")
