"""Request/response Pydantic models."""

from pydantic import BaseModel


class ScrapeResponse(BaseModel):
    content: str


class SummaryResponse(BaseModel):
    summary: str


class ErrorResponse(BaseModel):
    error: str
