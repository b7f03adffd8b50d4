"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_ARTICLE_SELECTORS = [
    "#maincontent .article-body-viewer-selector .dcr-16w5gq9",
]


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    # Provider API keys (GEMINI_API_KEY, OPENAI_API_KEY, ...) are read from
    # the environment by pydantic-ai itself.
    llm_provider: str = "google-gla"
    llm_model: str = "gemini-2.0-flash-001"
    generation_timeout_seconds: float = 60.0

    article_selectors: list[str] = DEFAULT_ARTICLE_SELECTORS
    fetch_timeout_seconds: float = 15.0
    user_agent: str = "article-digest-service/0.1.0"

    cors_allow_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"

    @property
    def llm_model_name(self) -> str:
        return f"{self.llm_provider}:{self.llm_model}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
